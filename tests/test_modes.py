import pytest

from audio_cleanup.models import ProcessingMode
from audio_cleanup.modes import prompt_for_mode, select_mode


def test_token_one_selects_raw():
    assert select_mode("1") is ProcessingMode.RAW
    assert select_mode(" 1\n") is ProcessingMode.RAW


@pytest.mark.parametrize("token", ["2", "", None, "raw", "11", "one", "0"])
def test_documented_default_is_zoom_teams_for_any_other_token(token):
    # Not a validation error: unknown input deliberately falls back to leveling only.
    assert select_mode(token) is ProcessingMode.ZOOM_TEAMS


def test_prompt_reads_one_token():
    seen = []

    def fake_input(prompt):
        seen.append(prompt)
        return "1"

    assert prompt_for_mode(fake_input) is ProcessingMode.RAW
    assert "[1]" in seen[0]


def test_prompt_eof_uses_default():
    def closed_stdin(_prompt):
        raise EOFError

    assert prompt_for_mode(closed_stdin) is ProcessingMode.ZOOM_TEAMS
