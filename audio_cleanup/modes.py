"""Mode selection from a CLI flag or an interactive prompt."""
from __future__ import annotations

from typing import Callable, Optional

from audio_cleanup.models import ProcessingMode


RAW_TOKEN = "1"

PROMPT = (
    "Select the recording type:\n"
    "  [1] Raw recording (microphone/field) - full cleaning + leveling\n"
    "  [2] Zoom/Teams recording - leveling only (default)\n"
    "Choice: "
)


def select_mode(token: Optional[str]) -> ProcessingMode:
    """Map a mode token to a ``ProcessingMode``.

    Only ``"1"`` selects raw processing. Anything else, including no input
    or an unrecognised value, falls back to Zoom/Teams leveling rather than
    being rejected.
    """

    if token is not None and token.strip() == RAW_TOKEN:
        return ProcessingMode.RAW
    return ProcessingMode.ZOOM_TEAMS


def prompt_for_mode(input_fn: Callable[[str], str] = input) -> ProcessingMode:
    try:
        token = input_fn(PROMPT)
    except EOFError:
        token = None
    return select_mode(token)
