import os

import pytest

from audio_cleanup.config import CleanupConfig
from audio_cleanup.errors import EngineNotFound, InputMissing
from audio_cleanup.preflight import locate_engine, run_preflight, validate_input


def test_missing_input_raises(tmp_path):
    with pytest.raises(InputMissing) as excinfo:
        validate_input(tmp_path / "nope.wav")
    assert excinfo.value.path == tmp_path / "nope.wav"


def test_directory_is_not_an_input(tmp_path):
    with pytest.raises(InputMissing):
        validate_input(tmp_path)


def test_engine_beside_tool_wins_over_path(config, tool_dir, monkeypatch):
    monkeypatch.setattr("audio_cleanup.preflight.shutil.which", lambda name: "/usr/bin/ffmpeg")
    assert locate_engine(config) == tool_dir / "ffmpeg"


def test_engine_found_on_path(tmp_path, monkeypatch):
    monkeypatch.setattr("audio_cleanup.preflight.shutil.which", lambda name: "/opt/bin/ffmpeg")
    config = CleanupConfig(output_dir=tmp_path, tool_dir=tmp_path / "empty")

    assert str(locate_engine(config)) == "/opt/bin/ffmpeg"


def test_explicit_engine_path(tmp_path, tool_dir):
    config = CleanupConfig(output_dir=tmp_path, tool_dir=tmp_path, engine_path=tool_dir / "ffmpeg")
    assert locate_engine(config) == tool_dir / "ffmpeg"


def test_engine_missing_everywhere(tmp_path, monkeypatch):
    monkeypatch.setattr("audio_cleanup.preflight.shutil.which", lambda name: None)
    config = CleanupConfig(output_dir=tmp_path, tool_dir=tmp_path)

    with pytest.raises(EngineNotFound) as excinfo:
        locate_engine(config)
    assert tmp_path / "ffmpeg" in excinfo.value.searched


@pytest.mark.skipif(os.name == "nt", reason="POSIX permission bits")
def test_non_executable_file_beside_tool_is_ignored(tmp_path, monkeypatch):
    monkeypatch.setattr("audio_cleanup.preflight.shutil.which", lambda name: None)
    (tmp_path / "ffmpeg").write_text("not a program")
    (tmp_path / "ffmpeg").chmod(0o644)
    config = CleanupConfig(output_dir=tmp_path, tool_dir=tmp_path)

    with pytest.raises(EngineNotFound):
        locate_engine(config)


def test_input_checked_before_engine(tmp_path, monkeypatch):
    monkeypatch.setattr("audio_cleanup.preflight.shutil.which", lambda name: None)
    config = CleanupConfig(output_dir=tmp_path, tool_dir=tmp_path)

    with pytest.raises(InputMissing):
        run_preflight(tmp_path / "missing.wav", config)
