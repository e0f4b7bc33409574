import os
import sys
from datetime import datetime, timedelta
from pathlib import Path
from typing import List, Sequence

import numpy as np
import pytest
import soundfile as sf

from audio_cleanup.config import CleanupConfig
from audio_cleanup.dsp_engine import ExecutionOutcome


def write_tone(path: Path, seconds: float = 1.0, sr: int = 48000, amplitude: float = 0.25) -> Path:
    t = np.arange(int(seconds * sr)) / sr
    tone = (amplitude * np.sin(2 * np.pi * 440.0 * t)).astype(np.float32)
    with path.open("wb") as fh:
        sf.write(fh, tone, sr, format="WAV")
    return path


class FakeExecutor:
    """Stands in for ffmpeg: records the command and optionally writes the output."""

    def __init__(self, exit_code: int = 0, write_output: bool = True, elapsed: float = 75.456) -> None:
        self.exit_code = exit_code
        self.write_output = write_output
        self.elapsed = timedelta(seconds=elapsed)
        self.calls: List[List[str]] = []

    def execute(self, args: Sequence[str]) -> ExecutionOutcome:
        self.calls.append(list(args))
        if self.write_output:
            write_tone(Path(args[-1]), seconds=2.0)
        return ExecutionOutcome(exit_code=self.exit_code, elapsed=self.elapsed)


class FixedClock:
    def __init__(self, moment: datetime) -> None:
        self.moment = moment

    def __call__(self) -> datetime:
        return self.moment


@pytest.fixture
def tool_dir(tmp_path: Path) -> Path:
    path = tmp_path / "tool"
    path.mkdir()
    engine = path / "ffmpeg"
    engine.write_text("#!/bin/sh\nexit 0\n")
    engine.chmod(0o755)
    return path


@pytest.fixture
def config(tmp_path: Path, tool_dir: Path) -> CleanupConfig:
    return CleanupConfig(output_dir=tmp_path / "out", tool_dir=tool_dir)


@pytest.fixture
def speech_wav(tmp_path: Path) -> Path:
    src = tmp_path / "in"
    src.mkdir()
    return write_tone(src / "speech.wav")


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock(datetime(2026, 10, 18, 14, 3, 22))


needs_bytes_filenames = pytest.mark.skipif(
    not sys.platform.startswith("linux"),
    reason="needs a filesystem that accepts non-UTF-8 file names",
)


@pytest.fixture
def latin1_wav(tmp_path: Path) -> Path:
    src = tmp_path / "in"
    src.mkdir(exist_ok=True)
    return write_tone(src / os.fsdecode(b"caf\xe9.wav"))
