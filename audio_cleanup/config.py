"""Runtime configuration.

Every component receives a ``CleanupConfig`` explicitly; nothing reads
module-level state. ``CleanupConfig.from_env`` is the only place that looks
at environment variables.
"""
from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


DEFAULT_LOG_FILENAME = "cleaning_log.txt"
DEFAULT_ENGINE_NAME = "ffmpeg"

_FALSY = {"0", "false", "no", "off"}


def default_output_dir() -> Path:
    return Path.home() / "Music" / "Cleaned Audio"


def default_tool_dir() -> Path:
    """Directory the tool was launched from; ffmpeg may be dropped beside it."""
    launched = sys.argv[0] if sys.argv and sys.argv[0] else __file__
    return Path(launched).resolve().parent


class CleanupConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    output_dir: Path = Field(default_factory=default_output_dir)
    log_filename: str = DEFAULT_LOG_FILENAME
    engine_name: str = DEFAULT_ENGINE_NAME
    engine_path: Optional[Path] = None
    tool_dir: Path = Field(default_factory=default_tool_dir)
    measure_loudness: bool = True

    @property
    def log_path(self) -> Path:
        return self.output_dir / self.log_filename

    @classmethod
    def from_env(cls, **overrides: Any) -> "CleanupConfig":
        """Build a config from ``AUDIO_CLEANUP_*`` variables.

        Keyword overrides win over the environment, which wins over the
        defaults.
        """

        values: dict[str, Any] = {}

        output_dir = os.getenv("AUDIO_CLEANUP_OUTPUT_DIR")
        if output_dir:
            values["output_dir"] = Path(output_dir).expanduser()

        engine_path = os.getenv("AUDIO_CLEANUP_FFMPEG")
        if engine_path:
            values["engine_path"] = Path(engine_path).expanduser()

        log_filename = os.getenv("AUDIO_CLEANUP_LOG_FILE")
        if log_filename:
            values["log_filename"] = log_filename

        measure = os.getenv("AUDIO_CLEANUP_MEASURE")
        if measure is not None:
            values["measure_loudness"] = measure.strip().lower() not in _FALSY

        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)
