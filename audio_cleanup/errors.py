"""Error taxonomy for the cleanup pipeline.

Preflight errors (``InputMissing``, ``EngineNotFound``) abort an invocation
before ffmpeg is spawned and before anything is written to the run log.
``EngineExecutionFailed`` and ``LogWriteFailure`` happen after a run result
exists.
"""
from __future__ import annotations

from pathlib import Path
from typing import Optional, Union


class CleanupError(Exception):
    """Base class for every error raised by audio_cleanup."""


class PreflightError(CleanupError):
    pass


class InputMissing(PreflightError):
    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Input file not found: {path}")


class EngineNotFound(PreflightError):
    def __init__(self, engine_name: str, searched: Optional[list[Path]] = None, reason: str | None = None) -> None:
        self.engine_name = engine_name
        self.searched = list(searched or [])
        message = f"{engine_name} was not found next to the tool or on PATH"
        if reason:
            message = f"{engine_name} could not be launched: {reason}"
        super().__init__(message)


class EngineExecutionFailed(CleanupError):
    def __init__(self, exit_code: int, output_path: Path) -> None:
        self.exit_code = exit_code
        self.output_path = output_path
        super().__init__(f"ffmpeg exited with code {exit_code} while writing {output_path}")


class LogWriteFailure(CleanupError):
    def __init__(self, log_path: Path, cause: Union[OSError, UnicodeError]) -> None:
        self.log_path = log_path
        self.cause = cause
        super().__init__(f"Could not append to run log {log_path}: {cause}")


class OutputDirUnavailable(PreflightError):
    def __init__(self, path: Path, cause: OSError) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"Output directory {path} cannot be created: {cause}")
