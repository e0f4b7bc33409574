"""Run log: one fixed-shape text record appended per processed file.

The log lives next to the cleaned files and is only ever appended to.
Concurrent runs against the same log are not coordinated.
"""
from __future__ import annotations

import logging
from datetime import timedelta
from pathlib import Path
from typing import Optional

from audio_cleanup.errors import LogWriteFailure
from audio_cleanup.models import RunRequest, RunResult


logger = logging.getLogger("audio_cleanup.report")

RULE = "=" * 60
NOT_AVAILABLE = "not available"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
MIB = 1024 * 1024


def format_duration(duration: timedelta) -> str:
    """``mm:ss.hh`` with total minutes and truncated hundredths."""

    hundredths = duration // timedelta(milliseconds=10)
    minutes, hundredths = divmod(hundredths, 60 * 100)
    seconds, hundredths = divmod(hundredths, 100)
    return f"{minutes:02d}:{seconds:02d}.{hundredths:02d}"


def format_size(size_bytes: Optional[int]) -> str:
    if size_bytes is None:
        return NOT_AVAILABLE
    return f"{size_bytes / MIB:.2f} MB"


def format_loudness(lufs: Optional[float]) -> str:
    if lufs is None:
        return NOT_AVAILABLE
    return f"{lufs:.2f} LUFS"


def render_log_entry(request: RunRequest, result: RunResult) -> str:
    lines = [
        RULE,
        f"Date:      {request.started_at.strftime(DATE_FORMAT)}",
        f"Status:    {result.status.value} (exit code {result.exit_code})",
        f"Mode:      {request.mode.label}",
        f"Duration:  {format_duration(result.duration)}",
        f"Input:     {request.input_path} ({format_size(result.input_size_bytes)})",
        f"Output:    {request.output_path} ({format_size(result.output_size_bytes)})",
        f"Loudness:  {format_loudness(result.integrated_lufs)}",
        f"Filters:   {request.filter_chain.expression}",
    ]
    return "\n".join(lines) + "\n"


def append_log_entry(log_path: Path, entry: str) -> None:
    log_path.parent.mkdir(parents=True, exist_ok=True)
    # Paths that are not valid UTF-8 are written as backslash escapes.
    with log_path.open("a", encoding="utf-8", errors="backslashreplace", newline="\n") as fh:
        fh.write(entry)


class RunReporter:
    def __init__(self, log_path: Path) -> None:
        self.log_path = log_path
        self.last_failure: Optional[LogWriteFailure] = None

    def report(self, request: RunRequest, result: RunResult) -> bool:
        """Append the record for this run; return False if it could not be written."""

        entry = render_log_entry(request, result)
        try:
            append_log_entry(self.log_path, entry)
        except (OSError, UnicodeError) as exc:
            self.last_failure = LogWriteFailure(self.log_path, exc)
            logger.warning("%s", self.last_failure)
            return False
        logger.debug("Appended run record to %s", self.log_path)
        return True
