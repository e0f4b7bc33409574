"""Output naming: ``<stem>_Cleaned_<YYYYmmdd_HHMM>.wav`` in the output dir.

Timestamps have minute resolution, so two runs on the same input within
the same minute resolve to the same path and the second run overwrites the
first.
"""
from __future__ import annotations

from datetime import datetime
from pathlib import Path

from audio_cleanup.models import OUTPUT_SUFFIX


TIMESTAMP_FORMAT = "%Y%m%d_%H%M"


def format_timestamp(moment: datetime) -> str:
    return moment.strftime(TIMESTAMP_FORMAT)


def resolve_output_path(input_path: Path, output_dir: Path, timestamp: datetime) -> Path:
    stem = f"{input_path.stem}_Cleaned_{format_timestamp(timestamp)}"
    return output_dir / f"{stem}{OUTPUT_SUFFIX}"
