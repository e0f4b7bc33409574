"""Two-mode speech cleanup and leveling on top of ffmpeg."""

from audio_cleanup.chains import build_filter_chain
from audio_cleanup.config import CleanupConfig
from audio_cleanup.engine import RunOutcome, process_audio
from audio_cleanup.modes import select_mode
from audio_cleanup.models import ProcessingMode, RunStatus

__all__ = [
    "CleanupConfig",
    "ProcessingMode",
    "RunOutcome",
    "RunStatus",
    "build_filter_chain",
    "process_audio",
    "select_mode",
]
