"""Checks that run before ffmpeg is spawned or the run log is touched."""
from __future__ import annotations

import logging
import os
import shutil
from pathlib import Path
from typing import List

from audio_cleanup.config import CleanupConfig
from audio_cleanup.errors import EngineNotFound, InputMissing, OutputDirUnavailable


logger = logging.getLogger("audio_cleanup.preflight")


def validate_input(path: Path) -> Path:
    if not path.is_file():
        raise InputMissing(path)
    return path


def _is_executable(path: Path) -> bool:
    return path.is_file() and os.access(path, os.X_OK)


def _adjacent_candidates(config: CleanupConfig) -> List[Path]:
    names = [config.engine_name]
    if os.name == "nt" and not config.engine_name.lower().endswith(".exe"):
        names.insert(0, f"{config.engine_name}.exe")
    return [config.tool_dir / name for name in names]


def locate_engine(config: CleanupConfig) -> Path:
    """Find ffmpeg: explicit override, then beside the tool, then PATH."""

    searched: List[Path] = []

    if config.engine_path is not None:
        searched.append(config.engine_path)
        if _is_executable(config.engine_path):
            return config.engine_path
        logger.warning("Configured ffmpeg %s is not an executable file", config.engine_path)

    for candidate in _adjacent_candidates(config):
        searched.append(candidate)
        if _is_executable(candidate):
            logger.debug("Using ffmpeg next to the tool: %s", candidate)
            return candidate

    found = shutil.which(config.engine_name)
    if found:
        logger.debug("Using ffmpeg from PATH: %s", found)
        return Path(found)

    raise EngineNotFound(config.engine_name, searched)


def run_preflight(input_path: Path, config: CleanupConfig) -> Path:
    """Validate the input and return the engine location.

    Raises ``InputMissing`` or ``EngineNotFound``; neither leaves any trace on
    disk.
    """

    validate_input(input_path)
    return locate_engine(config)


def prepare_output_dir(config: CleanupConfig) -> bool:
    """Create the output directory; return True if it did not exist before."""

    existed = config.output_dir.is_dir()
    try:
        config.output_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise OutputDirUnavailable(config.output_dir, exc) from exc
    return not existed
