"""End-to-end processing of a single file.

preflight -> filter chain + output path -> ffmpeg -> measurement -> run log
"""
from __future__ import annotations

import contextlib
import logging
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Callable, Optional

from audio_cleanup.chains import build_filter_chain
from audio_cleanup.config import CleanupConfig
from audio_cleanup.dsp_engine import FFmpegRunner, ProcessExecutor, measure_output
from audio_cleanup.errors import EngineExecutionFailed, EngineNotFound
from audio_cleanup.models import ProcessingMode, RunRequest, RunResult
from audio_cleanup.paths import resolve_output_path
from audio_cleanup.preflight import prepare_output_dir, run_preflight
from audio_cleanup.report import RunReporter


logger = logging.getLogger("audio_cleanup.engine")

Clock = Callable[[], datetime]


@dataclass
class RunOutcome:
    request: RunRequest
    result: RunResult
    logged: bool

    def raise_for_status(self) -> None:
        if not self.result.succeeded:
            raise EngineExecutionFailed(self.result.exit_code, self.request.output_path)


def _file_size(path: Path) -> Optional[int]:
    try:
        return path.stat().st_size if path.is_file() else None
    except OSError:
        return None


def build_request(input_path: Path, mode: ProcessingMode, config: CleanupConfig, started_at: datetime) -> RunRequest:
    return RunRequest(
        input_path=input_path,
        mode=mode,
        output_path=resolve_output_path(input_path, config.output_dir, started_at),
        started_at=started_at,
        filter_chain=build_filter_chain(mode),
    )


def process_audio(
    input_path: Path,
    mode: ProcessingMode,
    config: CleanupConfig,
    *,
    executor: Optional[ProcessExecutor] = None,
    clock: Optional[Clock] = None,
    reporter: Optional[RunReporter] = None,
) -> RunOutcome:
    """Clean one file and append its record to the run log.

    Preflight errors (``InputMissing``, ``EngineNotFound``,
    ``OutputDirUnavailable``) propagate before ffmpeg is spawned or the log
    is opened. A non-zero ffmpeg exit does not
    raise: it comes back as a FAILED result that has already been logged.
    """

    engine = run_preflight(input_path, config)

    request = build_request(input_path, mode, config, (clock or datetime.now)())
    input_size = input_path.stat().st_size
    created_dir = prepare_output_dir(config)

    try:
        outcome = FFmpegRunner(executor).run(request, engine)
    except EngineNotFound:
        # ffmpeg never started; leave no trace of this invocation.
        if created_dir:
            with contextlib.suppress(OSError):
                config.output_dir.rmdir()
        raise

    output_size = _file_size(request.output_path)
    lufs: Optional[float] = None
    if outcome.exit_code == 0 and output_size is not None and config.measure_loudness:
        stats = measure_output(request.output_path)
        if stats is not None:
            lufs = stats.integrated_lufs

    result = RunResult(
        exit_code=outcome.exit_code,
        duration=outcome.elapsed,
        input_size_bytes=input_size,
        output_size_bytes=output_size,
        integrated_lufs=lufs,
    )
    if not result.succeeded:
        logger.error("Processing %s failed with exit code %s", input_path, result.exit_code)

    reporter = reporter or RunReporter(config.log_path)
    logged = reporter.report(request, result)
    return RunOutcome(request=request, result=result, logged=logged)
