"""Synchronous ffmpeg invocation.

ffmpeg inherits the console: its progress stats and any codec or
corruption diagnostics are shown to the operator as-is. There is no timeout
and no retry; a run ends when ffmpeg exits.
"""
from __future__ import annotations

import logging
import subprocess
import time
from dataclasses import dataclass
from datetime import timedelta
from pathlib import Path
from typing import List, Optional, Protocol, Sequence

from ..errors import EngineNotFound
from ..models import RunRequest, RunStatus


logger = logging.getLogger("audio_cleanup.ffmpeg")


@dataclass(frozen=True)
class ExecutionOutcome:
  exit_code: int
  elapsed: timedelta


class ProcessExecutor(Protocol):
  def execute(self, args: Sequence[str]) -> ExecutionOutcome:
    ...


class SubprocessExecutor:
  """Runs a command to completion with stdio inherited from this process."""

  def execute(self, args: Sequence[str]) -> ExecutionOutcome:
    start = time.perf_counter()
    proc = subprocess.Popen(list(args))
    try:
      exit_code = proc.wait()
    except KeyboardInterrupt:
      # ffmpeg gets the same SIGINT; let it finalise and report its own exit.
      logger.warning("Interrupted, waiting for ffmpeg to stop")
      exit_code = proc.wait()
    elapsed = timedelta(seconds=time.perf_counter() - start)
    return ExecutionOutcome(exit_code=exit_code, elapsed=elapsed)


def build_ffmpeg_args(engine: Path, input_path: Path, filter_expression: str, output_path: Path) -> List[str]:
  return [
    str(engine),
    "-hide_banner",
    "-loglevel",
    "error",
    "-stats",
    "-y",
    "-i",
    str(input_path),
    "-vn",
    "-af",
    filter_expression,
    str(output_path),
  ]


def classify(exit_code: int) -> RunStatus:
  return RunStatus.SUCCESS if exit_code == 0 else RunStatus.FAILED


class FFmpegRunner:
  def __init__(self, executor: Optional[ProcessExecutor] = None) -> None:
    self.executor = executor or SubprocessExecutor()

  def run(self, request: RunRequest, engine: Path) -> ExecutionOutcome:
    args = build_ffmpeg_args(engine, request.input_path, request.filter_chain.expression, request.output_path)
    logger.info("Running %s on %s (%s)", engine.name, request.input_path, request.mode.value)
    logger.debug("ffmpeg args: %s", args)
    try:
      outcome = self.executor.execute(args)
    except OSError as exc:
      raise EngineNotFound(engine.name, [engine], reason=str(exc)) from exc
    logger.info(
      "ffmpeg exited with %s after %.2fs (%s)",
      outcome.exit_code,
      outcome.elapsed.total_seconds(),
      classify(outcome.exit_code).value,
    )
    return outcome
