"""ffmpeg integration for the cleanup pipeline.

The DSP itself (de-clip, de-click, denoise, normalisation, loudness
limiting) is done by ffmpeg; this package only builds the command line,
runs it, and measures what came out.
"""
from .analysis import OutputStats, measure_output
from .ffmpeg_runner import (
  ExecutionOutcome,
  FFmpegRunner,
  ProcessExecutor,
  SubprocessExecutor,
  build_ffmpeg_args,
  classify,
)

__all__ = [
  "ExecutionOutcome",
  "FFmpegRunner",
  "OutputStats",
  "ProcessExecutor",
  "SubprocessExecutor",
  "build_ffmpeg_args",
  "classify",
  "measure_output",
]
