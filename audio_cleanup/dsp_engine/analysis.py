"""Post-run measurement of the rendered file.

Only reads what ffmpeg wrote; a file that cannot be decoded is reported as
unmeasured and never changes how the run is classified.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Optional

import numpy as np
import pyloudnorm as pyln
import soundfile as sf


logger = logging.getLogger("audio_cleanup.analysis")


@dataclass
class OutputStats:
  integrated_lufs: Optional[float]
  peak_dbfs: Optional[float]
  duration_seconds: float
  sample_rate: int


@lru_cache(maxsize=16)
def _meter_for_sr(sr: int) -> pyln.Meter:
  return pyln.Meter(sr)


def _finite_or_none(value: float) -> Optional[float]:
  return value if math.isfinite(value) else None


def measure_output(path: Path) -> Optional[OutputStats]:
  try:
    # A file object sidesteps soundfile encoding non-UTF-8 names strictly.
    with path.open("rb") as fh:
      audio, sr = sf.read(fh, dtype="float32", always_2d=True)
  except Exception as exc:
    # Measurement is optional; it must never stop the run from being logged.
    logger.warning("Could not read %s for measurement: %s", path, exc)
    return None

  duration = audio.shape[0] / float(sr) if sr else 0.0
  if audio.size == 0:
    return OutputStats(integrated_lufs=None, peak_dbfs=None, duration_seconds=duration, sample_rate=int(sr))

  try:
    integrated = float(_meter_for_sr(int(sr)).integrated_loudness(audio))
  except ValueError as exc:
    # pyloudnorm refuses clips shorter than one gating block
    logger.debug("Loudness not measurable for %s: %s", path, exc)
    integrated = float("-inf")
  except Exception as exc:
    logger.warning("Loudness measurement of %s failed: %s", path, exc)
    integrated = float("-inf")

  peak = float(np.max(np.abs(audio)))
  peak_dbfs = 20.0 * math.log10(peak) if peak > 0.0 else float("-inf")

  return OutputStats(
    integrated_lufs=_finite_or_none(integrated),
    peak_dbfs=_finite_or_none(peak_dbfs),
    duration_seconds=duration,
    sample_rate=int(sr),
  )
