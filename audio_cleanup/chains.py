"""Build the ffmpeg filter chain for a processing mode."""
from __future__ import annotations

from typing import Dict, Iterable, List, Tuple

from audio_cleanup.models import FilterChain, FilterStage, ParamValue, ProcessingMode
from audio_cleanup.presets import CLEANING_STAGES, LEVELING_STAGES


def db_to_linear(db: float) -> float:
    return 10.0 ** (db / 20.0)


def _gate_params(params: Dict[str, float]) -> List[Tuple[str, ParamValue]]:
    """ffmpeg's agate takes threshold and range as linear amplitude (0..1)."""

    converted: List[Tuple[str, ParamValue]] = []
    for key in ("threshold", "range"):
        linear = round(db_to_linear(float(params[f"{key}_db"])), 6)
        if not 0.0 < linear <= 1.0:
            raise ValueError(f"agate {key} must map into (0, 1], got {linear}")
        converted.append((key, linear))
    return converted


def _to_stage(name: str, params: Dict[str, ParamValue]) -> FilterStage:
    if name == "agate":
        return FilterStage(name=name, params=tuple(_gate_params(params)))  # type: ignore[arg-type]
    return FilterStage(name=name, params=tuple(params.items()))


def _build_group(entries: Iterable[Tuple[str, Dict[str, ParamValue]]]) -> tuple[FilterStage, ...]:
    return tuple(_to_stage(name, params) for name, params in entries)


def build_filter_chain(mode: ProcessingMode) -> FilterChain:
    """Return the chain for ``mode``.

    Raw recordings get the cleaning stages (de-clip, highpass, de-click,
    spectral denoise, gate) ahead of the leveling stages; Zoom/Teams
    recordings are already cleaned by the call software and only get
    leveled.
    """

    cleaning = _build_group(CLEANING_STAGES) if mode.runs_cleaning else ()
    return FilterChain(cleaning=cleaning, leveling=_build_group(LEVELING_STAGES))
