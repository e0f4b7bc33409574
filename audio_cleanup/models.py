"""Pydantic models shared by the pipeline stages.

Requests and results are frozen: a ``RunRequest`` is built once per
invocation and a ``RunResult`` only once ffmpeg has exited.
"""

from __future__ import annotations

from datetime import datetime, timedelta
from enum import Enum
from pathlib import Path
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, model_validator


OUTPUT_SUFFIX = ".wav"

ParamValue = Union[int, float, str]


class ProcessingMode(str, Enum):
    RAW = "raw"
    ZOOM_TEAMS = "zoom_teams"

    @property
    def label(self) -> str:
        if self is ProcessingMode.RAW:
            return "Raw recording (full cleaning + leveling)"
        return "Zoom/Teams recording (leveling only)"

    @property
    def runs_cleaning(self) -> bool:
        return self is ProcessingMode.RAW


class RunStatus(str, Enum):
    SUCCESS = "SUCCESS"
    FAILED = "FAILED"


def format_param(value: ParamValue) -> str:
    """Render a filter option the way ffmpeg expects it (``-12`` not ``-12.0``)."""

    if isinstance(value, float):
        if value.is_integer():
            return str(int(value))
        return f"{value:g}"
    return str(value)


class FilterStage(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    params: tuple[tuple[str, ParamValue], ...] = ()

    def render(self) -> str:
        if not self.params:
            return self.name
        options = ":".join(f"{key}={format_param(value)}" for key, value in self.params)
        return f"{self.name}={options}"


class FilterChain(BaseModel):
    """Cleaning stages (raw mode only) followed by the leveling stages."""

    model_config = ConfigDict(frozen=True)

    cleaning: tuple[FilterStage, ...] = ()
    leveling: tuple[FilterStage, ...]

    @model_validator(mode="after")
    def _leveling_required(self) -> "FilterChain":
        if not self.leveling:
            raise ValueError("a filter chain always ends with the leveling stages")
        return self

    @property
    def stages(self) -> tuple[FilterStage, ...]:
        return self.cleaning + self.leveling

    @property
    def expression(self) -> str:
        return ",".join(stage.render() for stage in self.stages)


class RunRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    input_path: Path
    mode: ProcessingMode
    output_path: Path
    started_at: datetime
    filter_chain: FilterChain

    @model_validator(mode="after")
    def _never_overwrite_input(self) -> "RunRequest":
        if self.output_path.suffix != OUTPUT_SUFFIX:
            raise ValueError(f"output must be a {OUTPUT_SUFFIX} file, got {self.output_path.name}")
        if self.output_path.absolute() == self.input_path.absolute():
            raise ValueError("output path must differ from the input path")
        return self


class RunResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    exit_code: int
    duration: timedelta
    input_size_bytes: int
    output_size_bytes: Optional[int] = None
    integrated_lufs: Optional[float] = None

    @property
    def status(self) -> RunStatus:
        return RunStatus.SUCCESS if self.exit_code == 0 else RunStatus.FAILED

    @property
    def succeeded(self) -> bool:
        return self.status is RunStatus.SUCCESS
