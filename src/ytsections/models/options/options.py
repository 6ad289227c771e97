"""Top-level option model for building a download command."""

from __future__ import annotations

from typing import Annotated

from cyclopts import Parameter
from pydantic import BaseModel, ConfigDict, Field, field_validator

from .groups import SOURCE_GROUP
from .output import OutputOptions
from .range import RangeOptions, resolve_range
from .runtime import RuntimeOptions


@Parameter(name="*")
class Options(BaseModel):
    """Options for generating a section download command."""

    url: Annotated[
        str,
        Parameter(group=SOURCE_GROUP),
    ] = Field(description="YouTube video URL.")
    range: RangeOptions = Field(default_factory=RangeOptions)
    output: OutputOptions = Field(default_factory=OutputOptions)
    runtime: RuntimeOptions = Field(default_factory=RuntimeOptions)

    model_config = ConfigDict(extra="forbid")

    @field_validator("url")
    @classmethod
    def strip_url(cls, v: str) -> str:
        return v.strip()

    def section(self) -> tuple[float, float]:
        """Return the selected ``(start, end)`` in seconds."""
        return resolve_range(self.range)


__all__ = ["Options"]
