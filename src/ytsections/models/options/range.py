"""Time range option models."""

from __future__ import annotations

from functools import cached_property
from typing import ClassVar

from cyclopts import Parameter
from pydantic import BaseModel, Field, field_validator

from ytsections.models.selection import RangeModel
from ytsections.tools import parse_time_value

from .groups import RANGE_GROUP


@Parameter(group=RANGE_GROUP)
class RangeOptions(BaseModel):
    """Options selecting the section to download."""

    TIME_DESC_TEMPLATE: ClassVar[str] = "{}. Examples: '00:01:30.50', '90.5', '1m30s'."

    start: str | None = Field(None, description=TIME_DESC_TEMPLATE.format("Start of the section [default: 0]"))
    end: str | None = Field(None, description=TIME_DESC_TEMPLATE.format("End of the section [default: duration]"))
    duration: str | None = Field(None, description=TIME_DESC_TEMPLATE.format("Total length of the video"))

    @field_validator("start", "end", "duration")
    @classmethod
    def validate_time_format(cls, v: str | None) -> str | None:
        """Ensure time strings are parseable."""
        if v is None:
            return v
        try:
            parse_time_value(v)
        except ValueError as exc:
            raise ValueError(f"Invalid time format: {v}") from exc
        return v

    @cached_property
    def start_seconds(self) -> float | None:
        """Start in seconds."""
        return None if self.start is None else parse_time_value(self.start)

    @cached_property
    def end_seconds(self) -> float | None:
        """End in seconds."""
        return None if self.end is None else parse_time_value(self.end)

    @cached_property
    def duration_seconds(self) -> float | None:
        """Video length in seconds."""
        return None if self.duration is None else parse_time_value(self.duration)


def resolve_range(opts: RangeOptions) -> tuple[float, float]:
    """Compute the ``(start, end)`` section in seconds.

    With a known duration the values are applied to a :class:`RangeModel` so
    the command line and the GUI share one set of rules. Without one, the end
    must be given explicitly.

    Raises:
        ValueError: If the values do not form a valid section.

    """
    start = opts.start_seconds
    end = opts.end_seconds
    if opts.duration_seconds is None:
        if end is None:
            raise ValueError("An end time is required when the duration is unknown")
        start = start or 0.0
        if start > end:
            raise ValueError("Start must not be after end")
        return start, end

    model = RangeModel()
    model.set_duration(opts.duration_seconds)
    if end is not None and not model.set_end(end):
        raise ValueError(f"End {opts.end} is outside the video duration {model.duration_text}")
    if start is not None and not model.set_start(start):
        raise ValueError(f"Start {opts.start} must be within the video and not after the end")
    return model.start, model.end


__all__ = ["RangeOptions", "resolve_range"]
