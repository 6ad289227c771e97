"""Options package exports."""

from __future__ import annotations

from .defaults import (
    DEFAULT_AUDIO_CODEC,
    DEFAULT_FORCE_KEYFRAMES,
    DEFAULT_FORMAT,
    DEFAULT_TOOL,
)
from .options import Options
from .output import OutputOptions
from .range import RangeOptions, resolve_range
from .runtime import RuntimeOptions

__all__ = [
    "DEFAULT_AUDIO_CODEC",
    "DEFAULT_FORCE_KEYFRAMES",
    "DEFAULT_FORMAT",
    "DEFAULT_TOOL",
    "Options",
    "OutputOptions",
    "RangeOptions",
    "RuntimeOptions",
    "resolve_range",
]
