"""Core package for ytsections utilities."""

from .backend import Session, build_command, ytsections
from .models import Options, OutputFormat, RangeModel
from .tools import format_timecode, parse_timecode

__all__ = [
    "Options",
    "OutputFormat",
    "RangeModel",
    "Session",
    "build_command",
    "format_timecode",
    "parse_timecode",
    "ytsections",
]
