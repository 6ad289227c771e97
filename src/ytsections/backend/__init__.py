"""Backend utilities for building download commands."""

from .builder import build_command, build_from_options
from .generate import ytsections
from .session import Session

__all__ = [
    "Session",
    "build_command",
    "build_from_options",
    "ytsections",
]
