"""Expose models and type definitions."""

from .history import HISTORY_LIMIT, CommandHistory, clear_history, record_to_history
from .options import Options
from .selection import OVERLAP_RATIO, Player, RangeModel
from .types import AudioCodec, OutputFormat
from .verbosity import Verbosity

__all__ = [
    "HISTORY_LIMIT",
    "OVERLAP_RATIO",
    "AudioCodec",
    "CommandHistory",
    "Options",
    "OutputFormat",
    "Player",
    "RangeModel",
    "Verbosity",
    "clear_history",
    "record_to_history",
]
