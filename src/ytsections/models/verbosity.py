"""Verbosity levels for logging."""

import logging
from enum import IntEnum


class Verbosity(IntEnum):
    """Logging verbosity levels."""

    QUIET = 0
    VERBOSE = 1
    DEBUG = 2

    @property
    def log_level(self) -> int:
        """Standard ``logging`` level for this verbosity."""
        return {
            Verbosity.QUIET: logging.WARNING,
            Verbosity.VERBOSE: logging.INFO,
            Verbosity.DEBUG: logging.DEBUG,
        }[self]


__all__ = ["Verbosity"]
