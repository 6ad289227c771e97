"""Utility functions for time codes, seconds rendering and status emission."""

from __future__ import annotations

import logging
import math
import re
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable
else:
    from collections import abc

    Callable = abc.Callable

from pytimeparse2 import parse as parse_duration

logger = logging.getLogger(__name__)

# Two digits per group only; hours >= 100 are not accepted on input.
_TIMECODE_RE = re.compile(r"(\d{2}):(\d{2}):(\d{2})\.(\d{2})", re.ASCII)


def format_timecode(seconds: float) -> str:
    """Format seconds as ``HH:MM:SS.CC``.

    Hours are zero-padded to at least two digits and grow past two digits
    for long media. Centiseconds are rounded and clipped to ``99`` so a value
    never rolls over into the next second.

    Raises:
        ValueError: If ``seconds`` is negative or not finite.

    """
    if not math.isfinite(seconds) or seconds < 0:
        raise ValueError(f"Cannot format time: {seconds}")
    whole = math.floor(seconds)
    centis = min(round((seconds - whole) * 100), 99)
    h, remainder = divmod(int(whole), 3600)
    m, s = divmod(remainder, 60)
    return f"{h:02d}:{m:02d}:{s:02d}.{centis:02d}"


def parse_timecode(text: str) -> float:
    """Convert an ``HH:MM:SS.CC`` time code to seconds.

    Only the exact two-digit shape is accepted, so ``format_timecode`` output
    for 100 hours or more does not parse back.

    Raises:
        ValueError: If ``text`` does not have the time code shape.

    """
    match = _TIMECODE_RE.fullmatch(text)
    if match is None:
        raise ValueError(f"Invalid time code: {text!r}")
    h, m, s, cc = (int(group) for group in match.groups())
    return h * 3600 + m * 60 + s + cc / 100


def parse_time_value(text: str) -> float:
    """Parse a user supplied time as seconds.

    Accepts a time code (``"00:01:30.50"``), a plain number of seconds
    (``"90.5"``) or a human time span such as ``"1m30s"`` or ``"01:30"``.

    Raises:
        ValueError: If ``text`` cannot be parsed or is negative.

    """
    s = text.strip()
    if not s:
        raise ValueError("Empty time value")
    try:
        return parse_timecode(s)
    except ValueError:
        pass
    try:
        value = float(s)
    except ValueError:
        parsed = parse_duration(s)
        if parsed is None:
            raise ValueError(f"Unable to parse time: {text}") from None
        value = float(parsed)
    if not math.isfinite(value) or value < 0:
        raise ValueError(f"Time must be a non-negative number of seconds: {text}")
    return value


def format_seconds(value: float) -> str:
    """Render raw seconds for a command line.

    Integral values drop the decimal point and float noise is removed at
    millisecond precision: ``10.0 -> "10"``, ``0.29000000000000004 -> "0.29"``.
    """
    rounded = round(float(value), 3)
    if rounded.is_integer():
        return str(int(rounded))
    return repr(rounded)


def emit_status(message: str, *, status_callback: Callable[[str], None] | None) -> None:
    """Send ``message`` to the CLI, logger, or a custom callback.

    * ``print`` - used by the CLI for direct terminal output.
    * ``None`` - route messages through ``logger.info``.
    * Any other ``Callable[[str], None]`` - for GUIs or tests that capture
      status output.
    """
    if status_callback is None:
        logger.info(message)
        return
    if status_callback is print:
        print(message, flush=True)  # noqa: T201
        return
    status_callback(message)


__all__ = [
    "emit_status",
    "format_seconds",
    "format_timecode",
    "parse_time_value",
    "parse_timecode",
]
