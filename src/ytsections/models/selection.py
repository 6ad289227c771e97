"""Start/end range selection bounded by the media duration."""

from __future__ import annotations

import logging
import math
from typing import Protocol

from ytsections.tools import format_timecode, parse_timecode

logger = logging.getLogger(__name__)

OVERLAP_RATIO = 0.02  #: Fraction of the duration under which handles count as overlapping.


class Player(Protocol):
    """Seek capability of the media player previewing the selection."""

    def seek_to(self, seconds: float) -> None:
        """Move playback to ``seconds``."""

    def get_current_time(self) -> float:
        """Return the playback position in seconds."""


class RangeModel:
    """Own the ``(start, end)`` pair and enforce ``0 <= start <= end <= duration``.

    Setters never raise for out-of-range input: a rejected value leaves the
    previous one in place and the setter returns ``False``. Slider and text
    inputs both go through :meth:`set_start` / :meth:`set_end`.
    """

    def __init__(self, player: Player | None = None) -> None:
        self.player = player
        self.duration = 0.0
        self.start = 0.0
        self.end = 0.0

    def reset(self) -> None:
        """Clear the selection when the media source changes."""
        self.duration = 0.0
        self.start = 0.0
        self.end = 0.0

    def set_duration(self, duration: float) -> None:
        """Establish the media length and select all of it.

        Raises:
            ValueError: If ``duration`` is negative or not finite.

        """
        if not math.isfinite(duration) or duration < 0:
            raise ValueError(f"Invalid duration: {duration}")
        self.duration = float(duration)
        self.start = 0.0
        self.end = self.duration
        logger.debug("Duration set to %s", self.duration_text)

    def _in_bounds(self, t: float) -> bool:
        return math.isfinite(t) and 0 <= t <= self.duration

    def set_start(self, t: float) -> bool:
        """Move the start handle and seek the preview to it."""
        if not self._in_bounds(t) or t > self.end:
            logger.debug("Rejected start %s (end=%s, duration=%s)", t, self.end, self.duration)
            return False
        self.start = float(t)
        if self.player is not None:
            self.player.seek_to(self.start)
        return True

    def set_end(self, t: float) -> bool:
        """Move the end handle, pulling playback back if it is past the new end."""
        if not self._in_bounds(t) or t < self.start:
            logger.debug("Rejected end %s (start=%s, duration=%s)", t, self.start, self.duration)
            return False
        self.end = float(t)
        if self.player is not None and self.player.get_current_time() > self.end:
            self.player.seek_to(self.end)
        return True

    def set_start_text(self, text: str) -> bool:
        """Parse a time code and apply it as the start."""
        try:
            t = parse_timecode(text)
        except ValueError:
            return False
        return self.set_start(t)

    def set_end_text(self, text: str) -> bool:
        """Parse a time code and apply it as the end."""
        try:
            t = parse_timecode(text)
        except ValueError:
            return False
        return self.set_end(t)

    def on_progress(self, position: float, *, looping: bool) -> bool:
        """Loop playback back to the start once it reaches the end.

        Returns ``True`` when playback wrapped back to the start.
        """
        if not looping or position < self.end:
            return False
        if self.player is not None:
            self.player.seek_to(self.start)
        return True

    @property
    def near_overlap(self) -> bool:
        """Whether the two handles are close enough to draw on top of each other."""
        return abs(self.start - self.end) < self.duration * OVERLAP_RATIO

    @property
    def start_text(self) -> str:
        return format_timecode(self.start)

    @property
    def end_text(self) -> str:
        return format_timecode(self.end)

    @property
    def duration_text(self) -> str:
        return format_timecode(self.duration)

    def __repr__(self) -> str:
        return f"RangeModel(start={self.start!r}, end={self.end!r}, duration={self.duration!r})"


__all__ = ["Player", "RangeModel"]
