"""Shared pytest fixtures.

Forces Qt onto the offscreen backend and provides a recording stand-in for
the media player.
"""

from __future__ import annotations

import os

import pytest
from PyQt6.QtWidgets import QApplication

VIDEO_URL = "https://www.youtube.com/watch?v=dQw4w9WgXcQ"
#: Length in seconds used for selections in tests.
VIDEO_DURATION_SEC: float = 100.0


class FakePlayer:
    """Record seeks and report a settable playback position."""

    def __init__(self, position: float = 0.0) -> None:
        self.position = position
        self.seeks: list[float] = []

    def seek_to(self, seconds: float) -> None:
        self.seeks.append(seconds)
        self.position = seconds

    def get_current_time(self) -> float:
        return self.position


@pytest.fixture(autouse=True)
def _qt_offscreen() -> None:
    """Force Qt to use the offscreen platform for GUI tests."""
    os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture(scope="session")
def qapp() -> QApplication:
    """Create the QApplication once and keep it alive for the whole run."""
    os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
    return QApplication.instance() or QApplication([])


@pytest.fixture
def player() -> FakePlayer:
    return FakePlayer()
