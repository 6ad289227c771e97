"""Media player adapter used to preview the selection."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from PyQt6.QtCore import QObject, QUrl, pyqtSignal
from PyQt6.QtMultimedia import QAudioOutput, QMediaPlayer

if TYPE_CHECKING:
    from PyQt6.QtMultimediaWidgets import QVideoWidget

logger = logging.getLogger(__name__)


class QtPlayer(QObject):
    """Wrap ``QMediaPlayer`` behind the ``seek_to`` / ``get_current_time`` capability.

    Positions are reported in seconds through :attr:`durationKnown` and
    :attr:`progressed`.
    """

    durationKnown = pyqtSignal(float)  # noqa: N815
    progressed = pyqtSignal(float)

    def __init__(self, video_widget: QVideoWidget | None = None, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._player = QMediaPlayer(self)
        self._audio = QAudioOutput(self)
        self._player.setAudioOutput(self._audio)
        if video_widget is not None:
            self._player.setVideoOutput(video_widget)
        self._player.durationChanged.connect(self._on_duration)
        self._player.positionChanged.connect(self._on_position)
        self._player.errorOccurred.connect(self._on_error)

    def load(self, url: str) -> None:
        """Start loading ``url``; the duration arrives later."""
        self._player.setSource(QUrl(url))

    def unload(self) -> None:
        self._player.stop()
        self._player.setSource(QUrl())

    def seek_to(self, seconds: float) -> None:
        self._player.setPosition(round(seconds * 1000))

    def get_current_time(self) -> float:
        return self._player.position() / 1000

    @property
    def playing(self) -> bool:
        return self._player.playbackState() == QMediaPlayer.PlaybackState.PlayingState

    def set_playing(self, *, playing: bool) -> None:
        if playing:
            self._player.play()
        else:
            self._player.pause()

    def _on_duration(self, ms: int) -> None:
        if ms > 0:
            self.durationKnown.emit(ms / 1000)

    def _on_position(self, ms: int) -> None:
        self.progressed.emit(ms / 1000)

    def _on_error(self, _error: QMediaPlayer.Error, message: str) -> None:
        logger.warning("Preview unavailable: %s", message)


__all__ = ["QtPlayer"]
