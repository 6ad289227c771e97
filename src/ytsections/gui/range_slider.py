"""Two-handle slider for picking a start and end time."""

from __future__ import annotations

from typing import TYPE_CHECKING

from PyQt6.QtCore import QPointF, QRectF, QSize, Qt, pyqtSignal
from PyQt6.QtGui import QColor, QPainter, QPen
from PyQt6.QtWidgets import QSizePolicy, QWidget

if TYPE_CHECKING:
    from PyQt6.QtGui import QMouseEvent, QPaintEvent

START = "start"
END = "end"

HANDLE_RADIUS = 7
OVERLAP_OFFSET = 6  #: Vertical shift applied to each handle when they nearly coincide.
TRACK_HEIGHT = 4
_TRACK_COLOR = QColor(200, 200, 200)
_SELECTED_COLOR = QColor(79, 70, 229)


class RangeSlider(QWidget):
    """Slider with independent start and end handles.

    The widget only reports where the user dragged a handle. It shows
    whatever :meth:`set_state` last gave it, so rejected positions snap back.
    """

    startMoved = pyqtSignal(float)  # noqa: N815
    endMoved = pyqtSignal(float)  # noqa: N815

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._duration = 0.0
        self._start = 0.0
        self._end = 0.0
        self._overlap = False
        self._dragging: str | None = None
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Fixed)
        self.setMinimumWidth(120)

    def sizeHint(self) -> QSize:  # noqa: N802
        return QSize(300, 2 * (HANDLE_RADIUS + OVERLAP_OFFSET) + 8)

    def set_state(self, start: float, end: float, duration: float, *, overlap: bool) -> None:
        """Show the given selection."""
        self._start, self._end, self._duration, self._overlap = start, end, duration, overlap
        self.update()

    def _track_bounds(self) -> tuple[float, float]:
        return float(HANDLE_RADIUS + 1), float(self.width() - HANDLE_RADIUS - 1)

    def _to_x(self, seconds: float) -> float:
        left, right = self._track_bounds()
        if self._duration <= 0:
            return left
        return left + (right - left) * (seconds / self._duration)

    def _to_seconds(self, x: float) -> float:
        left, right = self._track_bounds()
        if self._duration <= 0 or right <= left:
            return 0.0
        ratio = min(max((x - left) / (right - left), 0.0), 1.0)
        return round(ratio * self._duration, 2)

    def handle_center(self, which: str) -> QPointF:
        """Return the center of the ``start`` or ``end`` handle."""
        y = self.height() / 2
        if self._overlap:
            y += -OVERLAP_OFFSET if which == START else OVERLAP_OFFSET
        return QPointF(self._to_x(self._start if which == START else self._end), y)

    def _pick_handle(self, pos: QPointF) -> str:
        start_c, end_c = self.handle_center(START), self.handle_center(END)
        d_start = (pos - start_c).manhattanLength()
        d_end = (pos - end_c).manhattanLength()
        if d_start == d_end:
            # Stacked handles: dragging right moves the end, left moves the start.
            return END if pos.x() >= end_c.x() else START
        return START if d_start < d_end else END

    def _emit(self, x: float) -> None:
        seconds = self._to_seconds(x)
        if self._dragging == START:
            self.startMoved.emit(seconds)
        elif self._dragging == END:
            self.endMoved.emit(seconds)

    def mousePressEvent(self, event: QMouseEvent | None) -> None:  # noqa: N802
        if event is None or event.button() != Qt.MouseButton.LeftButton or self._duration <= 0:
            return
        pos = event.position()
        self._dragging = self._pick_handle(pos)
        self._emit(pos.x())

    def mouseMoveEvent(self, event: QMouseEvent | None) -> None:  # noqa: N802
        if event is None or self._dragging is None:
            return
        self._emit(event.position().x())

    def mouseReleaseEvent(self, _event: QMouseEvent | None) -> None:  # noqa: N802
        self._dragging = None

    def paintEvent(self, _event: QPaintEvent | None) -> None:  # noqa: N802
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        left, right = self._track_bounds()
        y = self.height() / 2
        painter.setPen(Qt.PenStyle.NoPen)
        painter.setBrush(_TRACK_COLOR)
        painter.drawRoundedRect(QRectF(left, y - TRACK_HEIGHT / 2, right - left, TRACK_HEIGHT), 2, 2)
        if self._duration > 0:
            x0, x1 = self._to_x(self._start), self._to_x(self._end)
            painter.setBrush(_SELECTED_COLOR)
            painter.drawRect(QRectF(x0, y - TRACK_HEIGHT / 2, x1 - x0, TRACK_HEIGHT))
        painter.setPen(QPen(_SELECTED_COLOR, 2))
        painter.setBrush(Qt.GlobalColor.white)
        for which in (START, END):
            painter.drawEllipse(self.handle_center(which), HANDLE_RADIUS, HANDLE_RADIUS)
        painter.end()


__all__ = ["END", "START", "RangeSlider"]
