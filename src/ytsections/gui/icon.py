"""Application icon helpers."""

from __future__ import annotations

from functools import lru_cache

from PyQt6.QtCore import QPointF, QRectF, Qt
from PyQt6.QtGui import QColor, QIcon, QPainter, QPen, QPixmap, QPolygonF

_ICON_SIZES: tuple[int, ...] = (16, 24, 32, 64, 128, 256)
_BACKGROUND = QColor(204, 0, 0)
_CORNER_RATIO = 0.2
_MARGIN_RATIO = 0.08


def _paint_pixmap(size: int) -> QPixmap:
    """Draw a play triangle between two section brackets."""
    pixmap = QPixmap(size, size)
    pixmap.fill(Qt.GlobalColor.transparent)
    painter = QPainter(pixmap)
    painter.setRenderHint(QPainter.RenderHint.Antialiasing)

    margin = size * _MARGIN_RATIO
    body = QRectF(margin, margin * 2, size - 2 * margin, size - 4 * margin)
    painter.setPen(Qt.PenStyle.NoPen)
    painter.setBrush(_BACKGROUND)
    painter.drawRoundedRect(body, size * _CORNER_RATIO, size * _CORNER_RATIO)

    cx, cy = body.center().x(), body.center().y()
    h = body.height() * 0.22
    painter.setBrush(Qt.GlobalColor.white)
    painter.drawPolygon(
        QPolygonF([QPointF(cx - h * 0.8, cy - h), QPointF(cx - h * 0.8, cy + h), QPointF(cx + h, cy)])
    )

    pen = QPen(Qt.GlobalColor.white, max(1.0, size / 24))
    painter.setPen(pen)
    for x in (body.left() + body.width() * 0.18, body.right() - body.width() * 0.18):
        painter.drawLine(QPointF(x, cy - h * 1.4), QPointF(x, cy + h * 1.4))
    painter.end()
    return pixmap


@lru_cache(maxsize=1)
def build_app_icon() -> QIcon:
    """Create a multi-resolution application icon."""
    icon = QIcon()
    for size in _ICON_SIZES:
        icon.addPixmap(_paint_pixmap(size), QIcon.Mode.Normal, QIcon.State.Off)
    return icon
