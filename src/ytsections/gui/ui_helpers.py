"""Helper classes for building the GUI."""

from __future__ import annotations

import logging

from PyQt6.QtCore import QObject, pyqtSignal
from PyQt6.QtWidgets import QLineEdit


class LogEmitter(QObject):
    """Qt signal emitter that forwards log messages."""

    message = pyqtSignal(str)


class QtLogHandler(logging.Handler):
    """Logging handler that emits records to a Qt signal."""

    def __init__(self, emitter: LogEmitter) -> None:
        super().__init__()
        self.emitter = emitter

    def emit(self, record: logging.LogRecord) -> None:
        """Emit a formatted log record to the associated signal."""
        msg = self.format(record)
        self.emitter.message.emit(msg)


def create_field(placeholder: str = "", *, readonly: bool = False) -> QLineEdit:
    """Return a line edit with optional placeholder and read-only state."""
    field = QLineEdit()
    if placeholder:
        field.setPlaceholderText(placeholder)
    field.setReadOnly(readonly)
    return field


def set_text_quietly(field: QLineEdit, text: str) -> None:
    """Replace ``field`` text unless the user is editing it."""
    if field.hasFocus() or field.text() == text:
        return
    field.setText(text)
