"""Main application window and helpers for the GUI."""

from __future__ import annotations

import logging
import sys
from functools import partial
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import TYPE_CHECKING

from PyQt6.QtCore import QDir, QTimer
from PyQt6.QtGui import QFont, QFontDatabase
from PyQt6.QtMultimediaWidgets import QVideoWidget
from PyQt6.QtWidgets import (
    QApplication,
    QButtonGroup,
    QCheckBox,
    QFileDialog,
    QFormLayout,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QListWidget,
    QListWidgetItem,
    QMainWindow,
    QPushButton,
    QRadioButton,
    QTextEdit,
    QVBoxLayout,
    QWidget,
)

from ytsections.models import OutputFormat
from ytsections.models.options import DEFAULT_FORMAT

from .controller import YtSectionsController
from .icon import build_app_icon
from .player import QtPlayer
from .range_slider import RangeSlider
from .ui_helpers import LogEmitter, QtLogHandler, create_field, set_text_quietly

if TYPE_CHECKING:  # pragma: no cover - for type hints only
    from types import TracebackType

    from .controller import ViewState

TIMECODE_PLACEHOLDER = "HH:MM:SS.CC"
COPIED_RESET_MS = 2000

logger = logging.getLogger(__name__)


def _ensure_log_file_handler() -> None:
    """Attach a rotating file handler to the root logger."""
    try:
        lf = Path.home() / ".ytsections" / "ytsections.log"
        lf.parent.mkdir(parents=True, exist_ok=True)
        root = logging.getLogger()
        root.setLevel(logging.DEBUG)
        exists = any(
            isinstance(h, RotatingFileHandler) and getattr(h, "baseFilename", None) and Path(h.baseFilename) == lf
            for h in root.handlers
        )
        if not exists:
            fh = RotatingFileHandler(lf, maxBytes=1_000_000, backupCount=3, encoding="utf-8")
            fh.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
            root.addHandler(fh)
    except OSError:  # pragma: no cover - best effort
        pass


class YtSectionsGUI(QMainWindow):
    """Window with the URL, range selection, command and history controls."""

    def __init__(self) -> None:
        super().__init__()
        self.setWindowTitle("ytsections")
        self.setGeometry(100, 100, 1100, 700)
        self.video_widget = QVideoWidget()
        self.player = QtPlayer(self.video_widget, self)
        self.controller = YtSectionsController(self, self.player)
        self._build_ui()
        self._connect()
        self._setup_logging()
        self.controller.refresh()

    def _setup_logging(self) -> None:
        """Configure logging to the GUI and a rotating log file.

        - Root logger: DEBUG so the file at ``~/.ytsections/ytsections.log``
          captures everything.
        - Qt handler: mirrors warnings and errors into the status pane.
        """
        _ensure_log_file_handler()
        emitter = LogEmitter()
        emitter.message.connect(self.append_status)
        handler = QtLogHandler(emitter)
        handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
        handler.setLevel(logging.WARNING)
        logging.getLogger().addHandler(handler)
        self._log_emitter = emitter
        self._qt_handler = handler

    def _build_ui(self) -> None:
        central = QWidget()
        self.setCentralWidget(central)
        outer = QHBoxLayout(central)

        left = QVBoxLayout()
        outer.addLayout(left, 2)
        outer.addWidget(self.video_widget, 3)

        title = QLabel("YouTube Timestamp Tool")
        title.setFont(QFont("Arial", 16, QFont.Weight.Bold))
        left.addWidget(title)
        left.addWidget(QLabel("Generate yt-dlp commands for specific time ranges"))

        self.url = create_field("https://www.youtube.com/watch?v=...")
        self.url_error = QLabel("Please enter a valid YouTube URL")
        self.url_error.setStyleSheet("color: #dc2626;")
        self.url_error.setVisible(False)
        left.addWidget(QLabel("YouTube URL"))
        left.addWidget(self.url)
        left.addWidget(self.url_error)

        self.selection_box = QGroupBox("Selection")
        form = QFormLayout(self.selection_box)
        self.duration = create_field(TIMECODE_PLACEHOLDER)
        self.duration.setToolTip("Filled in by the preview; enter it manually if the preview cannot load.")
        form.addRow("Duration:", self.duration)
        self.range_slider = RangeSlider()
        form.addRow(self.range_slider)
        self.start_edit = create_field(TIMECODE_PLACEHOLDER)
        self.end_edit = create_field(TIMECODE_PLACEHOLDER)
        form.addRow("Start Time:", self.start_edit)
        form.addRow("End Time:", self.end_edit)

        self.play_btn = QPushButton("Play")
        self.loop = QCheckBox("Loop selected range")
        row = QHBoxLayout()
        row.addWidget(self.play_btn)
        row.addWidget(self.loop)
        row.addStretch(1)
        form.addRow(row)

        self.format_group = QButtonGroup(self)
        fmt_row = QHBoxLayout()
        self.format_buttons: dict[OutputFormat, QRadioButton] = {}
        for fmt in OutputFormat:
            btn = QRadioButton(fmt.label)
            btn.setChecked(fmt is DEFAULT_FORMAT)
            self.format_group.addButton(btn)
            self.format_buttons[fmt] = btn
            fmt_row.addWidget(btn)
        fmt_row.addStretch(1)
        form.addRow("Output Format:", fmt_row)

        self.file_name = create_field("Enter file name (optional)")
        form.addRow("Output File Name:", self.file_name)
        self.output_dir = create_field("Download folder (optional)", readonly=True)
        self.browse_btn = QPushButton("Browse")
        self.clear_dir_btn = QPushButton("Clear")
        dir_row = QHBoxLayout()
        dir_row.addWidget(self.output_dir, 1)
        dir_row.addWidget(self.browse_btn)
        dir_row.addWidget(self.clear_dir_btn)
        form.addRow("Output Folder:", dir_row)

        self.command = QTextEdit()
        self.command.setReadOnly(True)
        self.command.setFont(QFontDatabase.systemFont(QFontDatabase.SystemFont.FixedFont))
        self.command.setFixedHeight(80)
        self.copy_btn = QPushButton("Copy")
        form.addRow("Generated Command:", self.copy_btn)
        form.addRow(self.command)

        self.history = QListWidget()
        self.history.setToolTip("Double-click a command to copy it again.")
        self.clear_history_btn = QPushButton("Clear History")
        form.addRow("History:", self.clear_history_btn)
        form.addRow(self.history)
        left.addWidget(self.selection_box)

        self.status_text = QTextEdit()
        self.status_text.setReadOnly(True)
        self.status_text.setFixedHeight(60)
        left.addWidget(self.status_text)

    def _connect(self) -> None:
        c = self.controller
        self.url.textChanged.connect(c.on_url_changed)
        self.duration.editingFinished.connect(lambda: c.on_duration_text(self.duration.text()))
        self.range_slider.startMoved.connect(c.on_start_moved)
        self.range_slider.endMoved.connect(c.on_end_moved)
        self.start_edit.editingFinished.connect(lambda: c.on_start_text(self.start_edit.text()))
        self.end_edit.editingFinished.connect(lambda: c.on_end_text(self.end_edit.text()))
        self.loop.toggled.connect(lambda checked: c.on_looping_changed(enabled=checked))
        self.play_btn.clicked.connect(self.toggle_playing)
        for fmt, btn in self.format_buttons.items():
            btn.toggled.connect(partial(self._on_format_toggled, fmt))
        self.file_name.textChanged.connect(c.on_file_name_changed)
        self.browse_btn.clicked.connect(self.browse_output_dir)
        self.clear_dir_btn.clicked.connect(self.clear_output_dir)
        self.copy_btn.clicked.connect(c.copy_command)
        self.history.itemDoubleClicked.connect(self._on_history_activated)
        self.clear_history_btn.clicked.connect(c.clear_history)
        self.player.durationKnown.connect(c.on_duration_known)
        self.player.progressed.connect(c.on_progress_tick)

    def render(self, state: ViewState) -> None:
        """Show ``state`` in the widgets."""
        self.url_error.setVisible(state.show_url_error)
        self.selection_box.setVisible(state.url_valid)
        self.range_slider.set_state(state.start, state.end, state.duration, overlap=state.overlap)
        set_text_quietly(self.duration, state.duration_text if state.duration > 0 else "")
        # Text fields are re-rendered even when focused after an edit is committed.
        self.start_edit.setText(state.start_text)
        self.end_edit.setText(state.end_text)
        if self.command.toPlainText() != state.command:
            self.command.setPlainText(state.command)
        self._render_history(state.history)

    def _render_history(self, entries: tuple[str, ...]) -> None:
        current = tuple(self.history.item(i).text() for i in range(self.history.count()))
        if current == entries:
            return
        self.history.clear()
        for entry in entries:
            self.history.addItem(QListWidgetItem(entry))

    def _on_format_toggled(self, fmt: OutputFormat, checked: bool) -> None:  # noqa: FBT001
        if checked:
            self.controller.on_format_changed(fmt)

    def _on_history_activated(self, item: QListWidgetItem) -> None:
        self.controller.copy_history_entry(item.text())

    def load_media(self, url: str) -> None:
        self.player.load(url)

    def unload_media(self) -> None:
        self.player.unload()
        self.play_btn.setText("Play")

    def toggle_playing(self) -> None:
        playing = not self.player.playing
        self.player.set_playing(playing=playing)
        self.play_btn.setText("Pause" if playing else "Play")

    def browse_output_dir(self) -> None:
        """Pick the folder the download tool writes into."""
        path = QFileDialog.getExistingDirectory(self, "Select Output Folder", self.output_dir.text())
        if path:
            native = QDir.toNativeSeparators(path)
            self.output_dir.setText(native)
            self.controller.on_output_path_chosen(native)

    def clear_output_dir(self) -> None:
        self.output_dir.clear()
        self.controller.on_output_path_chosen(None)

    def flash_copied(self) -> None:
        self.copy_btn.setText("Copied!")
        QTimer.singleShot(COPIED_RESET_MS, lambda: self.copy_btn.setText("Copy"))

    def append_status(self, message: str) -> None:
        """Append a status line to the status box."""
        self.status_text.append(message)
        self.status_text.ensureCursorVisible()


def run_gui() -> None:
    """Launch the GUI application."""
    try:
        _ensure_log_file_handler()

        def _excepthook(
            exc_type: type[BaseException],
            exc_value: BaseException,
            exc_traceback: TracebackType | None,
        ) -> None:
            if issubclass(exc_type, KeyboardInterrupt):  # allow normal interrupt
                sys.__excepthook__(exc_type, exc_value, exc_traceback)
                return
            logging.getLogger(__name__).exception("Uncaught exception", exc_info=(exc_type, exc_value, exc_traceback))

        sys.excepthook = _excepthook

        app = QApplication(sys.argv)
        app.setApplicationName("ytsections")
        app.setOrganizationName("ytsections")
        icon = build_app_icon()
        app.setWindowIcon(icon)
        window = YtSectionsGUI()
        window.setWindowIcon(icon)
        window.show()
        sys.exit(app.exec())
    except Exception:  # pragma: no cover - display startup errors
        logger.exception("Failed to launch GUI")
        raise


if __name__ == "__main__":  # pragma: no cover - manual execution
    run_gui()
