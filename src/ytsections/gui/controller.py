"""Controller wiring GUI events to the selection session."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from PyQt6.QtGui import QGuiApplication

from ytsections.backend import Session
from ytsections.models import OutputFormat
from ytsections.tools import parse_timecode

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from collections.abc import Callable

    from ytsections.models import Player

    from .main_window import YtSectionsGUI


def write_clipboard(text: str) -> None:
    """Put ``text`` on the system clipboard."""
    clipboard = QGuiApplication.clipboard()
    if clipboard is None:
        raise RuntimeError("Clipboard is not available")
    clipboard.setText(text)


@dataclass(frozen=True)
class ViewState:
    """Everything the window shows, derived from the session."""

    url_valid: bool
    show_url_error: bool
    start: float
    end: float
    duration: float
    start_text: str
    end_text: str
    duration_text: str
    overlap: bool
    command: str
    history: tuple[str, ...]


class YtSectionsController:
    """Coordinate GUI actions with the selection session."""

    def __init__(self, gui: YtSectionsGUI, player: Player | None = None) -> None:
        """Store reference to the GUI window."""
        self.gui = gui
        self.session = Session(player, status_callback=gui.append_status)
        self.clipboard_writer: Callable[[str], None] = write_clipboard

    def view_state(self) -> ViewState:
        s = self.session
        r = s.range
        return ViewState(
            url_valid=s.url_valid,
            show_url_error=bool(s.url) and not s.url_valid,
            start=r.start,
            end=r.end,
            duration=r.duration,
            start_text=r.start_text,
            end_text=r.end_text,
            duration_text=r.duration_text,
            overlap=r.near_overlap,
            command=s.command or "",
            history=tuple(s.history),
        )

    def refresh(self) -> None:
        """Re-render the window from the session state."""
        self.gui.render(self.view_state())

    def on_url_changed(self, url: str) -> None:
        self.session.on_url_changed(url)
        if self.session.url_valid:
            self.gui.load_media(self.session.url)
        else:
            self.gui.unload_media()
        self.refresh()

    def on_duration_known(self, seconds: float) -> None:
        self.session.on_duration_known(seconds)
        self.refresh()

    def on_duration_text(self, text: str) -> None:
        """Accept a manually entered duration for media the player cannot load."""
        try:
            seconds = parse_timecode(text.strip())
        except ValueError:
            logger.debug("Ignoring malformed duration %r", text)
        else:
            self.session.on_duration_known(seconds)
        self.refresh()

    def on_progress_tick(self, seconds: float) -> None:
        self.session.on_progress_tick(seconds)

    def on_start_moved(self, seconds: float) -> None:
        if self.session.on_start_changed(seconds):
            self.refresh()

    def on_end_moved(self, seconds: float) -> None:
        if self.session.on_end_changed(seconds):
            self.refresh()

    def on_start_text(self, text: str) -> None:
        self.session.on_start_text(text.strip())
        # Always re-render so a rejected edit shows the retained value again.
        self.refresh()

    def on_end_text(self, text: str) -> None:
        self.session.on_end_text(text.strip())
        self.refresh()

    def on_format_changed(self, fmt: OutputFormat | str) -> None:
        self.session.set_format(fmt)
        self.refresh()

    def on_file_name_changed(self, name: str) -> None:
        self.session.set_file_name(name)
        self.refresh()

    def on_output_path_chosen(self, path: str | None) -> None:
        self.session.set_output_path(path)
        self.refresh()

    def on_looping_changed(self, *, enabled: bool) -> None:
        self.session.set_looping(enabled=enabled)

    def copy_command(self) -> None:
        """Copy the current command to the clipboard and remember it."""
        if self.session.copy_command(self.clipboard_writer):
            self.gui.flash_copied()
        self.refresh()

    def copy_history_entry(self, command: str) -> None:
        """Copy a previous command again."""
        self.session.copy_command(self.clipboard_writer, command)
        self.refresh()

    def clear_history(self) -> None:
        self.session.clear_history()
        self.refresh()


__all__ = ["ViewState", "YtSectionsController", "write_clipboard"]
