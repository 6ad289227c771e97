"""Selection session composing the range model, command builder and history."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ytsections.models import CommandHistory, OutputFormat, RangeModel
from ytsections.models.options import DEFAULT_AUDIO_CODEC, DEFAULT_FORCE_KEYFRAMES, DEFAULT_FORMAT, DEFAULT_TOOL
from ytsections.tools import can_play, emit_status

from .builder import build_command

if TYPE_CHECKING:
    from collections.abc import Callable

    from ytsections.models import AudioCodec, Player

logger = logging.getLogger(__name__)

COPY_FAILED = "Could not copy command to clipboard"


class Session:
    """State owned by the caller of the range selector.

    The ``on_*`` handlers are what a front end wires its widget and player
    events to. Every handler applies its change synchronously, so
    :attr:`command` is current as soon as a handler returns.
    """

    def __init__(
        self,
        player: Player | None = None,
        *,
        tool: str = DEFAULT_TOOL,
        status_callback: Callable[[str], None] | None = None,
    ) -> None:
        self.range = RangeModel(player)
        self.history = CommandHistory()
        self.status_callback = status_callback
        self.tool = tool
        self.url = ""
        self.url_valid = False
        self.format: OutputFormat = DEFAULT_FORMAT
        self.audio_codec: AudioCodec = DEFAULT_AUDIO_CODEC
        self.force_keyframes = DEFAULT_FORCE_KEYFRAMES
        self.file_name = ""
        self.output_path: str | None = None
        self.looping = False

    # Media events

    def on_url_changed(self, url: str) -> None:
        """Store ``url`` and drop the selection of the previous video."""
        self.url = url.strip()
        self.url_valid = can_play(self.url)
        self.range.reset()
        logger.debug("URL changed to %r (valid=%s)", self.url, self.url_valid)

    def on_duration_known(self, seconds: float) -> None:
        """Select the whole video once its length is known.

        A repeat of the current duration keeps the selection, so late player
        notifications for the same media do not undo edits.
        """
        if self.range.duration > 0 and seconds == self.range.duration:
            return
        try:
            self.range.set_duration(seconds)
        except ValueError:
            logger.warning("Ignoring invalid duration from player: %r", seconds)

    def on_progress_tick(self, seconds: float) -> bool:
        """Loop playback inside the selection when looping is on."""
        return self.range.on_progress(seconds, looping=self.looping)

    # Selection edits

    def on_start_changed(self, seconds: float) -> bool:
        return self.range.set_start(seconds)

    def on_end_changed(self, seconds: float) -> bool:
        return self.range.set_end(seconds)

    def on_start_text(self, text: str) -> bool:
        return self.range.set_start_text(text)

    def on_end_text(self, text: str) -> bool:
        return self.range.set_end_text(text)

    # Output settings

    def set_format(self, fmt: OutputFormat | str) -> None:
        self.format = OutputFormat(fmt)

    def set_file_name(self, name: str) -> None:
        self.file_name = name.strip()

    def set_output_path(self, path: str | None) -> None:
        self.output_path = path or None

    def set_looping(self, *, enabled: bool) -> None:
        self.looping = enabled

    # Commands

    @property
    def command(self) -> str | None:
        """The current download command, or ``None`` without a valid URL."""
        if not self.url_valid:
            return None
        return build_command(
            self.url,
            self.range.start,
            self.range.end,
            self.format,
            self.file_name,
            self.output_path,
            tool=self.tool,
            audio_codec=self.audio_codec,
            force_keyframes=self.force_keyframes,
        )

    def record_current(self) -> str | None:
        """Add the current command to the history and return it."""
        command = self.command
        if command is not None:
            self.history.record(command)
        return command

    def copy_command(self, writer: Callable[[str], None], command: str | None = None) -> bool:
        """Hand a command to ``writer`` and record it in the history.

        ``command`` defaults to the current one; passing a history entry
        copies it again and moves it to the front. The command is recorded
        even when the write fails so it can be copied again from the history.
        A failed write is reported through the status callback and ``False``
        is returned.
        """
        if command is None:
            command = self.record_current()
            if command is None:
                return False
        else:
            self.history.record(command)
        try:
            writer(command)
        except (OSError, RuntimeError) as e:
            logger.warning("Clipboard write failed: %s", e)
            emit_status(f"{COPY_FAILED}: {e}", status_callback=self.status_callback)
            return False
        emit_status("Copied command to clipboard", status_callback=self.status_callback)
        return True

    def clear_history(self) -> None:
        self.history.clear()


__all__ = ["COPY_FAILED", "Session"]
