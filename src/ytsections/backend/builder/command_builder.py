"""Build yt-dlp command lines from a time selection."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ytsections.models import AudioCodec, OutputFormat
from ytsections.models.options import DEFAULT_FORCE_KEYFRAMES, DEFAULT_TOOL
from ytsections.tools import can_play

from . import audio, output, sections, video
from .command_args import FORCE_KEYFRAMES, quote

if TYPE_CHECKING:
    from pathlib import Path

    from ytsections.models import Options

logger = logging.getLogger(__name__)


def _format_args(fmt: OutputFormat, audio_codec: AudioCodec) -> tuple[str, ...]:
    """Return format selection args."""
    if fmt is OutputFormat.AUDIO:
        return audio.extract(audio_codec)
    return video.select()


def build_command(  # noqa: PLR0913
    url: str,
    start: float,
    end: float,
    fmt: OutputFormat,
    file_name: str | None = None,
    output_path: str | Path | None = None,
    *,
    tool: str = DEFAULT_TOOL,
    audio_codec: AudioCodec = AudioCodec.MP3,
    force_keyframes: bool = DEFAULT_FORCE_KEYFRAMES,
) -> str:
    """Return the download command for the ``start``-``end`` section of ``url``.

    The result depends only on the arguments. The URL is always the last,
    quoted argument.
    """
    fmt = OutputFormat(fmt)
    args = (
        (tool,)
        + _format_args(fmt, audio_codec)
        + (FORCE_KEYFRAMES if force_keyframes else ())
        + sections.time_range(start, end)
        + output.build(file_name, output_path)
        + (quote(url),)
    )
    return " ".join(args)


def build_from_options(opts: Options) -> str:
    """Return the download command described by ``opts``.

    Raises:
        ValueError: If the URL is not a YouTube video or the section cannot
            be resolved.

    """
    if not can_play(opts.url):
        raise ValueError(f"Not a valid YouTube URL: {opts.url}")
    start, end = opts.section()
    command = build_command(
        opts.url,
        start,
        end,
        opts.output.format,
        opts.output.file_name,
        opts.output.path,
        tool=opts.output.tool,
        audio_codec=opts.output.audio_codec,
        force_keyframes=opts.output.force_keyframes,
    )
    logger.info("Built command for %s (%s-%s)", opts.url, start, end)
    return command


__all__ = ["build_command", "build_from_options"]
