"""Default constants for option models."""

from __future__ import annotations

import os

from ytsections.models.types import AudioCodec, OutputFormat

DEFAULT_TOOL = os.getenv("YTSECTIONS_TOOL", "yt-dlp")
DEFAULT_FORMAT = OutputFormat.AUDIO
DEFAULT_AUDIO_CODEC = AudioCodec.MP3
DEFAULT_FORCE_KEYFRAMES = True

__all__ = [
    "DEFAULT_AUDIO_CODEC",
    "DEFAULT_FORCE_KEYFRAMES",
    "DEFAULT_FORMAT",
    "DEFAULT_TOOL",
]
