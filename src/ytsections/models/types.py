"""Output format and codec type definitions."""

from enum import Enum


class OutputFormat(str, Enum):
    """What the generated command downloads."""

    AUDIO = "audio"
    VIDEO = "video"

    @property
    def label(self) -> str:
        """Human readable label for selection widgets."""
        return {
            OutputFormat.AUDIO: "Audio",
            OutputFormat.VIDEO: "Video",
        }[self]


class AudioCodec(str, Enum):
    """Audio formats accepted by ``yt-dlp --audio-format``."""

    BEST = "best"
    AAC = "aac"
    ALAC = "alac"
    FLAC = "flac"
    M4A = "m4a"
    MP3 = "mp3"
    OPUS = "opus"
    VORBIS = "vorbis"
    WAV = "wav"


__all__ = ["AudioCodec", "OutputFormat"]
