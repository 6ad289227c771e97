"""Audio extraction argument helpers."""

from ytsections.models import AudioCodec

EXTRACT: tuple[str, ...] = ("-x",)  #: Keep only the audio track after download.
AUDIO_FORMAT: tuple[str, ...] = ("--audio-format",)  #: Convert extracted audio to this format.


def extract(codec: AudioCodec = AudioCodec.MP3) -> tuple[str, ...]:
    """Return args to extract audio converted to ``codec``."""
    return EXTRACT + AUDIO_FORMAT + (codec.value,)
