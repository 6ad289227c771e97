"""Video format selection argument helpers."""

from .command_args import quote

FORMAT: tuple[str, ...] = ("-f",)  #: Format selection expression.
BEST_VIDEO_AUDIO = "bv*+ba/b"  #: Best video merged with best audio, else best single file.


def select() -> tuple[str, ...]:
    """Return args selecting the best video and audio streams."""
    return (*FORMAT, quote(BEST_VIDEO_AUDIO))
