"""Time range argument helpers."""

from ytsections.tools import format_seconds

from .command_args import DOWNLOAD_SECTIONS, quote

SECTION_PREFIX = "*"  #: Marks a section as a time range rather than a chapter regex.


def time_range(start: float, end: float) -> tuple[str, ...]:
    """Return ``--download-sections "*<start>-<end>"`` with raw seconds."""
    return (*DOWNLOAD_SECTIONS, quote(f"{SECTION_PREFIX}{format_seconds(start)}-{format_seconds(end)}"))
