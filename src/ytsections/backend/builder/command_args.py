"""Common yt-dlp command arguments."""

FORCE_KEYFRAMES: tuple[str, ...] = ("--force-keyframes-at-cuts",)  #: Re-encode so cuts land exactly.
DOWNLOAD_SECTIONS: tuple[str, ...] = ("--download-sections",)  #: Download only a time range.
OUTPUT_TEMPLATE: tuple[str, ...] = ("-o",)  #: Output file name template.
EXT_PLACEHOLDER = "%(ext)s"  #: Replaced by the tool with the final file extension.
TITLE_PLACEHOLDER = "%(title)s"  #: Replaced by the tool with the video title.


def quote(value: str) -> str:
    """Wrap ``value`` in double quotes."""
    return f'"{value}"'
