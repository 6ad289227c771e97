"""Output naming argument helpers."""

from __future__ import annotations

from pathlib import Path

from .command_args import EXT_PLACEHOLDER, OUTPUT_TEMPLATE, TITLE_PLACEHOLDER, quote

_SEPARATORS = "/\\"


def template(file_name: str | None, path: str | Path | None = None) -> str | None:
    """Return the output template, or ``None`` to keep the tool's default.

    A directory without a file name keeps the video title as the name.
    """
    name = (file_name or "").strip()
    folder = str(path).rstrip(_SEPARATORS) if path else ""
    if not name and not folder:
        return None
    stem = name or TITLE_PLACEHOLDER
    leaf = f"{stem}.{EXT_PLACEHOLDER}"
    return f"{folder}/{leaf}" if folder else leaf


def build(file_name: str | None, path: str | Path | None = None) -> tuple[str, ...]:
    """Return ``-o "<template>"`` or nothing."""
    tmpl = template(file_name, path)
    if tmpl is None:
        return ()
    return (*OUTPUT_TEMPLATE, quote(tmpl))
