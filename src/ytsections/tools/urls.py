"""YouTube URL recognition."""

from __future__ import annotations

import re
from urllib.parse import parse_qs, urlparse

_VIDEO_ID_RE = re.compile(r"[A-Za-z0-9_-]{11}", re.ASCII)
_YOUTUBE_HOSTS = {"youtube.com", "www.youtube.com", "m.youtube.com", "music.youtube.com"}
_SHORT_HOSTS = {"youtu.be", "www.youtu.be"}
_PATH_PREFIXES = ("/embed/", "/shorts/", "/live/", "/v/")


def extract_video_id(url: str) -> str | None:
    """Return the 11-character video id of a YouTube URL, or ``None``."""
    parsed = urlparse(url.strip())
    if parsed.scheme not in {"http", "https"}:
        return None
    host = (parsed.hostname or "").lower()
    candidate: str | None = None
    if host in _SHORT_HOSTS:
        candidate = parsed.path.lstrip("/").split("/", 1)[0]
    elif host in _YOUTUBE_HOSTS:
        if parsed.path == "/watch":
            candidate = parse_qs(parsed.query).get("v", [None])[0]
        else:
            for prefix in _PATH_PREFIXES:
                if parsed.path.startswith(prefix):
                    candidate = parsed.path[len(prefix) :].split("/", 1)[0]
                    break
    if candidate and _VIDEO_ID_RE.fullmatch(candidate):
        return candidate
    return None


def can_play(url: str) -> bool:
    """Whether ``url`` points at a playable YouTube video."""
    return extract_video_id(url) is not None


__all__ = ["can_play", "extract_video_id"]
