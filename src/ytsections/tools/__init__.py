"""Time code, URL and status helper utilities."""

from .helpers import emit_status, format_seconds, format_timecode, parse_time_value, parse_timecode
from .urls import can_play, extract_video_id

__all__ = [
    "can_play",
    "emit_status",
    "extract_video_id",
    "format_seconds",
    "format_timecode",
    "parse_time_value",
    "parse_timecode",
]
