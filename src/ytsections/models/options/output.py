"""Output option models."""

from __future__ import annotations

from pathlib import Path

from cyclopts import Parameter
from pydantic import BaseModel, Field, field_validator

from ytsections.models.types import AudioCodec, OutputFormat

from .defaults import DEFAULT_AUDIO_CODEC, DEFAULT_FORCE_KEYFRAMES, DEFAULT_FORMAT, DEFAULT_TOOL
from .groups import OUTPUT_GROUP


@Parameter(group=OUTPUT_GROUP)
class OutputOptions(BaseModel):
    """Options shaping the generated download command."""

    format: OutputFormat = Field(
        DEFAULT_FORMAT,
        description=f"Download audio only or video with audio. [default: {DEFAULT_FORMAT.value}]",
    )
    audio_codec: AudioCodec = Field(
        DEFAULT_AUDIO_CODEC,
        description=f"Audio format used when extracting audio. [default: {DEFAULT_AUDIO_CODEC.value}]",
    )
    file_name: str | None = Field(None, description="Output file name without extension.")
    path: Path | None = Field(None, description="Directory the download tool writes into.")
    tool: str = Field(DEFAULT_TOOL, description=f"Download tool invocation. [default: {DEFAULT_TOOL}]")
    force_keyframes: bool = Field(
        default=DEFAULT_FORCE_KEYFRAMES,
        description="Re-encode around the cut points so the section starts and ends exactly.",
    )

    @field_validator("file_name")
    @classmethod
    def normalize_file_name(cls, v: str | None) -> str | None:
        """Treat a blank file name as no file name."""
        if v is None:
            return None
        v = v.strip()
        return v or None

    @field_validator("tool")
    @classmethod
    def validate_tool(cls, v: str) -> str:
        """Ensure a tool invocation is present."""
        v = v.strip()
        if not v:
            raise ValueError("Download tool must not be empty")
        return v


__all__ = ["OutputOptions"]
