"""Probe report models (subset of ffprobe's JSON output).

Only the keys the classifier needs are declared. Anything else ffprobe
prints is ignored on validation, so newer ffprobe builds adding fields
never break decoding.
"""
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ProbeFormat(BaseModel):
    """Container-level information."""

    format_name: Optional[str] = None
    duration: Optional[str] = None

    model_config = ConfigDict(extra="ignore", frozen=True)


class ProbeStream(BaseModel):
    """Stream-level information."""

    codec_name: Optional[str] = None
    codec_type: Optional[str] = None
    width: Optional[int] = None
    height: Optional[int] = None

    model_config = ConfigDict(extra="ignore", frozen=True)


class ProbeReport(BaseModel):
    """Parsed ffprobe report for one file."""

    format: Optional[ProbeFormat] = None
    streams: List[ProbeStream] = Field(default_factory=list)

    model_config = ConfigDict(extra="ignore", frozen=True)

    @property
    def format_name(self) -> str:
        """Lowercased format name, empty when ffprobe reported none."""
        if self.format and self.format.format_name:
            return self.format.format_name.lower()
        return ""

    def has_stream(self, codec_type: str) -> bool:
        return any(s.codec_type == codec_type for s in self.streams)

    def has_audio_codec(self, codec_name: str) -> bool:
        return any(
            s.codec_type == "audio" and (s.codec_name or "").lower() == codec_name
            for s in self.streams
        )
