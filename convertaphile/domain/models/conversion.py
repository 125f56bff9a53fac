"""Conversion configuration and stored-conversion models."""
from datetime import datetime
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


class ConversionConfig(BaseModel):
    """Executables and limits handed to the conversion pipeline."""

    ffmpeg_bin: str = "ffmpeg"
    ffprobe_bin: str = "ffprobe"
    timeout: int = 60

    model_config = ConfigDict(frozen=True)


class StoredConversion(BaseModel):
    """A converted file kept for download."""

    conversion_id: str
    original_filename: str
    stored_filename: str
    target_format: str
    size_bytes: int
    path: Path
    created_at: datetime = Field(default_factory=datetime.utcnow)

    @property
    def size_mb(self) -> float:
        return self.size_bytes / (1024.0 * 1024.0)

    @property
    def download_name(self) -> str:
        """Stored filename without the conversion id prefix."""
        return self.stored_filename[len(self.conversion_id) + 1:]


class ConversionStats(BaseModel):
    """Aggregate usage counters."""

    total_files: int = 0
    total_size_mb: float = 0.0
    total_downloads: int = 0
