"""
Application settings.

Centralizes configuration using Pydantic BaseSettings. This keeps defaults
in one place and allows overriding via environment variables.
"""
from __future__ import annotations

from pathlib import Path
from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

from convertaphile.domain.models.conversion import ConversionConfig


class Settings(BaseSettings):
    """Application configuration."""

    # Server
    host: str = "0.0.0.0"
    port: int = 8080
    cors_origins: List[str] = ["*"]

    # Storage
    storage_root_dir: Path = Path("./storage")
    retention_minutes: int = 60
    cleanup_interval_seconds: int = 300

    # FFmpeg
    ffmpeg_dir: Optional[str] = None
    ffmpeg_path: Optional[str] = None
    ffprobe_path: Optional[str] = None
    conversion_timeout: int = 60

    # Logging
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="CONVERTAPHILE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    @property
    def uploads_dir(self) -> Path:
        return self.storage_root_dir / "uploads"

    @property
    def converted_dir(self) -> Path:
        return self.storage_root_dir / "converted"

    @property
    def stats_file(self) -> Path:
        return self.storage_root_dir / "stats.json"

    def get_ffmpeg_bin(self) -> str:
        """Return ffmpeg binary path (explicit path, then ffmpeg_dir, then PATH lookup)."""
        if self.ffmpeg_path:
            return self.ffmpeg_path
        if self.ffmpeg_dir:
            return str(Path(self.ffmpeg_dir) / "ffmpeg")
        return "ffmpeg"

    def get_ffprobe_bin(self) -> str:
        """Return ffprobe binary path (explicit path, then ffmpeg_dir, then PATH lookup)."""
        if self.ffprobe_path:
            return self.ffprobe_path
        if self.ffmpeg_dir:
            return str(Path(self.ffmpeg_dir) / "ffprobe")
        return "ffprobe"

    def conversion_config(self) -> ConversionConfig:
        return ConversionConfig(
            ffmpeg_bin=self.get_ffmpeg_bin(),
            ffprobe_bin=self.get_ffprobe_bin(),
            timeout=self.conversion_timeout,
        )


# Singleton instance
settings = Settings()
