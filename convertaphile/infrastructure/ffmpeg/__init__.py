"""FFmpeg infrastructure."""
from convertaphile.infrastructure.ffmpeg.converter import FFConverter
from convertaphile.infrastructure.ffmpeg.prober import FFProber
from convertaphile.infrastructure.ffmpeg.runner import DEFAULT_TIMEOUT, run_command

__all__ = [
    "DEFAULT_TIMEOUT",
    "FFConverter",
    "FFProber",
    "run_command",
]
