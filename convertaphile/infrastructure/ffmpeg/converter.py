"""FFmpeg conversion operations."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Union

from convertaphile.domain.models.formats import SourceMedia
from convertaphile.domain.models.result import ConversionResult
from convertaphile.domain.services.policy import build_command
from convertaphile.infrastructure.ffmpeg.runner import DEFAULT_TIMEOUT, run_command

logger = logging.getLogger(__name__)


class FFConverter:
    """FFmpeg converter wrapper."""

    def __init__(self, ffmpeg_path: str = "ffmpeg", timeout: int = DEFAULT_TIMEOUT):
        self.ffmpeg_path = ffmpeg_path
        self.timeout = timeout

    async def convert(self, source: SourceMedia, output_path: Union[str, Path]) -> ConversionResult:
        """Convert ``source`` into ``output_path``; the target format follows its extension."""
        cmd = build_command(source, output_path, self.ffmpeg_path)
        logger.info(f"Converting {source.path} to {output_path} using command: {' '.join(cmd)}")

        result = await run_command(cmd, timeout=self.timeout)

        if result.success:
            logger.info(f"Successfully converted {source.path} to {output_path}")
        else:
            logger.error(
                f"Failed to convert {source.path} to {output_path}. "
                f"Exit code: {result.exit_code}\nFFmpeg error output:\n{result.stderr}"
            )
        return result
