"""FFprobe operations."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional, Union

from pydantic import ValidationError

from convertaphile.domain.models.probe import ProbeReport
from convertaphile.infrastructure.ffmpeg.runner import DEFAULT_TIMEOUT, run_command

logger = logging.getLogger(__name__)


class FFProber:
    """FFprobe wrapper for container and stream detection."""

    def __init__(self, ffprobe_path: str = "ffprobe", timeout: int = DEFAULT_TIMEOUT):
        self.ffprobe_path = ffprobe_path
        self.timeout = timeout

    def build_command(self, file_path: Union[str, Path]) -> List[str]:
        return [
            self.ffprobe_path,
            "-hide_banner",
            "-of", "json",
            "-show_format",
            "-show_streams",
            str(file_path),
        ]

    async def analyze(self, file_path: Union[str, Path]) -> Optional[ProbeReport]:
        """Probe a file; None when ffprobe fails or prints something unparseable."""
        cmd = self.build_command(file_path)
        logger.info(f"Analyzing file with command: {' '.join(cmd)}")

        result = await run_command(cmd, timeout=self.timeout)
        if not result.success:
            logger.error(
                f"ffprobe failed for {file_path} (exit code {result.exit_code}): {result.stderr}"
            )
            return None

        try:
            return ProbeReport.model_validate_json(result.stdout)
        except ValidationError as exc:
            logger.error(f"Could not parse ffprobe output for {file_path}: {exc}")
            logger.debug(f"ffprobe raw output:\n{result.stdout}")
            return None
