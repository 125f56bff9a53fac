"""Conversion use case - probe, classify, build and execute."""
import logging
from pathlib import Path
from typing import Optional, Union

from convertaphile.config import settings
from convertaphile.domain.models.conversion import ConversionConfig
from convertaphile.domain.models.formats import SourceMedia, normalize_extension
from convertaphile.domain.models.probe import ProbeReport
from convertaphile.domain.models.result import ConversionResult
from convertaphile.domain.services.classifier import detect_source
from convertaphile.infrastructure.ffmpeg.converter import FFConverter
from convertaphile.infrastructure.ffmpeg.prober import FFProber

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def default_output_path(input_path: PathLike, target_extension: str) -> Path:
    """Sibling of the input named ``<stem>_converted.<ext>``."""
    path = Path(input_path)
    return path.with_name(f"{path.stem}_converted.{normalize_extension(target_extension)}")


class ConversionService:
    """Runs the detection and conversion pipeline for one file at a time."""

    def __init__(self, config: Optional[ConversionConfig] = None) -> None:
        self.config = config or ConversionConfig()
        self.prober = FFProber(self.config.ffprobe_bin, self.config.timeout)
        self.converter = FFConverter(self.config.ffmpeg_bin, self.config.timeout)

    async def probe(self, input_path: PathLike) -> Optional[ProbeReport]:
        return await self.prober.analyze(input_path)

    def classify(self, report: ProbeReport, input_path: PathLike) -> Optional[SourceMedia]:
        return detect_source(report, Path(input_path).resolve())

    async def detect(self, input_path: PathLike) -> Optional[SourceMedia]:
        """Probe and classify; None when either step fails."""
        report = await self.probe(input_path)
        if report is None:
            return None
        return self.classify(report, input_path)

    async def convert_source(self, source: SourceMedia, output_path: PathLike) -> ConversionResult:
        return await self.converter.convert(source, output_path)

    async def convert(
        self,
        input_path: PathLike,
        target_extension: str,
        output_path: Optional[PathLike] = None,
    ) -> ConversionResult:
        """
        Convert a file end to end.

        Detection failures come back as a failed ConversionResult with exit
        code -1 rather than an exception, same as process failures.
        """
        report = await self.probe(input_path)
        if report is None:
            return ConversionResult.failure(f"Could not analyze input file: {input_path}")

        source = self.classify(report, input_path)
        if source is None:
            return ConversionResult.failure(f"Unsupported input file type: {input_path}")

        target = Path(output_path) if output_path else default_output_path(input_path, target_extension)
        return await self.convert_source(source, target)


async def convert(
    input_path: PathLike,
    target_extension: str,
    ffmpeg_path: str = "ffmpeg",
    ffprobe_path: str = "ffprobe",
    output_path: Optional[PathLike] = None,
    timeout: int = 60,
) -> ConversionResult:
    """Convert ``input_path`` to ``target_extension`` with the given executables."""
    config = ConversionConfig(ffmpeg_bin=ffmpeg_path, ffprobe_bin=ffprobe_path, timeout=timeout)
    return await ConversionService(config).convert(input_path, target_extension, output_path)


# Global singleton
conversion_service = ConversionService(settings.conversion_config())
