"""Format classification from ffprobe reports (pure logic, no I/O)."""
import logging
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from convertaphile.domain.models.formats import (
    AUDIO_FORMATS,
    PHOTO_FORMATS,
    VIDEO_FORMATS,
    MediaFormat,
    SourceMedia,
    canonical_extension,
    extension_of,
)
from convertaphile.domain.models.probe import ProbeReport

logger = logging.getLogger(__name__)

# ffprobe labels Matroska and ASF containers by their family name, never "mkv"/"wmv".
VIDEO_FORMAT_NAME_TOKENS: Dict[MediaFormat, Tuple[str, ...]] = {
    MediaFormat.MP4: ("mp4",),
    MediaFormat.MKV: ("mkv", "matroska"),
    MediaFormat.MOV: ("mov",),
    MediaFormat.AVI: ("avi",),
    MediaFormat.WEBM: ("webm",),
    MediaFormat.WMV: ("wmv", "asf"),
}


def _classify_photo(format_name: str, extension: str) -> Optional[MediaFormat]:
    for fmt in PHOTO_FORMATS:
        if fmt.value in format_name or extension == fmt.value:
            return fmt
    return None


def video_candidates(format_name: str) -> List[MediaFormat]:
    """Video containers whose tokens appear in a format name, in match order."""
    return [
        fmt for fmt in VIDEO_FORMATS
        if any(token in format_name for token in VIDEO_FORMAT_NAME_TOKENS[fmt])
    ]


def _classify_video(format_name: str, extension: str) -> Optional[MediaFormat]:
    candidates = video_candidates(format_name)
    if len(candidates) == 1:
        return candidates[0]

    by_extension = next((f for f in VIDEO_FORMATS if f.value == extension), None)
    if by_extension is not None:
        return by_extension
    if candidates:
        return candidates[0]

    logger.warning(f"Unsupported video container: {format_name or '<unknown>'}")
    return None


def _classify_audio(report: ProbeReport, format_name: str) -> Optional[MediaFormat]:
    for fmt in AUDIO_FORMATS:
        if fmt.value in format_name or report.has_audio_codec(fmt.value):
            return fmt

    logger.warning(f"Unsupported audio container: {format_name or '<unknown>'}")
    return None


def classify(report: ProbeReport, fallback_extension: str = "") -> Optional[MediaFormat]:
    """
    Map a probe report to one supported format.

    Photo formats are checked first, by format-name substring or by the
    file extension, because still images carry no audio stream and their
    single video stream must not route them to the video branch. Then a
    video stream selects a container, then an audio stream selects a codec.

    Args:
        report: Parsed ffprobe output.
        fallback_extension: Upload's file extension, used when the format
            name is missing or ambiguous.

    Returns:
        The detected format, or None for unsupported input.
    """
    format_name = report.format_name
    extension = canonical_extension(fallback_extension)

    photo = _classify_photo(format_name, extension)
    if photo is not None:
        return photo

    if report.has_stream("video"):
        return _classify_video(format_name, extension)

    if report.has_stream("audio"):
        return _classify_audio(report, format_name)

    logger.warning(
        f"Unknown file type (format: {format_name or '<none>'}, "
        f"streams: {[s.codec_type for s in report.streams]})"
    )
    return None


def detect_source(report: ProbeReport, path: Path) -> Optional[SourceMedia]:
    """Classify a probed file, using its own extension as fallback."""
    fmt = classify(report, extension_of(path))
    if fmt is None:
        return None
    logger.info(f"Detected file type: .{fmt.value.upper()} ({fmt.family.value})")
    return SourceMedia(format=fmt, path=path)
