"""FFmpeg command construction per source format.

Every format shares the default invocation ``ffmpeg -i <source> <target>``,
where ffmpeg picks the muxer from the target extension. Some formats
register an override that contributes extra flags between the input and
the output path. AVIF output gets its encoder flags whatever the source.
"""
import logging
from pathlib import Path
from typing import Callable, Dict, List, Tuple, Union

from convertaphile.domain.models.formats import (
    AUDIO_FORMATS,
    SINGLE_FRAME_EXTENSIONS,
    VIDEO_FORMATS,
    MediaFormat,
    SourceMedia,
    extension_of,
)

logger = logging.getLogger(__name__)

# Default encoder choice for .avif is unreliable, so it is pinned.
AVIF_FLAGS: Tuple[str, ...] = ("-c:v", "libaom-av1", "-crf", "23", "-pix_fmt", "yuv420p")

SINGLE_FRAME_FLAGS: Tuple[str, ...] = ("-frames:v", "1")

DISABLE_VIDEO_FLAG = "-vn"

H264_AAC_FLAGS: Tuple[str, ...] = ("-c:v", "libx264", "-c:a", "aac", "-crf", "23", "-b:a", "128k")

VIDEO_TARGET_FLAGS: Dict[str, Tuple[str, ...]] = {
    "mp4": H264_AAC_FLAGS,
    "mov": H264_AAC_FLAGS,
    "mkv": H264_AAC_FLAGS,
    "webm": ("-c:v", "libvpx", "-c:a", "libopus", "-crf", "10", "-b:a", "128k"),
    "avi": ("-c:v", "mpeg4", "-c:a", "libmp3lame", "-b:v", "1M", "-b:a", "128k"),
    "wmv": ("-c:v", "wmv2", "-c:a", "wmav2", "-b:v", "1M", "-b:a", "128k"),
}

AUDIO_TARGET_FLAGS: Dict[str, Tuple[str, ...]] = {
    "mp3": ("-c:a", "libmp3lame", "-b:a", "192k"),
    "aac": ("-c:a", "aac", "-b:a", "192k"),
    "wav": ("-c:a", "pcm_s16le"),
    "flac": ("-c:a", "flac"),
    "ogg": ("-c:a", "libvorbis", "-q:a", "5"),
    "m4a": ("-c:a", "aac", "-b:a", "192k"),
}

# (source format, target extension) -> flags placed before the output path.
PolicyOverride = Callable[[MediaFormat, str], List[str]]


def _audio_target_flags(target_ext: str) -> List[str]:
    return [*AUDIO_TARGET_FLAGS[target_ext], DISABLE_VIDEO_FLAG]


def _gif_override(source_format: MediaFormat, target_ext: str) -> List[str]:
    if target_ext in SINGLE_FRAME_EXTENSIONS:
        logger.info("Adding -frames:v 1 for GIF to single image conversion")
        return list(SINGLE_FRAME_FLAGS)
    return []


def _video_override(source_format: MediaFormat, target_ext: str) -> List[str]:
    if target_ext in SINGLE_FRAME_EXTENSIONS:
        return list(SINGLE_FRAME_FLAGS)
    if target_ext in AUDIO_TARGET_FLAGS:
        return _audio_target_flags(target_ext)
    # Re-encoding AVI into AVI is left to ffmpeg's defaults.
    if target_ext in VIDEO_TARGET_FLAGS and not (
        target_ext == "avi" and source_format == MediaFormat.AVI
    ):
        return list(VIDEO_TARGET_FLAGS[target_ext])

    logger.warning(
        f"No specific codecs defined for .{target_ext} when converting from "
        f"{source_format.value.upper()}. Attempting default conversion."
    )
    return []


def _audio_override(source_format: MediaFormat, target_ext: str) -> List[str]:
    if target_ext in AUDIO_TARGET_FLAGS:
        return _audio_target_flags(target_ext)

    logger.warning(
        f"No specific codecs defined for .{target_ext} when converting from "
        f"{source_format.value.upper()}. Attempting default conversion."
    )
    return []


POLICY_OVERRIDES: Dict[MediaFormat, PolicyOverride] = {
    MediaFormat.GIF: _gif_override,
    **{fmt: _video_override for fmt in VIDEO_FORMATS},
    **{fmt: _audio_override for fmt in AUDIO_FORMATS},
}


def policy_flags(source_format: MediaFormat, target_ext: str) -> List[str]:
    """Flags for a (source format, target extension) pair, excluding input and output."""
    flags: List[str] = []
    override = POLICY_OVERRIDES.get(source_format)
    if override is not None:
        flags.extend(override(source_format, target_ext))
    if target_ext == "avif":
        flags.extend(AVIF_FLAGS)
    return flags


def build_command(
    source: SourceMedia,
    target_path: Union[str, Path],
    ffmpeg_path: str = "ffmpeg",
) -> List[str]:
    """
    Build the ffmpeg argument list converting ``source`` into ``target_path``.

    Building never fails: an unrecognized target extension logs a warning
    and yields the default invocation.

    Returns:
        ``[ffmpeg_path, "-i", source, *flags, target_path]``
    """
    target_ext = extension_of(target_path)
    cmd = [ffmpeg_path, "-i", str(source.path)]
    cmd.extend(policy_flags(source.format, target_ext))
    cmd.append(str(target_path))
    return cmd
