"""Supported media formats."""
from enum import Enum
from pathlib import Path
from typing import Dict, FrozenSet, Optional, Union

from pydantic import BaseModel, ConfigDict


class MediaFamily(str, Enum):
    """Media family."""

    PHOTO = "photo"
    VIDEO = "video"
    AUDIO = "audio"


class MediaFormat(str, Enum):
    """Source formats the service knows how to convert.

    The value doubles as the canonical file extension.
    """

    JPEG = "jpeg"
    PNG = "png"
    WEBP = "webp"
    GIF = "gif"
    AVIF = "avif"
    BMP = "bmp"
    TIFF = "tiff"

    MP4 = "mp4"
    MKV = "mkv"
    MOV = "mov"
    AVI = "avi"
    WEBM = "webm"
    WMV = "wmv"

    MP3 = "mp3"
    AAC = "aac"
    FLAC = "flac"
    M4A = "m4a"
    OGG = "ogg"
    WAV = "wav"

    @property
    def family(self) -> MediaFamily:
        return _FAMILIES[self]


_FAMILIES: Dict[MediaFormat, MediaFamily] = {
    **{f: MediaFamily.PHOTO for f in (
        MediaFormat.JPEG, MediaFormat.PNG, MediaFormat.WEBP, MediaFormat.GIF,
        MediaFormat.AVIF, MediaFormat.BMP, MediaFormat.TIFF,
    )},
    **{f: MediaFamily.VIDEO for f in (
        MediaFormat.MP4, MediaFormat.MKV, MediaFormat.MOV,
        MediaFormat.AVI, MediaFormat.WEBM, MediaFormat.WMV,
    )},
    **{f: MediaFamily.AUDIO for f in (
        MediaFormat.MP3, MediaFormat.AAC, MediaFormat.FLAC,
        MediaFormat.M4A, MediaFormat.OGG, MediaFormat.WAV,
    )},
}

# Classifier match order within each family.
PHOTO_FORMATS = (
    MediaFormat.JPEG, MediaFormat.PNG, MediaFormat.WEBP, MediaFormat.GIF,
    MediaFormat.AVIF, MediaFormat.BMP, MediaFormat.TIFF,
)
VIDEO_FORMATS = (
    MediaFormat.MP4, MediaFormat.MKV, MediaFormat.MOV,
    MediaFormat.AVI, MediaFormat.WEBM, MediaFormat.WMV,
)
AUDIO_FORMATS = (
    MediaFormat.MP3, MediaFormat.AAC, MediaFormat.FLAC,
    MediaFormat.M4A, MediaFormat.OGG, MediaFormat.WAV,
)

EXTENSION_ALIASES: Dict[str, str] = {
    "jpg": "jpeg",
    "tif": "tiff",
}

# Output extensions that hold exactly one image. svg and ico may join later.
SINGLE_FRAME_EXTENSIONS: FrozenSet[str] = frozenset(
    {"jpg", "jpeg", "png", "webp", "bmp", "tiff", "tif", "avif"}
)

SUPPORTED_TARGET_EXTENSIONS: FrozenSet[str] = frozenset(
    {f.value for f in MediaFormat} | set(EXTENSION_ALIASES)
)

MEDIA_TYPES: Dict[str, str] = {
    "png": "image/png",
    "jpg": "image/jpeg",
    "jpeg": "image/jpeg",
    "webp": "image/webp",
    "gif": "image/gif",
    "bmp": "image/bmp",
    "tiff": "image/tiff",
    "tif": "image/tiff",
    "ico": "image/x-icon",
    "avif": "image/avif",
    "mp3": "audio/mpeg",
    "aac": "audio/aac",
    "wav": "audio/wav",
    "flac": "audio/flac",
    "ogg": "audio/ogg",
    "m4a": "audio/mp4",
    "mp4": "video/mp4",
    "avi": "video/x-msvideo",
    "mov": "video/quicktime",
    "webm": "video/webm",
    "mkv": "video/x-matroska",
    "wmv": "video/x-ms-wmv",
}


def normalize_extension(value: str) -> str:
    """Lowercase an extension and strip its leading dot."""
    return value.strip().lower().lstrip(".")


def canonical_extension(value: str) -> str:
    """Normalize an extension and resolve aliases (jpg -> jpeg)."""
    ext = normalize_extension(value)
    return EXTENSION_ALIASES.get(ext, ext)


def extension_of(path: Union[str, Path]) -> str:
    return normalize_extension(Path(path).suffix)


def is_supported_target(extension: str) -> bool:
    return normalize_extension(extension) in SUPPORTED_TARGET_EXTENSIONS


def media_type_for(extension: str) -> str:
    return MEDIA_TYPES.get(normalize_extension(extension), "application/octet-stream")


def format_for_extension(extension: str) -> Optional[MediaFormat]:
    try:
        return MediaFormat(canonical_extension(extension))
    except ValueError:
        return None


class SourceMedia(BaseModel):
    """A detected input file: its format plus where it lives."""

    format: MediaFormat
    path: Path

    model_config = ConfigDict(frozen=True)

    @property
    def family(self) -> MediaFamily:
        return self.format.family
