"""Domain models."""
from convertaphile.domain.models.conversion import (
    ConversionConfig,
    ConversionStats,
    StoredConversion,
)
from convertaphile.domain.models.formats import (
    AUDIO_FORMATS,
    PHOTO_FORMATS,
    SINGLE_FRAME_EXTENSIONS,
    SUPPORTED_TARGET_EXTENSIONS,
    VIDEO_FORMATS,
    MediaFamily,
    MediaFormat,
    SourceMedia,
    canonical_extension,
    extension_of,
    format_for_extension,
    is_supported_target,
    media_type_for,
    normalize_extension,
)
from convertaphile.domain.models.probe import ProbeFormat, ProbeReport, ProbeStream
from convertaphile.domain.models.result import ABNORMAL_EXIT_CODE, ConversionResult

__all__ = [
    "ABNORMAL_EXIT_CODE",
    "AUDIO_FORMATS",
    "ConversionConfig",
    "ConversionResult",
    "ConversionStats",
    "MediaFamily",
    "MediaFormat",
    "PHOTO_FORMATS",
    "ProbeFormat",
    "ProbeReport",
    "ProbeStream",
    "SINGLE_FRAME_EXTENSIONS",
    "SUPPORTED_TARGET_EXTENSIONS",
    "SourceMedia",
    "StoredConversion",
    "VIDEO_FORMATS",
    "canonical_extension",
    "extension_of",
    "format_for_extension",
    "is_supported_target",
    "media_type_for",
    "normalize_extension",
]
