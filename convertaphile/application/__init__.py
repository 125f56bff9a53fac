"""Application layer - use cases and orchestration."""
from convertaphile.application.conversion import (
    ConversionService,
    conversion_service,
    convert,
    default_output_path,
)
from convertaphile.application.cleanup import ExpiredFileSweeper, file_sweeper

__all__ = [
    "ConversionService",
    "ExpiredFileSweeper",
    "conversion_service",
    "convert",
    "default_output_path",
    "file_sweeper",
]
