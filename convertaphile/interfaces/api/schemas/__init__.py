"""API schemas."""
from convertaphile.interfaces.api.schemas.conversion import (
    ConversionResponse,
    ConversionStatsResponse,
    ErrorResponse,
    HealthResponse,
)

__all__ = [
    "ConversionResponse",
    "ConversionStatsResponse",
    "ErrorResponse",
    "HealthResponse",
]
