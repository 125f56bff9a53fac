"""Conversion API schemas."""
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    """Base for response bodies; serialized with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ConversionResponse(ApiModel):
    """Metadata about a stored conversion."""
    conversion_id: str
    original_file_name: str
    converted_file_name: str
    target_format: str
    file_size_bytes: int
    file_size_mb: str = Field(alias="fileSizeMB")
    download_url: str
    message: str


class ConversionStatsResponse(ApiModel):
    """Usage statistics."""
    total_files: int
    total_size_mb: float = Field(alias="totalSizeMB")
    total_downloads: int
    message: str


class HealthResponse(BaseModel):
    """Health probe response."""
    status: str


class ErrorResponse(BaseModel):
    """Error response."""
    detail: str
