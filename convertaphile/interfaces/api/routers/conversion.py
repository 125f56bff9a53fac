"""Conversion API router."""
import asyncio
import logging
from pathlib import Path
from typing import Optional

from fastapi import APIRouter, File, Form, HTTPException, UploadFile
from fastapi.responses import FileResponse
from starlette.background import BackgroundTask

from convertaphile.application import conversion_service
from convertaphile.config import settings
from convertaphile.domain.models.formats import (
    is_supported_target,
    media_type_for,
    normalize_extension,
)
from convertaphile.infrastructure.filesystem import remove_file, save_uploaded_file
from convertaphile.infrastructure.persistence import conversion_repository, stats_repository
from convertaphile.interfaces.api.schemas.conversion import (
    ConversionResponse,
    ConversionStatsResponse,
    ErrorResponse,
    HealthResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["conversion"])


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Health probe."""
    return HealthResponse(status="healthy")


@router.post(
    "/conversion",
    response_model=ConversionResponse,
    responses={
        400: {"model": ErrorResponse},
        415: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def create_conversion(
    file: Optional[UploadFile] = File(None),
    target_format: Optional[str] = Form(None, alias="targetFormat"),
) -> ConversionResponse:
    """Convert an uploaded file and keep the result for download."""
    if not file or not file.filename or not target_format:
        raise HTTPException(status_code=400, detail="Missing file or target format")

    target_ext = normalize_extension(target_format)
    if not is_supported_target(target_ext):
        raise HTTPException(status_code=400, detail=f"Unsupported target format: {target_format}")

    content = await file.read()
    if not content:
        raise HTTPException(status_code=400, detail="Uploaded file is empty")

    conversion_id = conversion_repository.generate_conversion_id()
    upload_dir = settings.uploads_dir
    input_path = upload_dir / f"uploaded_{conversion_id}{Path(file.filename).suffix.lower()}"
    output_path = upload_dir / f"convertaphile_{conversion_id}.{target_ext}"
    logger.info(f"Received file: {file.filename}, requested target format: {target_ext}")

    try:
        await asyncio.to_thread(save_uploaded_file, content, input_path)

        report = await conversion_service.probe(input_path)
        if report is None:
            raise HTTPException(
                status_code=415,
                detail="Could not analyze input file type. Is it a valid media file?",
            )

        source = conversion_service.classify(report, input_path)
        if source is None:
            raise HTTPException(status_code=400, detail="Unsupported input file type detected.")

        result = await conversion_service.convert_source(source, output_path)
        if not result.success:
            raise HTTPException(status_code=500, detail=f"File conversion failed: {result.stderr}")

        if not output_path.exists() or output_path.stat().st_size == 0:
            raise HTTPException(status_code=500, detail="Converted file not found or is empty")

        stored = await asyncio.to_thread(
            conversion_repository.store, conversion_id, output_path, file.filename, target_ext
        )
        await asyncio.to_thread(stats_repository.increment, "total_files", 1)
        await asyncio.to_thread(stats_repository.increment, "total_size_mb", stored.size_mb)

        return ConversionResponse(
            conversion_id=stored.conversion_id,
            original_file_name=file.filename,
            converted_file_name=stored.stored_filename,
            target_format=target_ext,
            file_size_bytes=stored.size_bytes,
            file_size_mb=f"{stored.size_mb:.2f}",
            download_url=f"/download/{stored.conversion_id}",
            message="File converted successfully",
        )
    except HTTPException:
        raise
    except Exception as e:
        logger.exception(f"Unexpected error during conversion of {file.filename}")
        raise HTTPException(
            status_code=500,
            detail=f"Unexpected error occurred during conversion: {e}",
        )
    finally:
        remove_file(input_path)
        remove_file(output_path)


@router.get(
    "/download/{conversion_id}",
    response_class=FileResponse,
    responses={404: {"model": ErrorResponse}},
)
async def download_conversion(conversion_id: str) -> FileResponse:
    """Send a stored conversion once, then delete it."""
    stored = conversion_repository.find(conversion_id)
    if not stored or stored.size_bytes == 0:
        raise HTTPException(status_code=404, detail="File not found or has expired")

    await asyncio.to_thread(stats_repository.increment, "total_downloads", 1)
    logger.info(f"File downloaded: {stored.stored_filename}")

    return FileResponse(
        stored.path,
        media_type=media_type_for(stored.target_format),
        filename=stored.download_name,
        background=BackgroundTask(conversion_repository.delete, stored),
    )


@router.get("/stats", response_model=ConversionStatsResponse, responses={500: {"model": ErrorResponse}})
async def get_stats() -> ConversionStatsResponse:
    """Aggregate usage statistics."""
    try:
        stats = stats_repository.get_stats()
    except Exception as e:
        logger.error(f"Error retrieving stats: {str(e)}")
        raise HTTPException(status_code=500, detail="Error retrieving statistics")

    return ConversionStatsResponse(
        total_files=stats.total_files,
        total_size_mb=stats.total_size_mb,
        total_downloads=stats.total_downloads,
        message="Statistics retrieved successfully",
    )
