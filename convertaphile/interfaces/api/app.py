"""FastAPI application setup."""
import asyncio
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from convertaphile import __version__
from convertaphile.application import file_sweeper
from convertaphile.config import settings
from convertaphile.interfaces.api.routers import conversion_router

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage app startup/shutdown."""
    settings.uploads_dir.mkdir(parents=True, exist_ok=True)
    task = asyncio.create_task(file_sweeper.run())
    yield
    file_sweeper.stop()
    await task


app = FastAPI(
    title="Convertaphile",
    description="Media format conversion service",
    version=__version__,
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
)

app.include_router(conversion_router)
