"""Background sweeper purging expired uploads and converted files."""
from __future__ import annotations

import asyncio
import logging
from datetime import datetime
from pathlib import Path
from typing import List, Optional, Sequence

from convertaphile.config import settings
from convertaphile.infrastructure.filesystem import purge_expired_files

logger = logging.getLogger(__name__)


class ExpiredFileSweeper:
    """
    Periodically deletes files older than the retention window.

    Usage:
        task = asyncio.create_task(file_sweeper.run())
        # ... later ...
        file_sweeper.stop()
        await task
    """

    def __init__(
        self,
        directories: Sequence[Path],
        retention_seconds: float,
        interval_seconds: float,
    ) -> None:
        self.directories: List[Path] = list(directories)
        self.retention_seconds = retention_seconds
        self.interval_seconds = interval_seconds
        self._stop_event: Optional[asyncio.Event] = None
        self._stop_requested = False
        self._running = False
        self._last_run: Optional[datetime] = None

    @property
    def is_running(self) -> bool:
        return self._running

    @property
    def last_run(self) -> Optional[datetime]:
        return self._last_run

    def sweep_once(self) -> int:
        """Purge every directory once and return the number of deleted files."""
        purged = 0
        for directory in self.directories:
            purged += purge_expired_files(directory, self.retention_seconds)
        self._last_run = datetime.now().astimezone()
        if purged:
            logger.info(f"Expired file sweep removed {purged} file(s)")
        return purged

    async def run(self) -> None:
        """Sweep until stop() is called."""
        if self._running:
            logger.warning("File sweeper already running")
            return

        self._running = True
        # One event per run: an asyncio.Event is tied to the loop that awaits it.
        self._stop_event = asyncio.Event()
        if self._stop_requested:
            self._stop_event.set()
        logger.info(
            f"File sweeper started (retention {self.retention_seconds}s, "
            f"interval {self.interval_seconds}s)"
        )
        try:
            while not self._stop_event.is_set():
                try:
                    await asyncio.to_thread(self.sweep_once)
                except Exception as e:
                    logger.error(f"Error in file sweeper: {str(e)}")
                try:
                    await asyncio.wait_for(self._stop_event.wait(), timeout=self.interval_seconds)
                except asyncio.TimeoutError:
                    pass
        finally:
            self._running = False
            self._stop_event = None
            self._stop_requested = False
            logger.info("File sweeper stopped")

    def stop(self) -> None:
        """Signal the sweeper loop to exit, even if it has not started yet."""
        self._stop_requested = True
        if self._stop_event is not None:
            self._stop_event.set()


# Global singleton
file_sweeper = ExpiredFileSweeper(
    directories=[settings.converted_dir, settings.uploads_dir],
    retention_seconds=settings.retention_minutes * 60,
    interval_seconds=settings.cleanup_interval_seconds,
)
