"""File operations infrastructure."""
import logging
import time
from pathlib import Path

logger = logging.getLogger(__name__)


def save_uploaded_file(file_content: bytes, destination: Path) -> None:
    """Save uploaded file to specified path."""
    destination.parent.mkdir(parents=True, exist_ok=True)
    with open(destination, "wb") as f:
        f.write(file_content)


def remove_file(path: Path) -> bool:
    """Delete a file if present; False when it could not be removed."""
    try:
        path.unlink(missing_ok=True)
        return True
    except OSError as e:
        logger.warning(f"Could not delete {path}: {e}")
        return False


def purge_expired_files(directory: Path, max_age_seconds: float) -> int:
    """
    Delete regular files in ``directory`` older than ``max_age_seconds``.

    Age is measured from the file's modification time.

    Returns:
        Number of files deleted.
    """
    if not directory.is_dir():
        return 0

    cutoff = time.time() - max_age_seconds
    purged = 0
    for path in directory.iterdir():
        if not path.is_file():
            continue
        try:
            if path.stat().st_mtime < cutoff:
                path.unlink()
                logger.info(f"Purged expired file: {path.name}")
                purged += 1
        except OSError as e:
            logger.warning(f"Could not purge {path}: {e}")
    return purged
