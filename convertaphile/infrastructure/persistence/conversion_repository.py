"""Converted file storage."""
import logging
import re
import shutil
from datetime import datetime
from pathlib import Path
from typing import Optional

from nanoid import generate

from convertaphile.config import settings
from convertaphile.domain.models.conversion import StoredConversion
from convertaphile.domain.models.formats import normalize_extension

logger = logging.getLogger(__name__)

CONVERSION_ID_ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"
CONVERSION_ID_SIZE = 12

_CONVERSION_ID_RE = re.compile(rf"[0-9a-zA-Z]{{{CONVERSION_ID_SIZE}}}")


def is_valid_conversion_id(conversion_id: str) -> bool:
    return bool(conversion_id) and _CONVERSION_ID_RE.fullmatch(conversion_id) is not None


class ConversionRepository:
    """Stores converted files as ``<conversion_id>_<original stem>.<ext>``."""

    def __init__(self, root_dir: Optional[Path] = None):
        self.root_dir = (root_dir or settings.converted_dir).resolve()
        self.root_dir.mkdir(parents=True, exist_ok=True)

    def generate_conversion_id(self) -> str:
        """Generate unique conversion ID."""
        return generate(alphabet=CONVERSION_ID_ALPHABET, size=CONVERSION_ID_SIZE)

    def store(
        self,
        conversion_id: str,
        produced_path: Path,
        original_filename: str,
        target_format: str,
    ) -> StoredConversion:
        """Move a freshly converted file into storage."""
        if not is_valid_conversion_id(conversion_id):
            raise ValueError(f"Invalid conversion ID: {conversion_id}")
        if not produced_path.is_file():
            raise ValueError(f"Converted file not found: {produced_path}")
        if self.find(conversion_id) is not None:
            raise ValueError(f"Conversion {conversion_id} already exists")

        ext = normalize_extension(target_format)
        stem = Path(original_filename).stem or "converted"
        stored_filename = f"{conversion_id}_{stem}.{ext}"
        destination = self.root_dir / stored_filename

        shutil.move(str(produced_path), str(destination))
        logger.info(f"File stored at: {destination}")

        return StoredConversion(
            conversion_id=conversion_id,
            original_filename=original_filename,
            stored_filename=stored_filename,
            target_format=ext,
            size_bytes=destination.stat().st_size,
            path=destination,
        )

    def find(self, conversion_id: str) -> Optional[StoredConversion]:
        """Look up a stored conversion; None when missing or expired."""
        if not is_valid_conversion_id(conversion_id):
            return None

        prefix = f"{conversion_id}_"
        for path in self.root_dir.iterdir():
            if not path.is_file() or not path.name.startswith(prefix):
                continue
            stat = path.stat()
            return StoredConversion(
                conversion_id=conversion_id,
                original_filename=path.name[len(prefix):],
                stored_filename=path.name,
                target_format=normalize_extension(path.suffix),
                size_bytes=stat.st_size,
                path=path,
                created_at=datetime.fromtimestamp(stat.st_mtime),
            )
        return None

    def delete(self, conversion: StoredConversion) -> bool:
        """Delete a stored file."""
        try:
            conversion.path.unlink()
            logger.info(f"Cleaned up file: {conversion.stored_filename}")
            return True
        except OSError as e:
            logger.warning(f"Failed to delete {conversion.stored_filename}: {e}")
            return False


# Global singleton
conversion_repository = ConversionRepository()
