"""Filesystem infrastructure."""
from convertaphile.infrastructure.filesystem.file_ops import (
    purge_expired_files,
    remove_file,
    save_uploaded_file,
)

__all__ = [
    "purge_expired_files",
    "remove_file",
    "save_uploaded_file",
]
