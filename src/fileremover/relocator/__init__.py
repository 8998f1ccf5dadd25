"""Relocator module for moving deployed files into quarantine."""

from .filesystem import FileOperationResult, FileSystemPort, LocalFileSystem
from .relocator import (
    EntryOutcome,
    EntryStatus,
    FileRelocator,
    InvalidRunIdError,
    RelocationReport,
    RelocationRequest,
    escapes_base,
    is_valid_run_id,
    new_run_id,
    parse_file_paths,
)

__all__ = [
    "FileRelocator",
    "RelocationRequest",
    "RelocationReport",
    "EntryOutcome",
    "EntryStatus",
    "InvalidRunIdError",
    "new_run_id",
    "escapes_base",
    "is_valid_run_id",
    "parse_file_paths",
    # Filesystem
    "FileSystemPort",
    "LocalFileSystem",
    "FileOperationResult",
]
