"""Filesystem access used by the relocator.

Operations report failures through ``FileOperationResult`` instead of raising,
so the run loop can decide per entry whether to skip, abort or carry on.
"""

import shutil
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path


@dataclass
class FileOperationResult:
    """Result of a single filesystem operation."""

    path: Path
    success: bool
    error_message: str | None = None

    @classmethod
    def ok(cls, path: Path) -> "FileOperationResult":
        return cls(path=path, success=True)

    @classmethod
    def failed(cls, path: Path, error_message: str) -> "FileOperationResult":
        return cls(path=path, success=False, error_message=error_message)


class FileSystemPort(ABC):
    """Filesystem capabilities the relocator depends on."""

    @abstractmethod
    def exists(self, path: Path) -> bool:
        """Return True if a regular file exists at ``path``."""
        pass

    @abstractmethod
    def create_directories(self, path: Path) -> FileOperationResult:
        """Create ``path`` and any missing parents."""
        pass

    @abstractmethod
    def move(self, source: Path, destination: Path) -> FileOperationResult:
        """Move the file at ``source`` to ``destination``."""
        pass


class LocalFileSystem(FileSystemPort):
    """FileSystemPort backed by the local disk."""

    def exists(self, path: Path) -> bool:
        return Path(path).is_file()

    def create_directories(self, path: Path) -> FileOperationResult:
        path = Path(path)
        try:
            path.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            return FileOperationResult.failed(path, str(e))
        return FileOperationResult.ok(path)

    def move(self, source: Path, destination: Path) -> FileOperationResult:
        source = Path(source)
        destination = Path(destination)

        # Never overwrite: a file left by an earlier move stays untouched
        if destination.exists():
            return FileOperationResult.failed(
                destination, f"Destination already exists: {destination}"
            )

        try:
            shutil.move(str(source), str(destination))
        except PermissionError as e:
            return FileOperationResult.failed(destination, f"Permission denied: {e}")
        except OSError as e:
            return FileOperationResult.failed(destination, str(e))

        return FileOperationResult.ok(destination)
