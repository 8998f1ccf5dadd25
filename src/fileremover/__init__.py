"""
FileRemover - a post-deploy step that moves stale files out of an application.

Listed files are relocated into a timestamped temp folder below the
application root, keeping their relative folder structure.
"""

__version__ = "0.1.0"
__license__ = "MIT"

from .action import FileRemoverPostDeployAction
from .config import get_config
from .host import LoggerHost, PostDeployActionHost
from .relocator import (
    FileRelocator,
    FileSystemPort,
    LocalFileSystem,
    RelocationReport,
    RelocationRequest,
)
from .utils.logging import get_logger

__all__ = [
    "get_config",
    "get_logger",
    # Relocator
    "FileRelocator",
    "RelocationRequest",
    "RelocationReport",
    "FileSystemPort",
    "LocalFileSystem",
    # Host integration
    "FileRemoverPostDeployAction",
    "PostDeployActionHost",
    "LoggerHost",
]
