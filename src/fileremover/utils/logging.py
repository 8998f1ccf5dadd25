"""Package logging: Rich console output plus an optional rotating log file."""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

from ..config.models import LoggingSettings

ROOT_LOGGER_NAME = "fileremover"
LOG_FILE_NAME = "fileremover.log"
FILE_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Styles available to console markup, e.g. "[error]...[/error]"
FILEREMOVER_THEME = Theme(
    {
        "info": "cyan",
        "warning": "yellow",
        "error": "red bold",
        "success": "green bold",
    }
)

_console = Console(theme=FILEREMOVER_THEME)
_configured = False


def _console_handler(level: int) -> logging.Handler:
    # Host messages carry literal "[FileRemover]" prefixes, so markup stays off
    handler = RichHandler(console=_console, rich_tracebacks=True, show_path=False, markup=False)
    handler.setLevel(level)
    return handler


def _file_handler(settings: LoggingSettings, level: int) -> logging.Handler:
    log_dir = Path(settings.log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)

    handler = RotatingFileHandler(
        log_dir / LOG_FILE_NAME,
        maxBytes=settings.max_bytes,
        backupCount=settings.backup_count,
        encoding="utf-8",
    )
    handler.setFormatter(logging.Formatter(fmt=FILE_FORMAT, datefmt=DATE_FORMAT))
    handler.setLevel(level)
    return handler


def setup_logging(settings: LoggingSettings | None = None) -> logging.Logger:
    """
    (Re)configure the ``fileremover`` logger.

    Existing handlers are closed and replaced, so this can be called again
    after the configuration has been loaded.

    Args:
        settings: Logging settings; defaults log to the console only

    Returns:
        The package logger
    """
    global _configured
    settings = settings or LoggingSettings()
    level = getattr(logging, settings.level, logging.INFO)

    root = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(root.handlers):
        handler.close()
        root.removeHandler(handler)

    root.setLevel(level)
    root.propagate = False

    if settings.console_enabled:
        root.addHandler(_console_handler(level))
    if settings.file_enabled:
        root.addHandler(_file_handler(settings, level))
    if not root.handlers:
        root.addHandler(logging.NullHandler())

    _configured = True
    return root


def get_logger(name: str | None = None) -> logging.Logger:
    """
    Get the package logger or one of its children.

    The first call sets up console-only logging if ``setup_logging`` has not
    run yet.
    """
    if not _configured:
        setup_logging()
    root = logging.getLogger(ROOT_LOGGER_NAME)
    return root.getChild(name) if name else root


def get_console() -> Console:
    """Get the themed Rich console shared by logging and the CLI."""
    return _console
