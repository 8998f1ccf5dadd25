"""Host-side logging contract for deployment steps."""

import logging
from typing import Protocol

from .utils.logging import get_logger


class PostDeployActionHost(Protocol):
    """The deployment host that invokes a post-deploy step.

    Messages use %-style placeholders, filled from ``args`` by the host.
    """

    def log_message(self, message: str, *args: object) -> None: ...


class LoggerHost:
    """Host that writes messages to the fileremover logger."""

    def __init__(self, logger: logging.Logger | None = None, level: int = logging.INFO):
        self.logger = logger or get_logger("host")
        self.level = level

    def log_message(self, message: str, *args: object) -> None:
        self.logger.log(self.level, message, *args)
