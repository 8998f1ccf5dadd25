"""Configuration module for FileRemover."""

from .manager import ConfigManager, get_config, get_config_manager
from .models import FileRemoverConfig, LoggingSettings, RelocationSettings

__all__ = [
    "FileRemoverConfig",
    "RelocationSettings",
    "LoggingSettings",
    "ConfigManager",
    "get_config",
    "get_config_manager",
]
