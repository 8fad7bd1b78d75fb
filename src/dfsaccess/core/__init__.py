"""Core infrastructure shared by the storage and plugin packages.

- Configuration management
- Logging and observability
- Error handling
- Storage client interface
"""

from .config import AppConfig, Environment, LoggingConfig, StorageSettings, get_config, reload_config
from .errors import (
    ConfigResourceError,
    DfsAccessError,
    LocatorFormatError,
    StorageIOError,
    UnsupportedSchemeError,
)
from .interfaces import StorageClient
from .logging import configure_logging, get_logger

__all__ = [
    # Config
    "AppConfig",
    "Environment",
    "LoggingConfig",
    "StorageSettings",
    "get_config",
    "reload_config",
    # Errors
    "DfsAccessError",
    "LocatorFormatError",
    "ConfigResourceError",
    "StorageIOError",
    "UnsupportedSchemeError",
    # Interfaces
    "StorageClient",
    # Logging
    "get_logger",
    "configure_logging",
]
