"""Unified application configuration with environment support.

Configuration hierarchy:
    1. Environment variables (highest priority)
    2. .env file
    3. Built-in defaults

Site properties for the storage service itself (endpoint, identity, codecs)
live in the Hadoop-style XML resource described by ``StorageSettings``; this
module only decides where that resource is and which property keys to use.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Environment(str, Enum):
    """Deployment environment."""

    DEV = "dev"
    STAGING = "staging"
    PROD = "prod"


# ============================================================================
# Storage Configuration
# ============================================================================


class StorageSettings(BaseSettings):
    """Where the site configuration lives and which property keys carry meaning."""

    home_dir: Path = Field(
        default_factory=Path.home,
        description="Home directory holding the fallback config/ folder",
    )
    config_dirname: str = Field(
        default="config",
        description="Directory under home_dir with the site configuration",
    )
    config_filename: str = Field(
        default="hadoop-site.xml",
        description="Fallback site configuration file name",
    )
    default_fs_property: str = Field(
        default="fs.default.name",
        description="Property holding the default filesystem endpoint",
    )
    identity_property: str = Field(
        default="hadoop.job.ugi",
        description="Property holding the opaque client identity",
    )

    @field_validator("home_dir", mode="before")
    @classmethod
    def expand_home_dir(cls, v: Path | str) -> Path:
        """Expand ``~`` in the configured home directory."""
        return Path(v).expanduser()

    def default_config_path(self) -> Path:
        """Fallback resource: ``<home>/config/<config filename>``."""
        return self.home_dir / self.config_dirname / self.config_filename

    model_config = SettingsConfigDict(env_prefix="DFS_", extra="allow")


# ============================================================================
# Observability Configuration
# ============================================================================


class LoggingConfig(BaseSettings):
    """Logging configuration."""

    level: str = Field(
        default="INFO",
        description="Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    format: str = Field(
        default="json",
        description="Log format (json, console)",
    )

    @field_validator("level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return v_upper

    @field_validator("format")
    @classmethod
    def validate_format(cls, v: str) -> str:
        if v not in {"json", "console"}:
            raise ValueError(f"Invalid log format: {v}. Must be 'json' or 'console'")
        return v

    model_config = SettingsConfigDict(env_prefix="LOG_", extra="allow")


# ============================================================================
# Unified Application Configuration
# ============================================================================


class AppConfig(BaseSettings):
    """Master configuration for dfsaccess.

    Sub-configurations:
        config.storage.home_dir
        config.logging.level
    """

    environment: Environment = Field(default=Environment.DEV)

    storage: StorageSettings = Field(default_factory=StorageSettings)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )


# Global configuration instance
config = AppConfig()


def get_config() -> AppConfig:
    """Get the global application configuration.

    Returns:
        AppConfig instance
    """
    return config


def reload_config() -> AppConfig:
    """Reload configuration from environment.

    Useful for testing or dynamic configuration changes.

    Returns:
        New AppConfig instance
    """
    global config
    config = AppConfig()
    return config
