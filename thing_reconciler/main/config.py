"""
Application Settings - Main Layer

Use Pydantic Settings for configuration management.
Settings come from environment variables, a .env file and default values.
"""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from thing_reconciler.shared import EnumEnvironment, EnumLogLevel
from thing_reconciler.shared.consts import DEFAULT_LOG_FORMAT


class LoggingSettings(BaseSettings):
    """Logging configuration settings."""

    level: EnumLogLevel = Field(default=EnumLogLevel.INFO, description="Logging level")
    format: str = Field(
        default=DEFAULT_LOG_FORMAT,
        description="Stdlib format string; unused, structlog renders records",
    )
    file_path: Optional[str] = Field(
        default=None, description="Log file path (if None, logs to console)"
    )

    model_config = SettingsConfigDict(
        env_prefix="LOG_", case_sensitive=False, extra="ignore"
    )


class MergeSettings(BaseSettings):
    """Thing merge settings."""

    log_field_changes: bool = Field(
        default=True,
        description="Emit a debug event for every field taken from the update",
    )

    model_config = SettingsConfigDict(
        env_prefix="MERGE_", case_sensitive=False, extra="ignore"
    )


class AppSettings(BaseSettings):
    """Main application settings, aggregating all sub-settings."""

    environment: EnumEnvironment = Field(
        default=EnumEnvironment.DEVELOPMENT, description="Application environment"
    )

    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    merge: MergeSettings = Field(default_factory=MergeSettings)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_nested_delimiter="__",
        extra="ignore",
    )


def get_settings() -> AppSettings:
    """
    Get application settings instance Factory.

    Kept as a function so tests can build settings from a patched environment.
    """
    return AppSettings()
