"""Centralized configuration management using pydantic-settings.

This module provides type-safe configuration with environment variable loading,
validation, and sensible defaults for the host-wide Prometheus defaults and
for logging.
"""

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class PlatformSettings(BaseSettings):
    """Host-wide defaults shared by every Prometheus component.

    Unset values are detected from the running host when the
    global defaults are built.
    """

    model_config = SettingsConfigDict(env_prefix="PROMETHEUS_", extra="ignore")

    os: str | None = Field(
        default=None,
        description="Kernel name override (detected when unset)",
    )
    arch: str | None = Field(
        default=None,
        description="Machine architecture override (detected when unset)",
    )
    host: str | None = Field(
        default=None,
        description="Host name used for scrape targets (detected when unset)",
    )
    bin_dir: str = Field(
        default="/usr/local/bin",
        description="Directory binaries are linked into",
    )
    install_method: Literal["url", "package", "none"] = Field(
        default="url",
        description="Default installation method",
    )
    init_style: str = Field(
        default="systemd",
        description="Service manager used to run daemons",
    )

    @field_validator("bin_dir")
    @classmethod
    def normalize_bin_dir(cls, v: str) -> str:
        return v.rstrip("/") or "/"

    @field_validator("os", "arch", mode="before")
    @classmethod
    def lowercase_fact(cls, v: str | None) -> str | None:
        if isinstance(v, str):
            return v.lower()
        return v


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(extra="ignore")

    debug_all: bool = Field(
        default=False,
        validation_alias="DEBUG_ALL",
        description="Enable debug logging for all libraries",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        validation_alias="LOG_LEVEL",
        description="Log level for the consul_exporter namespace",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def uppercase_log_level(cls, v: str) -> str:
        if isinstance(v, str):
            return v.upper()
        return v


class Settings(BaseSettings):
    """Root settings class with all nested configurations.

    Usage:
        from consul_exporter.config import get_settings

        settings = get_settings()
        bin_dir = settings.platform.bin_dir
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=True,
    )

    platform: PlatformSettings = Field(default_factory=PlatformSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


# Singleton pattern for settings
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get or create the global settings instance.

    Returns:
        The singleton Settings instance with all configuration loaded.
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Reset settings singleton (useful for testing)."""
    global _settings
    _settings = None
