"""Configuration module for consul_exporter.

This module provides centralized, type-safe configuration management
using pydantic-settings with environment variable loading.

Usage:
    from consul_exporter.config import get_settings

    settings = get_settings()

    # Host-wide defaults for Prometheus components
    bin_dir = settings.platform.bin_dir
    install_method = settings.platform.install_method

    # Logging
    log_level = settings.logging.log_level
"""

from consul_exporter.config.settings import (
    LoggingSettings,
    PlatformSettings,
    Settings,
    get_settings,
    reset_settings,
)

__all__ = [
    "LoggingSettings",
    "PlatformSettings",
    "Settings",
    "get_settings",
    "reset_settings",
]
