"""Resolve consul_exporter install parameters for a shared daemon installer."""

from consul_exporter.defaults import GlobalDefaults
from consul_exporter.exceptions import ValidationError
from consul_exporter.installer import DaemonInstaller, VarsFileInstaller
from consul_exporter.resolver import ConfigResolver
from consul_exporter.types import ExporterConfig, ExporterInstallDescriptor, Version

__all__ = [
    "ConfigResolver",
    "DaemonInstaller",
    "ExporterConfig",
    "ExporterInstallDescriptor",
    "GlobalDefaults",
    "ValidationError",
    "VarsFileInstaller",
    "Version",
]
