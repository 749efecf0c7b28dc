"""Core data structures for exporter resolution

This package provides:
- Semantic version value object
- Declared exporter parameters
- The install descriptor handed to the daemon installer
"""

from .exporter_config import ExporterConfig, InstallMethod, ProxyType, ServiceEnsure
from .install_descriptor import ExporterInstallDescriptor
from .version import Version

__all__ = [
    "ExporterConfig",
    "ExporterInstallDescriptor",
    "InstallMethod",
    "ProxyType",
    "ServiceEnsure",
    "Version",
]
