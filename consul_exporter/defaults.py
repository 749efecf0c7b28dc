"""Host-wide defaults injected into the resolver.

Host facts are detected once and frozen into a GlobalDefaults value so that
resolution never reads the environment itself.
"""

import platform
import socket
from dataclasses import dataclass

from consul_exporter.config import PlatformSettings, get_settings

# Machine names reported by the kernel -> Prometheus release architecture
ARCH_ALIASES = {
    "x86_64": "amd64",
    "amd64": "amd64",
    "i386": "386",
    "i686": "386",
    "aarch64": "arm64",
    "arm64": "arm64",
    "armv7l": "armv7",
    "armv6l": "armv6",
    "ppc64le": "ppc64le",
}


def normalize_arch(machine: str) -> str:
    """Map a kernel machine name onto the release artifact architecture."""
    machine = machine.lower()
    return ARCH_ALIASES.get(machine, machine)


@dataclass(frozen=True)
class GlobalDefaults:
    """Defaults for parameters an exporter leaves undeclared."""

    os: str
    arch: str
    bin_dir: str = "/usr/local/bin"
    install_method: str = "url"
    init_style: str = "systemd"
    host: str | None = None

    @classmethod
    def from_settings(cls, settings: PlatformSettings | None = None) -> "GlobalDefaults":
        """Build defaults from settings, detecting unset host facts.

        Args:
            settings: Platform settings; the global settings when None

        Returns:
            GlobalDefaults with os, arch and host filled in
        """
        if settings is None:
            settings = get_settings().platform

        return cls(
            os=settings.os or platform.system().lower(),
            arch=normalize_arch(settings.arch or platform.machine()),
            bin_dir=settings.bin_dir,
            install_method=settings.install_method,
            init_style=settings.init_style,
            host=settings.host or socket.getfqdn(),
        )
