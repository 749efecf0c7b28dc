"""Tests for host-wide global defaults."""

import pytest

from consul_exporter.config import PlatformSettings
from consul_exporter.defaults import GlobalDefaults, normalize_arch


class TestNormalizeArch:
    @pytest.mark.parametrize(
        "machine,expected",
        [
            ("x86_64", "amd64"),
            ("AMD64", "amd64"),
            ("i686", "386"),
            ("aarch64", "arm64"),
            ("armv7l", "armv7"),
            ("armv6l", "armv6"),
            ("ppc64le", "ppc64le"),
            ("s390x", "s390x"),
        ],
    )
    def test_machine_names(self, machine, expected):
        assert normalize_arch(machine) == expected


class TestFromSettings:
    def test_explicit_settings_win(self):
        settings = PlatformSettings(
            os="Linux",
            arch="x86_64",
            host="node1.example.com",
            bin_dir="/opt/bin",
            install_method="package",
            init_style="sysv",
        )
        defaults = GlobalDefaults.from_settings(settings)
        assert defaults == GlobalDefaults(
            os="linux",
            arch="amd64",
            bin_dir="/opt/bin",
            install_method="package",
            init_style="sysv",
            host="node1.example.com",
        )

    def test_detects_host_facts(self, monkeypatch):
        monkeypatch.setattr("consul_exporter.defaults.platform.system", lambda: "Linux")
        monkeypatch.setattr(
            "consul_exporter.defaults.platform.machine", lambda: "aarch64"
        )
        monkeypatch.setattr(
            "consul_exporter.defaults.socket.getfqdn", lambda: "detected.example.com"
        )

        defaults = GlobalDefaults.from_settings(PlatformSettings())
        assert defaults.os == "linux"
        assert defaults.arch == "arm64"
        assert defaults.host == "detected.example.com"

    def test_reads_global_settings(self, monkeypatch):
        monkeypatch.setenv("PROMETHEUS_OS", "linux")
        monkeypatch.setenv("PROMETHEUS_ARCH", "amd64")
        monkeypatch.setenv("PROMETHEUS_HOST", "env.example.com")
        monkeypatch.setenv("PROMETHEUS_BIN_DIR", "/srv/bin")

        defaults = GlobalDefaults.from_settings()
        assert defaults.bin_dir == "/srv/bin"
        assert defaults.host == "env.example.com"
