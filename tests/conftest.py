"""Pytest configuration and shared fixtures."""

import pytest

from consul_exporter.config import reset_settings
from consul_exporter.defaults import GlobalDefaults


@pytest.fixture(autouse=True)
def reset_config_settings():
    """Reset the settings singleton before and after each test.

    This ensures that environment variable changes made by monkeypatch
    are properly reflected in the settings, since pydantic-settings
    reads env vars at instantiation time.
    """
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def linux_defaults() -> GlobalDefaults:
    """Global defaults of a typical amd64 Linux host."""
    return GlobalDefaults(
        os="linux",
        arch="amd64",
        bin_dir="/usr/local/bin",
        install_method="url",
        init_style="systemd",
        host="node1.example.com",
    )
