"""Declared parameters of a consul_exporter installation."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

InstallMethod = Literal["url", "package", "none"]
ServiceEnsure = Literal["running", "stopped"]
ProxyType = Literal["none", "http", "https", "ftp"]


class ExporterConfig(BaseModel):
    """Parameters declared for one consul_exporter install.

    Fields left as ``None`` (os, arch, bin_dir, init_style, install_method)
    are filled from the global defaults during resolution.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    version: str = Field(default="0.7.1", min_length=1, description="Release to install")
    consul_server: str = Field(
        default="http://localhost:8500",
        min_length=1,
        description="Consul HTTP API address",
    )
    consul_health_summary: bool = Field(
        default=True,
        description="Export the health summary of every service",
    )
    log_level: str = Field(default="info", min_length=1)
    web_listen_address: str = Field(default=":9107", min_length=1)
    web_telemetry_path: str = Field(default="/metrics", min_length=1)

    os: str | None = Field(default=None, description="Target kernel name")
    arch: str | None = Field(default=None, description="Target architecture")
    bin_dir: str | None = Field(default=None)
    init_style: str | None = Field(default=None)
    install_method: InstallMethod | None = Field(default=None)

    package_name: str = Field(default="consul_exporter", min_length=1)
    package_ensure: str = Field(default="latest", min_length=1)

    user: str = Field(default="consul-exporter", min_length=1)
    group: str = Field(default="consul-exporter", min_length=1)
    extra_groups: list[str] = Field(default_factory=list)
    manage_user: bool = True
    manage_group: bool = True

    service_name: str = Field(default="consul_exporter", min_length=1)
    service_enable: bool = True
    service_ensure: ServiceEnsure = "running"
    manage_service: bool = True
    restart_on_change: bool = True
    purge_config_dir: bool = True

    download_url: str | None = Field(
        default=None,
        description="Complete artifact URL; wins over the computed one",
    )
    download_url_base: str = Field(
        default="https://github.com/prometheus/consul_exporter/releases",
        min_length=1,
    )
    download_extension: str = Field(default="tar.gz", min_length=1)
    extra_options: str = Field(
        default="",
        description="Appended verbatim to the command line",
    )
    env_vars: dict[str, str] = Field(default_factory=dict)
    proxy_server: str | None = None
    proxy_type: ProxyType | None = None

    export_scrape_job: bool = False
    scrape_host: str | None = None
    scrape_port: int = Field(default=9107, ge=1, le=65535)
    scrape_job_name: str = Field(default="consul", min_length=1)
    scrape_job_labels: dict[str, str] | None = None
