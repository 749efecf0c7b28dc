"""Install descriptor handed to the daemon installer.

The field names form the contract with the installer and must not be
renamed.
"""

from collections.abc import Mapping
from dataclasses import asdict, dataclass
from typing import Any

Pairs = tuple[tuple[str, str], ...]


def _as_pairs(value: Mapping[str, str] | Pairs) -> Pairs:
    if isinstance(value, Mapping):
        return tuple(value.items())
    return tuple((key, val) for key, val in value)


@dataclass(frozen=True)
class ExporterInstallDescriptor:
    """Fully resolved description of one exporter daemon.

    Attributes:
        name: Daemon name, also used for config and service paths
        download_url: Artifact URL, explicit or computed
        options: Command-line options string for the daemon
        notify_service: Service reference to restart on change, or None
        purge: Whether the daemon's config directory is purged
        env_vars: Environment for the service, as (name, value) pairs
        scrape_job_labels: Scrape target labels as (name, value) pairs
    """

    name: str
    version: str
    download_url: str
    os: str
    arch: str
    download_extension: str
    install_method: str
    bin_dir: str
    package_name: str
    package_ensure: str
    user: str
    group: str
    manage_user: bool
    manage_group: bool
    service_name: str
    service_enable: bool
    service_ensure: str
    manage_service: bool
    notify_service: str | None
    purge: bool
    options: str
    init_style: str
    extra_groups: tuple[str, ...] = ()
    env_vars: Pairs = ()
    proxy_server: str | None = None
    proxy_type: str | None = None
    export_scrape_job: bool = False
    scrape_host: str | None = None
    scrape_port: int = 9107
    scrape_job_name: str = "consul"
    scrape_job_labels: Pairs | None = None

    def __post_init__(self):
        # Mappings are frozen into pairs so the descriptor stays hashable
        object.__setattr__(self, "extra_groups", tuple(self.extra_groups))
        object.__setattr__(self, "env_vars", _as_pairs(self.env_vars))
        if self.scrape_job_labels is not None:
            object.__setattr__(
                self, "scrape_job_labels", _as_pairs(self.scrape_job_labels)
            )

    def to_dict(self) -> dict[str, Any]:
        """Convert to a plain mapping in field order for serialization."""
        data = asdict(self)
        data["extra_groups"] = list(self.extra_groups)
        data["env_vars"] = dict(self.env_vars)
        if self.scrape_job_labels is not None:
            data["scrape_job_labels"] = dict(self.scrape_job_labels)
        return data

    def scrape_job(self) -> dict[str, Any] | None:
        """Build the Prometheus scrape job for this daemon.

        Returns:
            The scrape job mapping, or None when no job is exported or the
            scrape host is unknown.
        """
        if not self.export_scrape_job or not self.scrape_host:
            return None

        static_config: dict[str, Any] = {
            "targets": [f"{self.scrape_host}:{self.scrape_port}"],
        }
        if self.scrape_job_labels:
            static_config["labels"] = dict(self.scrape_job_labels)

        return {
            "job_name": self.scrape_job_name,
            "static_configs": [static_config],
        }
