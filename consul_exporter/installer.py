"""Daemon installer collaborators.

The installer performs user/group provisioning, artifact installation,
service management and scrape-job export. This package only defines the
hand-off: a descriptor is passed to ``install`` exactly once per run.
"""

from pathlib import Path
from typing import Protocol

import yaml

from consul_exporter.const import DAEMON_VARS_KEY, SCRAPE_JOB_VARS_KEY
from consul_exporter.types import ExporterInstallDescriptor
from consul_exporter.utils.logging import get_logger

logger = get_logger(__name__)


class DaemonInstaller(Protocol):
    """Consumes a resolved descriptor and installs the daemon it describes."""

    def install(self, descriptor: ExporterInstallDescriptor) -> None: ...


def render_vars(descriptor: ExporterInstallDescriptor) -> str:
    """Render the descriptor as the YAML vars document read by the installer."""
    document = {
        DAEMON_VARS_KEY: descriptor.to_dict(),
        SCRAPE_JOB_VARS_KEY: descriptor.scrape_job(),
    }
    return yaml.safe_dump(
        document,
        default_flow_style=False,
        sort_keys=False,
        allow_unicode=True,
    )


class VarsFileInstaller:
    """Hands the descriptor over as a YAML vars file.

    A configuration-management run picks the file up and applies the
    shared daemon role with it.
    """

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def install(self, descriptor: ExporterInstallDescriptor) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(render_vars(descriptor))
        logger.info(
            "Wrote daemon vars",
            path=str(self.path),
            daemon=descriptor.name,
            version=descriptor.version,
        )
