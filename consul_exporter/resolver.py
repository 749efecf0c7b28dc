"""Resolution of declared exporter parameters into an install descriptor."""

from consul_exporter.const import (
    DOWNLOAD_URL_TEMPLATE,
    MIN_SUPPORTED_VERSION,
    SERVICE_REFERENCE_TEMPLATE,
)
from consul_exporter.defaults import GlobalDefaults
from consul_exporter.exceptions import ValidationError
from consul_exporter.flags import FlagStyle, flag_style_for, render_flag
from consul_exporter.installer import DaemonInstaller
from consul_exporter.types import ExporterConfig, ExporterInstallDescriptor, Version
from consul_exporter.utils.logging import get_logger

logger = get_logger(__name__)

DAEMON_NAME = "consul_exporter"


class ConfigResolver:
    """Turns an ExporterConfig into an ExporterInstallDescriptor.

    Host-dependent values come only from the injected GlobalDefaults, so
    resolving the same config twice yields an identical descriptor.

    Example:
        >>> resolver = ConfigResolver(GlobalDefaults(os="linux", arch="amd64"))
        >>> resolver.resolve(ExporterConfig(version="0.5.0")).download_url
        'https://github.com/prometheus/consul_exporter/releases/download/v0.5.0/consul_exporter-0.5.0.linux-amd64.tar.gz'
    """

    def __init__(
        self,
        defaults: GlobalDefaults,
        installer: DaemonInstaller | None = None,
    ):
        self.defaults = defaults
        self.installer = installer

    def resolve(self, config: ExporterConfig) -> ExporterInstallDescriptor:
        """Validate the config and compute every derived value.

        Raises:
            ValidationError: If the version is malformed or older than 0.3.0
        """
        version = self._check_version(config.version)

        os_name = config.os or self.defaults.os
        arch = config.arch or self.defaults.arch
        style = flag_style_for(version)

        descriptor = ExporterInstallDescriptor(
            name=DAEMON_NAME,
            version=config.version,
            download_url=self.download_url(config, os_name, arch),
            os=os_name,
            arch=arch,
            download_extension=config.download_extension,
            install_method=config.install_method or self.defaults.install_method,
            bin_dir=config.bin_dir or self.defaults.bin_dir,
            package_name=config.package_name,
            package_ensure=config.package_ensure,
            user=config.user,
            group=config.group,
            manage_user=config.manage_user,
            manage_group=config.manage_group,
            service_name=config.service_name,
            service_enable=config.service_enable,
            service_ensure=config.service_ensure,
            manage_service=config.manage_service,
            notify_service=self.notify_service(config),
            purge=config.purge_config_dir,
            options=self.options(config, style),
            init_style=config.init_style or self.defaults.init_style,
            extra_groups=tuple(config.extra_groups),
            env_vars=tuple(config.env_vars.items()),
            proxy_server=config.proxy_server,
            proxy_type=config.proxy_type,
            export_scrape_job=config.export_scrape_job,
            scrape_host=config.scrape_host or self.defaults.host,
            scrape_port=config.scrape_port,
            scrape_job_name=config.scrape_job_name,
            scrape_job_labels=(
                tuple(config.scrape_job_labels.items())
                if config.scrape_job_labels is not None
                else None
            ),
        )

        logger.debug(
            "Resolved exporter",
            version=descriptor.version,
            flag_style=style.name,
            install_method=descriptor.install_method,
        )
        return descriptor

    def apply(self, config: ExporterConfig) -> ExporterInstallDescriptor:
        """Resolve the config and hand the descriptor to the installer.

        Raises:
            ValidationError: If the config cannot be resolved
            RuntimeError: If no installer was injected
        """
        if self.installer is None:
            raise RuntimeError("ConfigResolver.apply() requires an installer")

        descriptor = self.resolve(config)
        self.installer.install(descriptor)
        logger.info("Handed exporter to installer", version=descriptor.version)
        return descriptor

    @staticmethod
    def _check_version(raw: str) -> Version:
        version = Version(raw)
        if version < Version(MIN_SUPPORTED_VERSION):
            raise ValidationError(
                f"unsupported version {raw}: consul_exporter older than "
                f"{MIN_SUPPORTED_VERSION} is not supported",
                field="version",
            )
        return version

    @staticmethod
    def download_url(config: ExporterConfig, os_name: str, arch: str) -> str:
        """Return the explicit download URL, or compute the release URL."""
        if config.download_url:
            return config.download_url
        return DOWNLOAD_URL_TEMPLATE.format(
            base=config.download_url_base.rstrip("/"),
            version=config.version,
            package_name=config.package_name,
            os=os_name,
            arch=arch,
            extension=config.download_extension,
        )

    @staticmethod
    def health_summary_flag(config: ExporterConfig, style: FlagStyle) -> str:
        """Return the health-summary flag, or "" when it is disabled."""
        if not config.consul_health_summary:
            return ""
        return render_flag(style, "consul.health-summary")

    @classmethod
    def options(cls, config: ExporterConfig, style: FlagStyle) -> str:
        """Assemble the daemon command line in its fixed flag order.

        extra_options is appended after a separating space even when empty,
        so the default command line ends with a trailing space.
        """
        flags = [
            render_flag(style, "consul.server", config.consul_server),
            cls.health_summary_flag(config, style),
            render_flag(style, "web.listen-address", config.web_listen_address),
            render_flag(style, "web.telemetry-path", config.web_telemetry_path),
            render_flag(style, "log.level", config.log_level),
        ]
        # A disabled health summary leaves no token, so no double space.
        return " ".join(flag for flag in flags if flag) + " " + config.extra_options

    @staticmethod
    def notify_service(config: ExporterConfig) -> str | None:
        if not config.restart_on_change:
            return None
        return SERVICE_REFERENCE_TEMPLATE.format(service_name=config.service_name)
