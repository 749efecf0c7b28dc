"""Constants used throughout the application."""

# Oldest consul_exporter release the resolver accepts
MIN_SUPPORTED_VERSION = "0.3.0"

# First release that takes double-dash command-line flags
DOUBLE_DASH_FLAGS_VERSION = "0.4.0"

# Release artifact location template
DOWNLOAD_URL_TEMPLATE = (
    "{base}/download/v{version}/{package_name}-{version}.{os}-{arch}.{extension}"
)

# Notification target rendered for the managed service
SERVICE_REFERENCE_TEMPLATE = "Service[{service_name}]"

# Top-level keys of the vars file handed to the daemon installer
DAEMON_VARS_KEY = "prometheus_daemon"
SCRAPE_JOB_VARS_KEY = "scrape_job"
