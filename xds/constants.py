"""Shared constants for XDS dot-directories and artefact locations."""

XDS_HOME_EXT = ".xds"  # user-level state/config directory suffix

API_VERSION = "1"

# Per-folder settings file provisioned in every new folder root
PROJECT_CONF_FILENAME = "xds-project.conf"

LOG_FILENAME = "xds-server.log"

# Every REST route lives under this prefix
API_PREFIX = f"/api/v{API_VERSION}"
