"""Default paths, environment variable names, and constants."""

from __future__ import annotations

import platformdirs

APP_NAME = "netbox-mapper"
APP_AUTHOR = "netbox-mapper"

CONFIG_DIR = platformdirs.user_config_path(APP_NAME, APP_AUTHOR)
CONFIG_FILE = CONFIG_DIR / "config.toml"

# Environment variable names
ENV_URL_PREFIX = "NETBOX_URL_PREFIX"
ENV_KEY = "NETBOX_KEY"
ENV_TOKEN = "NETBOX_TOKEN"
ENV_PROFILE = "NETBOX_PROFILE"

# API defaults
DEFAULT_TIMEOUT = 30.0
STATUS_PATH = "/status/"
