"""Default paths, environment variable names, and constants."""

from __future__ import annotations

import platformdirs

APP_NAME = "fila-cli"
APP_AUTHOR = "automatiza-mg"

CONFIG_DIR = platformdirs.user_config_path(APP_NAME, APP_AUTHOR)
CONFIG_FILE = CONFIG_DIR / "config.toml"

# Environment variable names
ENV_API_URL = "FILA_API_URL"
ENV_API_TOKEN = "FILA_TOKEN"
ENV_PROFILE = "FILA_PROFILE"

# API defaults
DEFAULT_API_BASE = "/api/v1"
DEFAULT_TIMEOUT = 30.0
