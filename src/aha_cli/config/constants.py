"""Default paths, environment variable names, and constants."""

from __future__ import annotations

from pathlib import Path

# Resolved against the current working directory
DEFAULT_CONFIG_FILE = Path("cmd") / "default.yaml"
CONNECTIONS_KEY = ("check", "connections")

# Environment variable names
ENV_CONFIG_FILE = "AHA_CONFIG_FILE"

# Probe defaults (seconds)
MYSQL_CONNECT_TIMEOUT = 5
REDIS_TIMEOUT = 5.0
PUBSUB_TIMEOUT = 5.0

PUBSUB_SCOPE = "https://www.googleapis.com/auth/pubsub"
