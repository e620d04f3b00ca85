"""Configuration loader: read the YAML file and build resource descriptors."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from aha_cli.config.constants import CONNECTIONS_KEY, DEFAULT_CONFIG_FILE, ENV_CONFIG_FILE
from aha_cli.config.models import CheckConfig, ResourceDescriptor
from aha_cli.errors import ConfigurationError

logger = logging.getLogger(__name__)


def default_config_path() -> Path:
    """Config file path: ``$AHA_CONFIG_FILE`` if set, else ``cmd/default.yaml``."""
    env_path = os.environ.get(ENV_CONFIG_FILE)
    return Path(env_path) if env_path else DEFAULT_CONFIG_FILE


class ConfigLoader:
    """Loads the ``check.connections`` section of a YAML config file."""

    def __init__(self, config_path: Path | None = None) -> None:
        self.config_path = config_path or default_config_path()

    def load(self) -> CheckConfig:
        data = self._read()
        section = self._connections_section(data)
        connections: dict[str, ResourceDescriptor] = {}
        for name, entry in section.items():
            name = str(name)
            connections[name] = self._parse_entry(name, entry)
        logger.debug("Loaded %d connections from %s", len(connections), self.config_path)
        return CheckConfig(path=self.config_path, connections=connections)

    def _read(self) -> dict[str, Any]:
        try:
            raw = self.config_path.read_text(encoding="utf-8")
        except FileNotFoundError as exc:
            raise ConfigurationError(
                f"failed to read config file: {self.config_path} does not exist"
            ) from exc
        except OSError as exc:
            raise ConfigurationError(f"failed to read config file: {exc}") from exc
        try:
            data = yaml.safe_load(raw)
        except yaml.YAMLError as exc:
            raise ConfigurationError(
                f"failed to parse config file {self.config_path}: {exc}"
            ) from exc
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigurationError(
                f"config file {self.config_path} must contain a mapping at the top level"
            )
        return data

    def _connections_section(self, data: dict[str, Any]) -> dict[Any, Any]:
        node: Any = data
        for key in CONNECTIONS_KEY:
            if not isinstance(node, dict):
                raise ConfigurationError(
                    f"'{'.'.join(CONNECTIONS_KEY)}' must be a mapping of connection names"
                )
            node = node.get(key)
            if node is None:
                return {}
        if not isinstance(node, dict):
            raise ConfigurationError(
                f"'{'.'.join(CONNECTIONS_KEY)}' must be a mapping of connection names"
            )
        return node

    def _parse_entry(self, name: str, entry: Any) -> ResourceDescriptor:
        if entry is None:
            entry = {}
        if not isinstance(entry, dict):
            raise ConfigurationError(f"connection '{name}' must be a mapping")
        # Empty YAML values fall back to the field defaults; the map key is the name
        fields = {
            str(k): v for k, v in entry.items() if v is not None and str(k) != "name"
        }
        try:
            return ResourceDescriptor(name=name, **fields)
        except ValidationError as exc:
            raise ConfigurationError(f"invalid connection '{name}': {exc}") from exc
