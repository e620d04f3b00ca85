"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest

from aha_cli.config.loader import ConfigLoader
from aha_cli.config.models import ResourceDescriptor
from aha_cli.probes.factory import ResourceFactory

SAMPLE_CONFIG = """\
check:
  connections:
    api:
      type: http
      is_checked: true
      url: http://api.local/health
      method: GET
      timeout: 2s
    orders-db:
      type: mysql
      is_checked: false
      host: db.local
      port: 3306
      user: app
      password: secret
      database: orders
    cache:
      type: redis
      is_checked: false
      host: cache.local
      port: 6379
      db: 2
    events:
      type: pubsub
      is_checked: false
      project_id: demo-project
      topic_id: order-events
"""


class FakeCredentialsSource:
    """Ambient credential source that counts how often it is asked."""

    def __init__(self, credentials: object = "ambient-creds") -> None:
        self.credentials = credentials
        self.calls = 0

    def __call__(self) -> object:
        self.calls += 1
        return self.credentials


@pytest.fixture
def tmp_config(tmp_path: Path) -> Path:
    """Return a temporary config file path."""
    return tmp_path / "default.yaml"


@pytest.fixture
def write_config(tmp_config: Path) -> Callable[[str], Path]:
    """Write YAML text to the temporary config file and return its path."""

    def _write(text: str) -> Path:
        tmp_config.write_text(text, encoding="utf-8")
        return tmp_config

    return _write


@pytest.fixture
def sample_config(write_config: Callable[[str], Path]) -> Path:
    return write_config(SAMPLE_CONFIG)


@pytest.fixture
def config_loader(sample_config: Path) -> ConfigLoader:
    return ConfigLoader(config_path=sample_config)


@pytest.fixture
def credentials_source() -> FakeCredentialsSource:
    return FakeCredentialsSource()


@pytest.fixture
def factory(credentials_source: FakeCredentialsSource) -> ResourceFactory:
    return ResourceFactory(ambient_credentials=credentials_source)


@pytest.fixture
def make_descriptor() -> Callable[..., ResourceDescriptor]:
    """Build a descriptor from YAML-style keys (``type``, ``is_checked``...)."""

    def _make(name: str = "res", **fields: object) -> ResourceDescriptor:
        return ResourceDescriptor(name=name, **fields)

    return _make
