"""Probes for each supported resource kind."""

from aha_cli.probes.dispatch import attempt_connection, describe
from aha_cli.probes.factory import ResourceFactory
from aha_cli.probes.models import HTTPProbe, MySQLProbe, Probe, PubSubProbe, RedisProbe

__all__ = [
    "HTTPProbe",
    "MySQLProbe",
    "Probe",
    "PubSubProbe",
    "RedisProbe",
    "ResourceFactory",
    "attempt_connection",
    "describe",
]
