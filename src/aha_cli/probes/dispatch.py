"""The two probe operations, dispatched over the probe variants."""

from __future__ import annotations

from aha_cli.probes.http import check_http
from aha_cli.probes.models import HTTPProbe, MySQLProbe, Probe, PubSubProbe, RedisProbe
from aha_cli.probes.mysql import check_mysql
from aha_cli.probes.pubsub import check_pubsub
from aha_cli.probes.redis import check_redis


def attempt_connection(probe: Probe) -> None:
    """Make exactly one connection attempt.

    Raises:
        ProbeConnectionError: if the resource could not be reached or verified.
    """
    match probe:
        case HTTPProbe():
            check_http(probe)
        case MySQLProbe():
            check_mysql(probe)
        case RedisProbe():
            check_redis(probe)
        case PubSubProbe():
            check_pubsub(probe)
        case _:
            raise TypeError(f"not a probe: {probe!r}")


def describe(probe: Probe) -> str:
    """Human-readable identifier for the report. Never performs I/O."""
    match probe:
        case HTTPProbe(method=method, url=url):
            return f"{method}:{url}"
        case MySQLProbe(user=user, host=host, port=port, database=database):
            return f"mysql://{user}@{host}:{port}/{database}"
        case RedisProbe(host=host, port=port, db=db):
            return f"redis://{host}:{port}/{db}"
        case PubSubProbe(project_id=project_id, topic_id=topic_id):
            return f"pubsub://{project_id}/topics/{topic_id}"
        case _:
            raise TypeError(f"not a probe: {probe!r}")
