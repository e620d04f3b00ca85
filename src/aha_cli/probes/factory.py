"""Resource factory: turn a descriptor into the probe for its kind."""

from __future__ import annotations

from aha_cli.config.models import ResourceDescriptor
from aha_cli.errors import ConstructionError
from aha_cli.probes.models import (
    CredentialsSource,
    HTTPProbe,
    MySQLProbe,
    Probe,
    PubSubProbe,
    RedisProbe,
)
from aha_cli.probes.pubsub import default_credentials
from aha_cli.utils.duration import parse_duration


class ResourceFactory:
    """Builds probes from descriptors without touching the network.

    ``ambient_credentials`` is handed to every Pub/Sub probe and is only
    called at attempt time, when the descriptor carries no JSON credentials.
    """

    def __init__(self, ambient_credentials: CredentialsSource | None = None) -> None:
        self.ambient_credentials = ambient_credentials or default_credentials

    def materialize(self, name: str, descriptor: ResourceDescriptor) -> Probe:
        kind = descriptor.kind
        if kind == "mysql":
            return MySQLProbe(
                host=descriptor.host,
                port=descriptor.port,
                user=descriptor.user,
                password=descriptor.password,
                database=descriptor.database,
            )
        if kind == "http":
            return HTTPProbe(
                url=descriptor.url,
                method=descriptor.method,
                timeout=_http_timeout(descriptor.timeout),
            )
        if kind == "redis":
            return RedisProbe(
                host=descriptor.host,
                port=descriptor.port,
                password=descriptor.password,
                db=descriptor.db,
            )
        if kind == "pubsub":
            return PubSubProbe(
                project_id=descriptor.project_id,
                topic_id=descriptor.topic_id,
                credentials_json=descriptor.credentials_json,
                ambient_credentials=self.ambient_credentials,
            )
        raise ConstructionError(
            ConstructionError.UNSUPPORTED_RESOURCE_TYPE,
            f"unsupported resource type: {kind}",
        )


def _http_timeout(text: str) -> float | None:
    try:
        seconds = parse_duration(text)
    except ValueError as exc:
        raise ConstructionError(
            ConstructionError.INVALID_TIMEOUT, f"invalid timeout format: {exc}",
        ) from exc
    if seconds < 0:
        raise ConstructionError(
            ConstructionError.INVALID_TIMEOUT,
            f'invalid timeout format: negative duration "{text}"',
        )
    # Zero means no timeout
    return seconds or None
