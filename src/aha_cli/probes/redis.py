"""Redis probe: open a client and PING."""

from __future__ import annotations

import logging

import redis
from redis.backoff import NoBackoff
from redis.retry import Retry

from aha_cli.config.constants import REDIS_TIMEOUT
from aha_cli.errors import ProbeConnectionError
from aha_cli.probes.models import RedisProbe

logger = logging.getLogger(__name__)


def check_redis(probe: RedisProbe) -> None:
    """Single PING; the client is built without its default reconnect retries."""
    client = redis.Redis(
        host=probe.host,
        port=probe.port,
        password=probe.password or None,
        db=probe.db,
        socket_connect_timeout=REDIS_TIMEOUT,
        socket_timeout=REDIS_TIMEOUT,
        retry=Retry(NoBackoff(), 0),
        retry_on_timeout=False,
    )
    try:
        client.ping()
    except (redis.RedisError, OSError) as exc:
        raise ProbeConnectionError(f"Redis ping failed: {exc}") from exc
    finally:
        client.close()
    logger.debug("Redis %s:%d/%d answered ping", probe.host, probe.port, probe.db)
