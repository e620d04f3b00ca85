"""MySQL probe: connect with a short timeout, then ping."""

from __future__ import annotations

import logging

import pymysql

from aha_cli.config.constants import MYSQL_CONNECT_TIMEOUT
from aha_cli.errors import ProbeConnectionError
from aha_cli.probes.models import MySQLProbe

logger = logging.getLogger(__name__)


def connect_mysql(probe: MySQLProbe) -> pymysql.connections.Connection:
    """Open a connection for *probe*; the caller must close it."""
    try:
        return pymysql.connect(
            host=probe.host,
            port=probe.port,
            user=probe.user,
            password=probe.password,
            database=probe.database or None,
            connect_timeout=MYSQL_CONNECT_TIMEOUT,
        )
    except (pymysql.MySQLError, OSError, ValueError) as exc:
        raise ProbeConnectionError(f"failed to connect to MySQL: {exc}") from exc


def check_mysql(probe: MySQLProbe) -> None:
    connection = connect_mysql(probe)
    try:
        connection.ping(reconnect=False)
    except (pymysql.MySQLError, OSError) as exc:
        raise ProbeConnectionError(f"MySQL ping failed: {exc}") from exc
    finally:
        connection.close()
    logger.debug("MySQL %s:%d answered ping", probe.host, probe.port)
