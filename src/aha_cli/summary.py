"""Table summary: row counts for every table behind a MySQL resource."""

from __future__ import annotations

import logging

import pymysql

from aha_cli.errors import ProbeConnectionError
from aha_cli.models.check import TableCount
from aha_cli.probes.models import MySQLProbe
from aha_cli.probes.mysql import connect_mysql

logger = logging.getLogger(__name__)


def _quote_identifier(name: str) -> str:
    return "`" + name.replace("`", "``") + "`"


def summarize_tables(probe: MySQLProbe) -> list[TableCount]:
    """List the tables of ``probe.database`` with their row counts.

    Uses a single connection for the listing and all counts. A table whose
    count fails is reported with ``rows=-1``.

    Raises:
        ProbeConnectionError: if connecting or listing tables fails.
    """
    connection = connect_mysql(probe)
    try:
        with connection.cursor() as cursor:
            try:
                cursor.execute("SHOW TABLES")
                tables = [str(row[0]) for row in cursor.fetchall()]
            except pymysql.MySQLError as exc:
                raise ProbeConnectionError(f"failed to query tables: {exc}") from exc

            counts: list[TableCount] = []
            for table in tables:
                try:
                    cursor.execute(f"SELECT COUNT(*) FROM {_quote_identifier(table)}")
                    (rows,) = cursor.fetchone()
                except pymysql.MySQLError as exc:
                    logger.warning("Counting rows of %s failed: %s", table, exc)
                    rows = -1
                counts.append(TableCount(table=table, rows=rows))
    finally:
        connection.close()
    return counts
