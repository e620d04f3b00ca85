"""Tests for the sequential check runner."""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import httpx
import pymysql
import respx

from aha_cli.config.loader import ConfigLoader
from aha_cli.errors import ProbeConnectionError
from aha_cli.models.check import Outcome
from aha_cli.probes.factory import ResourceFactory
from aha_cli.runner import CheckRunner


def _connections(make_descriptor, **entries):
    return {name: make_descriptor(name, **fields) for name, fields in entries.items()}


class TestCheckRunner:
    def test_unchecked_resources_make_no_calls(self, factory, credentials_source, config_loader: ConfigLoader):
        config = config_loader.load()
        config.connections.pop("api")
        with patch("aha_cli.probes.mysql.pymysql.connect") as connect, patch(
            "aha_cli.probes.redis.redis.Redis"
        ) as redis_cls, patch("aha_cli.probes.pubsub.pubsub_v1.PublisherClient") as pubsub_cls:
            results = CheckRunner(factory).run(config.connections)
        connect.assert_not_called()
        redis_cls.assert_not_called()
        pubsub_cls.assert_not_called()
        assert credentials_source.calls == 0
        assert [r.outcome for r in results] == [Outcome.SKIPPED] * 3
        assert all(r.status == "Skipped" for r in results)

    def test_skipped_row_has_description(self, factory, make_descriptor):
        conns = _connections(make_descriptor, cache={"type": "redis", "host": "c", "port": 6379})
        (row,) = CheckRunner(factory).run(conns)
        assert row.description == "redis://c:6379/0"
        assert row.kind == "redis"

    def test_construction_error_does_not_abort_run(self, factory, make_descriptor):
        conns = _connections(
            make_descriptor,
            a_queue={"type": "kafka", "is_checked": True},
            b_api={"type": "http", "is_checked": True, "url": "http://x", "timeout": "bogus"},
            c_cache={"type": "redis", "is_checked": False},
        )
        results = CheckRunner(factory).run(conns)
        assert len(results) == len(conns)
        queue, api, cache = results
        assert queue.outcome is Outcome.CONSTRUCTION_ERROR
        assert queue.status == "Error: unsupported resource type: kafka"
        assert queue.description == ""
        assert queue.kind == "kafka"
        assert api.outcome is Outcome.CONSTRUCTION_ERROR
        assert api.status.startswith("Error: invalid timeout format")
        assert cache.outcome is Outcome.SKIPPED

    def test_invalid_timeout_never_attempts(self, factory, make_descriptor):
        conns = _connections(
            make_descriptor,
            api={"type": "http", "is_checked": True, "url": "http://x", "timeout": "bogus"},
        )
        with patch("aha_cli.runner.attempt_connection") as attempt:
            (row,) = CheckRunner(factory).run(conns)
        attempt.assert_not_called()
        assert row.outcome is Outcome.CONSTRUCTION_ERROR

    def test_rows_sorted_by_name(self, factory, make_descriptor):
        conns = _connections(
            make_descriptor,
            zeta={"type": "redis"}, alpha={"type": "redis"}, mid={"type": "mysql"},
        )
        assert [r.name for r in CheckRunner(factory).run(conns)] == ["alpha", "mid", "zeta"]

    @respx.mock
    def test_http_outcomes(self, factory, make_descriptor):
        respx.get("http://ok.local/").mock(return_value=httpx.Response(200))
        respx.get("http://missing.local/").mock(return_value=httpx.Response(404))
        respx.get("http://down.local/").mock(side_effect=httpx.ConnectError("refused"))
        conns = _connections(
            make_descriptor,
            ok={"type": "http", "is_checked": True, "url": "http://ok.local/", "method": "GET", "timeout": "1s"},
            missing={"type": "http", "is_checked": True, "url": "http://missing.local/", "timeout": "1s"},
            down={"type": "http", "is_checked": True, "url": "http://down.local/", "timeout": "1s"},
        )
        rows = {r.name: r for r in CheckRunner(factory).run(conns)}
        assert rows["ok"].status == "Connected"
        assert rows["ok"].description == "GET:http://ok.local/"
        assert rows["missing"].status == "Failed: HTTP request failed with status: 404"
        assert rows["down"].outcome is Outcome.FAILED
        assert "HTTP connection failed" in rows["down"].reason

    def test_unreachable_mysql_and_skipped_redis(self, factory, make_descriptor):
        conns = _connections(
            make_descriptor,
            db1={"type": "mysql", "is_checked": True, "host": "unreachable", "port": 3306},
            cache1={"type": "redis", "is_checked": False},
        )
        err = pymysql.err.OperationalError(2005, "Unknown MySQL server host 'unreachable'")
        with patch("aha_cli.probes.mysql.pymysql.connect", side_effect=err):
            results = CheckRunner(factory).run(conns)
        assert len(results) == 2
        rows = {r.name: r for r in results}
        assert rows["db1"].status.startswith("Failed: failed to connect to MySQL")
        assert rows["cache1"].status == "Skipped"

    def test_unexpected_probe_exception_becomes_failed_row(self, factory, make_descriptor):
        conns = _connections(
            make_descriptor,
            a={"type": "redis", "is_checked": True},
            b={"type": "redis", "is_checked": False},
        )
        with patch("aha_cli.runner.attempt_connection", side_effect=RuntimeError("kaboom")):
            a, b = CheckRunner(factory).run(conns)
        assert a.status == "Failed: RuntimeError: kaboom"
        assert b.outcome is Outcome.SKIPPED

    def test_connected_row(self, factory, make_descriptor):
        conns = _connections(make_descriptor, cache={"type": "redis", "is_checked": True, "host": "c", "port": 1})
        with patch("aha_cli.probes.redis.redis.Redis"):
            (row,) = CheckRunner(factory).run(conns)
        assert row.outcome is Outcome.CONNECTED
        assert row.reason is None

    def test_failed_row_keeps_error_text(self, factory, make_descriptor):
        conns = _connections(make_descriptor, cache={"type": "redis", "is_checked": True})
        with patch(
            "aha_cli.runner.attempt_connection",
            side_effect=ProbeConnectionError("Redis ping failed: NOAUTH"),
        ):
            (row,) = CheckRunner(factory).run(conns)
        assert row.status == "Failed: Redis ping failed: NOAUTH"

    def test_idempotent(self, factory, make_descriptor):
        conns = _connections(
            make_descriptor,
            q={"type": "kafka"},
            cache={"type": "redis", "host": "c"},
            api={"type": "http", "url": "http://x", "timeout": "3s"},
        )
        runner = CheckRunner(factory)
        assert runner.run(conns) == runner.run(conns)

    def test_default_factory(self):
        assert isinstance(CheckRunner().factory, ResourceFactory)

    def test_each_resource_gets_its_own_client(self, factory, make_descriptor):
        conns = _connections(
            make_descriptor,
            a={"type": "redis", "is_checked": True, "host": "a"},
            b={"type": "redis", "is_checked": True, "host": "b"},
        )
        with patch("aha_cli.probes.redis.redis.Redis", side_effect=lambda **kw: MagicMock()) as redis_cls:
            CheckRunner(factory).run(conns)
        assert [c.kwargs["host"] for c in redis_cls.call_args_list] == ["a", "b"]
