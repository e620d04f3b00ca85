"""HTTP probe: a single GET with the configured timeout."""

from __future__ import annotations

import logging

import httpx

from aha_cli.errors import ProbeConnectionError
from aha_cli.probes.models import HTTPProbe

logger = logging.getLogger(__name__)


def check_http(probe: HTTPProbe) -> None:
    """GET ``probe.url``; any transport error or a status >= 400 is a failure."""
    try:
        with httpx.Client(timeout=probe.timeout) as client:
            # Only the status line is needed; the body is never read
            with client.stream("GET", probe.url) as response:
                status = response.status_code
    except (httpx.HTTPError, httpx.InvalidURL) as exc:
        raise ProbeConnectionError(f"HTTP connection failed: {exc}") from exc

    logger.debug("GET %s -> %d", probe.url, status)
    if status >= 400:
        raise ProbeConnectionError(
            f"HTTP request failed with status: {status}"
        )
