"""Pub/Sub probe: build a publisher client and look the topic up."""

from __future__ import annotations

import json
import logging
from typing import Any

import google.auth
from google.api_core import exceptions as gexc
from google.auth import exceptions as auth_exceptions
from google.cloud import pubsub_v1

from aha_cli.config.constants import PUBSUB_SCOPE, PUBSUB_TIMEOUT
from aha_cli.errors import ProbeConnectionError
from aha_cli.probes.models import PubSubProbe

logger = logging.getLogger(__name__)


def default_credentials() -> Any:
    """Application Default Credentials scoped for Pub/Sub."""
    credentials, _project = google.auth.default(scopes=[PUBSUB_SCOPE])
    return credentials


def _resolve_credentials(probe: PubSubProbe) -> Any:
    if not probe.uses_ambient_credentials:
        info = json.loads(probe.credentials_json)
        credentials, _project = google.auth.load_credentials_from_dict(
            info, scopes=[PUBSUB_SCOPE],
        )
        return credentials
    source = probe.ambient_credentials or default_credentials
    return source()


def _make_client(probe: PubSubProbe) -> pubsub_v1.PublisherClient:
    try:
        credentials = _resolve_credentials(probe)
        return pubsub_v1.PublisherClient(credentials=credentials)
    except (auth_exceptions.GoogleAuthError, ValueError) as exc:
        # json.JSONDecodeError is a ValueError
        raise ProbeConnectionError(f"failed to create Pub/Sub client: {exc}") from exc


def check_pubsub(probe: PubSubProbe) -> None:
    client = _make_client(probe)
    with client:
        topic_path = client.topic_path(probe.project_id, probe.topic_id)
        try:
            client.get_topic(
                request={"topic": topic_path}, retry=None, timeout=PUBSUB_TIMEOUT,
            )
        except gexc.NotFound as exc:
            raise ProbeConnectionError(f"topic {probe.topic_id} does not exist") from exc
        except (gexc.GoogleAPIError, auth_exceptions.GoogleAuthError) as exc:
            raise ProbeConnectionError(
                f"failed to check topic existence: {exc}"
            ) from exc
    logger.debug("Pub/Sub topic %s exists", topic_path)
