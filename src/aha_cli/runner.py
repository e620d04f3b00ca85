"""Sequential check runner: descriptors in, classified report rows out."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from aha_cli.config.models import ResourceDescriptor
from aha_cli.errors import ConstructionError, ProbeConnectionError
from aha_cli.models.check import CheckResult, Outcome, Resource
from aha_cli.probes.dispatch import attempt_connection, describe
from aha_cli.probes.factory import ResourceFactory

logger = logging.getLogger(__name__)


class CheckRunner:
    """Checks every configured resource, one at a time, in name order.

    Per-resource errors never escape :meth:`run`; each resource yields
    exactly one :class:`CheckResult`.
    """

    def __init__(self, factory: ResourceFactory | None = None) -> None:
        self.factory = factory or ResourceFactory()

    def run(self, connections: Mapping[str, ResourceDescriptor]) -> list[CheckResult]:
        results = []
        for name in sorted(connections):
            result = self.check_one(name, connections[name])
            logger.info("[%s] %s", name, result.status)
            results.append(result)
        return results

    def check_one(self, name: str, descriptor: ResourceDescriptor) -> CheckResult:
        try:
            probe = self.factory.materialize(name, descriptor)
        except ConstructionError as exc:
            return CheckResult(
                name=name,
                kind=descriptor.kind,
                outcome=Outcome.CONSTRUCTION_ERROR,
                reason=str(exc),
            )

        resource = Resource(
            name=name, kind=descriptor.kind, checked=descriptor.checked, probe=probe,
        )
        description = describe(resource.probe)

        if not resource.checked:
            return CheckResult(
                name=name,
                kind=resource.kind,
                description=description,
                outcome=Outcome.SKIPPED,
            )

        logger.debug("Checking %s (%s)", name, description)
        try:
            attempt_connection(resource.probe)
        except ProbeConnectionError as exc:
            return self._failed(resource, description, str(exc))
        except Exception as exc:
            logger.exception("Unexpected error while checking %s", name)
            return self._failed(resource, description, f"{type(exc).__name__}: {exc}")

        return CheckResult(
            name=name,
            kind=resource.kind,
            description=description,
            outcome=Outcome.CONNECTED,
        )

    def _failed(self, resource: Resource, description: str, reason: str) -> CheckResult:
        return CheckResult(
            name=resource.name,
            kind=resource.kind,
            description=description,
            outcome=Outcome.FAILED,
            reason=reason,
        )
