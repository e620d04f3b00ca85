"""Resources and per-resource check results."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel

from aha_cli.probes.models import Probe


class Outcome(str, Enum):
    SKIPPED = "skipped"
    CONNECTED = "connected"
    FAILED = "failed"
    CONSTRUCTION_ERROR = "construction_error"


class Resource(BaseModel):
    """A configured entry paired with its probe, alive for a single run."""

    name: str
    kind: str
    checked: bool
    probe: Probe


class CheckResult(BaseModel):
    """One report row."""

    name: str
    kind: str
    description: str = ""
    outcome: Outcome
    reason: str | None = None

    @property
    def status(self) -> str:
        if self.outcome is Outcome.SKIPPED:
            return "Skipped"
        if self.outcome is Outcome.CONNECTED:
            return "Connected"
        if self.outcome is Outcome.FAILED:
            return f"Failed: {self.reason}"
        return f"Error: {self.reason}"

    def as_row(self) -> list[str]:
        return [self.name, self.kind, self.description, self.status]


class TableCount(BaseModel):
    """Row count for one MySQL table; ``rows`` is -1 when counting failed."""

    table: str
    rows: int
