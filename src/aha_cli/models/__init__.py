"""Pydantic data models for check runs."""

from aha_cli.models.check import CheckResult, Outcome, Resource, TableCount

__all__ = [
    "CheckResult",
    "Outcome",
    "Resource",
    "TableCount",
]
