"""Typed exceptions and error handling decorator."""

from __future__ import annotations

import functools
from typing import Any, Callable, TypeVar

from rich.console import Console

F = TypeVar("F", bound=Callable[..., Any])

err_console = Console(stderr=True)


class AhaError(Exception):
    """Base exception for aha."""

    exit_code: int = 1


class ConfigurationError(AhaError):
    """Config file missing, unreadable or malformed."""

    exit_code = 2


class ConstructionError(AhaError):
    """A single resource could not be turned into a probe."""

    INVALID_TIMEOUT = "invalid-timeout"
    UNSUPPORTED_RESOURCE_TYPE = "unsupported-resource-type"

    def __init__(self, kind: str, message: str) -> None:
        self.kind = kind
        super().__init__(message)


class ProbeConnectionError(AhaError):
    """A connection attempt against a resource failed."""


def error_handler(func: F) -> F:
    """Decorator that catches AhaError and prints user-friendly messages."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except AhaError as exc:
            err_console.print(f"[bold red]Error:[/] {exc}")
            raise SystemExit(exc.exit_code)

    return wrapper  # type: ignore[return-value]
