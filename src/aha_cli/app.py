"""Root Typer app — global options and command group registration."""

from __future__ import annotations

import logging
from typing import Optional

import typer
from rich.logging import RichHandler

from aha_cli import __version__
from aha_cli.commands import check
from aha_cli.errors import err_console

app = typer.Typer(
    name="aha",
    help="Small operations toolbox: check that configured resources are reachable.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


def version_callback(value: bool) -> None:
    if value:
        print(f"aha {__version__}")
        raise typer.Exit()


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


@app.callback()
def main_callback(
    version: Optional[bool] = typer.Option(
        None, "--version", "-V", callback=version_callback, is_eager=True, help="Show version and exit."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log each check to stderr."),
) -> None:
    """aha — connectivity checks for databases, caches, endpoints and topics."""
    configure_logging(verbose)


# Register command groups
app.add_typer(check.app, name="check")


def main() -> None:
    app()
