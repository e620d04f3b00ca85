"""Check commands: resource connectivity and MySQL table summaries."""

from __future__ import annotations

import typer
from rich.console import Console
from rich.markup import escape
from rich.text import Text

from aha_cli.config.loader import ConfigLoader
from aha_cli.errors import ProbeConnectionError, error_handler
from aha_cli.output.tables import results_table, table_counts_table
from aha_cli.probes.dispatch import describe
from aha_cli.probes.factory import ResourceFactory
from aha_cli.probes.models import MySQLProbe
from aha_cli.runner import CheckRunner
from aha_cli.summary import summarize_tables

app = typer.Typer(name="check", help="Check configured resources.", no_args_is_help=True)
console = Console()


def _get_loader() -> ConfigLoader:
    return ConfigLoader()


def _get_factory() -> ResourceFactory:
    return ResourceFactory()


@app.command()
@error_handler
def connection() -> None:
    """Try to connect to every configured resource and print a status table."""
    config = _get_loader().load()
    if not config.connections:
        console.print(f"[yellow]No connections configured in {escape(str(config.path))}.[/]")
        return

    results = CheckRunner(_get_factory()).run(config.connections)
    console.print(results_table(results))


@app.command("table-summary")
@error_handler
def table_summary() -> None:
    """Print the row count of every table behind each MySQL connection."""
    config = _get_loader().load()
    factory = _get_factory()

    found = False
    for name in sorted(config.connections):
        descriptor = config.connections[name]
        if descriptor.kind != "mysql":
            continue
        found = True
        probe = factory.materialize(name, descriptor)
        if not isinstance(probe, MySQLProbe):
            continue
        title = f"{name} ({describe(probe)})"
        try:
            counts = summarize_tables(probe)
        except ProbeConnectionError as exc:
            console.print(Text(f"{name}: {exc}", style="red"))
            continue
        console.print(table_counts_table(counts, title=title))

    if not found:
        console.print(f"[yellow]No MySQL connections configured in {escape(str(config.path))}.[/]")
