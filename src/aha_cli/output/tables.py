"""Rich table rendering helpers."""

from __future__ import annotations

from typing import Any, Sequence

from rich.table import Table
from rich.text import Text

from aha_cli.models.check import CheckResult, Outcome, TableCount

REPORT_COLUMNS = ("Name", "Type", "Description", "Status")

_STATUS_STYLES = {
    Outcome.CONNECTED: "green",
    Outcome.SKIPPED: "yellow",
    Outcome.FAILED: "red",
    Outcome.CONSTRUCTION_ERROR: "red",
}


def make_table(
    title: str | None,
    columns: Sequence[str],
    rows: Sequence[Sequence[Any]],
    *,
    show_lines: bool = False,
) -> Table:
    """Build a Rich Table from column headers and row data."""
    table = Table(title=title, show_lines=show_lines)
    for col in columns:
        table.add_column(col, no_wrap=False)
    for row in rows:
        table.add_row(*(_cell(cell) for cell in row))
    return table


def _cell(value: Any) -> Any:
    if value is None:
        return ""
    if isinstance(value, Text):
        return value
    # Plain text so that brackets in URLs or error messages are not read as markup
    return Text(str(value))


def results_table(results: Sequence[CheckResult], *, title: str | None = None) -> Table:
    """The connection report: one row per configured resource."""
    rows = []
    for r in results:
        row: list[Any] = list(r.as_row())
        row[-1] = Text(r.status, style=_STATUS_STYLES[r.outcome])
        rows.append(row)
    return make_table(title, REPORT_COLUMNS, rows)


def table_counts_table(counts: Sequence[TableCount], *, title: str | None = None) -> Table:
    return make_table(title, ("Table", "Rows"), [[c.table, c.rows] for c in counts])
