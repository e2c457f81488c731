"""Command: summary statistics for a roster file."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from rosterctl.commands._base import RosterCommand, separator_option, strict_columns_option

if TYPE_CHECKING:
    from rosterctl.commands._context import AppContext


@click.command(
    cls=RosterCommand,
    examples="""\
  rosterctl stats employees.csv
  rosterctl stats employees.csv --limit 0
  rosterctl stats sample_employees.csv --limit 3
  rosterctl --json stats employees.csv""",
)
@click.argument("source")
@separator_option
@strict_columns_option
@click.option(
    "--limit",
    type=click.IntRange(min=0),
    default=None,
    help="Records to preview (default from config: 10).",
)
@click.pass_obj
def stats(
    app: AppContext,
    source: str,
    separator: str | None,
    strict_columns: bool,
    limit: int | None,
) -> None:
    """Print headcount, gender split, salary range, and division count."""
    from rosterctl.services.stats import StatsService

    config = app.ingest_config(separator=separator, strict_columns=strict_columns or None)
    preview_limit = app.settings.report.preview_limit if limit is None else limit
    app.emit(StatsService(app.registry, config).stats(source, preview_limit=preview_limit))
