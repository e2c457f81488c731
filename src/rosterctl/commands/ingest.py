"""Command: ingest a roster file and list the validated records."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from rosterctl.commands._base import RosterCommand, separator_option, strict_columns_option

if TYPE_CHECKING:
    from rosterctl.commands._context import AppContext


@click.command(
    cls=RosterCommand,
    examples="""\
  rosterctl ingest employees.csv
  rosterctl ingest employees.csv --separator ,
  rosterctl ingest employees.csv --strict-columns
  rosterctl --json ingest sample_employees.csv
  rosterctl -q ingest employees.csv""",
)
@click.argument("source")
@separator_option
@strict_columns_option
@click.pass_obj
def ingest(
    app: AppContext,
    source: str,
    separator: str | None,
    strict_columns: bool,
) -> None:
    """Validate SOURCE row by row and list the accepted records.

    SOURCE is a file path, or the name of a bundled data file.
    Invalid rows are reported on stderr and skipped.
    """
    from rosterctl.services.ingest import IngestService

    config = app.ingest_config(separator=separator, strict_columns=strict_columns or None)
    app.emit(IngestService(app.registry, config).ingest(source))
