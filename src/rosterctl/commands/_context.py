"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Owns the division registry for the invocation and
centralizes result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click
from pydantic import ValidationError

from rosterctl.config.models import IngestConfig
from rosterctl.domain.divisions import DivisionRegistry
from rosterctl.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from rosterctl.config.settings import RosterSettings
    from rosterctl.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The registry is created lazily and lives for the whole invocation, so
    every ingest in one process shares division identities.
    """

    def __init__(self, settings: RosterSettings) -> None:
        self.settings = settings
        self._registry: DivisionRegistry | None = None

        from rosterctl.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def registry(self) -> DivisionRegistry:
        """The division registry (created lazily on first access)."""
        if self._registry is None:
            self._registry = DivisionRegistry()
        return self._registry

    def ingest_config(self, **overrides: Any) -> IngestConfig:
        """Configured ingest settings with non-None CLI *overrides* applied.

        Raises:
            click.BadParameter: If an override fails validation.
        """
        changes = {k: v for k, v in overrides.items() if v is not None}
        if not changes:
            return self.settings.ingest
        try:
            return IngestConfig.model_validate(
                {**self.settings.ingest.model_dump(), **changes}
            )
        except ValidationError as exc:
            msg = "; ".join(err["msg"] for err in exc.errors())
            raise click.BadParameter(msg) from exc

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings are emitted to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            # In JSON mode, warnings are already in the serialized payload.
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
