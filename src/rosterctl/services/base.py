"""BaseService — shared foundation for ingestion-backed services.

Every service receives the :class:`DivisionRegistry` it should populate and
the ingest configuration at construction time. Reading a source always goes
through :meth:`BaseService._read`, so every service applies the same
separator, encoding, and column rules.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import date
from pathlib import Path
from typing import TYPE_CHECKING

from rosterctl.config.logging import source_context
from rosterctl.config.models import IngestConfig
from rosterctl.domain.errors import SourceError
from rosterctl.domain.records import RecordValidator
from rosterctl.infrastructure.reader import open_rows, resolve_source
from rosterctl.services.result import Operation, ServiceError, ServiceResult

if TYPE_CHECKING:
    from rosterctl.domain.divisions import DivisionRegistry
    from rosterctl.services.ingest import IngestReport

logger = logging.getLogger(__name__)


class BaseService:
    """Base for service classes that read a roster source.

    Usage::

        class IngestService(BaseService):
            def ingest(self, location: str) -> ServiceResult:
                try:
                    report = self._read(location)
                except SourceError as exc:
                    return self._source_failure("ingest", location, exc)
                ...
    """

    def __init__(
        self,
        registry: DivisionRegistry,
        config: IngestConfig | None = None,
        *,
        today: Callable[[], date] = date.today,
    ) -> None:
        self._registry = registry
        self._config = config or IngestConfig()
        self._today = today

    @property
    def config(self) -> IngestConfig:
        return self._config

    def _validator(self) -> RecordValidator:
        return RecordValidator(
            self._registry,
            today=self._today,
            strict_columns=self._config.strict_columns,
        )

    def _read(self, location: str | Path) -> IngestReport:
        """Resolve, open, and ingest *location*. Source failures propagate.

        Log events emitted while reading carry ``source=<location>``.
        """
        from rosterctl.services.ingest import ingest_rows

        with source_context(location):
            source = resolve_source(location)
            with open_rows(
                source,
                separator=self._config.separator,
                encoding=self._config.encoding,
            ) as rows:
                return ingest_rows(rows, self._validator())

    def _meta(self, location: str | Path) -> dict[str, str]:
        return {"source": str(location), "separator": self._config.separator}

    def _source_failure(
        self,
        op: Operation,
        location: str | Path,
        exc: SourceError,
    ) -> ServiceResult:
        """Convert a fatal source error into a failed ServiceResult."""
        logger.info("%s aborted: %s", op, exc, extra={"code": exc.code})
        return ServiceResult(
            ok=False,
            op=op,
            error=ServiceError.from_source_error(exc, location),
            meta=self._meta(location),
        )
