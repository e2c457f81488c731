"""Roster ingestion — header skip, per-row validation, error collection.

:func:`ingest_rows` is the core loop: it never aborts on a bad row, and it
never swallows a source failure. Errors raised by the row iterator itself
(tokenization, I/O) propagate to the caller untouched.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from rosterctl.domain.errors import RowError, SourceError
from rosterctl.domain.records import Accepted, EmployeeRecord, RecordValidator, Rejected
from rosterctl.services.base import BaseService
from rosterctl.services.result import ServiceResult

logger = logging.getLogger(__name__)

HEADER_ROW = 1


@dataclass
class IngestReport:
    """Accepted records in input order, plus one RowError per rejected row."""

    records: list[EmployeeRecord] = field(default_factory=list)
    rejected: list[RowError] = field(default_factory=list)

    @property
    def total_rows(self) -> int:
        return len(self.records) + len(self.rejected)


def ingest_rows(rows: Iterable[Sequence[str]], validator: RecordValidator) -> IngestReport:
    """Validate every data row of *rows*, discarding the header row.

    Rows are numbered from 1 with the header as row 1, so the first data
    row is row 2. A source with only a header (or nothing at all) yields an
    empty report.
    """
    report = IngestReport()
    iterator = iter(rows)
    if next(iterator, None) is None:
        logger.debug("Source is empty; nothing to ingest")
        return report

    for row_number, fields in enumerate(iterator, start=HEADER_ROW + 1):
        match validator.build(fields, row_number):
            case Accepted(record=record):
                report.records.append(record)
            case Rejected(error=error):
                logger.info(
                    "Rejected row %d: %s",
                    error.row,
                    error.message,
                    extra={"row": error.row, "code": error.code},
                )
                report.rejected.append(error)

    logger.debug(
        "Ingested %d rows: %d accepted, %d rejected",
        report.total_rows,
        len(report.records),
        len(report.rejected),
    )
    return report


def record_to_dict(record: EmployeeRecord) -> dict[str, Any]:
    """JSON-ready view of a record with the division flattened to its name."""
    data = record.model_dump(mode="json")
    data["division_id"] = record.division.id
    data["division"] = record.division.name
    return data


class IngestService(BaseService):
    """Ingest a roster file into validated records."""

    def ingest(self, location: str | Path) -> ServiceResult:
        """Read *location* and report accepted records and rejected rows.

        Source-level failures (missing file, malformed tokenization) return
        ``ok=False``; row-level failures are warnings on a successful result.
        """
        logger.debug("Ingesting %s", location)
        try:
            report = self._read(location)
        except SourceError as exc:
            return self._source_failure("ingest", location, exc)

        return ServiceResult(
            ok=True,
            op="ingest",
            data={
                "source": str(location),
                "count": len(report.records),
                "rejected_count": len(report.rejected),
                "records": [record_to_dict(r) for r in report.records],
                "rejected": [err.to_dict() for err in report.rejected],
                "divisions": [d.model_dump() for d in self._registry.divisions()],
            },
            warnings=[str(err) for err in report.rejected],
            meta=self._meta(location),
        )
