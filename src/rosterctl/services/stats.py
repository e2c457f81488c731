"""Summary statistics over ingested employee records."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from pydantic import BaseModel

from rosterctl.domain.errors import SourceError
from rosterctl.domain.records import EmployeeRecord
from rosterctl.domain.types import Gender
from rosterctl.services.base import BaseService
from rosterctl.services.ingest import record_to_dict
from rosterctl.services.result import ServiceResult

logger = logging.getLogger(__name__)


class RosterStats(BaseModel):
    """Headcount, gender split, salary range, and division count."""

    model_config = {"frozen": True}

    total: int = 0
    male: int = 0
    female: int = 0
    male_pct: float = 0.0
    female_pct: float = 0.0
    avg_salary: float = 0.0
    max_salary: float = 0.0
    min_salary: float = 0.0
    division_count: int = 0


def _pct(part: int, total: int) -> float:
    return round(part / total * 100, 1) if total else 0.0


def summarize(records: Sequence[EmployeeRecord]) -> RosterStats:
    """Compute :class:`RosterStats`. An empty sequence gives all zeros."""
    total = len(records)
    if not total:
        return RosterStats()

    male = sum(1 for r in records if r.gender is Gender.MALE)
    salaries = [r.salary for r in records]
    return RosterStats(
        total=total,
        male=male,
        female=total - male,
        male_pct=_pct(male, total),
        female_pct=_pct(total - male, total),
        avg_salary=round(sum(salaries) / total, 2),
        max_salary=round(max(salaries), 2),
        min_salary=round(min(salaries), 2),
        division_count=len({r.division.name for r in records}),
    )


class StatsService(BaseService):
    """Ingest a roster file and summarize it."""

    def stats(self, location: str | Path, *, preview_limit: int = 10) -> ServiceResult:
        """Summarize *location*, including the first *preview_limit* records."""
        try:
            report = self._read(location)
        except SourceError as exc:
            return self._source_failure("stats", location, exc)

        summary = summarize(report.records)
        logger.debug("Summarized %d records from %s", summary.total, location)
        return ServiceResult(
            ok=True,
            op="stats",
            data={
                **summary.model_dump(),
                "rejected_count": len(report.rejected),
                "preview": [record_to_dict(r) for r in report.records[:preview_limit]],
            },
            warnings=[str(err) for err in report.rejected],
            meta=self._meta(location),
        )
