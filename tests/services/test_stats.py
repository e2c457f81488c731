"""Tests for roster summary statistics."""

from __future__ import annotations

from pathlib import Path

import pytest

from rosterctl.domain.divisions import DivisionRegistry
from rosterctl.domain.records import RecordValidator
from rosterctl.services.ingest import ingest_rows
from rosterctl.services.stats import RosterStats, StatsService, summarize
from tests.conftest import FIXED_TODAY, HEADER, WriteCsv


def _records(validator: RecordValidator, *lines: str):
    rows = [line.split(";") for line in (HEADER, *lines)]
    return ingest_rows(rows, validator).records


class TestSummarize:
    def test_empty(self) -> None:
        assert summarize([]) == RosterStats()

    def test_counts_and_salaries(self, validator: RecordValidator) -> None:
        records = _records(
            validator,
            "1;John;Male;15.05.1970;IT;5000",
            "2;Jane;Female;07.02.1983;IT;6000",
            "3;Ann;Ж;01.01.1990;HR;1000",
            "4;Bob;м;01.01.1991;Ops;2500.5",
        )
        stats = summarize(records)
        assert stats.total == 4
        assert stats.male == 2
        assert stats.female == 2
        assert stats.male_pct == 50.0
        assert stats.female_pct == 50.0
        assert stats.avg_salary == pytest.approx(3625.13, abs=0.01)
        assert stats.max_salary == 6000.0
        assert stats.min_salary == 1000.0
        assert stats.division_count == 3

    def test_percentages_rounded(self, validator: RecordValidator) -> None:
        records = _records(
            validator,
            "1;A;Male;01.01.1990;IT;1",
            "2;B;Female;01.01.1990;IT;1",
            "3;C;Female;01.01.1990;IT;1",
        )
        stats = summarize(records)
        assert stats.male_pct == 33.3
        assert stats.female_pct == 66.7


class TestStatsService:
    def test_stats_file(self, registry: DivisionRegistry, write_csv: WriteCsv) -> None:
        path = write_csv(
            [
                HEADER,
                "1;John;Male;15.05.1970;IT;5000",
                "X;Bad;Male;15.05.1970;IT;5000",
                "2;Jane;Female;07.02.1983;HR;6000",
            ]
        )
        result = StatsService(registry, today=lambda: FIXED_TODAY).stats(path, preview_limit=1)
        assert result.ok
        assert result.op == "stats"
        assert result.data["total"] == 2
        assert result.data["division_count"] == 2
        assert result.data["rejected_count"] == 1
        assert [r["name"] for r in result.data["preview"]] == ["John"]
        assert result.warnings == ["row 3: Invalid id format: 'X'"]

    def test_zero_preview(self, registry: DivisionRegistry) -> None:
        result = StatsService(registry).stats("sample_employees.csv", preview_limit=0)
        assert result.data["preview"] == []
        assert result.data["total"] == 12

    def test_missing_file(self, registry: DivisionRegistry, tmp_path: Path) -> None:
        result = StatsService(registry).stats(tmp_path / "nope.csv")
        assert not result.ok
        assert result.op == "stats"
        assert result.error is not None
        assert result.error.code == "SOURCE_NOT_FOUND"
