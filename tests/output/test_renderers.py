"""Tests for operation-specific Rich renderers."""

from rosterctl.output.renderers import render_quiet, render_result
from rosterctl.services.result import ServiceError, ServiceResult

# ── Helpers ───────────────────────────────────────────────────────────

JOHN = {
    "id": 1,
    "name": "John",
    "gender": "MALE",
    "birth_date": "1970-05-15",
    "division": "IT",
    "division_id": 1,
    "salary": 5000.0,
}
JANE = {**JOHN, "id": 2, "name": "Jane", "gender": "FEMALE", "salary": 6000.0}


def _ok(op: str, **data: object) -> ServiceResult:
    return ServiceResult(ok=True, op=op, data=dict(data), meta={"separator": ";"})


def _err(op: str, code: str, message: str, **detail: object) -> ServiceResult:
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(code=code, message=message, detail=dict(detail)),
    )


# ── Error rendering ──────────────────────────────────────────────────


class TestErrorRenderer:
    def test_basic_error(self) -> None:
        output = render_result(_err("ingest", "SOURCE_NOT_FOUND", "File not found: x.csv"))
        assert "ERROR" in output
        assert "ingest" in output
        assert "File not found: x.csv" in output

    def test_verbose_shows_detail(self) -> None:
        result = _err("ingest", "TOKENIZATION", "Malformed", source="x.csv", line=3)
        output = render_result(result, verbose=True)
        assert "detail" in output
        assert "line: 3" in output

    def test_no_error_object(self) -> None:
        output = render_result(ServiceResult(ok=False, op="ingest"))
        assert "Unknown error" in output


# ── Ingest renderer ──────────────────────────────────────────────────


class TestIngestRenderer:
    def test_table_and_counts(self) -> None:
        result = _ok(
            "ingest",
            source="roster.csv",
            count=2,
            rejected_count=0,
            records=[JOHN, JANE],
            rejected=[],
            divisions=[{"id": 1, "name": "IT"}],
        )
        output = render_result(result)
        assert "OK" in output
        assert "records: 2" in output
        assert "divisions: 1" in output
        assert "John" in output
        assert "Jane" in output
        assert "FEMALE" in output
        assert "5000.00" in output
        assert "1970-05-15" in output

    def test_rejected_rows_counted_not_listed(self) -> None:
        result = _ok(
            "ingest",
            source="roster.csv",
            count=0,
            rejected_count=1,
            records=[],
            rejected=[{"row": 2, "code": "INVALID_ID", "message": "Invalid id format: 'X'"}],
            divisions=[],
        )
        output = render_result(result)
        assert "rejected: 1" in output
        assert "Invalid id format" not in output

    def test_verbose_shows_division_ids_and_meta(self) -> None:
        result = _ok("ingest", source="r.csv", count=1, records=[JOHN], rejected=[], divisions=[])
        output = render_result(result, verbose=True)
        assert "Div ID" in output
        assert "separator: ;" in output

    def test_data_with_markup_characters(self) -> None:
        odd = {**JOHN, "name": "[bold]Eve[/bold]"}
        output = render_result(_ok("ingest", count=1, records=[odd], rejected=[], divisions=[]))
        assert "[bold]Eve[/bold]" in output


# ── Stats renderer ───────────────────────────────────────────────────


class TestStatsRenderer:
    def test_summary(self) -> None:
        result = _ok(
            "stats",
            total=2,
            male=1,
            female=1,
            male_pct=50.0,
            female_pct=50.0,
            avg_salary=5500.0,
            max_salary=6000.0,
            min_salary=5000.0,
            division_count=1,
            rejected_count=0,
            preview=[JOHN],
        )
        output = render_result(result)
        assert "total: 2" in output
        assert "male: 1 (50.0%)" in output
        assert "avg salary: 5500.00" in output
        assert "divisions: 1" in output
        assert "first 1 records" in output
        assert "John" in output
        assert "rejected" not in output

    def test_rejected_count_shown_when_nonzero(self) -> None:
        output = render_result(_ok("stats", total=0, rejected_count=3, preview=[]))
        assert "rejected: 3" in output


# ── Quiet ─────────────────────────────────────────────────────────────


class TestQuietRenderer:
    def test_ingest_ids(self) -> None:
        assert render_quiet(_ok("ingest", records=[JOHN, JANE])) == "1\n2"

    def test_stats(self) -> None:
        assert render_quiet(_ok("stats", total=2)) == "OK: stats"

    def test_error(self) -> None:
        output = render_quiet(_err("ingest", "SOURCE_NOT_FOUND", "File not found: x.csv"))
        assert output.startswith("ERROR: ingest")
        assert "File not found" in output
