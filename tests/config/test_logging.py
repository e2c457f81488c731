"""Tests for structlog log routing and row event fields."""

from __future__ import annotations

import json
import logging
from collections.abc import Generator
from pathlib import Path

import pytest

from rosterctl.config.logging import configure_logging, source_context
from rosterctl.domain.divisions import DivisionRegistry
from rosterctl.services.ingest import IngestService
from tests.conftest import FIXED_TODAY, HEADER, WriteCsv


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore root logger state after each test."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    roster = logging.getLogger("rosterctl")
    roster_level = roster.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    roster.setLevel(roster_level)


class TestConfigureLogging:
    def test_verbose_enables_debug(self) -> None:
        configure_logging(verbose=True, log_json=False)
        assert logging.getLogger("rosterctl").level == logging.DEBUG
        assert logging.getLogger().level == logging.WARNING

    def test_non_verbose_sets_warning(self) -> None:
        configure_logging(verbose=False, log_json=False)
        assert logging.getLogger("rosterctl").level == logging.WARNING

    def test_stdlib_logger_gets_structured_fields(
        self, capfd: pytest.CaptureFixture[str]
    ) -> None:
        configure_logging(verbose=True, log_json=True)

        logging.getLogger("rosterctl.services.ingest").info("Rejected row %d: %s", 2, "bad id")

        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["event"] == "Rejected row 2: bad id"
        assert parsed["level"] == "info"
        assert parsed["logger"] == "rosterctl.services.ingest"

    def test_quiet_by_default(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=False, log_json=True)
        logging.getLogger("rosterctl.domain.divisions").debug("Registered division")
        logging.getLogger("rosterctl.services.ingest").info("Rejected row 2")
        assert capfd.readouterr().err == ""

    def test_idempotent_calls(self) -> None:
        """Multiple configure_logging calls don't stack handlers."""
        configure_logging(verbose=True, log_json=False)
        configure_logging(verbose=True, log_json=True)
        assert len(logging.getLogger().handlers) == 1

    def test_rejected_row_carries_row_code_and_source(
        self,
        capfd: pytest.CaptureFixture[str],
        registry: DivisionRegistry,
        write_csv: WriteCsv,
    ) -> None:
        configure_logging(verbose=True, log_json=True)
        path = write_csv([HEADER, "X;John;Male;15.05.1970;IT;5000"])

        IngestService(registry, today=lambda: FIXED_TODAY).ingest(path)

        events = [json.loads(line) for line in capfd.readouterr().err.splitlines()]
        rejected = [e for e in events if e.get("row") == 2]
        assert len(rejected) == 1
        assert rejected[0]["level"] == "info"
        assert rejected[0]["code"] == "INVALID_ID"
        assert rejected[0]["source"] == str(path)
        assert rejected[0]["logger"] == "rosterctl.services.ingest"

    def test_source_unbound_after_read(
        self,
        capfd: pytest.CaptureFixture[str],
        registry: DivisionRegistry,
        write_csv: WriteCsv,
    ) -> None:
        configure_logging(verbose=True, log_json=True)
        IngestService(registry).ingest(write_csv([HEADER]))
        capfd.readouterr()

        logging.getLogger("rosterctl.test").warning("after")
        assert "source" not in json.loads(capfd.readouterr().err.strip())


class TestSourceContext:
    def test_binds_source_for_stdlib_records(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        with source_context(Path("roster.csv")):
            logging.getLogger("rosterctl.test").info("inside", extra={"row": 5})
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["source"] == "roster.csv"
        assert parsed["row"] == 5
