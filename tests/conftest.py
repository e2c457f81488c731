"""Shared pytest fixtures and test helpers for rosterctl tests."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from datetime import date
from pathlib import Path

import pytest
from click.testing import CliRunner

from rosterctl.domain.divisions import DivisionRegistry
from rosterctl.domain.records import RecordValidator

FIXED_TODAY = date(2024, 6, 15)
HEADER = "id;name;gender;birthDate;division;salary"

WriteCsv = Callable[..., Path]


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def registry() -> DivisionRegistry:
    """A fresh, isolated division registry (ids start at 1)."""
    return DivisionRegistry()


@pytest.fixture
def validator(registry: DivisionRegistry) -> RecordValidator:
    """Record validator pinned to FIXED_TODAY."""
    return RecordValidator(registry, today=lambda: FIXED_TODAY)


@pytest.fixture
def write_csv(tmp_path: Path) -> WriteCsv:
    """Write lines to a CSV file under tmp_path and return its path."""

    def _write(
        lines: Sequence[str],
        name: str = "roster.csv",
        *,
        encoding: str = "utf-8",
    ) -> Path:
        path = tmp_path / name
        path.write_text("\n".join(lines) + "\n", encoding=encoding)
        return path

    return _write


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run inside tmp_path with no config discovery leaking in from outside.

    Use via ``@pytest.mark.usefixtures("_isolated_cwd")`` on command test
    classes.
    """
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("ROSTERCTL_CONFIG", raising=False)
    for var in ("ROSTERCTL_INGEST__SEPARATOR", "ROSTERCTL_REPORT__PREVIEW_LIMIT"):
        monkeypatch.delenv(var, raising=False)
