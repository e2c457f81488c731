"""Employee records and row-to-record validation.

Column order is fixed: id, name, gender, birth date, division, salary.
Rules run in that order and the first failure wins, so a row is either a
complete :class:`EmployeeRecord` or a single :class:`RowError`. There is
no partially valid record.

:meth:`RecordValidator.build` returns a :data:`RowOutcome` instead of
raising; callers ``match`` on :class:`Accepted` / :class:`Rejected`.
"""

from __future__ import annotations

import math
import re
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from datetime import date

from pydantic import BaseModel, Field

from rosterctl.domain.dates import is_not_future, parse_date
from rosterctl.domain.divisions import Division, DivisionRegistry
from rosterctl.domain.errors import (
    FutureDateError,
    InvalidIdError,
    InvalidNameError,
    InvalidSalaryError,
    RowError,
    RowValidationError,
    SchemaError,
)
from rosterctl.domain.gender import resolve_gender
from rosterctl.domain.types import Gender

REQUIRED_FIELDS = 6

_ID_RE = re.compile(r"^[+-]?[0-9]+$")
_MAX_ID = 2**63 - 1
_SALARY_RE = re.compile(r"^[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?$")


class EmployeeRecord(BaseModel):
    """One validated employee. Ids come from the input and may repeat."""

    model_config = {"frozen": True}

    id: int = Field(gt=0)
    name: str = Field(min_length=1)
    gender: Gender
    birth_date: date
    division: Division
    salary: float = Field(ge=0)


@dataclass(frozen=True)
class Accepted:
    record: EmployeeRecord


@dataclass(frozen=True)
class Rejected:
    error: RowError


RowOutcome = Accepted | Rejected


def parse_id(text: str) -> int:
    """Parse a strictly positive integer id (optional sign, ASCII digits)."""
    value = text.strip()
    if not _ID_RE.match(value):
        raise InvalidIdError(f"Invalid id format: {value!r}")
    emp_id = int(value)
    if emp_id <= 0:
        raise InvalidIdError(f"Id must be a positive number, got {emp_id}")
    if emp_id > _MAX_ID:
        raise InvalidIdError(f"Id out of range: {value}")
    return emp_id


def parse_salary(text: str) -> float:
    """Parse a finite, non-negative salary written with ASCII digits."""
    value = text.strip()
    if not _SALARY_RE.match(value):
        raise InvalidSalaryError(f"Invalid salary format: {value!r}")
    salary = float(value)
    if not math.isfinite(salary):
        raise InvalidSalaryError(f"Invalid salary format: {value!r}")
    if salary < 0:
        raise InvalidSalaryError(f"Salary must not be negative, got {value}")
    return salary


class RecordValidator:
    """Build :class:`EmployeeRecord` objects from tokenized rows.

    Args:
        registry: Division cache shared by every row of an ingestion.
        today: Clock returning the date birth dates are checked against.
        strict_columns: Require exactly six fields instead of at least six.
    """

    def __init__(
        self,
        registry: DivisionRegistry,
        *,
        today: Callable[[], date] = date.today,
        strict_columns: bool = False,
    ) -> None:
        self._registry = registry
        self._today = today
        self._strict_columns = strict_columns

    def build(self, fields: Sequence[str], row_number: int) -> RowOutcome:
        """Validate one row. Never raises for row-level problems."""
        try:
            record = self._build(fields)
        except RowValidationError as exc:
            return Rejected(RowError(row=row_number, cause=exc))
        return Accepted(record)

    def _build(self, fields: Sequence[str]) -> EmployeeRecord:
        self._check_shape(fields)

        emp_id = parse_id(fields[0])

        name = fields[1].strip()
        if not name:
            raise InvalidNameError("Name must not be empty")

        gender = resolve_gender(fields[2])

        birth_date = parse_date(fields[3])
        if not is_not_future(birth_date, self._today()):
            raise FutureDateError(f"Birth date {birth_date:%d.%m.%Y} is in the future")

        division = self._registry.get_or_create(fields[4])
        salary = parse_salary(fields[5])

        return EmployeeRecord(
            id=emp_id,
            name=name,
            gender=gender,
            birth_date=birth_date,
            division=division,
            salary=salary,
        )

    def _check_shape(self, fields: Sequence[str]) -> None:
        count = len(fields)
        if count < REQUIRED_FIELDS:
            raise SchemaError(f"Expected {REQUIRED_FIELDS} fields, got {count}")
        if self._strict_columns and count != REQUIRED_FIELDS:
            raise SchemaError(f"Expected exactly {REQUIRED_FIELDS} fields, got {count}")
