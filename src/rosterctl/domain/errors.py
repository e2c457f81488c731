"""Error taxonomy for roster ingestion.

Two families:
- Source-level (:class:`SourceError`): the input cannot be located or
  tokenized. Always fatal to the run; propagates to the caller.
- Row-level (:class:`RowValidationError`): one row violates a field rule.
  Wrapped in :class:`RowError` with its row number and recovered at the
  ingest boundary.

Every row-level error carries a stable ``code`` so the output layer and
tests can distinguish subtypes without ``isinstance`` chains.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar


class RosterError(Exception):
    """Base class for all rosterctl errors."""


# --- Source-level (fatal) ---


class SourceError(RosterError):
    """The row source itself failed. Never recovered per row."""

    code: ClassVar[str] = "SOURCE"


class SourceNotFoundError(SourceError):
    """The input location resolved to neither a file nor a bundled resource."""

    code = "SOURCE_NOT_FOUND"

    def __init__(self, location: str) -> None:
        super().__init__(f"File not found: {location}")
        self.location = location


class TokenizationError(SourceError):
    """The reader could not split the stream into rows."""

    code = "TOKENIZATION"

    def __init__(self, source: str, line: int, reason: str) -> None:
        super().__init__(f"Malformed input in {source} at line {line}: {reason}")
        self.source = source
        self.line = line
        self.reason = reason


# --- Row-level (recoverable) ---


class RowValidationError(RosterError, ValueError):
    """A single field (or the row shape) failed validation."""

    code: ClassVar[str] = "ROW"


class SchemaError(RowValidationError):
    code = "SCHEMA"


class InvalidIdError(RowValidationError):
    code = "INVALID_ID"


class InvalidNameError(RowValidationError):
    code = "INVALID_NAME"


class InvalidGenderError(RowValidationError):
    code = "INVALID_GENDER"


class FormatError(RowValidationError):
    """A date field is empty or not ``dd.mm.yyyy``."""

    code = "INVALID_DATE"


class FutureDateError(RowValidationError):
    code = "FUTURE_DATE"


class InvalidSalaryError(RowValidationError):
    code = "INVALID_SALARY"


@dataclass(frozen=True)
class RowError:
    """A row-level failure bound to its 1-based row number (header is row 1)."""

    row: int
    cause: RowValidationError

    @property
    def code(self) -> str:
        return self.cause.code

    @property
    def message(self) -> str:
        return str(self.cause)

    def to_dict(self) -> dict[str, object]:
        return {"row": self.row, "code": self.code, "message": self.message}

    def __str__(self) -> str:
        return f"row {self.row}: {self.message}"
