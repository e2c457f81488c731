"""ServiceResult and ServiceError, the contract between services and the CLI.

Every service operation returns a ServiceResult. Row problems never make a
result fail; they ride along in ``warnings``. Only a source failure (missing
file, broken tokenization) gives ``ok=False``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, Field

from rosterctl.domain.errors import SourceError, TokenizationError

Operation = Literal["ingest", "stats"]


class ServiceError(BaseModel):
    """Why a source could not be read. ``code`` is a ``SourceError.code``."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_source_error(cls, exc: SourceError, location: str | Path) -> ServiceError:
        """Build the error payload, adding the failing line for tokenization errors."""
        detail: dict[str, Any] = {"source": str(location)}
        if isinstance(exc, TokenizationError):
            detail["line"] = exc.line
        return cls(code=exc.code, message=str(exc), detail=detail)


class ServiceResult(BaseModel):
    """Outcome of one ``ingest`` or ``stats`` run.

    Attributes:
        ok: False only when the source itself could not be read.
        op: The operation that produced the result.
        data: Operation payload on success.
        warnings: One ``"row N: message"`` line per rejected row.
        error: The source failure when ``ok`` is False.
        meta: Source location and separator used.
    """

    model_config = {"frozen": True}

    ok: bool
    op: Operation
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None
