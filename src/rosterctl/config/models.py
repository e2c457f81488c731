"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, rosterctl.toml only contains
overrides. An empty (or absent) config file is valid.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator


class IngestConfig(BaseModel):
    """[ingest] section."""

    model_config = {"frozen": True}

    separator: str = ";"
    encoding: str = "utf-8"
    strict_columns: bool = False

    @field_validator("separator")
    @classmethod
    def _single_character(cls, value: str) -> str:
        if len(value) != 1:
            msg = f"separator must be a single character, got {value!r}"
            raise ValueError(msg)
        return value


class ReportConfig(BaseModel):
    """[report] section."""

    model_config = {"frozen": True}

    preview_limit: int = Field(default=10, ge=0)
