"""Classification enums for employee records."""

from __future__ import annotations

from enum import StrEnum


class Gender(StrEnum):
    """Two-valued gender of an employee record."""

    MALE = "MALE"
    FEMALE = "FEMALE"
