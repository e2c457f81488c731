"""Birth date parsing for the fixed ``dd.mm.yyyy`` format.

Only exact two-digit day, two-digit month, four-digit year is accepted.
Impossible calendar dates (``31.02.2000``) fail the same way as malformed
text.
"""

from __future__ import annotations

import re
from datetime import date

from rosterctl.domain.errors import FormatError

DATE_FORMAT = "dd.mm.yyyy"

_DATE_RE = re.compile(r"^([0-9]{2})\.([0-9]{2})\.([0-9]{4})$")


def parse_date(text: str) -> date:
    """Parse *text* as ``dd.mm.yyyy``.

    Surrounding whitespace is ignored.

    Raises:
        FormatError: If *text* is blank, does not match the pattern,
            or names a day that does not exist.
    """
    value = text.strip()
    if not value:
        raise FormatError("Birth date must not be empty")

    match = _DATE_RE.match(value)
    if match is None:
        raise FormatError(f"Invalid date {value!r}, expected {DATE_FORMAT}")

    day, month, year = (int(part) for part in match.groups())
    try:
        return date(year, month, day)
    except ValueError as exc:
        raise FormatError(f"Invalid date {value!r}: {exc}") from exc


def is_not_future(value: date, today: date | None = None) -> bool:
    """True when *value* is on or before *today* (default: the current date)."""
    if today is None:
        today = date.today()
    return value <= today
