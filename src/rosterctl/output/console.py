"""Rich Console factory and theme for rosterctl output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract.  In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

ROSTER_THEME = Theme(
    {
        "roster.ok": "bold green",
        "roster.error": "bold red",
        "roster.warning": "bold yellow",
        "roster.op": "bold cyan",
        "roster.key": "dim",
        "roster.id": "bold blue",
        "roster.name": "bold",
        "roster.division": "magenta",
        "roster.salary": "green",
        "roster.gender.male": "cyan",
        "roster.gender.female": "yellow",
    }
)

_GENDER_STYLES: dict[str, str] = {
    "MALE": "roster.gender.male",
    "FEMALE": "roster.gender.female",
}


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=ROSTER_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_gender(gender: str) -> str:
    """Return the Rich style name for a gender value."""
    return _GENDER_STYLES.get(gender, "")
