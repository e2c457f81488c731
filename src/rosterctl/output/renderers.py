"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Rejected rows are not listed here: the CLI reports them on stderr.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from rosterctl.output.console import create_console, get_output, style_for_gender

if TYPE_CHECKING:
    from rich.console import Console

    from rosterctl.services.result import ServiceResult

Renderer = Callable[..., None]


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS[result.op]
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    records = result.data.get("records")
    if isinstance(records, list):
        return "\n".join(str(r["id"]) for r in records if "id" in r)

    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    label = Text("OK", style="roster.ok")
    op = Text(f"  {result.op}", style="roster.op")
    console.print(label, op)


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="roster.key")
    console.print(k, Text(str(value)), sep="")


def _record_table(records: list[dict[str, Any]], *, verbose: bool = False) -> Table:
    """Build a Rich Table of employee records."""
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("ID", style="roster.id", no_wrap=True, justify="right")
    table.add_column("Name", style="roster.name")
    table.add_column("Gender")
    table.add_column("Birth Date", no_wrap=True)
    table.add_column("Division", style="roster.division")
    table.add_column("Salary", style="roster.salary", justify="right")
    if verbose:
        table.add_column("Div ID", style="dim", justify="right")

    # Cells are Text, not str, so names with brackets are not read as markup.
    for rec in records:
        gender = str(rec.get("gender", ""))
        row = [
            Text(str(rec.get("id", ""))),
            Text(str(rec.get("name", ""))),
            Text(gender, style=style_for_gender(gender)),
            Text(str(rec.get("birth_date", ""))),
            Text(str(rec.get("division", ""))),
            Text(f"{float(rec.get('salary', 0.0)):.2f}"),
        ]
        if verbose:
            row.append(Text(str(rec.get("division_id", ""))))
        table.add_row(*row)

    return table


def _render_meta(console: Console, result: ServiceResult) -> None:
    if not result.meta:
        return
    console.print(Text("  meta:", style="dim"))
    for k, v in result.meta.items():
        console.print(f"    {k}: {v}", markup=False)


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="roster.error")
    op = Text(f"  {result.op}", style="roster.op")
    console.print(label, op, Text(" — "), Text(msg), sep="")

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}", markup=False)


# ── Operation renderers ───────────────────────────────────────────────


def _render_ingest(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render ingest results: counts and the record table."""
    _status_line(console, result)
    d = result.data
    _field(console, "source", d.get("source", ""))
    _field(console, "records", d.get("count", 0))
    _field(console, "rejected", d.get("rejected_count", 0))
    _field(console, "divisions", len(d.get("divisions", [])))

    records = d.get("records", [])
    if records:
        console.print()
        console.print(_record_table(records, verbose=verbose))

    if verbose:
        _render_meta(console, result)


def _render_stats(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render stats results: summary block, then a preview table."""
    _status_line(console, result)
    d = result.data
    _field(console, "total", d.get("total", 0))
    _field(console, "male", f"{d.get('male', 0)} ({d.get('male_pct', 0.0):.1f}%)")
    _field(console, "female", f"{d.get('female', 0)} ({d.get('female_pct', 0.0):.1f}%)")
    _field(console, "avg salary", f"{d.get('avg_salary', 0.0):.2f}")
    _field(console, "max salary", f"{d.get('max_salary', 0.0):.2f}")
    _field(console, "min salary", f"{d.get('min_salary', 0.0):.2f}")
    _field(console, "divisions", d.get("division_count", 0))
    if d.get("rejected_count"):
        _field(console, "rejected", d["rejected_count"])

    preview = d.get("preview", [])
    if preview:
        console.print()
        console.print(Text(f"  first {len(preview)} records:", style="dim"))
        console.print(_record_table(preview, verbose=verbose))

    if verbose:
        _render_meta(console, result)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Renderer] = {
    "ingest": _render_ingest,
    "stats": _render_stats,
}
