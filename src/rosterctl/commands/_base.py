"""Custom Click base class with --examples support.

When ``--examples`` is passed, the command prints usage examples and exits.
This keeps ``--help`` concise while making examples available on demand.
"""

from __future__ import annotations

from typing import Any

import click


def _add_examples_option(cmd: click.Command, examples: str) -> None:
    """Attach an eager ``--examples`` flag to a Click command."""

    def show_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(examples)
        ctx.exit(0)

    cmd.params.append(
        click.Option(
            ["--examples"],
            is_flag=True,
            expose_value=False,
            is_eager=True,
            callback=show_examples,
            help="Show usage examples.",
        )
    )


class RosterCommand(click.Command):
    """Click Command subclass that supports an ``--examples`` flag."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            _add_examples_option(self, examples)


def separator_option(func: Any) -> Any:
    """Shared ``--separator/-s`` option; None means use the configured value."""
    return click.option(
        "-s",
        "--separator",
        default=None,
        help="Field separator (single character). Default from config: ';'.",
    )(func)


def strict_columns_option(func: Any) -> Any:
    """Shared ``--strict-columns`` flag; off means use the configured value."""
    return click.option(
        "--strict-columns",
        is_flag=True,
        help="Require exactly 6 fields per row (default: at least 6).",
    )(func)
