"""Log routing for rosterctl.

Modules log through ``logging.getLogger(__name__)``. :func:`configure_logging`
renders those records with structlog on stderr, as console lines or, with
``--log-json``, as JSON lines.

Row events carry structured fields: ``row`` and ``code`` arrive through
``extra=``, and ``source`` is bound by :func:`source_context` while a roster
is read. Rejected rows are logged at INFO, so they only appear with
``--verbose``; the CLI reports them on stderr as warnings either way.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

import structlog

ROOT_LOGGER = "rosterctl"
ROW_FIELDS = ("row", "code")


@contextmanager
def source_context(location: str | Path) -> Iterator[None]:
    """Tag every log event emitted inside the block with ``source``."""
    with structlog.contextvars.bound_contextvars(source=str(location)):
        yield


def _pre_chain() -> list[structlog.types.Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.ExtraAdder(allow=ROW_FIELDS),
        structlog.processors.TimeStamper(fmt="iso"),
    ]


def _renderer(log_json: bool) -> structlog.types.Processor:
    if log_json:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
) -> None:
    """Install a single structlog-rendering handler on the root logger.

    Args:
        verbose: Lower the ``rosterctl`` logger to DEBUG, which shows row
            rejections (INFO) and ingestion progress (DEBUG). Otherwise
            only WARNING and above.
        log_json: Use the JSON renderer instead of the console renderer.
    """
    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=_pre_chain(),
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            _renderer(log_json),
        ],
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(logging.WARNING)

    logging.getLogger(ROOT_LOGGER).setLevel(logging.DEBUG if verbose else logging.WARNING)
