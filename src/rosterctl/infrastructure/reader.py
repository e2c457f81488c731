"""Row source: file resolution and delimited-text tokenization.

A location is resolved against the filesystem first, then against the data
files bundled in :mod:`rosterctl.data`. :func:`open_rows` owns the open
handle and yields the rows lazily; reader failures surface as
:class:`~rosterctl.domain.errors.TokenizationError` while iterating.
"""

from __future__ import annotations

import csv
import logging
from collections.abc import Generator, Iterator
from contextlib import contextmanager
from importlib import resources
from importlib.resources.abc import Traversable
from pathlib import Path
from typing import TextIO

from rosterctl.domain.errors import SourceNotFoundError, TokenizationError

logger = logging.getLogger(__name__)

DEFAULT_SEPARATOR = ";"
DEFAULT_ENCODING = "utf-8"
BUNDLED_PACKAGE = "rosterctl.data"


def resolve_source(location: str | Path) -> Path | Traversable:
    """Find *location* on disk, else among the bundled data files.

    Raises:
        SourceNotFoundError: If neither lookup finds a regular file.
    """
    path = Path(location)
    if path.is_file():
        return path

    bundled = resources.files(BUNDLED_PACKAGE).joinpath(path.name)
    if path.name and bundled.is_file():
        logger.debug("Resolved %s to bundled resource %s", location, path.name)
        return bundled

    raise SourceNotFoundError(str(location))


@contextmanager
def open_rows(
    source: Path | Traversable,
    *,
    separator: str = DEFAULT_SEPARATOR,
    encoding: str = DEFAULT_ENCODING,
) -> Generator[Iterator[list[str]]]:
    """Open *source* and yield an iterator over its tokenized rows.

    The handle is closed when the ``with`` block exits, so the iterator
    must be consumed inside it.
    """
    if len(separator) != 1:
        msg = f"Separator must be a single character, got {separator!r}"
        raise ValueError(msg)

    try:
        handle = source.open("r", encoding=encoding, newline="")
    except OSError as exc:
        raise SourceNotFoundError(str(source)) from exc

    with handle:
        yield _tokenize(handle, separator, name=getattr(source, "name", str(source)))


def _tokenize(handle: TextIO, separator: str, *, name: str) -> Iterator[list[str]]:
    reader = csv.reader(handle, delimiter=separator, strict=True)
    try:
        yield from reader
    except csv.Error as exc:
        raise TokenizationError(name, reader.line_num, str(exc)) from exc
    except UnicodeDecodeError as exc:
        raise TokenizationError(name, reader.line_num + 1, str(exc)) from exc
