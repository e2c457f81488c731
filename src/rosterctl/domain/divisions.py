"""Division identity cache.

A :class:`DivisionRegistry` maps trimmed division names to a single shared
:class:`Division` instance, assigning sequential ids (starting at 1) in
first-seen order.

INVARIANT: Within one registry, all records naming the same division hold
the *same* Division object, and an id is never handed out twice.

The registry is plain, unsynchronized state. One ingestion at a time per
registry; callers sharing one across threads must add their own lock.
"""

from __future__ import annotations

import itertools
import logging

from pydantic import BaseModel, Field

from rosterctl.domain.errors import InvalidNameError

logger = logging.getLogger(__name__)


class Division(BaseModel):
    """A named organizational unit. Equality is by ``(id, name)``."""

    model_config = {"frozen": True}

    id: int = Field(gt=0)
    name: str = Field(min_length=1)


class DivisionRegistry:
    """Get-or-create cache of divisions keyed by trimmed name.

    Usage::

        registry = DivisionRegistry()
        it = registry.get_or_create(" IT ")
        assert registry.get_or_create("IT") is it
    """

    def __init__(self) -> None:
        self._by_name: dict[str, Division] = {}
        self._ids = itertools.count(1)

    def get_or_create(self, name: str) -> Division:
        """Return the cached division for *name*, creating it on first sight.

        Raises:
            InvalidNameError: If the trimmed name is empty.
        """
        key = name.strip()
        if not key:
            raise InvalidNameError("Division name must not be empty")

        division = self._by_name.get(key)
        if division is None:
            division = Division(id=next(self._ids), name=key)
            self._by_name[key] = division
            logger.debug("Registered division %r as id %d", key, division.id)
        return division

    def get(self, name: str) -> Division | None:
        """Look up a division without creating it."""
        return self._by_name.get(name.strip())

    def divisions(self) -> list[Division]:
        """All cached divisions in id order."""
        return sorted(self._by_name.values(), key=lambda d: d.id)

    def clear(self) -> None:
        """Forget every cached division.

        The id sequence keeps counting: a name seen again after ``clear()``
        gets a new, higher id. Build a fresh registry to restart at 1.
        """
        self._by_name.clear()

    def __len__(self) -> int:
        return len(self._by_name)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.strip() in self._by_name
