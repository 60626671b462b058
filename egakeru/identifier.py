"""Allocation of small unique ids to owning objects."""

from __future__ import annotations

from typing import Any

from egakeru.mathutils import INVALID_ID_32


class IdentifierRegistry:
    """Hands out the lowest free id to each owner and recycles released ids."""

    def __init__(self) -> None:
        self._owners: list[Any] = []

    def acquire(self, owner: Any) -> int:
        """Return a free id and record ``owner`` as holding it."""
        if owner is None:
            raise ValueError("an id owner must not be None")
        for unique_id, current in enumerate(self._owners):
            if current is None:
                self._owners[unique_id] = owner
                return unique_id
        self._owners.append(owner)
        return len(self._owners) - 1

    def release(self, unique_id: int) -> None:
        """Free ``unique_id``; the invalid id is ignored."""
        if unique_id == INVALID_ID_32:
            return
        if not self._owners:
            raise KeyError("cannot release an identifier: none have been acquired")
        if not 0 <= unique_id < len(self._owners):
            raise KeyError(f"identifier {unique_id} exceeds the registered amount")
        self._owners[unique_id] = None

    def owner_of(self, unique_id: int) -> Any:
        """Return the owner holding ``unique_id``, or None if it is free."""
        if 0 <= unique_id < len(self._owners):
            return self._owners[unique_id]
        return None