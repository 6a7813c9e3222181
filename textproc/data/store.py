"""
RecordStore — in-memory, unique-key collection of Records.

Usage::

    store = RecordStore()
    table.bind(store.view())          # live: later changes show up here

    store.add_or_update("x", "1")     # append ("x", "1")
    store.add_or_update("x", "2")     # same row, value replaced
    store.delete("x")                 # True; the view is empty again

Nothing is persisted and there is no locking: the store is meant to be owned
and mutated by a single (GUI) thread.
"""

import logging
from typing import Optional

from textproc.data.models import Record
from textproc.data.observable import ObservableList

__all__ = ["RecordStore"]

logger = logging.getLogger(__name__)


class RecordStore:
    """
    Key -> Record index plus an insertion-ordered ObservableList of the same
    records.  Both structures always hold exactly the same members.
    """

    def __init__(self) -> None:
        self._index: dict[str, Record]     = {}
        self._view:  ObservableList[Record] = ObservableList()

    # ── Internal helpers ──────────────────────────────────────────────────

    def _position(self, record: Record) -> int:
        for i, item in enumerate(self._view):
            if item is record:
                return i
        raise LookupError(f"{record} is indexed but missing from the view")

    # ── Public API ────────────────────────────────────────────────────────

    def add_or_update(self, key: Optional[str], value: Optional[str]) -> bool:
        """
        Insert a new record or replace the value of an existing one.

        An existing record keeps its position in the view.  A ``None`` value is
        stored as an empty string.

        Returns:
            False if *key* is None (nothing changes), True otherwise.
        """
        if key is None:
            return False
        value = "" if value is None else value

        existing = self._index.get(key)
        if existing is not None:
            existing.value = value
            self._view.item_changed(self._position(existing))
            logger.debug("Updated %s", existing)
        else:
            record = Record(key=key, value=value)
            self._index[key] = record
            self._view.append(record)
            logger.debug("Added %s", record)
        return True

    def delete(self, key: Optional[str]) -> bool:
        """
        Remove the record for *key*.

        Returns:
            True if a record was removed, False if no record had that key.
        """
        record = self._index.pop(key, None) if key is not None else None
        if record is None:
            return False
        self._view.pop(self._position(record))
        logger.debug("Deleted %s", record)
        return True

    def get(self, key: str) -> Optional[Record]:
        """Return the record for *key*, or None."""
        return self._index.get(key)

    def view(self) -> ObservableList[Record]:
        """Return the live, insertion-ordered sequence of records."""
        return self._view

    def __len__(self) -> int:
        return len(self._index)

    def __contains__(self, key: object) -> bool:
        return key in self._index
