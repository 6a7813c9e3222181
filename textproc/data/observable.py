"""
ObservableList — an ordered, read-mostly sequence that reports its changes.

A RecordStore owns one ObservableList and hands the same object to anyone who
calls ``view()``.  Readers index and iterate it like a list; widgets that need
to refresh call ``subscribe()`` and get a ListChange after every mutation.

Only the owning store calls the mutating methods (append / pop / item_changed).
Subscribers are called synchronously, in subscription order, after the
mutation has been applied.  A listener that raises is logged and skipped;
the mutation stands and the remaining listeners are still notified.
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Generic, Iterator, TypeVar, overload

__all__ = ["ChangeKind", "ListChange", "ObservableList"]

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ChangeKind(str, Enum):
    ADDED   = "added"
    UPDATED = "updated"
    REMOVED = "removed"


@dataclass(frozen=True)
class ListChange:
    """Describes one mutation: what happened, at which index, to which item."""
    kind:  ChangeKind
    index: int
    item:  Any


Listener = Callable[[ListChange], None]


class ObservableList(Sequence, Generic[T]):
    """Sequence with change notification."""

    def __init__(self) -> None:
        self._items:     list[T]        = []
        self._listeners: list[Listener] = []

    # ── Sequence protocol ─────────────────────────────────────────────────

    @overload
    def __getitem__(self, index: int) -> T: ...

    @overload
    def __getitem__(self, index: slice) -> list[T]: ...

    def __getitem__(self, index):
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"ObservableList({self._items!r})"

    # ── Subscription ──────────────────────────────────────────────────────

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """
        Register *listener* for future changes.

        Returns:
            A zero-argument callable that removes the listener again.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _emit(self, change: ListChange) -> None:
        logger.debug("ObservableList %s at %d", change.kind.value, change.index)
        # copy: a listener may unsubscribe itself while being notified
        for listener in list(self._listeners):
            try:
                listener(change)
            except Exception:  # noqa: BLE001
                logger.exception("Listener %r failed on %s", listener, change.kind.value)

    # ── Mutation (owner only) ─────────────────────────────────────────────

    def append(self, item: T) -> None:
        """Add *item* at the end and emit ADDED."""
        self._items.append(item)
        self._emit(ListChange(ChangeKind.ADDED, len(self._items) - 1, item))

    def pop(self, index: int) -> T:
        """Remove and return the item at *index*; emit REMOVED."""
        item = self._items.pop(index)
        self._emit(ListChange(ChangeKind.REMOVED, index, item))
        return item

    def item_changed(self, index: int) -> None:
        """Emit UPDATED for the item at *index* after it was mutated in place."""
        self._emit(ListChange(ChangeKind.UPDATED, index, self._items[index]))
