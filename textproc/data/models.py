"""Data models for the data module."""

from dataclasses import dataclass

__all__ = ["Record"]


@dataclass(eq=False)
class Record:
    """
    One key–value pair held by a RecordStore.

    Fields
    ──────
    key   — unique within the owning store; never changed after creation
    value — free text, may be empty; replaced in place on update

    Equality and hashing use ``key`` only: two records with the same key are
    the same record whatever their values.  The store itself still tracks
    records through its key -> Record mapping.
    """
    key:   str
    value: str = ""

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Record):
            return NotImplemented
        return self.key == other.key

    def __hash__(self) -> int:
        return hash(self.key)

    def as_tuple(self) -> tuple[str, str]:
        """Return ``(key, value)`` — the shape shown in the two-column table."""
        return (self.key, self.value)

    def __str__(self) -> str:
        return f"Record(key={self.key!r}, value={self.value!r})"
