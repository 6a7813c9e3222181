"""
data — in-memory key–value records with a live, observable view.

Public API
──────────
Record          — dataclass holding one key/value pair
RecordStore     — add_or_update / delete / view
ObservableList  — sequence returned by RecordStore.view()
ListChange      — notification payload (kind, index, item)
ChangeKind      — ADDED | UPDATED | REMOVED
"""

from textproc.data.models import Record
from textproc.data.observable import ChangeKind, ListChange, ObservableList
from textproc.data.store import RecordStore

__all__ = ["Record", "RecordStore", "ObservableList", "ListChange", "ChangeKind"]
