"""
GUI ViewModels — pure-Python state containers behind the two tabs.

No Qt imports here; every class is testable without a display.
Qt widgets copy their input fields into these objects, call an action, then
render the resulting state.

Public API
──────────
RegexViewModel         — pattern / subject / replacement + matches and result
RecordTableViewModel   — key / value inputs bound to a RecordStore
"""

import logging
from typing import Optional

from textproc.data.store import RecordStore
from textproc.exceptions import PatternError
from textproc.regex.matcher import find_matches, replace_all

__all__ = [
    "NO_MATCHES",
    "RegexViewModel",
    "RecordTableViewModel",
]

logger = logging.getLogger(__name__)

# Placeholder shown in the matches list when a valid pattern matched nothing
NO_MATCHES = "No matches found"


def _error_text(exc: PatternError) -> str:
    return f"Invalid pattern: {exc}"


# ── RegexViewModel ─────────────────────────────────────────────────────────────

class RegexViewModel:
    """
    State of the Regex Operations tab.

    Attributes
    ──────────
    subject        — text to search
    pattern        — regex in ``re`` syntax
    replacement    — replacement template (may be empty)
    matches        — lines shown in the matches list
    replaced_text  — contents of the read-only result area
    """

    def __init__(self) -> None:
        self.subject:       str       = ""
        self.pattern:       str       = ""
        self.replacement:   str       = ""
        self.matches:       list[str] = []
        self.replaced_text: str       = ""

    def find(self) -> None:
        """Fill ``matches``; an empty pattern just clears the list."""
        self.matches = []
        if not self.pattern:
            return
        try:
            self.matches = find_matches(self.pattern, self.subject)
        except PatternError as exc:
            logger.info("Find rejected: %s", exc)
            self.matches = [_error_text(exc)]
            return
        if not self.matches:
            self.matches = [NO_MATCHES]

    def replace(self) -> None:
        """Set ``replaced_text``; does nothing when the pattern is empty."""
        if not self.pattern:
            return
        try:
            self.replaced_text = replace_all(self.pattern, self.replacement, self.subject)
        except PatternError as exc:
            logger.info("Replace rejected: %s", exc)
            self.replaced_text = _error_text(exc)


# ── RecordTableViewModel ───────────────────────────────────────────────────────

class RecordTableViewModel:
    """
    State of the Data Management tab.

    Attributes
    ──────────
    store       — the RecordStore being edited (created if not given)
    key_text    — contents of the Key input
    value_text  — contents of the Value input
    rows        — derived: ``(key, value)`` pairs in display order
    """

    def __init__(self, store: Optional[RecordStore] = None) -> None:
        self.store:      RecordStore = store if store is not None else RecordStore()
        self.key_text:   str         = ""
        self.value_text: str         = ""

    @property
    def rows(self) -> list[tuple[str, str]]:
        """Return the store's records as ``(key, value)`` tuples."""
        return [r.as_tuple() for r in self.store.view()]

    def _clear_inputs(self) -> None:
        self.key_text = ""
        self.value_text = ""

    def add_or_update(self) -> bool:
        """
        Add or update the record for ``key_text``.

        Empty keys are ignored.  On success both inputs are cleared.
        """
        if not self.key_text:
            return False
        if self.store.add_or_update(self.key_text, self.value_text):
            self._clear_inputs()
            return True
        return False

    def delete(self) -> bool:
        """Delete the record for ``key_text``; clears the inputs on success."""
        if not self.key_text:
            return False
        if self.store.delete(self.key_text):
            self._clear_inputs()
            return True
        return False
