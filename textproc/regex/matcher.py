"""
Pattern matching helpers used by the Regex Operations tab and the CLI.

Both functions are pure: the pattern is compiled on every call and nothing is
cached between calls.  Semantics are those of Python's ``re`` module:

  • matches are found left to right and never overlap
  • empty matches are reported, including one directly after a non-empty match
    (``find_matches("x*", "abxd") == ["", "", "x", "", ""]``)
  • backreferences in the replacement use ``\\1`` / ``\\g<1>`` / ``\\g<name>``
  • the replaced output is never re-scanned

Usage::

    find_matches(r"\\d+", "a12b345")          # ["12", "345"]
    replace_all(r"\\d+", "#", "a12b345")      # "a#b#"
"""

import logging
import re

from textproc.exceptions import InvalidPatternError, InvalidReplacementError

__all__ = ["find_matches", "replace_all"]

logger = logging.getLogger(__name__)


def _compile(pattern: str) -> re.Pattern:
    """Compile *pattern*, translating ``re.error`` into InvalidPatternError."""
    try:
        return re.compile(pattern)
    except re.error as exc:
        logger.debug("Pattern %r failed to compile: %s", pattern, exc)
        raise InvalidPatternError(pattern, exc.msg, exc.pos) from exc


def find_matches(pattern: str, subject: str) -> list[str]:
    """
    Return every non-overlapping match of *pattern* in *subject*.

    Each element is the whole matched substring (group 0), in the order found.
    An empty list means the pattern is valid but matched nothing.

    Raises:
        InvalidPatternError: *pattern* does not compile.
    """
    compiled = _compile(pattern)
    return [m.group(0) for m in compiled.finditer(subject)]


def replace_all(pattern: str, replacement: str, subject: str) -> str:
    """
    Replace every non-overlapping match of *pattern* in *subject*.

    *replacement* may be empty (matches are deleted) and may contain group
    references in ``re`` syntax.  *subject* is returned unchanged when nothing
    matches.

    Raises:
        InvalidPatternError:     *pattern* does not compile.
        InvalidReplacementError: *replacement* refers to a missing group or
                                 contains a bad escape.
    """
    compiled = _compile(pattern)
    try:
        return compiled.sub(replacement, subject)
    except (re.error, IndexError) as exc:
        # unknown named groups surface as IndexError, bad escapes as re.error
        logger.debug("Replacement %r rejected: %s", replacement, exc)
        raise InvalidReplacementError(str(exc)) from exc
