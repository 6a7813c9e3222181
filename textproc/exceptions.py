"""
Project-wide custom exception hierarchy.
All modules raise subclasses of TextProcError — never bare Exception.
"""

from typing import Optional

__all__ = [
    "TextProcError",
    "PatternError",
    "InvalidPatternError",
    "InvalidReplacementError",
    "ConfigError",
]


class TextProcError(Exception):
    """Root exception for all textproc errors."""


# ── Pattern matching ──────────────────────────────────────────────────────────

class PatternError(TextProcError):
    """Base class for regex search/replace errors."""


class InvalidPatternError(PatternError):
    """
    Raised when a pattern fails to compile.

    Attributes
    ──────────
    pattern  — the offending pattern text
    msg      — the engine diagnostic (re.error.msg)
    position — index into *pattern* where compilation failed, or None
    """

    def __init__(self, pattern: str, msg: str, position: Optional[int] = None) -> None:
        self.pattern = pattern
        self.msg = msg
        self.position = position
        text = msg if position is None else f"{msg} at position {position}"
        super().__init__(text)


class InvalidReplacementError(PatternError):
    """Raised when a replacement template references a missing group or is malformed."""


# ── Configuration ─────────────────────────────────────────────────────────────

class ConfigError(TextProcError):
    """Raised when a configuration value cannot be parsed."""
