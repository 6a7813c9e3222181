"""
regex — find-all / replace-all facade over Python's ``re`` engine.

Public API
──────────
find_matches  — every non-overlapping match, left to right
replace_all   — subject with every match substituted
"""

from textproc.regex.matcher import find_matches, replace_all

__all__ = ["find_matches", "replace_all"]
