"""
textproc — desktop tool for regex search/replace and key–value record editing.

Sub-packages
────────────
regex  — find_matches / replace_all over Python's ``re``
data   — RecordStore with a live, observable view
gui    — PyQt6 front-end (two tabs)
cli    — command-line entry point
"""

__version__ = "0.1.0"
