"""
gui — PyQt6 front-end for the Text Processing Tool.

Public API
──────────
MainWindow            — top-level application window
viewmodels            — pure-Python state behind each tab
pages                 — the individual tab widgets
"""

from textproc.gui.main_window import MainWindow
from textproc.gui import viewmodels

__all__ = ["MainWindow", "viewmodels"]
