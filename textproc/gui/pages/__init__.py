"""gui.pages — one QWidget per main-window tab."""

from textproc.gui.pages.regex_ops import RegexOperationsPage
from textproc.gui.pages.data_manager import DataManagerPage

__all__ = ["RegexOperationsPage", "DataManagerPage"]
