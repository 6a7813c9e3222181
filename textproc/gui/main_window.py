"""
MainWindow — top-level application window for the Text Processing Tool.

Uses a QTabWidget to host two independent pages:
  0  RegexOperationsPage  — regex find / replace over free text
  1  DataManagerPage      — key–value records in a live table

The pages share nothing; the window only owns the RecordStore so that it can
be injected (e.g. pre-populated) by the caller.
"""

import logging
import sys
from typing import Optional

from PyQt6.QtWidgets import (
    QApplication,
    QMainWindow,
    QTabWidget,
    QWidget,
)

from textproc.config import AppConfig
from textproc.data.store import RecordStore
from textproc.gui.pages.data_manager import DataManagerPage
from textproc.gui.pages.regex_ops import RegexOperationsPage

__all__ = ["MainWindow", "run"]

logger = logging.getLogger(__name__)

# Tab indices — keep in sync with the order they are added
TAB_REGEX = 0
TAB_DATA  = 1


class MainWindow(QMainWindow):
    """Root window: hosts the QTabWidget with the regex and data pages."""

    def __init__(
        self,
        config: Optional[AppConfig] = None,
        store: Optional[RecordStore] = None,
        parent: QWidget = None,
    ) -> None:
        super().__init__(parent)
        self._config = config or AppConfig()
        self._store = store if store is not None else RecordStore()

        self.setWindowTitle(self._config.window_title)
        self.resize(self._config.window_width, self._config.window_height)
        self._build_ui()

    # ── UI construction ────────────────────────────────────────────────────

    def _build_ui(self) -> None:
        self._tabs = QTabWidget()
        self._tabs.setTabsClosable(False)
        self.setCentralWidget(self._tabs)

        self._page_regex = RegexOperationsPage()
        self._page_data  = DataManagerPage(store=self._store)

        self._tabs.addTab(self._page_regex, "Regex Operations")  # 0
        self._tabs.addTab(self._page_data,  "Data Management")   # 1

        self._tabs.setCurrentIndex(TAB_REGEX)

    # ── Public API ─────────────────────────────────────────────────────────

    @property
    def store(self) -> RecordStore:
        """The RecordStore shown on the Data Management tab."""
        return self._store

    def go_to(self, tab_index: int) -> None:
        """Switch the visible tab to *tab_index*."""
        self._tabs.setCurrentIndex(tab_index)


def run(config: AppConfig, argv: Optional[list[str]] = None) -> int:
    """Create the QApplication, show MainWindow and block in the event loop."""
    app = QApplication.instance() or QApplication(argv if argv is not None else sys.argv)
    window = MainWindow(config=config)
    window.show()
    logger.info("GUI started (%dx%d)", config.window_width, config.window_height)
    return app.exec()
