"""
RegexOperationsPage — first tab of the main window.

The user types a subject text, a pattern and an optional replacement, then
either lists every match or produces the replaced text.

Layout
──────
  ┌─────────────────────────────────────────┐
  │ Enter Text:                             │
  │ ┌─────────────────────────────────────┐ │
  │ │ a12b345                             │ │
  │ └─────────────────────────────────────┘ │
  │ Enter Regex Pattern:   [\d+__________]  │
  │ Replacement (optional):[#_____________] │
  │ [Find Matches] [Replace]                │
  │ Matches:                                │
  │ ┌─────────────────────────────────────┐ │
  │ │ 12                                  │ │
  │ │ 345                                 │ │
  │ └─────────────────────────────────────┘ │
  │ Replaced Text:                          │
  │ ┌─────────────────────────────────────┐ │
  │ │ a#b#                                │ │
  │ └─────────────────────────────────────┘ │
  └─────────────────────────────────────────┘
"""

import logging

from PyQt6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QListWidget,
    QPlainTextEdit,
    QPushButton,
    QScrollArea,
    QVBoxLayout,
    QWidget,
)

from textproc.gui.viewmodels import RegexViewModel

__all__ = ["RegexOperationsPage"]

logger = logging.getLogger(__name__)


class RegexOperationsPage(QWidget):
    """Regex search / replace tab."""

    def __init__(self, parent: QWidget = None) -> None:
        super().__init__(parent)
        self._vm = RegexViewModel()
        self._build_ui()

    # ── UI construction ────────────────────────────────────────────────────

    def _build_ui(self) -> None:
        # Content sits in a scroll area so it stays reachable in small windows
        outer = QVBoxLayout(self)
        outer.setContentsMargins(0, 0, 0, 0)
        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        outer.addWidget(scroll)

        content = QWidget()
        layout = QVBoxLayout(content)
        layout.setContentsMargins(10, 10, 10, 10)
        layout.setSpacing(10)
        scroll.setWidget(content)

        # Subject text
        layout.addWidget(QLabel("Enter Text:"))
        self._text_edit = QPlainTextEdit()
        layout.addWidget(self._text_edit)

        # Pattern and replacement
        layout.addWidget(QLabel("Enter Regex Pattern:"))
        self._pattern_edit = QLineEdit()
        self._pattern_edit.setPlaceholderText("e.g., \\d+ for digits")
        layout.addWidget(self._pattern_edit)

        layout.addWidget(QLabel("Replacement (optional):"))
        self._replacement_edit = QLineEdit()
        self._replacement_edit.setPlaceholderText("Replacement text")
        layout.addWidget(self._replacement_edit)

        # Buttons
        btn_row = QHBoxLayout()
        self._find_btn    = QPushButton("Find Matches")
        self._replace_btn = QPushButton("Replace")
        self._find_btn.clicked.connect(self._on_find)
        self._replace_btn.clicked.connect(self._on_replace)
        btn_row.addWidget(self._find_btn)
        btn_row.addWidget(self._replace_btn)
        btn_row.addStretch()
        layout.addLayout(btn_row)

        # Results
        layout.addWidget(QLabel("Matches:"))
        self._match_list = QListWidget()
        layout.addWidget(self._match_list)

        layout.addWidget(QLabel("Replaced Text:"))
        self._replaced_view = QPlainTextEdit()
        self._replaced_view.setReadOnly(True)
        layout.addWidget(self._replaced_view)

    # ── Slots ──────────────────────────────────────────────────────────────

    def _sync_inputs(self) -> None:
        self._vm.subject     = self._text_edit.toPlainText()
        self._vm.pattern     = self._pattern_edit.text()
        self._vm.replacement = self._replacement_edit.text()

    def _on_find(self) -> None:
        self._sync_inputs()
        self._vm.find()
        self._match_list.clear()
        self._match_list.addItems(self._vm.matches)

    def _on_replace(self) -> None:
        self._sync_inputs()
        self._vm.replace()
        self._replaced_view.setPlainText(self._vm.replaced_text)
