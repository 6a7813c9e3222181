"""
DataManagerPage — second tab of the main window.

Shows every record of a RecordStore in a two-column table and lets the user
add, update or delete records by key.  The table listens to the store's view,
so it follows changes made from anywhere, not only from this page.

Layout
──────
  ┌─────────────────────────────────────────┐
  │ ┌──────────────────────────────────────┐│
  │ │ Key          │ Value                 ││
  │ │ host         │ localhost             ││
  │ │ …            │ …                     ││
  │ └──────────────────────────────────────┘│
  │ [Key___] [Value_____] [Add/Update] [Delete]
  └─────────────────────────────────────────┘
"""

import logging
from typing import Optional

from PyQt6.QtWidgets import (
    QHBoxLayout,
    QHeaderView,
    QLineEdit,
    QPushButton,
    QTableWidget,
    QTableWidgetItem,
    QVBoxLayout,
    QWidget,
)

from textproc.data.observable import ListChange
from textproc.data.store import RecordStore
from textproc.gui.viewmodels import RecordTableViewModel

__all__ = ["DataManagerPage"]

logger = logging.getLogger(__name__)

# Column indices
_COL_KEY   = 0
_COL_VALUE = 1
_HEADERS = ["Key", "Value"]


class DataManagerPage(QWidget):
    """Key–value table with Add/Update and Delete controls."""

    def __init__(self, store: Optional[RecordStore] = None, parent: QWidget = None) -> None:
        super().__init__(parent)
        self._vm = RecordTableViewModel(store)
        self._build_ui()
        unsubscribe = self._vm.store.view().subscribe(self._on_store_changed)
        # the store may outlive this widget
        self.destroyed.connect(lambda *_: unsubscribe())
        self._refresh_table()

    # ── UI construction ────────────────────────────────────────────────────

    def _build_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(10, 10, 10, 10)
        layout.setSpacing(10)

        # Record table
        self._table = QTableWidget(0, len(_HEADERS))
        self._table.setHorizontalHeaderLabels(_HEADERS)
        self._table.setEditTriggers(QTableWidget.EditTrigger.NoEditTriggers)
        self._table.setSelectionBehavior(QTableWidget.SelectionBehavior.SelectRows)
        self._table.horizontalHeader().setSectionResizeMode(QHeaderView.ResizeMode.Stretch)
        self._table.itemSelectionChanged.connect(self._on_selection_changed)
        layout.addWidget(self._table)

        # Inputs and buttons
        input_row = QHBoxLayout()
        self._key_edit = QLineEdit()
        self._key_edit.setPlaceholderText("Key")
        self._value_edit = QLineEdit()
        self._value_edit.setPlaceholderText("Value")
        self._add_btn    = QPushButton("Add/Update")
        self._delete_btn = QPushButton("Delete")
        self._add_btn.clicked.connect(self._on_add_or_update)
        self._delete_btn.clicked.connect(self._on_delete)
        input_row.addWidget(self._key_edit)
        input_row.addWidget(self._value_edit)
        input_row.addWidget(self._add_btn)
        input_row.addWidget(self._delete_btn)
        layout.addLayout(input_row)

    # ── Slots ──────────────────────────────────────────────────────────────

    def _sync_inputs(self) -> None:
        self._vm.key_text   = self._key_edit.text()
        self._vm.value_text = self._value_edit.text()

    def _show_inputs(self) -> None:
        self._key_edit.setText(self._vm.key_text)
        self._value_edit.setText(self._vm.value_text)

    def _on_add_or_update(self) -> None:
        self._sync_inputs()
        if self._vm.add_or_update():
            self._show_inputs()

    def _on_delete(self) -> None:
        self._sync_inputs()
        if self._vm.delete():
            self._show_inputs()

    def _on_selection_changed(self) -> None:
        # Clicking a row copies it into the inputs for quick editing
        row = self._table.currentRow()
        rows = self._vm.rows
        if 0 <= row < len(rows):
            key, value = rows[row]
            self._key_edit.setText(key)
            self._value_edit.setText(value)

    def _on_store_changed(self, change: ListChange) -> None:
        logger.debug("Store %s at row %d", change.kind.value, change.index)
        self._refresh_table()

    # ── Internal helpers ───────────────────────────────────────────────────

    def _refresh_table(self) -> None:
        rows = self._vm.rows
        self._table.blockSignals(True)
        self._table.setRowCount(len(rows))
        for row, (key, value) in enumerate(rows):
            self._table.setItem(row, _COL_KEY,   QTableWidgetItem(key))
            self._table.setItem(row, _COL_VALUE, QTableWidgetItem(value))
        self._table.blockSignals(False)
