"""
Unit tests for textproc/gui/ Qt widgets — requires PyQt6 + offscreen display.

Run with: QT_QPA_PLATFORM=offscreen pytest tests/unit/test_gui_widgets.py

Coverage plan
─────────────
MainWindow            → 4 tests
RegexOperationsPage   → 4 tests
DataManagerPage       → 5 tests
"""

import os

import pytest

# Ensure offscreen rendering when no display is available
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

PyQt6 = pytest.importorskip("PyQt6", reason="PyQt6 not installed")


# ─────────────────────────────────────────────────────────────────────────────
# 1. MainWindow
# ─────────────────────────────────────────────────────────────────────────────

class TestMainWindow:

    def test_title_and_size_come_from_config(self, qtbot):
        from textproc.config import AppConfig
        from textproc.gui.main_window import MainWindow
        win = MainWindow(config=AppConfig(window_width=640, window_height=480))
        qtbot.addWidget(win)
        assert win.windowTitle() == "Text Processing Tool"
        assert win.width() == 640
        assert win.height() == 480

    def test_has_two_tabs(self, qtbot):
        from textproc.gui.main_window import MainWindow
        from PyQt6.QtWidgets import QTabWidget
        win = MainWindow()
        qtbot.addWidget(win)
        tabs = win.findChildren(QTabWidget)
        assert len(tabs) == 1
        labels = [tabs[0].tabText(i) for i in range(tabs[0].count())]
        assert labels == ["Regex Operations", "Data Management"]

    def test_go_to_switches_tab(self, qtbot):
        from textproc.gui.main_window import MainWindow, TAB_DATA
        win = MainWindow()
        qtbot.addWidget(win)
        win.go_to(TAB_DATA)
        assert win._tabs.currentIndex() == TAB_DATA

    def test_injected_store_is_shown(self, qtbot):
        from textproc.data import RecordStore
        from textproc.gui.main_window import MainWindow
        store = RecordStore()
        store.add_or_update("seed", "1")
        win = MainWindow(store=store)
        qtbot.addWidget(win)
        assert win.store is store
        assert win._page_data._table.rowCount() == 1


# ─────────────────────────────────────────────────────────────────────────────
# 2. RegexOperationsPage
# ─────────────────────────────────────────────────────────────────────────────

class TestRegexOperationsPage:

    def _page(self, qtbot, text, pattern, replacement=""):
        from textproc.gui.pages.regex_ops import RegexOperationsPage
        page = RegexOperationsPage()
        qtbot.addWidget(page)
        page._text_edit.setPlainText(text)
        page._pattern_edit.setText(pattern)
        page._replacement_edit.setText(replacement)
        return page

    def _items(self, page):
        return [page._match_list.item(i).text() for i in range(page._match_list.count())]

    def test_find_button_fills_match_list(self, qtbot):
        page = self._page(qtbot, "a12b345", r"\d+")
        page._find_btn.click()
        assert self._items(page) == ["12", "345"]

    def test_find_without_matches_shows_placeholder(self, qtbot):
        page = self._page(qtbot, "abc", r"\d+")
        page._find_btn.click()
        assert self._items(page) == ["No matches found"]

    def test_replace_button_fills_read_only_area(self, qtbot):
        page = self._page(qtbot, "a12b345", r"\d+", "#")
        page._replace_btn.click()
        assert page._replaced_view.isReadOnly()
        assert page._replaced_view.toPlainText() == "a#b#"

    def test_invalid_pattern_is_reported_not_raised(self, qtbot):
        page = self._page(qtbot, "anything", "(")
        page._find_btn.click()
        page._replace_btn.click()
        assert self._items(page)[0].startswith("Invalid pattern:")
        assert page._replaced_view.toPlainText().startswith("Invalid pattern:")


# ─────────────────────────────────────────────────────────────────────────────
# 3. DataManagerPage
# ─────────────────────────────────────────────────────────────────────────────

class TestDataManagerPage:

    def _page(self, qtbot, store=None):
        from textproc.gui.pages.data_manager import DataManagerPage
        page = DataManagerPage(store=store)
        qtbot.addWidget(page)
        return page

    def _table_rows(self, page):
        t = page._table
        return [(t.item(r, 0).text(), t.item(r, 1).text()) for r in range(t.rowCount())]

    def test_has_key_and_value_columns(self, qtbot):
        page = self._page(qtbot)
        headers = [page._table.horizontalHeaderItem(i).text() for i in range(2)]
        assert headers == ["Key", "Value"]

    def test_add_button_inserts_row_and_clears_inputs(self, qtbot):
        page = self._page(qtbot)
        page._key_edit.setText("x")
        page._value_edit.setText("1")
        page._add_btn.click()
        assert self._table_rows(page) == [("x", "1")]
        assert page._key_edit.text() == ""
        assert page._value_edit.text() == ""

    def test_empty_key_leaves_inputs_alone(self, qtbot):
        page = self._page(qtbot)
        page._value_edit.setText("orphan")
        page._add_btn.click()
        assert page._table.rowCount() == 0
        assert page._value_edit.text() == "orphan"

    def test_delete_button_removes_row(self, qtbot):
        page = self._page(qtbot)
        page._key_edit.setText("x")
        page._add_btn.click()
        page._key_edit.setText("x")
        page._delete_btn.click()
        assert page._table.rowCount() == 0

    def test_table_follows_external_store_changes(self, qtbot):
        from textproc.data import RecordStore
        store = RecordStore()
        page = self._page(qtbot, store)
        store.add_or_update("a", "1")
        store.add_or_update("b", "2")
        store.add_or_update("a", "10")
        assert self._table_rows(page) == [("a", "10"), ("b", "2")]
        store.delete("a")
        assert self._table_rows(page) == [("b", "2")]
