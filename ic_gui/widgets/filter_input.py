"""Per-column filter controls."""

from __future__ import annotations

from datetime import date
from typing import Any, Callable

from PySide6.QtCore import QDate
from PySide6.QtGui import QDoubleValidator
from PySide6.QtWidgets import (
    QCalendarWidget,
    QComboBox,
    QHBoxLayout,
    QLineEdit,
    QMenu,
    QToolButton,
    QWidget,
    QWidgetAction,
)

from ic_table.filter_input import ColumnFilterInput
from ic_table.models import DateRange, SearchType
from ic_table.parsing import parse_number

ALL_OPTION_TEXT = "All"


def _to_date(value: QDate) -> date:
    return date(value.year(), value.month(), value.day())


class FilterInputWidget(QWidget):
    """Render a ColumnFilterInput as the control matching its search type."""

    def __init__(self, filter_input: ColumnFilterInput, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._input = filter_input
        self._range_start: date | None = None
        self._line_edit: QLineEdit | None = None
        self._combo: QComboBox | None = None
        self._button: QToolButton | None = None
        self._calendar: QCalendarWidget | None = None

        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        builders: dict[SearchType, Callable[[], QWidget]] = {
            SearchType.TEXT: self._build_line_edit,
            SearchType.EMAIL: self._build_line_edit,
            SearchType.NUMBER: self._build_number_edit,
            SearchType.DATE: self._build_calendar_button,
            SearchType.DATE_RANGE: self._build_calendar_button,
            SearchType.SELECT: self._build_combo,
        }
        layout.addWidget(builders[filter_input.search_type]())
        self.sync(filter_input.value)

    @property
    def column_id(self) -> str:
        return self._input.column_id

    @property
    def filter_input(self) -> ColumnFilterInput:
        return self._input

    # Builders

    def _build_line_edit(self) -> QWidget:
        self._line_edit = QLineEdit()
        self._line_edit.setPlaceholderText(self._input.placeholder)
        self._line_edit.setClearButtonEnabled(True)
        self._line_edit.textChanged.connect(self._input.handle_input)
        return self._line_edit

    def _build_number_edit(self) -> QWidget:
        widget = self._build_line_edit()
        validator = QDoubleValidator(self._line_edit)
        validator.setNotation(QDoubleValidator.Notation.StandardNotation)
        self._line_edit.setValidator(validator)
        return widget

    def _build_calendar_button(self) -> QWidget:
        self._button = QToolButton()
        self._button.setPopupMode(QToolButton.ToolButtonPopupMode.InstantPopup)
        menu = QMenu(self._button)
        self._calendar = QCalendarWidget()
        self._calendar.clicked.connect(self._on_date_clicked)
        calendar_action = QWidgetAction(menu)
        calendar_action.setDefaultWidget(self._calendar)
        menu.addAction(calendar_action)
        menu.addSeparator()
        clear_action = menu.addAction("Clear")
        clear_action.triggered.connect(self.clear)
        self._button.setMenu(menu)
        return self._button

    def _build_combo(self) -> QWidget:
        self._combo = QComboBox()
        self._combo.setPlaceholderText(self._input.placeholder)
        self._populate_combo()
        self._combo.currentIndexChanged.connect(self._on_combo_changed)
        return self._combo

    def _populate_combo(self) -> None:
        self._combo.blockSignals(True)
        self._combo.clear()
        self._combo.addItem(ALL_OPTION_TEXT, None)
        for option in self._input.options:
            self._combo.addItem(option.display, option.value)
        self._combo.blockSignals(False)

    # Handlers

    def _on_date_clicked(self, value: QDate) -> None:
        picked = _to_date(value)
        if self._input.search_type is SearchType.DATE:
            self._input.handle_input(picked)
            self._button.menu().hide()
        elif self._range_start is None:
            self._range_start = picked
            self._input.handle_input(DateRange(from_=picked))
        else:
            start, self._range_start = self._range_start, None
            self._input.handle_input(DateRange(from_=start, to=picked))
            self._button.menu().hide()
        self._refresh_button_text()

    def _on_combo_changed(self, index: int) -> None:
        data = self._combo.itemData(index)
        self._input.handle_input("" if data is None else data)

    # Public API

    def pick_date(self, value: date) -> None:
        """Apply a calendar pick programmatically."""
        self._on_date_clicked(QDate(value.year, value.month, value.day))

    def set_options(self, options) -> None:
        """Replace the select options, keeping the current value when still offered."""
        self._input.set_options(options)
        if self._combo is not None:
            self._populate_combo()
            self.sync(self._input.value)

    def clear(self) -> None:
        self._range_start = None
        self._input.clear()
        self.sync(None)

    def sync(self, value: Any) -> None:
        """Show ``value`` from table state without emitting a change."""
        self._input.set_value(value)
        if self._line_edit is not None:
            text = "" if value is None else str(value)
            if self._line_edit.text() != text and not self._same_number(text):
                self._line_edit.blockSignals(True)
                self._line_edit.setText(text)
                self._line_edit.blockSignals(False)
        elif self._combo is not None:
            index = self._combo.findData(value) if value is not None else 0
            self._combo.blockSignals(True)
            self._combo.setCurrentIndex(max(index, 0))
            self._combo.blockSignals(False)
        else:
            if value is None:
                self._range_start = None
            self._refresh_button_text()

    def display_text(self) -> str:
        if self._line_edit is not None:
            return self._line_edit.text()
        if self._combo is not None:
            return self._combo.currentText()
        return self._button.text()

    def _same_number(self, text: str) -> bool:
        # "4.0" typed for a parsed 4 keeps the user's spelling.
        if self._input.search_type is not SearchType.NUMBER or not text:
            return False
        return parse_number(self._line_edit.text()) == parse_number(text)

    def _refresh_button_text(self) -> None:
        text = self._input.display_text()
        self._button.setText(text or self._input.placeholder)

