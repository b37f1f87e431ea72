"""Data table widget rendering one page of a table snapshot."""

from __future__ import annotations

from typing import Any, Callable, Sequence

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import QTableWidget, QTableWidgetItem

from ic_app.formatters import format_cell
from ic_gui.utils import set_table_headers
from ic_gui.widgets.action_menu import ActionMenuButton
from ic_gui.widgets.status_badge import StatusBadgeLabel
from ic_table.actions import ActionMenu
from ic_table.models import ColumnDefinition, SortDirection, TableSnapshot
from ic_table.status import StatusBadge

EMPTY_TEXT = "No results."
SORT_MARKERS = {SortDirection.ASC: " ▲", SortDirection.DESC: " ▼"}
SELECT_HEADER = {True: "☑", False: "☐"}
ROW_ID_ROLE = Qt.ItemDataRole.UserRole + 1


class DataTable(QTableWidget):
    """Table with a selection column, sortable headers and row actions."""

    sort_requested = Signal(str)  # column id
    row_toggled = Signal(str)  # row id
    page_toggled = Signal()

    def __init__(self, parent: object | None = None) -> None:
        super().__init__(parent)
        self._column_ids: list[str | None] = []
        self._sortable: set[str] = set()
        self._selection = True
        self.horizontalHeader().setStretchLastSection(True)
        self.verticalHeader().setVisible(False)
        self.setAlternatingRowColors(True)
        self.setShowGrid(False)
        self.setEditTriggers(QTableWidget.EditTrigger.NoEditTriggers)
        self.setSelectionMode(QTableWidget.SelectionMode.NoSelection)
        self.horizontalHeader().sectionClicked.connect(self._on_header_clicked)
        self.itemChanged.connect(self._on_item_changed)

    @property
    def column_ids(self) -> list[str | None]:
        """Column id per table column; ``None`` for selection and actions."""
        return list(self._column_ids)

    def render_page(
        self,
        columns: Sequence[ColumnDefinition],
        snapshot: TableSnapshot,
        *,
        selection: bool = True,
        status_column: str | None = None,
        render_status: Callable[[Any], StatusBadge] | None = None,
        action_menu: Callable[[Any], ActionMenu] | None = None,
    ) -> None:
        """Replace the table contents with the snapshot's page rows."""
        self._selection = selection
        self._sortable = {c.id for c in columns if c.sortable}
        sort_by = {entry.column_id: entry.direction for entry in snapshot.sorting}
        page_selected = bool(snapshot.row_ids) and all(
            row_id in snapshot.selection for row_id in snapshot.row_ids
        )

        headers: list[str] = []
        self._column_ids = []
        if selection:
            headers.append(SELECT_HEADER[page_selected])
            self._column_ids.append(None)
        for column in columns:
            headers.append(column.title + SORT_MARKERS.get(sort_by.get(column.id), ""))
            self._column_ids.append(column.id)
        if action_menu is not None:
            headers.append("")
            self._column_ids.append(None)

        self.blockSignals(True)
        try:
            self.clearContents()
            self.clearSpans()
            set_table_headers(self, headers)
            if not snapshot.rows:
                self._render_empty(len(headers))
                return
            self.setRowCount(len(snapshot.rows))
            for i, (row_id, row) in enumerate(zip(snapshot.row_ids, snapshot.rows)):
                j = 0
                if selection:
                    self.setItem(i, j, self._checkbox_item(row_id, row_id in snapshot.selection))
                    j += 1
                for column in columns:
                    value = column.value(row)
                    if render_status is not None and column.id == status_column:
                        self.setCellWidget(i, j, StatusBadgeLabel(render_status(value)))
                    else:
                        self.setItem(i, j, QTableWidgetItem(format_cell(value)))
                    j += 1
                if action_menu is not None:
                    self.setCellWidget(i, j, ActionMenuButton(action_menu(row)))
        finally:
            self.blockSignals(False)

    def _render_empty(self, column_count: int) -> None:
        self.setRowCount(1)
        item = QTableWidgetItem(EMPTY_TEXT)
        item.setTextAlignment(Qt.AlignmentFlag.AlignCenter)
        self.setItem(0, 0, item)
        if column_count > 1:
            self.setSpan(0, 0, 1, column_count)

    def _checkbox_item(self, row_id: str, checked: bool) -> QTableWidgetItem:
        item = QTableWidgetItem()
        item.setFlags(Qt.ItemFlag.ItemIsUserCheckable | Qt.ItemFlag.ItemIsEnabled)
        item.setCheckState(Qt.CheckState.Checked if checked else Qt.CheckState.Unchecked)
        item.setData(ROW_ID_ROLE, row_id)
        item.setToolTip("Select row")
        return item

    def _on_header_clicked(self, index: int) -> None:
        if index >= len(self._column_ids):
            return
        column_id = self._column_ids[index]
        if column_id is None:
            if self._selection and index == 0:
                self.page_toggled.emit()
            return
        if column_id in self._sortable:
            self.sort_requested.emit(column_id)

    def _on_item_changed(self, item: QTableWidgetItem) -> None:
        row_id = item.data(ROW_ID_ROLE)
        if row_id is not None:
            self.row_toggled.emit(str(row_id))
