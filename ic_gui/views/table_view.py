"""Data table view: global search, filters, table and pagination."""

from __future__ import annotations

from typing import TYPE_CHECKING

from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QMenu,
    QMessageBox,
    QPushButton,
    QToolButton,
    QVBoxLayout,
    QWidget,
)

from ic_gui.widgets import DataTable, FilterInputWidget, PaginationBar
from ic_table.models import SearchType, TableSnapshot

if TYPE_CHECKING:
    from ic_gui.viewmodels.search_vm import GlobalSearchViewModel
    from ic_gui.viewmodels.table_vm import TableViewModel
    from ic_table.classifier import ClassifiedQuery


class DataTableView(QWidget):
    """View combining the table viewmodel with its controls."""

    def __init__(
        self,
        viewmodel: "TableViewModel",
        search: "GlobalSearchViewModel | None" = None,
        *,
        title: str = "Rows",
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self._vm = viewmodel
        self._search = search
        self._title = title
        self._filter_widgets: dict[str, FilterInputWidget] = {}
        self._facet_columns: set[str] = set()

        self._setup_ui()
        self._connect_signals()
        self._on_state_changed(self._vm.snapshot)

    @property
    def search_edit(self) -> QLineEdit:
        return self._search_edit

    @property
    def table(self) -> DataTable:
        return self._table

    @property
    def pagination_bar(self) -> PaginationBar:
        return self._pagination

    @property
    def filter_widgets(self) -> dict[str, FilterInputWidget]:
        return dict(self._filter_widgets)

    def _setup_ui(self) -> None:
        """Set up the UI layout."""
        layout = QVBoxLayout(self)
        layout.setContentsMargins(20, 20, 20, 20)
        layout.setSpacing(12)

        # Title
        title = QLabel(self._title)
        title.setProperty("role", "title")
        layout.addWidget(title)

        # Toolbar: global search, column visibility, reset
        toolbar = QHBoxLayout()
        self._search_edit = QLineEdit()
        self._search_edit.setPlaceholderText("Search anything...")
        self._search_edit.setClearButtonEnabled(True)
        self._search_edit.setVisible(self._search is not None)
        toolbar.addWidget(self._search_edit, 1)

        self._columns_btn = QToolButton()
        self._columns_btn.setText("Columns")
        self._columns_btn.setPopupMode(QToolButton.ToolButtonPopupMode.InstantPopup)
        self._columns_menu = QMenu(self._columns_btn)
        self._column_actions = {}
        for column in self._vm.columns:
            if not column.hideable:
                continue
            action = self._columns_menu.addAction(column.title)
            action.setCheckable(True)
            action.setChecked(True)
            action.toggled.connect(
                lambda _checked, column_id=column.id: self._vm.toggle_column(column_id)
            )
            self._column_actions[column.id] = action
        self._columns_btn.setMenu(self._columns_menu)
        self._columns_btn.setEnabled(bool(self._column_actions))
        toolbar.addWidget(self._columns_btn)

        self._reset_btn = QPushButton("Reset")
        toolbar.addWidget(self._reset_btn)
        layout.addLayout(toolbar)

        # Per-column filters
        filters_row = QHBoxLayout()
        declared = {c.id: bool(c.options) for c in self._vm.columns}
        for filter_input in self._vm.filter_inputs():
            widget = FilterInputWidget(filter_input)
            self._filter_widgets[filter_input.column_id] = widget
            if filter_input.search_type is SearchType.SELECT and not declared[filter_input.column_id]:
                self._facet_columns.add(filter_input.column_id)
            filters_row.addWidget(widget)
        filters_row.addStretch()
        layout.addLayout(filters_row)

        # Table
        self._table = DataTable()
        layout.addWidget(self._table, 1)

        # Footer
        self._pagination = PaginationBar(
            self._vm.page_size_options,
            show_selection=self._vm.selection_enabled,
            show_pagination=self._vm.pagination_enabled,
        )
        layout.addWidget(self._pagination)

        self._status_label = QLabel("")
        self._status_label.setProperty("role", "muted")
        layout.addWidget(self._status_label)

    def _connect_signals(self) -> None:
        """Connect viewmodel and widget signals."""
        self._vm.state_changed.connect(self._on_state_changed)
        self._vm.error_occurred.connect(self._on_error)
        self._table.sort_requested.connect(self._vm.toggle_sort)
        self._table.row_toggled.connect(self._vm.toggle_row)
        self._table.page_toggled.connect(self._vm.toggle_page_rows)
        self._pagination.first_requested.connect(self._vm.first_page)
        self._pagination.previous_requested.connect(self._vm.previous_page)
        self._pagination.next_requested.connect(self._vm.next_page)
        self._pagination.last_requested.connect(self._vm.last_page)
        self._pagination.page_size_changed.connect(self._vm.set_page_size)
        self._reset_btn.clicked.connect(self._on_reset)
        if self._search is not None:
            self._search_edit.textChanged.connect(self._search.set_query)
            self._search.query_classified.connect(self._on_query_classified)

    def _on_state_changed(self, snapshot: TableSnapshot) -> None:
        """Re-render everything derived from table state."""
        self._table.render_page(
            self._vm.visible_columns,
            snapshot,
            selection=self._vm.selection_enabled,
            status_column=self._vm.status_column,
            render_status=self._vm.render_status,
            action_menu=self._vm.action_menu,
        )
        for column_id, widget in self._filter_widgets.items():
            if column_id in self._facet_columns:
                widget.set_options(self._vm.table.facet_options(column_id))
            widget.sync(snapshot.filters.get(column_id))
        for column_id, action in self._column_actions.items():
            visible = snapshot.visibility.get(column_id, True)
            if action.isChecked() != visible:
                action.blockSignals(True)
                action.setChecked(visible)
                action.blockSignals(False)
        self._pagination.update_state(
            snapshot, self._vm.selection_summary(), self._vm.page_summary()
        )

    def _on_query_classified(self, classified: "ClassifiedQuery | None") -> None:
        if classified is None:
            self._status_label.setText("")
        else:
            self._status_label.setText(f"Searching as {classified.kind.value}")

    def _on_reset(self) -> None:
        if self._search is not None:
            self._search_edit.blockSignals(True)
            self._search_edit.clear()
            self._search_edit.blockSignals(False)
            self._search.clear()
        self._vm.reset_filters()

    def _on_error(self, message: str) -> None:
        QMessageBox.warning(self, "Table", message)
