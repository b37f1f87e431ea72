"""ViewModel wrapping the table state controller."""

from __future__ import annotations

import logging
from typing import Any, Sequence

from PySide6.QtCore import QObject, Signal

from ic_common.errors import ICError
from ic_table.actions import ActionMenu, ActionMenuFactory, CustomAction
from ic_table.filter_input import ColumnFilterInput
from ic_table.models import ColumnDefinition, TableSnapshot
from ic_table.status import StatusBadge, StatusBadgeRenderer
from ic_table.table_state import TableStateController

logger = logging.getLogger(__name__)


class TableViewModel(QObject):
    """ViewModel for the data table view.

    Every state write goes through the controller; the controller callback
    re-emits the resulting snapshot as ``state_changed``. Row actions only
    emit signals carrying the row record.
    """

    # Signals
    state_changed = Signal(object)  # TableSnapshot
    error_occurred = Signal(str)
    view_requested = Signal(object)  # row record
    edit_requested = Signal(object)  # row record
    delete_requested = Signal(object)  # row record
    custom_action_triggered = Signal(str, object)  # label, row record

    def __init__(
        self,
        table: TableStateController,
        *,
        status_column: str | None = None,
        status_renderer: StatusBadgeRenderer | None = None,
        custom_actions: Sequence[str] = (),
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._table = table
        self._status_column = status_column
        self._status_renderer = status_renderer or StatusBadgeRenderer()
        self._actions = ActionMenuFactory(
            on_view=self.view_requested.emit,
            on_edit=self.edit_requested.emit,
            on_delete=self.delete_requested.emit,
            custom_actions=[
                CustomAction(label, self._custom_emitter(label)) for label in custom_actions
            ],
        )
        self._snapshot: TableSnapshot = table.snapshot()
        table.register_callback(self._on_table_changed)

    def _custom_emitter(self, label: str):
        def _emit(row: Any) -> None:
            self.custom_action_triggered.emit(label, row)

        return _emit

    @property
    def table(self) -> TableStateController:
        return self._table

    @property
    def snapshot(self) -> TableSnapshot:
        """Latest derived table state."""
        return self._snapshot

    @property
    def status_column(self) -> str | None:
        return self._status_column

    @property
    def columns(self) -> list[ColumnDefinition]:
        return self._table.columns

    @property
    def visible_columns(self) -> list[ColumnDefinition]:
        return self._table.visible_columns

    @property
    def selection_enabled(self) -> bool:
        return self._table.settings.selection

    @property
    def pagination_enabled(self) -> bool:
        return self._table.settings.pagination

    @property
    def page_size_options(self) -> list[int]:
        return list(self._table.settings.page_size_options)

    def filter_inputs(self) -> list[ColumnFilterInput]:
        return self._table.filter_inputs()

    def render_status(self, value: Any) -> StatusBadge:
        return self._status_renderer.render(value)

    def action_menu(self, row: Any) -> ActionMenu:
        return self._actions.build(row)

    def selection_summary(self) -> str:
        return self._table.selection_summary()

    def page_summary(self) -> str:
        return self._table.page_summary()

    # Commands

    def toggle_sort(self, column_id: str) -> None:
        self._run(self._table.toggle_sorting, column_id)

    def set_column_filter(self, column_id: str, value: Any) -> None:
        self._run(self._table.set_column_filter, column_id, value)

    def reset_filters(self) -> None:
        self._run(self._table.reset_column_filters)

    def toggle_column(self, column_id: str) -> None:
        self._run(self._table.toggle_column_visibility, column_id)

    def toggle_row(self, row_id: str) -> None:
        self._run(self._table.toggle_row_selected, row_id)

    def toggle_page_rows(self) -> None:
        self._run(self._table.toggle_page_rows_selected)

    def clear_selection(self) -> None:
        self._run(self._table.clear_selection)

    def first_page(self) -> None:
        self._run(self._table.first_page)

    def previous_page(self) -> None:
        self._run(self._table.previous_page)

    def next_page(self) -> None:
        self._run(self._table.next_page)

    def last_page(self) -> None:
        self._run(self._table.last_page)

    def set_page_size(self, page_size: int) -> None:
        self._run(self._table.set_page_size, page_size)

    def set_data(self, rows: Sequence[Any]) -> None:
        self._run(self._table.set_data, rows)

    def _run(self, command, *args: Any) -> Any:
        try:
            return command(*args)
        except ICError as exc:
            logger.warning("Table command failed: %s", exc)
            self.error_occurred.emit(str(exc))
            return None

    def _on_table_changed(self, snapshot: TableSnapshot) -> None:
        self._snapshot = snapshot
        self.state_changed.emit(snapshot)
