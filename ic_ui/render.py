"""Turn the current table page into a printable TableModel."""

from __future__ import annotations

from rich.markup import escape

from ic_app.formatters import format_cell
from ic_table.status import StatusBadgeRenderer
from ic_table.table_state import TableStateController
from ic_ui import theme
from ic_ui.table_layout import TableModel

SORT_MARKERS = {"asc": " ▲", "desc": " ▼"}


def _header(table: TableStateController, column_id: str) -> str:
    title = table.column(column_id).title
    direction = table.sort_direction(column_id)
    return title + (SORT_MARKERS[direction.value] if direction is not None else "")


def build_page_model(
    table: TableStateController,
    *,
    title: str = "Rows",
    status_column: str | None = None,
    status_renderer: StatusBadgeRenderer | None = None,
) -> TableModel:
    """Render the visible columns of the current page, status cells as badges."""
    columns = table.visible_columns
    selection = table.settings.selection
    headers = (["✓"] if selection else []) + [_header(table, c.id) for c in columns]
    rows: list[list[str]] = []
    for row_id, row in zip(table.page_row_ids, table.page_rows):
        cells = ["x" if table.is_row_selected(row_id) else ""] if selection else []
        for column in columns:
            value = column.value(row)
            if status_renderer is not None and column.id == status_column:
                badge = status_renderer.render(value)
                label = escape(badge.label)
                if badge.icon:
                    label = f"{escape(badge.icon)} {label}"
                cells.append(theme.role_text(badge.role, label))
            else:
                cells.append(escape(format_cell(value)))
        rows.append(cells)
    if not rows and headers:
        rows.append([theme.EMPTY_TABLE_TEXT] + [""] * (len(headers) - 1))
    captions = []
    if selection:
        captions.append(table.selection_summary())
    if table.settings.pagination:
        captions.append(table.page_summary())
    return TableModel(
        title=title,
        columns=headers,
        rows=rows,
        caption="  ".join(captions) or None,
    )
