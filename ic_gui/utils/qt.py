"""Small Qt helpers shared by the table widgets."""

from __future__ import annotations

from typing import Sequence

from PySide6.QtWidgets import QTableWidget, QWidget


def set_table_headers(table: QTableWidget, headers: Sequence[str]) -> None:
    """Resize the column count to ``headers`` and relabel every column."""
    if table.columnCount() != len(headers):
        table.setColumnCount(len(headers))
    table.setHorizontalHeaderLabels(list(headers))


def set_widget_role(widget: QWidget, role: str | None) -> None:
    """Set the QSS ``role`` property; repolish only when it changes."""
    if widget.property("role") == role:
        return
    widget.setProperty("role", role)
    style = widget.style()
    style.unpolish(widget)
    style.polish(widget)
