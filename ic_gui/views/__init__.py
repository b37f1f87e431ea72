"""Views for the GUI."""

from ic_gui.views.table_view import DataTableView

__all__ = ["DataTableView"]
