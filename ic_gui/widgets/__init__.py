"""Reusable GUI widgets."""

from ic_gui.widgets.action_menu import ActionMenuButton, build_qmenu
from ic_gui.widgets.data_table import DataTable
from ic_gui.widgets.filter_input import FilterInputWidget
from ic_gui.widgets.pagination_bar import PaginationBar
from ic_gui.widgets.status_badge import StatusBadgeLabel

__all__ = [
    "ActionMenuButton",
    "DataTable",
    "FilterInputWidget",
    "PaginationBar",
    "StatusBadgeLabel",
    "build_qmenu",
]
