"""UI-agnostic data table engine: filtering, sorting, selection, pagination."""

from ic_table.api import (
    ActionMenuFactory,
    ColumnDefinition,
    ColumnFilterInput,
    DebounceStabilizer,
    GlobalSearchDispatcher,
    SearchType,
    StatusBadgeRenderer,
    TableSettings,
    TableStateController,
)

__all__ = [
    "ActionMenuFactory",
    "ColumnDefinition",
    "ColumnFilterInput",
    "DebounceStabilizer",
    "GlobalSearchDispatcher",
    "SearchType",
    "StatusBadgeRenderer",
    "TableSettings",
    "TableStateController",
]
