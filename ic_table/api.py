"""Public API surface for ic_table."""

from ic_table.actions import (
    ActionItem,
    ActionKind,
    ActionMenu,
    ActionMenuFactory,
    CustomAction,
)
from ic_table.classifier import ClassifiedQuery, QueryKind, classify_query
from ic_table.debounce import DebounceStabilizer, Scheduler
from ic_table.filter_input import (
    ColumnFilterInput,
    format_filter_value,
    normalize_filter_value,
)
from ic_table.global_search import GlobalSearchDispatcher
from ic_table.models import (
    ColumnDefinition,
    DateRange,
    FilterOption,
    FilterValue,
    PaginationState,
    SearchType,
    SortDirection,
    SortEntry,
    TableSnapshot,
)
from ic_table.settings import GlobalSearchConfig, TableSettings
from ic_table.status import BadgeVariant, StatusBadge, StatusBadgeRenderer, StatusStyle
from ic_table.table_state import TableStateController

__all__ = [
    "ActionItem",
    "ActionKind",
    "ActionMenu",
    "ActionMenuFactory",
    "BadgeVariant",
    "ClassifiedQuery",
    "ColumnDefinition",
    "ColumnFilterInput",
    "CustomAction",
    "DateRange",
    "DebounceStabilizer",
    "FilterOption",
    "FilterValue",
    "GlobalSearchConfig",
    "GlobalSearchDispatcher",
    "PaginationState",
    "QueryKind",
    "Scheduler",
    "SearchType",
    "SortDirection",
    "SortEntry",
    "StatusBadge",
    "StatusBadgeRenderer",
    "StatusStyle",
    "TableSettings",
    "TableSnapshot",
    "TableStateController",
    "classify_query",
    "format_filter_value",
    "normalize_filter_value",
]
