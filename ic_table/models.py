"""Value objects shared by the table engine (UI-agnostic)."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Any, Callable, Union


class SearchType(str, Enum):
    """Declared data kind governing a column filter's control and value."""

    TEXT = "text"
    EMAIL = "email"
    NUMBER = "number"
    DATE = "date"
    DATE_RANGE = "date-range"
    SELECT = "select"

    @classmethod
    def parse(cls, value: "SearchType | str | None") -> "SearchType":
        """Resolve a search type, falling back to ``TEXT`` for unknown values."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                return cls.TEXT
        return cls.TEXT


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


@dataclass(frozen=True)
class FilterOption:
    value: str
    label: str = ""

    @property
    def display(self) -> str:
        return self.label or self.value


@dataclass(frozen=True)
class DateRange:
    """Partial date range; ``to`` stays empty while a range is being picked."""

    from_: date | None = None
    to: date | None = None

    @property
    def is_empty(self) -> bool:
        return self.from_ is None and self.to is None


FilterValue = Union[str, int, float, date, DateRange]
RowAccessor = Callable[[Any], Any]


@dataclass(frozen=True)
class ColumnDefinition:
    """Column contract handed to the engine by the hosting application."""

    id: str
    accessor: RowAccessor
    header: str | None = None
    sortable: bool = True
    filterable: bool = True
    hideable: bool = True
    search_type: SearchType = SearchType.TEXT
    options: tuple[FilterOption, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "search_type", SearchType.parse(self.search_type))
        object.__setattr__(self, "options", tuple(self.options))

    @property
    def title(self) -> str:
        return self.header or self.id

    def value(self, row: Any) -> Any:
        """Read this column's cell value from a row."""
        return self.accessor(row)


@dataclass(frozen=True)
class SortEntry:
    column_id: str
    direction: SortDirection = SortDirection.ASC

    @property
    def descending(self) -> bool:
        return self.direction is SortDirection.DESC


@dataclass(frozen=True)
class PaginationState:
    page_index: int = 0
    page_size: int = 5


@dataclass(frozen=True)
class TableSnapshot:
    """Read-only view of the controller state for rendering."""

    rows: list[Any]
    row_ids: list[str]
    sorting: tuple[SortEntry, ...]
    filters: dict[str, FilterValue]
    visibility: dict[str, bool]
    selection: frozenset[str]
    pagination: PaginationState
    page_count: int
    total_count: int
    filtered_count: int
    selected_count: int
    can_previous_page: bool
    can_next_page: bool
    visible_column_ids: list[str] = field(default_factory=list)
