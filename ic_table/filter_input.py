"""Per-column filter inputs: one normalizer per search-type variant.

Each variant turns whatever its control produces (keystrokes, a picked day,
a half-picked range, a chosen option) into a typed filter value, or ``None``
when the filter should be cleared. Text and email inputs are not debounced;
every keystroke is forwarded as typed.
"""

from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Any, Callable, Mapping, Sequence

from ic_table.models import (
    ColumnDefinition,
    DateRange,
    FilterOption,
    FilterValue,
    SearchType,
)
from ic_table.parsing import as_date, parse_number

logger = logging.getLogger(__name__)

DATE_DISPLAY_FORMAT = "%b %d, %Y"
EMPTY_RANGE_TEXT = "Pick a date range"

Normalizer = Callable[[Any, Sequence[FilterOption]], "FilterValue | None"]


def _normalize_text(raw: Any, options: Sequence[FilterOption]) -> str | None:
    if raw is None:
        return None
    return raw if isinstance(raw, str) else str(raw)


def _normalize_number(raw: Any, options: Sequence[FilterOption]) -> int | float | None:
    # Empty or non-numeric input clears the filter; NaN never escapes.
    return parse_number(raw)


def _normalize_date(raw: Any, options: Sequence[FilterOption]) -> date | None:
    if isinstance(raw, date):
        return raw
    return as_date(raw)


def _normalize_date_range(raw: Any, options: Sequence[FilterOption]) -> DateRange | None:
    if raw is None:
        return None
    if isinstance(raw, DateRange):
        start, end = raw.from_, raw.to
    elif isinstance(raw, Mapping):
        start = raw.get("from", raw.get("from_"))
        end = raw.get("to")
    elif isinstance(raw, (tuple, list)) and len(raw) <= 2:
        start = raw[0] if raw else None
        end = raw[1] if len(raw) > 1 else None
    else:
        start, end = raw, None
    start = _normalize_date(start, options)
    end = _normalize_date(end, options)
    if start is None:
        return None
    if end is not None and as_date(end) < as_date(start):
        start, end = end, start
    return DateRange(from_=start, to=end)


def _normalize_select(raw: Any, options: Sequence[FilterOption]) -> str | None:
    if raw is None:
        return None
    value = raw.value if isinstance(raw, FilterOption) else str(raw)
    if not value:
        return None
    if options and value not in {option.value for option in options}:
        logger.debug("Rejected select value %r outside of the offered options", value)
        return None
    return value


_NORMALIZERS: dict[SearchType, Normalizer] = {
    SearchType.TEXT: _normalize_text,
    SearchType.EMAIL: _normalize_text,
    SearchType.NUMBER: _normalize_number,
    SearchType.DATE: _normalize_date,
    SearchType.DATE_RANGE: _normalize_date_range,
    SearchType.SELECT: _normalize_select,
}


def normalize_filter_value(
    search_type: SearchType | str | None,
    raw: Any,
    options: Sequence[FilterOption] = (),
) -> FilterValue | None:
    """Normalize a raw control value into the filter type of ``search_type``."""
    return _NORMALIZERS[SearchType.parse(search_type)](raw, options)


def _format_day(value: date) -> str:
    return value.strftime(DATE_DISPLAY_FORMAT)


def format_filter_value(search_type: SearchType | str | None, value: Any) -> str:
    """Render a typed filter value as the text shown inside its control."""
    kind = SearchType.parse(search_type)
    if kind is SearchType.DATE_RANGE:
        if not isinstance(value, DateRange) or value.from_ is None:
            return EMPTY_RANGE_TEXT
        if value.to is None:
            return _format_day(value.from_)
        return f"{_format_day(value.from_)} - {_format_day(value.to)}"
    if value is None:
        return ""
    if kind is SearchType.DATE and isinstance(value, date):
        return _format_day(value.date() if isinstance(value, datetime) else value)
    return str(value)


class ColumnFilterInput:
    """Filter control state for one column.

    The control itself is rendered by a UI layer; this object owns the
    current typed value and forwards normalized changes to ``on_change``.
    """

    def __init__(
        self,
        column_id: str,
        search_type: SearchType | str | None = None,
        *,
        options: Sequence[FilterOption] = (),
        placeholder: str | None = None,
        value: FilterValue | None = None,
        on_change: Callable[[FilterValue | None], None] | None = None,
    ) -> None:
        self._column_id = column_id
        self._search_type = SearchType.parse(search_type)
        self._options: tuple[FilterOption, ...] = tuple(options)
        self._placeholder = placeholder
        self._value = value
        self._on_change = on_change

    @classmethod
    def for_column(
        cls,
        column: ColumnDefinition,
        *,
        value: FilterValue | None = None,
        options: Sequence[FilterOption] | None = None,
        on_change: Callable[[FilterValue | None], None] | None = None,
    ) -> "ColumnFilterInput":
        return cls(
            column.id,
            column.search_type,
            options=column.options if options is None else options,
            value=value,
            on_change=on_change,
        )

    @property
    def column_id(self) -> str:
        return self._column_id

    @property
    def search_type(self) -> SearchType:
        return self._search_type

    @property
    def options(self) -> tuple[FilterOption, ...]:
        return self._options

    @property
    def value(self) -> FilterValue | None:
        return self._value

    @property
    def placeholder(self) -> str:
        if self._placeholder:
            return self._placeholder
        if self._search_type is SearchType.SELECT:
            return f"Filter {self._column_id}..."
        return f"Search {self._column_id}..."

    def set_options(self, options: Sequence[FilterOption]) -> None:
        """Replace the option list offered by a select control."""
        self._options = tuple(options)

    def set_value(self, value: FilterValue | None) -> None:
        """Sync the displayed value from table state without emitting."""
        self._value = value

    def handle_input(self, raw: Any) -> FilterValue | None:
        """Normalize a control change, store it and emit it."""
        normalized = normalize_filter_value(self._search_type, raw, self._options)
        self._value = normalized
        if self._on_change is not None:
            self._on_change(normalized)
        return normalized

    def clear(self) -> None:
        self._value = None
        if self._on_change is not None:
            self._on_change(None)

    def display_text(self) -> str:
        return format_filter_value(self._search_type, self._value)
