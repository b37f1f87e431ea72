"""Row predicates for active column filters, keyed by search type."""

from __future__ import annotations

from datetime import date
from typing import Any, Callable

from ic_table.models import DateRange, SearchType
from ic_table.parsing import as_date, parse_number

Matcher = Callable[[Any, Any], bool]


def _contains_text(filter_value: Any, cell: Any) -> bool:
    return str(filter_value).casefold() in str(cell).casefold()


def _equals_number(filter_value: Any, cell: Any) -> bool:
    number = parse_number(cell)
    return number is not None and number == filter_value


def _same_day(filter_value: Any, cell: Any) -> bool:
    day = as_date(cell)
    return day is not None and day == as_date(filter_value)


def _within_range(filter_value: Any, cell: Any) -> bool:
    if not isinstance(filter_value, DateRange):
        return True
    day = as_date(cell)
    if day is None:
        return False
    if filter_value.from_ is not None and day < _day(filter_value.from_):
        return False
    if filter_value.to is not None and day > _day(filter_value.to):
        return False
    return True


def _equals_option(filter_value: Any, cell: Any) -> bool:
    return str(cell) == str(filter_value)


def _day(value: date) -> date:
    return as_date(value) or value


_MATCHERS: dict[SearchType, Matcher] = {
    SearchType.TEXT: _contains_text,
    SearchType.EMAIL: _contains_text,
    SearchType.NUMBER: _equals_number,
    SearchType.DATE: _same_day,
    SearchType.DATE_RANGE: _within_range,
    SearchType.SELECT: _equals_option,
}


def matches_filter(search_type: SearchType, filter_value: Any, cell: Any) -> bool:
    """Return True when ``cell`` satisfies an active filter of ``search_type``."""
    if cell is None:
        return False
    return _MATCHERS[search_type](filter_value, cell)


def is_empty_filter(value: Any) -> bool:
    """Filter values that mean "no filter" and are dropped from state."""
    if value is None:
        return True
    if isinstance(value, str):
        return value == ""
    if isinstance(value, DateRange):
        return value.is_empty
    return False
