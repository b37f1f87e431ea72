"""Heuristic classification of a free-text search query."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Callable, Union

from ic_table.parsing import parse_iso_datetime, parse_number


class QueryKind(str, Enum):
    DATE = "date"
    NUMERIC = "numeric"
    EMAIL = "email"
    TEXT = "text"


QueryValue = Union[datetime, int, float, str]


@dataclass(frozen=True)
class ClassifiedQuery:
    kind: QueryKind
    raw: str
    value: QueryValue


def _as_date(raw: str) -> datetime | None:
    return parse_iso_datetime(raw)


def _as_number(raw: str) -> int | float | None:
    return parse_number(raw)


def _as_email(raw: str) -> str | None:
    return raw if "@" in raw and "." in raw else None


def _as_text(raw: str) -> str:
    return raw


# Evaluated in order; the first predicate returning a value wins.
CLASSIFIERS: tuple[tuple[QueryKind, Callable[[str], QueryValue | None]], ...] = (
    (QueryKind.DATE, _as_date),
    (QueryKind.NUMERIC, _as_number),
    (QueryKind.EMAIL, _as_email),
    (QueryKind.TEXT, _as_text),
)


def classify_query(raw: str) -> ClassifiedQuery | None:
    """Classify ``raw`` into exactly one query kind.

    Returns None for an empty (or whitespace-only) query.
    """
    if not raw or not raw.strip():
        return None
    for kind, predicate in CLASSIFIERS:
        value = predicate(raw)
        if value is not None:
            return ClassifiedQuery(kind=kind, raw=raw, value=value)
    return ClassifiedQuery(kind=QueryKind.TEXT, raw=raw, value=raw)
