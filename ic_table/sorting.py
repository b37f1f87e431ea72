"""Sort keys for mixed-type cell values."""

from __future__ import annotations

from datetime import date, datetime, time, timezone
from typing import Any, Sequence


def _naive(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


def sort_key(value: Any) -> tuple[int, Any]:
    """Build a key that orders numbers, then dates, then text, then the rest."""
    if isinstance(value, (bool, int, float)):
        return (0, value)
    if isinstance(value, datetime):
        return (1, _naive(value))
    if isinstance(value, date):
        return (1, datetime.combine(value, time()))
    if isinstance(value, str):
        return (2, value.casefold())
    return (3, str(value))


def sort_indices(values: Sequence[Any], *, descending: bool = False) -> list[int]:
    """Return positions of ``values`` in sorted order; ``None`` always sorts last.

    The sort is stable in both directions.
    """
    present = [i for i, value in enumerate(values) if value is not None]
    missing = [i for i, value in enumerate(values) if value is None]
    present.sort(key=lambda i: sort_key(values[i]), reverse=descending)
    return present + missing
