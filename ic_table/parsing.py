"""Lenient parsing of free-text values into dates and numbers."""

from __future__ import annotations

import math
import re
from datetime import date, datetime, time, timedelta, timezone

_DATE_PATTERNS = (
    # YYYY, YYYY-MM, YYYY-MM-DD
    re.compile(r"^(?P<year>\d{4})(?:-(?P<month>\d{2})(?:-(?P<day>\d{2}))?)?$"),
    # YYYYMMDD
    re.compile(r"^(?P<year>\d{4})(?P<month>\d{2})(?P<day>\d{2})$"),
    # YYYY-DDD (ordinal)
    re.compile(r"^(?P<year>\d{4})-?(?P<ordinal>\d{3})$"),
    # YYYY-Www, YYYY-Www-D
    re.compile(r"^(?P<year>\d{4})-?W(?P<week>\d{2})(?:-?(?P<weekday>\d))?$"),
)

_DATE_TIME_DELIMITER = re.compile(r"[T ]")

_TIME_PATTERN = re.compile(
    r"^(?P<hour>\d{2})(?::?(?P<minute>\d{2})(?::?(?P<second>\d{2})"
    r"(?:[.,](?P<fraction>\d+))?)?)?"
    r"(?P<tz>Z|[+-]\d{2}(?::?\d{2})?)?$"
)


def _parse_date_part(text: str) -> date | None:
    for pattern in _DATE_PATTERNS:
        match = pattern.match(text)
        if match is None:
            continue
        parts = match.groupdict()
        year = int(parts["year"])
        if parts.get("ordinal"):
            ordinal = int(parts["ordinal"])
            if not 1 <= ordinal <= 366:
                return None
            value = date(year, 1, 1) + timedelta(days=ordinal - 1)
            return value if value.year == year else None
        if parts.get("week"):
            weekday = int(parts.get("weekday") or 1)
            return date.fromisocalendar(year, int(parts["week"]), weekday)
        return date(year, int(parts.get("month") or 1), int(parts.get("day") or 1))
    return None


def _parse_tz(token: str | None) -> timezone | None:
    if not token:
        return None
    if token == "Z":
        return timezone.utc
    sign = -1 if token[0] == "-" else 1
    digits = token[1:].replace(":", "")
    hours = int(digits[:2])
    minutes = int(digits[2:4] or 0)
    if hours > 23 or minutes > 59:
        raise ValueError(f"invalid offset {token}")
    return timezone(sign * timedelta(hours=hours, minutes=minutes))


def _parse_time_part(text: str) -> tuple[time, timezone | None] | None:
    match = _TIME_PATTERN.match(text)
    if match is None:
        return None
    parts = match.groupdict()
    fraction = (parts["fraction"] or "0")[:6].ljust(6, "0")
    hour = int(parts["hour"])
    minute = int(parts["minute"] or 0)
    second = int(parts["second"] or 0)
    tz = _parse_tz(parts["tz"])
    if hour == 24 and minute == 0 and second == 0:
        return time(0, 0), tz
    return time(hour, minute, second, int(fraction)), tz


def parse_iso_datetime(value: str) -> datetime | None:
    """Parse an ISO-8601 string; return None when it is not a valid date.

    Accepts calendar (``2024``, ``2024-01``, ``2024-01-15``, ``20240115``),
    ordinal (``2024-015``) and week (``2024-W03-1``) dates, optionally
    followed by ``T`` or a space and a time with an optional UTC offset.
    Bare two-digit centuries are not treated as dates.
    """
    text = value.strip()
    if not text:
        return None
    date_text, *rest = _DATE_TIME_DELIMITER.split(text, maxsplit=1)
    time_text = rest[0] if rest else ""
    if rest and not time_text:
        return None
    try:
        day = _parse_date_part(date_text)
        if day is None:
            return None
        if not time_text:
            return datetime.combine(day, time())
        parsed = _parse_time_part(time_text)
        if parsed is None:
            return None
        clock, tz = parsed
        result = datetime.combine(day, clock, tzinfo=tz)
        if time_text.startswith("24"):
            result += timedelta(days=1)
        return result
    except ValueError:
        return None


def as_date(value: object) -> date | None:
    """Coerce a cell or filter value to a calendar date, or None."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        parsed = parse_iso_datetime(value)
        return parsed.date() if parsed is not None else None
    return None


def parse_number(value: object) -> int | float | None:
    """Cast a value to a finite number, or return None.

    Strings are trimmed first; empty strings are not numbers. Integral
    values come back as ``int``. Hex/octal/binary literals are accepted.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = value
    elif isinstance(value, str):
        text = value.strip()
        if not text or "_" in text:
            return None
        try:
            number = float(text)
        except ValueError:
            try:
                return int(text, 0)
            except ValueError:
                return None
    else:
        return None
    if isinstance(number, float):
        if not math.isfinite(number):
            return None
        if number.is_integer():
            return int(number)
    return number
