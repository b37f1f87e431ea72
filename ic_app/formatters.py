"""Formatting helpers for table cells."""

from __future__ import annotations

from datetime import date, datetime
from typing import Any


def format_cell(value: Any, fallback: str = "-") -> str:
    """Format a cell value for display."""
    if value is None:
        return fallback
    if isinstance(value, datetime):
        return value.strftime("%Y-%m-%d %H:%M")
    if isinstance(value, date):
        return value.strftime("%Y-%m-%d")
    if isinstance(value, bool):
        return "yes" if value else "no"
    if isinstance(value, float):
        return f"{value:,.2f}"
    if isinstance(value, (list, tuple)):
        return ", ".join(str(item) for item in value) or fallback
    return str(value)
