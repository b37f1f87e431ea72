"""Shared fixtures for ic_table tests."""

from __future__ import annotations

from typing import Any

import pytest

from ic_table.models import ColumnDefinition, FilterOption, SearchType
from ic_table.settings import TableSettings
from ic_table.table_state import TableStateController

STATUS_OPTIONS = tuple(
    FilterOption(value=value, label=value.title())
    for value in ("pending", "processing", "success", "failed", "custom1")
)

INVENTORY: list[dict[str, Any]] = [
    {"sku": "A-1", "name": "Alpha Widget", "email": "alice@example.com", "amount": 42, "status": "pending", "created_at": "2024-01-15"},
    {"sku": "B-2", "name": "Beta Gadget", "email": "bob@example.com", "amount": 17.5, "status": "success", "created_at": "2024-02-01"},
    {"sku": "C-3", "name": "Gamma Tool", "email": "carol@example.org", "amount": 42, "status": "failed", "created_at": "2023-12-31"},
    {"sku": "D-4", "name": "Delta Part", "email": "dave@example.com", "amount": 8, "status": "processing", "created_at": "2024-01-15T10:30:00"},
    {"sku": "E-5", "name": "Epsilon Kit", "email": "erin@example.net", "amount": 120, "status": "success", "created_at": "2024-03-10"},
    {"sku": "F-6", "name": "Zeta Box", "email": None, "amount": 5, "status": "pending", "created_at": None},
    {"sku": "G-7", "name": "Eta Cable", "email": "frank@example.com", "amount": 99, "status": "custom1", "created_at": "2024-01-20"},
    {"sku": "H-8", "name": "Theta Board", "email": "grace@example.com", "amount": 64, "status": "success", "created_at": "2024-02-14"},
    {"sku": "I-9", "name": "Iota Chip", "email": "heidi@example.com", "amount": 3, "status": "failed", "created_at": "2024-01-02"},
    {"sku": "J-10", "name": "Kappa Fan", "email": "ivan@example.com", "amount": 250, "status": "pending", "created_at": "2024-04-01"},
    {"sku": "K-11", "name": "Lambda Lamp", "email": "judy@example.com", "amount": 42, "status": "processing", "created_at": "2024-01-31"},
    {"sku": "L-12", "name": "Mu Motor", "email": "mallory@example.com", "amount": 11, "status": "success", "created_at": "2024-02-29"},
]


def _key(name: str):
    return lambda row: row.get(name)


def make_columns() -> list[ColumnDefinition]:
    return [
        ColumnDefinition("sku", _key("sku"), header="SKU", hideable=False),
        ColumnDefinition("name", _key("name"), header="Name"),
        ColumnDefinition("email", _key("email"), header="Email", search_type=SearchType.EMAIL),
        ColumnDefinition("amount", _key("amount"), header="Amount", search_type=SearchType.NUMBER),
        ColumnDefinition(
            "status",
            _key("status"),
            header="Status",
            search_type=SearchType.SELECT,
            options=STATUS_OPTIONS,
        ),
        ColumnDefinition("created_at", _key("created_at"), header="Created", search_type="date"),
        ColumnDefinition(
            "period", _key("created_at"), header="Period", search_type="date-range", sortable=False
        ),
        ColumnDefinition("notes", _key("notes"), filterable=False, sortable=False),
    ]


@pytest.fixture
def rows() -> list[dict[str, Any]]:
    return [dict(row) for row in INVENTORY]


@pytest.fixture
def columns() -> list[ColumnDefinition]:
    return make_columns()


@pytest.fixture
def table(columns, rows) -> TableStateController:
    return TableStateController(
        columns, rows, settings=TableSettings(), row_id=lambda row, _i: row["sku"]
    )
