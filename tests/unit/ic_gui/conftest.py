"""Pytest configuration for ic_gui tests."""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Any

import pytest

from tests.helpers.optional_imports import module_available

HAS_PYSIDE6 = module_available("PySide6")

# Skip collection of test files if GUI deps are missing.
if not HAS_PYSIDE6:
    collect_ignore = [
        path.name
        for path in Path(__file__).parent.glob("test_*.py")
        if path.name != "test_dependencies.py"
    ]
else:
    os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

ROWS: list[dict[str, Any]] = [
    {"sku": "A-1", "name": "Alpha", "amount": 42, "status": "pending", "created_at": "2024-01-15"},
    {"sku": "B-2", "name": "Beta", "amount": 7, "status": "success", "created_at": "2024-02-01"},
    {"sku": "C-3", "name": "Gamma", "amount": 42, "status": "failed", "created_at": "2024-01-20"},
    {"sku": "D-4", "name": "Delta", "amount": 3, "status": "success", "created_at": "2024-03-05"},
    {"sku": "E-5", "name": "Epsilon", "amount": 9, "status": "Unknownish", "created_at": None},
    {"sku": "F-6", "name": "Zeta", "amount": 1, "status": "pending", "created_at": "2024-04-01"},
]


@pytest.fixture(scope="session", autouse=True)
def qapp():
    """Ensure a QApplication exists for widget tests."""
    from PySide6.QtWidgets import QApplication

    app = QApplication.instance()
    if app is None:
        app = QApplication(sys.argv[:1])
    yield app


@pytest.fixture
def table():
    from ic_table.models import ColumnDefinition
    from ic_table.table_state import TableStateController

    def key(name: str):
        return lambda row: row.get(name)

    columns = [
        ColumnDefinition("sku", key("sku"), header="SKU", hideable=False),
        ColumnDefinition("name", key("name"), header="Name"),
        ColumnDefinition("amount", key("amount"), header="Amount", search_type="number"),
        ColumnDefinition("status", key("status"), header="Status", search_type="select"),
        ColumnDefinition("created_at", key("created_at"), header="Created", search_type="date"),
    ]
    return TableStateController(
        columns, [dict(row) for row in ROWS], row_id=lambda row, _i: row["sku"]
    )


@pytest.fixture
def search_config():
    from ic_table.settings import GlobalSearchConfig

    return GlobalSearchConfig(
        text_columns=["name"], numeric_columns=["amount"], email_column=None
    )
