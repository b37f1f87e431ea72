"""Shared fixtures for ic_app tests."""

from __future__ import annotations

from pathlib import Path

import pytest

DATASET_YAML = """\
row_id_key: sku
status_column: status
status_map:
  pending: {variant: secondary, label: Pending, icon: clock}
  success: {variant: default, label: Done}
search:
  text_columns: [name]
  numeric_columns: [stock.count]
  email_column: owner
  date_columns: [created_at]
settings:
  default_page_size: 2
columns:
  - {id: sku, header: SKU, hideable: false}
  - {id: name, header: Name}
  - {id: owner, search_type: email}
  - {id: stock.count, header: Stock, key: stock.count, search_type: number}
  - {id: status, search_type: select, options: [pending, success, failed]}
  - {id: created_at, search_type: date}
rows:
  - {sku: A-1, name: Alpha, owner: alice@example.com, stock: {count: 4}, status: Pending, created_at: "2024-01-15"}
  - {sku: B-2, name: Beta, owner: bob@example.com, stock: {count: 42}, status: SUCCESS, created_at: "2024-02-01"}
  - {sku: C-3, name: Gamma, owner: carol@example.org, stock: {count: 42}, status: failed, created_at: "2024-01-20"}
"""


@pytest.fixture
def dataset_path(tmp_path: Path) -> Path:
    path = tmp_path / "inventory.yaml"
    path.write_text(DATASET_YAML, encoding="utf-8")
    return path
