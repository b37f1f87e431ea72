"""Shared fixtures for ic_ui tests."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock

import pytest

DATASET_YAML = """\
row_id_key: sku
status_column: status
status_map:
  pending: {variant: secondary, label: Waiting}
search:
  text_columns: [name]
  numeric_columns: [amount]
  email_column: owner
columns:
  - {id: sku, header: SKU}
  - {id: name, header: Name}
  - {id: owner, header: Owner, search_type: email}
  - {id: amount, header: Amount, search_type: number}
  - {id: status, header: Status, search_type: select}
  - {id: created_at, header: Created, search_type: date}
  - {id: period, header: Period, key: created_at, search_type: date-range}
rows:
  - {sku: A-1, name: Alpha, owner: alice@example.com, amount: 4, status: pending, created_at: "2024-01-15"}
  - {sku: B-2, name: Beta, owner: bob@example.com, amount: 42, status: success, created_at: "2024-02-01"}
  - {sku: C-3, name: Gamma, owner: carol@example.org, amount: 42, status: failed, created_at: "2024-01-20"}
  - {sku: D-4, name: Delta, owner: dave@example.com, amount: 7, status: success, created_at: "2024-03-05"}
  - {sku: E-5, name: Epsilon, owner: erin@example.com, amount: 9, status: pending, created_at: "2024-03-09"}
  - {sku: F-6, name: Zeta, owner: frank@example.com, amount: 1, status: failed, created_at: "2024-04-01"}
"""


@pytest.fixture
def dataset_path(tmp_path: Path) -> Path:
    path = tmp_path / "inventory.yaml"
    path.write_text(DATASET_YAML, encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def _no_logging_setup(monkeypatch: pytest.MonkeyPatch) -> MagicMock:
    """Keep the CLI callback from replacing pytest's root handlers."""
    configure = MagicMock()
    monkeypatch.setattr("ic_ui.cli.main.configure_logging", configure)
    return configure
