"""Load tabular datasets (YAML or JSON) for the table surfaces."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable

import yaml
from pydantic import BaseModel, Field, ValidationError, model_validator

from ic_app.columns import ColumnSpec, key_accessor
from ic_common.errors import DatasetError, wrap_error
from ic_table.models import ColumnDefinition
from ic_table.settings import GlobalSearchConfig, TableSettings
from ic_table.status import StatusBadgeRenderer, StatusStyle
from ic_table.table_state import TableStateController

logger = logging.getLogger(__name__)


class DatasetFile(BaseModel):
    """Schema of a dataset file."""

    columns: list[ColumnSpec] = Field(min_length=1)
    rows: list[dict[str, Any]] = Field(default_factory=list)
    row_id_key: str | None = None
    status_column: str | None = None
    status_map: dict[str, StatusStyle] = Field(default_factory=dict)
    search: GlobalSearchConfig = Field(default_factory=GlobalSearchConfig)
    settings: TableSettings = Field(default_factory=TableSettings)

    @model_validator(mode="after")
    def _check_columns(self) -> "DatasetFile":
        ids = [column.id for column in self.columns]
        duplicates = sorted({column_id for column_id in ids if ids.count(column_id) > 1})
        if duplicates:
            raise ValueError(f"duplicate column ids: {', '.join(duplicates)}")
        if self.status_column is not None and self.status_column not in ids:
            raise ValueError(f"status_column '{self.status_column}' is not a column")
        return self


@dataclass
class Dataset:
    """A loaded dataset ready to be handed to a table controller."""

    columns: list[ColumnDefinition]
    rows: list[dict[str, Any]]
    settings: TableSettings
    search: GlobalSearchConfig
    status_column: str | None = None
    status_renderer: StatusBadgeRenderer | None = None
    row_id: Callable[[Any, int], str] | None = None
    source: Path | None = None

    def build_table(self, settings: TableSettings | None = None) -> TableStateController:
        return TableStateController(
            self.columns,
            self.rows,
            settings=settings or self.settings,
            row_id=self.row_id,
        )


def _row_id_getter(key: str) -> Callable[[Any, int], str]:
    read = key_accessor(key)

    def _get(row: Any, index: int) -> str:
        value = read(row)
        return str(index) if value is None else str(value)

    return _get


def parse_dataset(data: Any, *, source: Path | None = None) -> Dataset:
    """Validate raw dataset data and build engine inputs."""
    if not isinstance(data, dict):
        raise DatasetError(
            "Dataset must contain a mapping at the top level",
            context={"source": source},
        )
    try:
        spec = DatasetFile(**data)
    except ValidationError as exc:
        raise wrap_error(
            DatasetError,
            f"Invalid dataset: {exc.error_count()} validation error(s)",
            context={"source": source, "errors": [err["msg"] for err in exc.errors()]},
            cause=exc,
        ) from exc
    renderer = StatusBadgeRenderer(spec.status_map) if spec.status_column else None
    logger.debug(
        "Loaded dataset with %d column(s) and %d row(s)", len(spec.columns), len(spec.rows)
    )
    return Dataset(
        columns=[column.to_definition() for column in spec.columns],
        rows=spec.rows,
        settings=spec.settings,
        search=spec.search,
        status_column=spec.status_column,
        status_renderer=renderer,
        row_id=_row_id_getter(spec.row_id_key) if spec.row_id_key else None,
        source=source,
    )


def load_dataset(path: Path) -> Dataset:
    """Read a YAML or JSON dataset file."""
    path = Path(path).expanduser()
    if not path.exists():
        raise DatasetError(f"Dataset file not found: {path}", context={"path": path})
    try:
        text = path.read_text(encoding="utf-8")
        if path.suffix.lower() == ".json":
            data = json.loads(text) if text.strip() else {}
        else:
            data = yaml.safe_load(text) or {}
    except (OSError, ValueError, yaml.YAMLError) as exc:
        raise wrap_error(
            DatasetError, f"Cannot read dataset {path}", context={"path": path}, cause=exc
        ) from exc
    return parse_dataset(data, source=path)
