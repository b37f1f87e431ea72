"""Build engine column definitions from declarative column specs."""

from __future__ import annotations

from typing import Any, Callable, Mapping

from pydantic import BaseModel, Field, field_validator

from ic_table.models import ColumnDefinition, FilterOption, SearchType


def key_accessor(path: str) -> Callable[[Any], Any]:
    """Return an accessor for a dotted key path (``"category.name"``).

    Each step reads a mapping key or, failing that, an attribute. A missing
    step yields None.
    """
    parts = [part for part in path.split(".") if part]

    def _read(row: Any) -> Any:
        value = row
        for part in parts:
            if value is None:
                return None
            if isinstance(value, Mapping):
                value = value.get(part)
            else:
                value = getattr(value, part, None)
        return value

    return _read


class ColumnSpec(BaseModel):
    """One column as declared in a dataset file."""

    id: str = Field(min_length=1)
    header: str | None = None
    key: str | None = Field(default=None, description="Dotted path into the row; defaults to id")
    sortable: bool = True
    filterable: bool = True
    hideable: bool = True
    search_type: SearchType = SearchType.TEXT
    options: list[FilterOption] = Field(default_factory=list)

    @field_validator("search_type", mode="before")
    @classmethod
    def _lenient_search_type(cls, value: Any) -> SearchType:
        return SearchType.parse(value)

    @field_validator("options", mode="before")
    @classmethod
    def _coerce_options(cls, value: Any) -> Any:
        if not isinstance(value, list):
            return value
        return [
            {"value": str(item), "label": str(item)} if not isinstance(item, Mapping) else item
            for item in value
        ]

    def to_definition(self) -> ColumnDefinition:
        return ColumnDefinition(
            id=self.id,
            accessor=key_accessor(self.key or self.id),
            header=self.header,
            sortable=self.sortable,
            filterable=self.filterable,
            hideable=self.hideable,
            search_type=self.search_type,
            options=tuple(self.options),
        )
