"""Table and global-search configuration models."""

from __future__ import annotations

import os
from typing import Any

from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from ic_common.config.env import parse_bool_env, parse_int_env
from ic_common.errors import TableConfigurationError, wrap_error

DEFAULT_PAGE_SIZE_OPTIONS = [5, 10, 20, 30, 40, 50]

_ENV_FIELDS: dict[str, tuple[str, Any]] = {
    "IC_TABLE_PAGE_SIZE": ("default_page_size", parse_int_env),
    "IC_TABLE_PAGINATION": ("pagination", parse_bool_env),
    "IC_TABLE_SELECTION": ("selection", parse_bool_env),
    "IC_SEARCH_DELAY_MS": ("search_delay_ms", parse_int_env),
    "IC_SEARCH_MAX_WAIT_MS": ("search_max_wait_ms", parse_int_env),
}


class TableSettings(BaseModel):
    """Initial configuration for one table instance."""

    default_page_size: int = Field(default=5, ge=1)
    pagination: bool = True
    selection: bool = True
    page_size_options: list[int] = Field(
        default_factory=lambda: list(DEFAULT_PAGE_SIZE_OPTIONS)
    )
    search_delay_ms: int = Field(default=300, ge=0)
    search_max_wait_ms: int | None = Field(default=None, ge=0)

    @field_validator("page_size_options")
    @classmethod
    def _positive_sizes(cls, value: list[int]) -> list[int]:
        if any(size < 1 for size in value):
            raise ValueError("page sizes must be >= 1")
        return sorted(set(value))

    @classmethod
    def build(cls, **values: Any) -> "TableSettings":
        """Validate settings, raising TableConfigurationError on bad input."""
        try:
            return cls(**values)
        except ValidationError as exc:
            raise wrap_error(
                TableConfigurationError,
                "Invalid table settings",
                context={"errors": [err["msg"] for err in exc.errors()]},
                cause=exc,
            ) from exc

    @classmethod
    def from_env(cls, **overrides: Any) -> "TableSettings":
        """Build settings from ``IC_TABLE_*``/``IC_SEARCH_*`` env vars.

        Explicit keyword overrides win; unparsable env values are ignored.
        """
        values: dict[str, Any] = {}
        for env_name, (field_name, parser) in _ENV_FIELDS.items():
            parsed = parser(os.environ.get(env_name))
            if parsed is not None:
                values[field_name] = parsed
        values.update(overrides)
        return cls.build(**values)


class GlobalSearchConfig(BaseModel):
    """Which columns the global search fans each query kind out to."""

    text_columns: list[str] = Field(default_factory=list)
    email_column: str | None = "email"
    numeric_columns: list[str] = Field(default_factory=list)
    date_columns: list[str] = Field(default_factory=lambda: ["created_at"])

    @model_validator(mode="after")
    def _strip_blank_email(self) -> "GlobalSearchConfig":
        if self.email_column is not None and not self.email_column.strip():
            self.email_column = None
        return self

    @property
    def owned_columns(self) -> list[str]:
        """Every column id the dispatcher may write, in first-seen order."""
        ordered: list[str] = []
        email = [self.email_column] if self.email_column else []
        for column_id in (
            *self.date_columns,
            *self.numeric_columns,
            *email,
            *self.text_columns,
        ):
            if column_id not in ordered:
                ordered.append(column_id)
        return ordered
