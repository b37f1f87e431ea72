"""Status string -> badge descriptor lookup."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict


class BadgeVariant(str, Enum):
    DEFAULT = "default"
    SECONDARY = "secondary"
    DESTRUCTIVE = "destructive"
    OUTLINE = "outline"


class StatusStyle(BaseModel):
    """Configured appearance of one status token."""

    model_config = ConfigDict(frozen=True)

    variant: BadgeVariant = BadgeVariant.DEFAULT
    label: str | None = None
    icon: str | None = None


@dataclass(frozen=True)
class StatusBadge:
    variant: BadgeVariant
    label: str
    icon: str | None
    role: str


# Style roles understood by the GUI stylesheet and the rich theme.
DEFAULT_STATUS_ROLES: dict[str, str] = {
    "pending": "status-warning",
    "processing": "status-info",
    "success": "status-success",
    "failed": "status-error",
    "custom1": "status-accent",
}
NEUTRAL_ROLE = "muted"


class StatusBadgeRenderer:
    """Case-insensitive status lookup with a fallback that echoes the raw text."""

    def __init__(
        self,
        status_map: Mapping[str, StatusStyle | Mapping[str, Any]] | None = None,
        roles: Mapping[str, str] | None = None,
    ) -> None:
        self._styles = {
            key.lower(): style if isinstance(style, StatusStyle) else StatusStyle(**style)
            for key, style in (status_map or {}).items()
        }
        self._roles = {
            key.lower(): role for key, role in (DEFAULT_STATUS_ROLES if roles is None else roles).items()
        }

    def role_for(self, status: Any) -> str:
        return self._roles.get(_token(status), NEUTRAL_ROLE)

    def render(self, status: Any) -> StatusBadge:
        raw = "" if status is None else str(status)
        style = self._styles.get(raw.lower())
        if style is None:
            return StatusBadge(
                variant=BadgeVariant.DEFAULT, label=raw, icon=None, role=self.role_for(raw)
            )
        return StatusBadge(
            variant=style.variant,
            label=style.label or raw,
            icon=style.icon,
            role=self.role_for(raw),
        )


def _token(status: Any) -> str:
    return "" if status is None else str(status).lower()
