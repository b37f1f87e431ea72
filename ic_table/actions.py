"""Row-scoped action menus.

Menus only emit callbacks carrying the row record; they never touch table
state. Delete is flagged destructive for styling and has no confirmation
step of its own.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Sequence

RowCallback = Callable[[Any], None]

ACTIONS_COLUMN_ID = "actions"
MENU_TITLE = "Actions"


class ActionKind(str, Enum):
    VIEW = "view"
    EDIT = "edit"
    DELETE = "delete"
    CUSTOM = "custom"


@dataclass(frozen=True)
class CustomAction:
    label: str
    action: RowCallback
    icon: str | None = None


@dataclass(frozen=True)
class ActionItem:
    label: str
    kind: ActionKind
    callback: RowCallback
    row: Any
    destructive: bool = False
    icon: str | None = None
    separator_before: bool = False

    def trigger(self) -> None:
        self.callback(self.row)


@dataclass(frozen=True)
class ActionMenu:
    title: str
    items: tuple[ActionItem, ...]

    @property
    def is_empty(self) -> bool:
        return not self.items

    def item(self, label: str) -> ActionItem:
        for item in self.items:
            if item.label == label:
                return item
        raise KeyError(label)


class ActionMenuFactory:
    """Build the per-row action menu from optional callbacks."""

    def __init__(
        self,
        *,
        on_view: RowCallback | None = None,
        on_edit: RowCallback | None = None,
        on_delete: RowCallback | None = None,
        custom_actions: Sequence[CustomAction] = (),
    ) -> None:
        self._on_view = on_view
        self._on_edit = on_edit
        self._on_delete = on_delete
        self._custom_actions = tuple(custom_actions)

    @property
    def column_id(self) -> str:
        return ACTIONS_COLUMN_ID

    def build(self, row: Any) -> ActionMenu:
        items: list[ActionItem] = []
        if self._on_view is not None:
            items.append(ActionItem("View", ActionKind.VIEW, self._on_view, row))
        if self._on_edit is not None:
            items.append(ActionItem("Edit", ActionKind.EDIT, self._on_edit, row))
        if self._on_delete is not None:
            items.append(
                ActionItem("Delete", ActionKind.DELETE, self._on_delete, row, destructive=True)
            )
        for index, custom in enumerate(self._custom_actions):
            items.append(
                ActionItem(
                    custom.label,
                    ActionKind.CUSTOM,
                    custom.action,
                    row,
                    icon=custom.icon,
                    separator_before=index == 0,
                )
            )
        return ActionMenu(title=MENU_TITLE, items=tuple(items))
