"""Tests for row action menus."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from ic_table.actions import ActionKind, ActionMenuFactory, CustomAction

pytestmark = pytest.mark.unit_table

ROW = {"sku": "A-1", "name": "Alpha Widget"}


def test_menu_order_and_flags() -> None:
    archive = MagicMock()
    factory = ActionMenuFactory(
        on_view=MagicMock(),
        on_edit=MagicMock(),
        on_delete=MagicMock(),
        custom_actions=[CustomAction("Archive", archive, icon="archive"), CustomAction("Copy", MagicMock())],
    )

    menu = factory.build(ROW)

    assert menu.title == "Actions"
    assert [item.label for item in menu.items] == ["View", "Edit", "Delete", "Archive", "Copy"]
    assert [item.destructive for item in menu.items] == [False, False, True, False, False]
    assert [item.separator_before for item in menu.items] == [False, False, False, True, False]
    assert menu.item("Archive").icon == "archive"
    assert menu.item("Archive").kind is ActionKind.CUSTOM


def test_actions_emit_full_row() -> None:
    on_delete = MagicMock()
    factory = ActionMenuFactory(on_delete=on_delete)

    factory.build(ROW).item("Delete").trigger()

    on_delete.assert_called_once_with(ROW)


def test_delete_has_no_confirmation_step(table) -> None:
    on_delete = MagicMock()
    factory = ActionMenuFactory(on_delete=on_delete)
    before = table.snapshot()

    factory.build(table.page_rows[0]).item("Delete").trigger()

    on_delete.assert_called_once()
    assert table.snapshot() == before


def test_only_configured_actions_appear() -> None:
    menu = ActionMenuFactory(on_edit=MagicMock()).build(ROW)

    assert [item.kind for item in menu.items] == [ActionKind.EDIT]


def test_empty_factory_builds_empty_menu() -> None:
    factory = ActionMenuFactory()

    assert factory.build(ROW).is_empty
    assert factory.column_id == "actions"


def test_unknown_item_label_raises() -> None:
    with pytest.raises(KeyError):
        ActionMenuFactory(on_view=MagicMock()).build(ROW).item("Share")
