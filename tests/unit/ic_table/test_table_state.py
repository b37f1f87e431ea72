"""Tests for TableStateController."""

from __future__ import annotations

import logging
from datetime import date
from unittest.mock import MagicMock

import pytest

from ic_common.errors import TableConfigurationError, UnknownColumnError
from ic_table.models import (
    ColumnDefinition,
    DateRange,
    PaginationState,
    SortDirection,
    SortEntry,
    TableSnapshot,
)
from ic_table.settings import TableSettings
from ic_table.table_state import TableStateController

pytestmark = pytest.mark.unit_table


def _skus(rows) -> list[str]:
    return [row["sku"] for row in rows]


class TestConstruction:
    def test_duplicate_column_ids_are_rejected(self, columns, rows) -> None:
        with pytest.raises(TableConfigurationError):
            TableStateController([*columns, columns[0]], rows)

    def test_duplicate_row_ids_are_rejected(self, columns, rows) -> None:
        with pytest.raises(TableConfigurationError):
            TableStateController(columns, rows, row_id=lambda row, _i: "same")

    def test_default_row_ids_are_indexes(self, columns, rows) -> None:
        table = TableStateController(columns, rows)

        assert table.page_row_ids == ["0", "1", "2", "3", "4"]
        assert table.row_id(rows[3]) == "3"
        assert table.row_id({"sku": "A-1"}) is None

    def test_unknown_column_lookup_raises(self, table) -> None:
        with pytest.raises(UnknownColumnError) as excinfo:
            table.column("bogus")
        assert excinfo.value.context == {"column_id": "bogus"}


class TestSorting:
    def test_toggle_cycles_ascending_then_descending(self, table) -> None:
        assert table.toggle_sorting("amount") is SortDirection.ASC
        assert _skus(table.page_rows) == ["I-9", "F-6", "D-4", "L-12", "B-2"]

        assert table.toggle_sorting("amount") is SortDirection.DESC
        assert _skus(table.page_rows)[:2] == ["J-10", "E-5"]

        assert table.toggle_sorting("amount") is SortDirection.ASC

    def test_other_column_replaces_active_sort(self, table) -> None:
        table.toggle_sorting("amount")
        table.toggle_sorting("amount")

        assert table.toggle_sorting("name") is SortDirection.ASC
        assert table.sorting == (SortEntry("name", SortDirection.ASC),)
        assert table.sort_direction("amount") is None

    def test_missing_values_sort_last(self, table) -> None:
        table.set_page_size(20)
        table.set_sorting([("created_at", "asc")])
        assert table.page_rows[-1]["sku"] == "F-6"

        table.set_sorting([("created_at", "desc")])
        assert table.page_rows[-1]["sku"] == "F-6"
        assert table.page_rows[0]["sku"] == "J-10"

    def test_only_first_sort_entry_is_kept(self, table) -> None:
        table.set_sorting([("amount", "desc"), ("name", "asc")])

        assert table.sorting == (SortEntry("amount", SortDirection.DESC),)

    def test_non_sortable_column_is_ignored(self, table, caplog) -> None:
        with caplog.at_level(logging.WARNING, logger="ic_table.table_state"):
            assert table.toggle_sorting("period") is None
        assert table.sorting == ()
        assert "not sortable" in caplog.text

    def test_clear_sorting_restores_data_order(self, table) -> None:
        table.toggle_sorting("name")
        table.clear_sorting()

        assert _skus(table.page_rows) == ["A-1", "B-2", "C-3", "D-4", "E-5"]


class TestFilters:
    def test_numeric_filter_reverts_when_cleared(self, table) -> None:
        table.set_column_filter("amount", "42")
        assert table.filtered_count == 3

        table.set_column_filter("amount", "")
        assert table.filtered_count == 12
        assert "amount" not in table.column_filters

    def test_non_numeric_input_clears_filter(self, table) -> None:
        table.set_column_filter("amount", 42)
        table.set_column_filter("amount", "abc")

        assert table.column_filters == {}

    def test_filters_combine_with_and(self, table) -> None:
        table.update_column_filters({"status": "success", "name": "a"})

        assert _skus(table.filtered_rows) == ["B-2", "H-8"]

    def test_date_range_filter(self, table) -> None:
        table.set_column_filter("period", DateRange(date(2024, 1, 1), date(2024, 1, 31)))

        assert _skus(table.filtered_rows) == ["A-1", "D-4", "G-7", "I-9", "K-11"]

    def test_select_value_outside_options_is_dropped(self, table) -> None:
        table.set_column_filter("status", "archived")

        assert table.column_filters == {}

    def test_unknown_column_write_is_atomic(self, table) -> None:
        table.set_column_filter("name", "alpha")

        with pytest.raises(UnknownColumnError):
            table.update_column_filters({"email": "x", "bogus": 1})

        assert table.column_filters == {"name": "alpha"}

    def test_non_filterable_column_is_ignored(self, table) -> None:
        table.set_column_filter("notes", "x")

        assert table.column_filters == {}

    def test_set_column_filters_replaces_state(self, table) -> None:
        table.set_column_filter("name", "alpha")

        table.set_column_filters({"amount": 42})

        assert table.column_filters == {"amount": 42}

    def test_reset_selected_columns(self, table) -> None:
        table.update_column_filters({"name": "a", "amount": 42})

        table.reset_column_filters(["name"])
        assert table.column_filters == {"amount": 42}

        table.reset_column_filters()
        assert table.column_filters == {}

    def test_filter_inputs_write_back_to_table(self, table) -> None:
        inputs = {control.column_id: control for control in table.filter_inputs()}

        assert "notes" not in inputs
        inputs["amount"].handle_input("42")

        assert table.filter_value("amount") == 42


class TestFacets:
    def test_facets_follow_filtered_set(self, table) -> None:
        assert table.faceted_unique_values("status")["success"] == 4

        table.set_column_filter("amount", 42)

        assert table.faceted_unique_values("status") == {
            "pending": 1,
            "failed": 1,
            "processing": 1,
        }

    def test_select_without_options_uses_facets(self) -> None:
        column = ColumnDefinition("kind", lambda row: row["kind"], search_type="select")
        table = TableStateController([column], [{"kind": "b"}, {"kind": "a"}, {"kind": "b"}, {"kind": None}])

        (control,) = table.filter_inputs()

        assert [option.value for option in control.options] == ["a", "b"]
        assert table.faceted_unique_values("kind") == {"b": 2, "a": 1, None: 1}


class TestVisibility:
    def test_toggle_hides_and_shows(self, table) -> None:
        assert table.toggle_column_visibility("name") is False
        assert "name" not in [c.id for c in table.visible_columns]

        assert table.toggle_column_visibility("name") is True

    def test_non_hideable_column_stays_visible(self, table) -> None:
        table.set_column_visibility({"sku": False, "email": False})

        assert table.is_column_visible("sku") is True
        assert table.is_column_visible("email") is False

    def test_unknown_column_visibility_raises(self, table) -> None:
        with pytest.raises(UnknownColumnError):
            table.set_column_visibility({"bogus": False})


class TestSelection:
    def test_selection_survives_filters_but_counts_intersect(self, table) -> None:
        table.set_row_selection({"A-1", "B-2"})
        table.set_column_filter("status", "success")

        assert table.row_selection == frozenset({"A-1", "B-2"})
        assert table.selected_count == 1
        assert _skus(table.filtered_selected_rows) == ["B-2"]
        assert table.selection_summary() == "1 of 4 row(s) selected."

        table.reset_column_filters()
        assert table.selected_count == 2

    def test_unknown_ids_are_dropped(self, table) -> None:
        table.set_row_selection({"A-1", "Z-99"})

        assert table.row_selection == frozenset({"A-1"})

    def test_toggle_row(self, table) -> None:
        assert table.toggle_row_selected("C-3") is True
        assert table.toggle_row_selected("C-3") is False

    def test_toggle_page_rows(self, table) -> None:
        table.toggle_row_selected("A-1")
        table.toggle_page_rows_selected()

        assert table.is_all_page_rows_selected()
        assert table.selected_count == 5

        table.toggle_page_rows_selected()
        assert table.selected_count == 0

    def test_set_data_drops_missing_ids(self, table, rows) -> None:
        table.set_row_selection({"A-1", "L-12"})

        table.set_data(rows[:6])

        assert table.row_selection == frozenset({"A-1"})
        assert table.total_count == 6

    def test_selection_disabled(self, columns, rows) -> None:
        table = TableStateController(columns, rows, settings=TableSettings(selection=False))

        table.set_row_selection({"0", "1"})

        assert table.row_selection == frozenset()
        assert table.selected_count == 0

    def test_clear_selection(self, table) -> None:
        table.set_row_selection({"A-1"})
        table.clear_selection()
        assert table.row_selection == frozenset()


class TestPagination:
    def test_page_count_and_clamp_after_filtering(self, table) -> None:
        assert table.page_count == 3

        table.set_page_index(2)
        assert _skus(table.page_rows) == ["K-11", "L-12"]

        table.set_column_filter("status", "success")

        assert table.filtered_count == 4
        assert table.page_count == 1
        assert table.pagination.page_index == 0

    def test_out_of_range_index_is_clamped(self, table) -> None:
        table.set_page_index(99)
        assert table.pagination.page_index == 2

        table.set_page_index(-3)
        assert table.pagination.page_index == 0

    def test_navigation(self, table) -> None:
        assert not table.can_previous_page
        table.next_page()
        assert table.pagination.page_index == 1
        assert table.can_previous_page and table.can_next_page

        table.last_page()
        assert not table.can_next_page
        assert table.page_summary() == "Page 3 of 3"

        table.previous_page()
        table.first_page()
        assert table.pagination.page_index == 0

    def test_page_size_change_keeps_first_row(self, table) -> None:
        table.set_page_index(2)

        table.set_page_size(10)

        assert table.pagination == PaginationState(page_index=1, page_size=10)
        assert _skus(table.page_rows) == ["K-11", "L-12"]

    def test_invalid_page_size_raises(self, table) -> None:
        with pytest.raises(TableConfigurationError):
            table.set_page_size(0)

    def test_empty_result_has_one_page(self, table) -> None:
        table.set_column_filter("name", "no such thing")

        assert table.page_count == 1
        assert table.page_rows == []
        assert not table.can_next_page

    def test_pagination_disabled_shows_all_rows(self, columns, rows) -> None:
        table = TableStateController(columns, rows, settings=TableSettings(pagination=False))

        assert table.page_count == 1
        assert len(table.page_rows) == 12


class TestSnapshots:
    def test_callbacks_receive_snapshot(self, table) -> None:
        listener = MagicMock()
        table.register_callback(listener)

        table.set_column_filter("amount", 42)

        (snapshot,), _ = listener.call_args
        assert isinstance(snapshot, TableSnapshot)
        assert snapshot.filtered_count == 3
        assert snapshot.total_count == 12
        assert snapshot.filters == {"amount": 42}
        assert snapshot.row_ids == ["A-1", "C-3", "K-11"]

    def test_failing_callback_is_logged(self, table, caplog) -> None:
        table.register_callback(MagicMock(side_effect=RuntimeError("boom")))
        healthy = MagicMock()
        table.register_callback(healthy)

        with caplog.at_level(logging.ERROR, logger="ic_table.table_state"):
            table.next_page()

        healthy.assert_called_once()
        assert "callback failed" in caplog.text

    def test_snapshot_lists_visible_columns(self, table) -> None:
        table.toggle_column_visibility("email")

        snapshot = table.snapshot()

        assert "email" not in snapshot.visible_column_ids
        assert snapshot.visibility["email"] is False
