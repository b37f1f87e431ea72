"""Presentation-state controller for one data table.

Owns sorting, column filters, column visibility, row selection and
pagination, and derives the visible row window through a fixed
filter -> sort -> paginate pipeline after every state change.
"""

from __future__ import annotations

import logging
import math
from collections import Counter
from typing import Any, Callable, Iterable, Mapping, Sequence

from ic_common.errors import TableConfigurationError, UnknownColumnError
from ic_table.filter_input import ColumnFilterInput, normalize_filter_value
from ic_table.filtering import is_empty_filter, matches_filter
from ic_table.models import (
    ColumnDefinition,
    FilterOption,
    FilterValue,
    PaginationState,
    SearchType,
    SortDirection,
    SortEntry,
    TableSnapshot,
)
from ic_table.settings import TableSettings
from ic_table.sorting import sort_indices, sort_key

logger = logging.getLogger(__name__)

RowIdGetter = Callable[[Any, int], str]


def _index_row_id(row: Any, index: int) -> str:
    return str(index)


class TableStateController:
    """Sorting/filter/visibility/selection/pagination state for one table.

    Selection policy: selected ids survive filtering. An id hidden by the
    current filters stays recorded, but selection counts and bulk-action
    targets only ever use the intersection with the filtered row set.
    """

    def __init__(
        self,
        columns: Sequence[ColumnDefinition],
        rows: Sequence[Any] = (),
        *,
        settings: TableSettings | None = None,
        row_id: RowIdGetter | None = None,
    ) -> None:
        self._settings = settings or TableSettings()
        self._columns: dict[str, ColumnDefinition] = {}
        for column in columns:
            if column.id in self._columns:
                raise TableConfigurationError(
                    f"Duplicate column id '{column.id}'",
                    context={"column_id": column.id},
                )
            self._columns[column.id] = column
        self._row_id = row_id or _index_row_id

        self._rows: list[Any] = []
        self._row_ids: list[str] = []
        self._index_by_id: dict[str, int] = {}

        self._sorting: tuple[SortEntry, ...] = ()
        self._filters: dict[str, FilterValue] = {}
        self._visibility: dict[str, bool] = {}
        self._selection: set[str] = set()
        self._page_index = 0
        self._page_size = self._settings.default_page_size

        self._filtered: list[int] = []
        self._sorted: list[int] = []
        self._callbacks: list[Callable[[TableSnapshot], None]] = []

        self._load_rows(rows)
        self._recompute()

    # ------------------------------------------------------------------
    # Columns and configuration
    # ------------------------------------------------------------------

    @property
    def settings(self) -> TableSettings:
        return self._settings

    @property
    def columns(self) -> list[ColumnDefinition]:
        return list(self._columns.values())

    @property
    def column_ids(self) -> list[str]:
        return list(self._columns)

    def column(self, column_id: str) -> ColumnDefinition:
        try:
            return self._columns[column_id]
        except KeyError:
            raise UnknownColumnError(
                f"Unknown column '{column_id}'", context={"column_id": column_id}
            ) from None

    def register_callback(self, callback: Callable[[TableSnapshot], None]) -> None:
        """Register a callback invoked with a snapshot after every change."""
        self._callbacks.append(callback)

    # ------------------------------------------------------------------
    # Data
    # ------------------------------------------------------------------

    def set_data(self, rows: Sequence[Any]) -> None:
        """Replace the row collection; selected ids no longer present are dropped."""
        self._load_rows(rows)
        self._selection &= set(self._index_by_id)
        self._recompute()
        self._notify()

    def _load_rows(self, rows: Sequence[Any]) -> None:
        self._rows = list(rows)
        self._row_ids = [self._row_id(row, i) for i, row in enumerate(self._rows)]
        self._index_by_id = {row_id: i for i, row_id in enumerate(self._row_ids)}
        if len(self._index_by_id) != len(self._row_ids):
            raise TableConfigurationError(
                "Row ids must be unique", context={"rows": len(self._row_ids)}
            )

    def row_id(self, row: Any) -> str | None:
        """Return the id of a row object from the current data, if present."""
        for index, candidate in enumerate(self._rows):
            if candidate is row:
                return self._row_ids[index]
        return None

    # ------------------------------------------------------------------
    # Sorting
    # ------------------------------------------------------------------

    @property
    def sorting(self) -> tuple[SortEntry, ...]:
        return self._sorting

    def sort_direction(self, column_id: str) -> SortDirection | None:
        for entry in self._sorting:
            if entry.column_id == column_id:
                return entry.direction
        return None

    def set_sorting(self, sorting: Sequence[SortEntry | tuple[str, str]]) -> None:
        """Replace the sort state; only the first entry is kept."""
        entries = [
            entry if isinstance(entry, SortEntry) else SortEntry(entry[0], SortDirection(entry[1]))
            for entry in sorting
        ]
        if len(entries) > 1:
            logger.debug("Only one sort column is supported; keeping '%s'", entries[0].column_id)
        if entries:
            column = self.column(entries[0].column_id)
            if not column.sortable:
                logger.warning("Column '%s' is not sortable; sort ignored", column.id)
                return
        self._sorting = tuple(entries[:1])
        self._recompute()
        self._notify()

    def toggle_sorting(self, column_id: str) -> SortDirection | None:
        """Cycle ascending -> descending -> ascending on ``column_id``.

        A different column replaces the active sort and starts ascending.
        """
        column = self.column(column_id)
        if not column.sortable:
            logger.warning("Column '%s' is not sortable; toggle ignored", column_id)
            return None
        current = self.sort_direction(column_id)
        direction = SortDirection.DESC if current is SortDirection.ASC else SortDirection.ASC
        logger.debug("Sorting '%s' %s", column_id, direction.value)
        self.set_sorting([SortEntry(column_id, direction)])
        return direction

    def clear_sorting(self) -> None:
        self.set_sorting([])

    # ------------------------------------------------------------------
    # Filters
    # ------------------------------------------------------------------

    @property
    def column_filters(self) -> dict[str, FilterValue]:
        return dict(self._filters)

    def filter_value(self, column_id: str) -> FilterValue | None:
        return self._filters.get(column_id)

    def set_column_filters(self, filters: Mapping[str, Any]) -> None:
        """Replace the whole filter state."""
        self._filters = {}
        self._apply_filter_updates(filters)
        self._recompute()
        self._notify()

    def update_column_filters(self, updates: Mapping[str, Any]) -> None:
        """Merge filter updates in one write; ``None``/empty values remove."""
        self._apply_filter_updates(updates)
        self._recompute()
        self._notify()

    def set_column_filter(self, column_id: str, value: Any) -> None:
        self.update_column_filters({column_id: value})

    def reset_column_filters(self, column_ids: Iterable[str] | None = None) -> None:
        if column_ids is None:
            self.set_column_filters({})
        else:
            self.update_column_filters({column_id: None for column_id in column_ids})

    def _apply_filter_updates(self, updates: Mapping[str, Any]) -> None:
        for column_id in updates:
            self.column(column_id)
        for column_id, raw in updates.items():
            column = self.column(column_id)
            if not column.filterable:
                logger.warning("Column '%s' is not filterable; filter ignored", column_id)
                continue
            value = normalize_filter_value(column.search_type, raw, column.options)
            if is_empty_filter(value):
                if raw is not None and not is_empty_filter(raw):
                    logger.debug(
                        "Dropped %s filter on '%s': %r is not a valid value",
                        column.search_type.value,
                        column_id,
                        raw,
                    )
                self._filters.pop(column_id, None)
            else:
                self._filters[column_id] = value

    def filter_inputs(self) -> list[ColumnFilterInput]:
        """Build filter inputs for every filterable column, wired to this table.

        Select inputs without declared options offer the column's facets.
        """
        inputs = []
        for column in self._columns.values():
            if not column.filterable:
                continue
            options = column.options
            if not options and column.search_type is SearchType.SELECT:
                options = tuple(self.facet_options(column.id))

            def on_change(value: FilterValue | None, column_id: str = column.id) -> None:
                self.set_column_filter(column_id, value)

            inputs.append(
                ColumnFilterInput.for_column(
                    column,
                    value=self._filters.get(column.id),
                    options=options,
                    on_change=on_change,
                )
            )
        return inputs

    def faceted_unique_values(self, column_id: str) -> dict[Any, int]:
        """Distinct values of a column across the filtered rows, with counts."""
        column = self.column(column_id)
        counts: Counter[Any] = Counter()
        for index in self._filtered:
            value = column.value(self._rows[index])
            try:
                counts[value] += 1
            except TypeError:
                counts[str(value)] += 1
        return dict(counts)

    def facet_options(self, column_id: str) -> list[FilterOption]:
        """Facet values as sorted select options (``None`` excluded)."""
        values = [v for v in self.faceted_unique_values(column_id) if v is not None]
        values.sort(key=sort_key)
        return [FilterOption(value=str(v), label=str(v)) for v in values]

    # ------------------------------------------------------------------
    # Visibility
    # ------------------------------------------------------------------

    @property
    def column_visibility(self) -> dict[str, bool]:
        return {column_id: self.is_column_visible(column_id) for column_id in self._columns}

    def is_column_visible(self, column_id: str) -> bool:
        return self._visibility.get(column_id, True)

    @property
    def visible_columns(self) -> list[ColumnDefinition]:
        return [c for c in self._columns.values() if self.is_column_visible(c.id)]

    def set_column_visibility(self, visibility: Mapping[str, bool]) -> None:
        """Replace the visibility state; unlisted columns are visible."""
        resolved: dict[str, bool] = {}
        for column_id, visible in visibility.items():
            column = self.column(column_id)
            if not visible and not column.hideable:
                logger.warning("Column '%s' cannot be hidden", column_id)
                continue
            resolved[column_id] = bool(visible)
        self._visibility = resolved
        self._notify()

    def toggle_column_visibility(self, column_id: str) -> bool:
        visibility = dict(self._visibility)
        visibility[column_id] = not self.is_column_visible(column_id)
        self.set_column_visibility(visibility)
        return self.is_column_visible(column_id)

    # ------------------------------------------------------------------
    # Selection
    # ------------------------------------------------------------------

    @property
    def row_selection(self) -> frozenset[str]:
        """Every id the user marked, including rows hidden by filters."""
        return frozenset(self._selection)

    def is_row_selected(self, row_id: str) -> bool:
        return row_id in self._selection

    def set_row_selection(self, row_ids: Iterable[str]) -> None:
        """Replace the selection; ids not present in the data are dropped."""
        if not self._settings.selection:
            logger.debug("Selection is disabled; ignoring selection change")
            return
        requested = set(row_ids)
        unknown = requested - set(self._index_by_id)
        if unknown:
            logger.debug("Dropping %d unknown row id(s) from selection", len(unknown))
        self._selection = requested - unknown
        self._notify()

    def toggle_row_selected(self, row_id: str) -> bool:
        selection = set(self._selection)
        selection.symmetric_difference_update({row_id})
        self.set_row_selection(selection)
        return self.is_row_selected(row_id)

    def is_all_page_rows_selected(self) -> bool:
        ids = self.page_row_ids
        return bool(ids) and all(row_id in self._selection for row_id in ids)

    def toggle_page_rows_selected(self) -> None:
        """Select every row on the current page, or unselect them if all are."""
        ids = set(self.page_row_ids)
        if self.is_all_page_rows_selected():
            self.set_row_selection(self._selection - ids)
        else:
            self.set_row_selection(self._selection | ids)

    def clear_selection(self) -> None:
        self.set_row_selection(())

    @property
    def filtered_selected_row_ids(self) -> list[str]:
        """Selected ids within the filtered set, in data order."""
        return [self._row_ids[i] for i in self._filtered if self._row_ids[i] in self._selection]

    @property
    def filtered_selected_rows(self) -> list[Any]:
        """Bulk-action targets: selected rows that pass the current filters."""
        return [self._rows[self._index_by_id[row_id]] for row_id in self.filtered_selected_row_ids]

    @property
    def selected_count(self) -> int:
        if not self._settings.selection:
            return 0
        return len(self.filtered_selected_row_ids)

    # ------------------------------------------------------------------
    # Pagination
    # ------------------------------------------------------------------

    @property
    def pagination(self) -> PaginationState:
        return PaginationState(page_index=self._page_index, page_size=self._page_size)

    @property
    def page_count(self) -> int:
        if not self._settings.pagination:
            return 1
        return max(1, math.ceil(len(self._sorted) / self._page_size))

    @property
    def can_previous_page(self) -> bool:
        return self._page_index > 0

    @property
    def can_next_page(self) -> bool:
        return self._page_index < self.page_count - 1

    def set_page_index(self, page_index: int) -> None:
        """Move to a page; out-of-range indexes are clamped."""
        self._page_index = page_index
        self._clamp_page_index()
        self._notify()

    def set_page_size(self, page_size: int) -> None:
        """Change the page size, keeping the first visible row on screen."""
        if page_size < 1:
            raise TableConfigurationError(
                "Page size must be >= 1", context={"page_size": page_size}
            )
        first_row = self._page_index * self._page_size
        self._page_size = page_size
        self._page_index = first_row // page_size
        self._clamp_page_index()
        self._notify()

    def first_page(self) -> None:
        self.set_page_index(0)

    def previous_page(self) -> None:
        self.set_page_index(self._page_index - 1)

    def next_page(self) -> None:
        self.set_page_index(self._page_index + 1)

    def last_page(self) -> None:
        self.set_page_index(self.page_count - 1)

    def _clamp_page_index(self) -> None:
        clamped = min(max(self._page_index, 0), self.page_count - 1)
        if clamped != self._page_index:
            logger.debug("Clamped page index %d -> %d", self._page_index, clamped)
        self._page_index = clamped

    # ------------------------------------------------------------------
    # Derived rows
    # ------------------------------------------------------------------

    @property
    def total_count(self) -> int:
        return len(self._rows)

    @property
    def filtered_count(self) -> int:
        return len(self._filtered)

    @property
    def filtered_rows(self) -> list[Any]:
        """Rows passing all filters, in data order."""
        return [self._rows[i] for i in self._filtered]

    @property
    def sorted_rows(self) -> list[Any]:
        return [self._rows[i] for i in self._sorted]

    def _page_slice(self) -> list[int]:
        if not self._settings.pagination:
            return list(self._sorted)
        start = self._page_index * self._page_size
        return self._sorted[start : start + self._page_size]

    @property
    def page_rows(self) -> list[Any]:
        return [self._rows[i] for i in self._page_slice()]

    @property
    def page_row_ids(self) -> list[str]:
        return [self._row_ids[i] for i in self._page_slice()]

    def selection_summary(self) -> str:
        return f"{self.selected_count} of {self.filtered_count} row(s) selected."

    def page_summary(self) -> str:
        return f"Page {self._page_index + 1} of {self.page_count}"

    def snapshot(self) -> TableSnapshot:
        return TableSnapshot(
            rows=self.page_rows,
            row_ids=self.page_row_ids,
            sorting=self._sorting,
            filters=dict(self._filters),
            visibility=self.column_visibility,
            selection=frozenset(self._selection),
            pagination=self.pagination,
            page_count=self.page_count,
            total_count=self.total_count,
            filtered_count=self.filtered_count,
            selected_count=self.selected_count,
            can_previous_page=self.can_previous_page,
            can_next_page=self.can_next_page,
            visible_column_ids=[c.id for c in self.visible_columns],
        )

    def _recompute(self) -> None:
        active = [(self._columns[cid], value) for cid, value in self._filters.items()]
        self._filtered = [
            index
            for index, row in enumerate(self._rows)
            if all(
                matches_filter(column.search_type, value, column.value(row))
                for column, value in active
            )
        ]
        if self._sorting:
            entry = self._sorting[0]
            column = self._columns[entry.column_id]
            values = [column.value(self._rows[i]) for i in self._filtered]
            order = sort_indices(values, descending=entry.descending)
            self._sorted = [self._filtered[i] for i in order]
        else:
            self._sorted = list(self._filtered)
        self._clamp_page_index()

    def _notify(self) -> None:
        if not self._callbacks:
            return
        snapshot = self.snapshot()
        for callback in list(self._callbacks):
            try:
                callback(snapshot)
            except Exception:
                logger.exception("Table state callback failed")
