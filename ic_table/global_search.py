"""Global search: classify one query and fan it out to typed columns."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Callable

from ic_table.classifier import ClassifiedQuery, QueryKind, classify_query
from ic_table.settings import GlobalSearchConfig

if TYPE_CHECKING:
    from ic_table.debounce import DebounceStabilizer
    from ic_table.table_state import TableStateController

logger = logging.getLogger(__name__)


class GlobalSearchDispatcher:
    """Write global-search filters into a table controller.

    The dispatcher owns the filters of every column named in its config.
    Each stabilized query replaces all of them in one state write: columns
    of the matched kind receive the typed value, the others are cleared.
    An empty query clears them all. Filters on other columns are untouched.

    With a ``stabilizer`` the raw keystrokes passed to :meth:`set_query` are
    debounced and only committed values are dispatched; without one every
    query is dispatched immediately.
    """

    def __init__(
        self,
        table: "TableStateController",
        config: GlobalSearchConfig | None = None,
        *,
        stabilizer: "DebounceStabilizer[str] | None" = None,
    ) -> None:
        self._table = table
        self._config = config or GlobalSearchConfig()
        self._stabilizer = stabilizer
        self._query = stabilizer.raw_value if stabilizer is not None else ""
        self._last: ClassifiedQuery | None = None
        self._callbacks: list[Callable[[ClassifiedQuery | None], None]] = []
        self._targets = self._resolve_targets()
        if stabilizer is not None:
            stabilizer.register_callback(self.dispatch)

    def _resolve_targets(self) -> dict[QueryKind, list[str]]:
        known = set(self._table.column_ids)
        missing = [c for c in self._config.owned_columns if c not in known]
        if missing:
            logger.warning("Global search ignores undefined columns: %s", ", ".join(missing))

        def keep(ids: list[str]) -> list[str]:
            return [column_id for column_id in ids if column_id in known]

        email = [self._config.email_column] if self._config.email_column else []
        return {
            QueryKind.DATE: keep(self._config.date_columns),
            QueryKind.NUMERIC: keep(self._config.numeric_columns),
            QueryKind.EMAIL: keep(email),
            QueryKind.TEXT: keep(self._config.text_columns),
        }

    @property
    def config(self) -> GlobalSearchConfig:
        return self._config

    @property
    def query(self) -> str:
        """Latest raw query text."""
        return self._query

    @property
    def last_classification(self) -> ClassifiedQuery | None:
        return self._last

    @property
    def owned_columns(self) -> list[str]:
        ordered: list[str] = []
        for ids in self._targets.values():
            ordered.extend(c for c in ids if c not in ordered)
        return ordered

    def register_callback(self, callback: Callable[[ClassifiedQuery | None], None]) -> None:
        """Register a callback invoked after each dispatch."""
        self._callbacks.append(callback)

    def set_query(self, raw: str) -> None:
        """Feed a raw keystroke value."""
        self._query = raw
        if self._stabilizer is None:
            self.dispatch(raw)
        else:
            self._stabilizer.set_value(raw)

    def dispatch(self, query: str) -> ClassifiedQuery | None:
        """Classify ``query`` and write the resulting filters atomically."""
        classified = classify_query(query)
        updates: dict[str, Any] = {column_id: None for column_id in self.owned_columns}
        if classified is not None:
            for column_id in self._targets[classified.kind]:
                updates[column_id] = classified.value
            logger.debug(
                "Global search %r classified as %s -> %s",
                query,
                classified.kind.value,
                self._targets[classified.kind],
            )
        else:
            logger.debug("Global search cleared")
        self._last = classified
        if updates:
            self._table.update_column_filters(updates)
        for callback in list(self._callbacks):
            try:
                callback(classified)
            except Exception:
                logger.exception("Global search callback failed")
        return classified

    def clear(self) -> None:
        """Clear the query and every owned filter immediately."""
        self.set_query("")
        if self._stabilizer is not None:
            self._stabilizer.flush()

    def close(self) -> None:
        """Teardown: cancel pending debounce timers."""
        if self._stabilizer is not None:
            self._stabilizer.close()
