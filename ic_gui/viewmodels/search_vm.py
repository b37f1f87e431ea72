"""ViewModel for the global search box."""

from __future__ import annotations

from typing import TYPE_CHECKING

from PySide6.QtCore import QObject, Signal

from ic_table.classifier import ClassifiedQuery
from ic_table.debounce import DebounceStabilizer, Scheduler
from ic_table.global_search import GlobalSearchDispatcher
from ic_table.settings import GlobalSearchConfig

if TYPE_CHECKING:
    from ic_table.table_state import TableStateController


class GlobalSearchViewModel(QObject):
    """Debounced "search anything" box.

    Keystrokes feed a stabilizer; committed queries are classified and
    written to the table by a dispatcher. ``scheduler`` defaults to a QTimer
    scheduler and may be replaced in tests.
    """

    # Signals
    query_classified = Signal(object)  # ClassifiedQuery or None
    pending_changed = Signal(bool)

    def __init__(
        self,
        table: "TableStateController",
        config: GlobalSearchConfig | None = None,
        *,
        scheduler: Scheduler | None = None,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        if scheduler is None:
            from ic_gui.utils.timers import QtTimerScheduler

            scheduler = QtTimerScheduler(self)
        settings = table.settings
        self._stabilizer: DebounceStabilizer[str] = DebounceStabilizer(
            "",
            scheduler,
            delay_ms=settings.search_delay_ms,
            max_wait_ms=settings.search_max_wait_ms,
        )
        self._dispatcher = GlobalSearchDispatcher(table, config, stabilizer=self._stabilizer)
        self._dispatcher.register_callback(self._on_dispatched)

    @property
    def query(self) -> str:
        return self._dispatcher.query

    @property
    def pending(self) -> bool:
        return self._stabilizer.pending

    @property
    def last_classification(self) -> ClassifiedQuery | None:
        return self._dispatcher.last_classification

    def set_query(self, text: str) -> None:
        """Feed the current search box text."""
        self._dispatcher.set_query(text)
        self.pending_changed.emit(self._stabilizer.pending)

    def clear(self) -> None:
        self._dispatcher.clear()
        self.pending_changed.emit(False)

    def close(self) -> None:
        self._dispatcher.close()

    def _on_dispatched(self, classified: ClassifiedQuery | None) -> None:
        self.pending_changed.emit(False)
        self.query_classified.emit(classified)
