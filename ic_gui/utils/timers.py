"""QTimer-backed scheduler for debounced values."""

from __future__ import annotations

from typing import Callable

from PySide6.QtCore import QObject, QTimer


class QtTimerScheduler:
    """Single-shot QTimer schedule/cancel pair on the GUI thread."""

    def __init__(self, parent: QObject | None = None) -> None:
        self._parent = parent
        self._timers: set[QTimer] = set()

    @property
    def pending_count(self) -> int:
        return len(self._timers)

    def schedule(self, delay_ms: int, callback: Callable[[], None]) -> QTimer:
        timer = QTimer(self._parent)
        timer.setSingleShot(True)
        timer.timeout.connect(lambda: self._fire(timer, callback))
        self._timers.add(timer)
        timer.start(max(0, int(delay_ms)))
        return timer

    def cancel(self, handle: QTimer) -> None:
        handle.stop()
        self._release(handle)

    def cancel_all(self) -> None:
        for timer in list(self._timers):
            self.cancel(timer)

    def _fire(self, timer: QTimer, callback: Callable[[], None]) -> None:
        if timer not in self._timers:
            return
        self._release(timer)
        callback()

    def _release(self, timer: QTimer) -> None:
        if timer in self._timers:
            self._timers.discard(timer)
            timer.deleteLater()
