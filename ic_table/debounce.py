"""Time-based value stabilization over a cancellable scheduler."""

from __future__ import annotations

import logging
import operator
from typing import Any, Callable, Generic, Protocol, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Scheduler(Protocol):
    """Schedule/cancel pair used for deferred, cancellable callbacks."""

    def schedule(self, delay_ms: int, callback: Callable[[], None]) -> Any: ...
    def cancel(self, handle: Any) -> None: ...


class DebounceStabilizer(Generic[T]):
    """Commit a changing raw value only after it stops changing.

    Every raw change (per ``equality``) cancels the pending timers and starts
    a ``delay_ms`` timer, plus a ``max_wait_ms`` timer when configured.
    Whichever fires first commits the current raw value and cancels the
    other. The max-wait timer is restarted on every change, so continuous
    input keeps deferring the forced commit.

    The initial value is adopted immediately, without a timer.
    """

    def __init__(
        self,
        initial: T,
        scheduler: Scheduler,
        *,
        delay_ms: int = 300,
        max_wait_ms: int | None = None,
        equality: Callable[[T, T], bool] = operator.eq,
    ) -> None:
        if delay_ms < 0:
            raise ValueError("delay_ms must be >= 0")
        if max_wait_ms is not None and max_wait_ms < 0:
            raise ValueError("max_wait_ms must be >= 0")
        self._scheduler = scheduler
        self._delay_ms = delay_ms
        self._max_wait_ms = max_wait_ms
        self._equality = equality
        self._raw: T = initial
        self._value: T = initial
        self._delay_handle: Any = None
        self._max_wait_handle: Any = None
        self._callbacks: list[Callable[[T], None]] = []
        self._closed = False

    @property
    def value(self) -> T:
        """The last committed (stabilized) value."""
        return self._value

    @property
    def raw_value(self) -> T:
        """The last observed raw value."""
        return self._raw

    @property
    def pending(self) -> bool:
        return self._delay_handle is not None or self._max_wait_handle is not None

    @property
    def closed(self) -> bool:
        return self._closed

    def register_callback(self, callback: Callable[[T], None]) -> None:
        """Register a callback invoked with each newly committed value."""
        self._callbacks.append(callback)

    def set_value(self, raw: T) -> None:
        """Observe a raw value change."""
        if self._closed:
            logger.debug("Ignoring value change on a closed stabilizer")
            return
        if self._equality(self._raw, raw):
            return
        self._raw = raw
        self.cancel_all()
        if self._max_wait_ms is not None:
            self._max_wait_handle = self._scheduler.schedule(
                self._max_wait_ms, self._on_max_wait_elapsed
            )
        self._delay_handle = self._scheduler.schedule(
            self._delay_ms, self._on_delay_elapsed
        )

    def flush(self) -> None:
        """Commit the current raw value now, cancelling pending timers."""
        if not self.pending:
            return
        self.cancel_all()
        self._commit(self._raw)

    def cancel_all(self) -> None:
        """Cancel pending timers without committing."""
        if self._delay_handle is not None:
            self._scheduler.cancel(self._delay_handle)
            self._delay_handle = None
        if self._max_wait_handle is not None:
            self._scheduler.cancel(self._max_wait_handle)
            self._max_wait_handle = None

    def close(self) -> None:
        """Teardown: cancel timers and stop committing for good."""
        self.cancel_all()
        self._closed = True
        self._callbacks.clear()

    def _on_delay_elapsed(self) -> None:
        self._delay_handle = None
        if self._max_wait_handle is not None:
            self._scheduler.cancel(self._max_wait_handle)
            self._max_wait_handle = None
        self._commit(self._raw)

    def _on_max_wait_elapsed(self) -> None:
        self._max_wait_handle = None
        if self._delay_handle is not None:
            self._scheduler.cancel(self._delay_handle)
            self._delay_handle = None
        self._commit(self._raw)

    def _commit(self, value: T) -> None:
        if self._closed:
            return
        if self._equality(self._value, value):
            logger.debug("Stabilized value unchanged; skipping commit")
            return
        self._value = value
        for callback in list(self._callbacks):
            try:
                callback(value)
            except Exception:
                logger.exception("Debounce commit callback failed")
