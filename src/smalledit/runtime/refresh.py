"""Trailing-edge debounce for gutter and status-bar recomputation."""

from __future__ import annotations

import time
from typing import Callable, Optional

from smalledit.runtime import telemetry

Scheduler = Callable[[float, Callable[[], None]], object]


class RefreshCoordinator:
    """Coalesces bursts of change notifications into a single refresh.

    ``notify_changed`` may be called once per keystroke or scroll step. The
    first call arms a one-shot timer through ``schedule``; when it fires the
    coordinator checks how long ago the latest notification arrived. If that
    is less than ``quiet_ms`` the timer is re-armed, otherwise ``on_refresh``
    runs once and the coordinator goes idle again.

    Everything runs on the host's event-loop thread, so no locking is done.
    """

    def __init__(
        self,
        schedule: Scheduler,
        on_refresh: Callable[[], None],
        *,
        delay_ms: int = 50,
        quiet_ms: int = 45,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if delay_ms <= 0:
            raise ValueError("delay_ms must be positive")
        if quiet_ms < 0 or quiet_ms > delay_ms:
            raise ValueError("quiet_ms must be between 0 and delay_ms")
        self._schedule = schedule
        self._on_refresh = on_refresh
        self._delay = delay_ms / 1000.0
        self._quiet = quiet_ms / 1000.0
        self._clock = clock
        self._pending = False
        self._generation = 0
        self._last_request: Optional[float] = None
        self.refresh_count = 0
        self.reschedule_count = 0

    @property
    def pending(self) -> bool:
        return self._pending

    def notify_changed(self) -> None:
        self._last_request = self._clock()
        if self._pending:
            return
        self._pending = True
        self._arm()

    def flush(self) -> None:
        """Refresh right now, discarding any scheduled timer."""

        self._generation += 1
        self._pending = False
        self._run()

    def cancel(self) -> None:
        self._generation += 1
        self._pending = False

    def _arm(self) -> None:
        generation = self._generation
        self._schedule(self._delay, lambda: self._on_timer(generation))

    def _on_timer(self, generation: int) -> None:
        if generation != self._generation or not self._pending:
            return
        last = self._last_request if self._last_request is not None else 0.0
        if self._clock() - last < self._quiet:
            self.reschedule_count += 1
            self._arm()
            return
        try:
            self._run()
        finally:
            self._pending = False

    def _run(self) -> None:
        self.refresh_count += 1
        with telemetry.span(
            "refresh::run",
            logger_name="smalledit.refresh",
            metadata={"count": self.refresh_count},
        ):
            self._on_refresh()


__all__ = ["RefreshCoordinator", "Scheduler"]
