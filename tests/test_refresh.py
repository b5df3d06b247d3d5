from __future__ import annotations

from typing import Callable, List, Tuple

import pytest

from smalledit.runtime.refresh import RefreshCoordinator


class FakeClock:
    def __init__(self) -> None:
        self.now = 0.0

    def __call__(self) -> float:
        return self.now

    def advance(self, ms: float) -> None:
        self.now += ms / 1000.0


class FakeScheduler:
    """Collects timers instead of running them; tests fire them by hand."""

    def __init__(self) -> None:
        self.timers: List[Tuple[float, Callable[[], None]]] = []

    def __call__(self, delay: float, callback: Callable[[], None]) -> object:
        self.timers.append((delay, callback))
        return len(self.timers)

    def fire_next(self) -> None:
        _, callback = self.timers.pop(0)
        callback()


def make_coordinator(
    on_refresh: Callable[[], None],
) -> tuple[RefreshCoordinator, FakeScheduler, FakeClock]:
    scheduler = FakeScheduler()
    clock = FakeClock()
    coordinator = RefreshCoordinator(
        scheduler, on_refresh, delay_ms=50, quiet_ms=45, clock=clock
    )
    return coordinator, scheduler, clock


def test_burst_of_notifications_refreshes_once_with_latest_state() -> None:
    state = {"text": ""}
    seen: List[str] = []
    coordinator, scheduler, clock = make_coordinator(lambda: seen.append(state["text"]))

    for char in "hello":
        state["text"] += char
        coordinator.notify_changed()
        clock.advance(5)

    assert len(scheduler.timers) == 1
    assert scheduler.timers[0][0] == pytest.approx(0.05)

    clock.advance(50)
    scheduler.fire_next()

    assert seen == ["hello"]
    assert coordinator.refresh_count == 1
    assert not coordinator.pending


def test_timer_is_rearmed_while_activity_continues() -> None:
    calls: List[int] = []
    coordinator, scheduler, clock = make_coordinator(lambda: calls.append(1))

    coordinator.notify_changed()
    clock.advance(40)
    coordinator.notify_changed()
    clock.advance(10)
    scheduler.fire_next()

    assert calls == []
    assert coordinator.reschedule_count == 1
    assert coordinator.pending
    assert len(scheduler.timers) == 1

    clock.advance(50)
    scheduler.fire_next()

    assert calls == [1]
    assert not coordinator.pending


def test_notification_after_refresh_arms_a_new_timer() -> None:
    calls: List[int] = []
    coordinator, scheduler, clock = make_coordinator(lambda: calls.append(1))

    coordinator.notify_changed()
    clock.advance(50)
    scheduler.fire_next()
    coordinator.notify_changed()

    assert len(scheduler.timers) == 1
    clock.advance(50)
    scheduler.fire_next()
    assert calls == [1, 1]


def test_flush_refreshes_immediately_and_drops_pending_timer() -> None:
    calls: List[int] = []
    coordinator, scheduler, clock = make_coordinator(lambda: calls.append(1))

    coordinator.notify_changed()
    coordinator.flush()
    assert calls == [1]
    assert not coordinator.pending

    clock.advance(100)
    scheduler.fire_next()
    assert calls == [1]


def test_cancel_discards_scheduled_refresh() -> None:
    calls: List[int] = []
    coordinator, scheduler, clock = make_coordinator(lambda: calls.append(1))

    coordinator.notify_changed()
    coordinator.cancel()
    clock.advance(100)
    scheduler.fire_next()

    assert calls == []
    assert coordinator.refresh_count == 0


def test_refresh_error_propagates_and_leaves_coordinator_idle() -> None:
    def boom() -> None:
        raise RuntimeError("render failed")

    coordinator, scheduler, clock = make_coordinator(boom)
    coordinator.notify_changed()
    clock.advance(50)

    with pytest.raises(RuntimeError):
        scheduler.fire_next()

    assert not coordinator.pending


@pytest.mark.parametrize("delay_ms, quiet_ms", [(0, 0), (50, 60), (50, -1)])
def test_rejects_invalid_timing(delay_ms: int, quiet_ms: int) -> None:
    with pytest.raises(ValueError):
        RefreshCoordinator(
            FakeScheduler(), lambda: None, delay_ms=delay_ms, quiet_ms=quiet_ms
        )
