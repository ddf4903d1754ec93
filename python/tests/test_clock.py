"""SecondTicker tests, driven by a hand-advanced clock."""

from __future__ import annotations

import pytest

from picture_puzzle.backend.engine.gameclock import SecondTicker


class FakeClock:
    def __init__(self) -> None:
        self.now = 0.0

    def __call__(self) -> float:
        return self.now


def test_not_running_until_started() -> None:
    ticker = SecondTicker(clock=FakeClock())
    assert not ticker.running
    assert ticker.poll() == 0
    assert ticker.time_until_next() is None


def test_one_tick_per_interval() -> None:
    clock = FakeClock()
    ticker = SecondTicker(clock=clock)
    ticker.start()

    clock.now = 0.99
    assert ticker.poll() == 0
    assert ticker.time_until_next() == pytest.approx(0.01)

    clock.now = 1.0
    assert ticker.poll() == 1
    assert ticker.poll() == 0

    clock.now = 4.2
    assert ticker.poll() == 3
    assert ticker.time_until_next() == pytest.approx(0.8)


def test_cancel_drops_pending_ticks() -> None:
    clock = FakeClock()
    ticker = SecondTicker(clock=clock)
    ticker.start()
    clock.now = 5.0
    ticker.cancel()
    assert not ticker.running
    assert ticker.poll() == 0


def test_restart_measures_from_now() -> None:
    clock = FakeClock()
    ticker = SecondTicker(clock=clock)
    ticker.start()
    clock.now = 2.5
    ticker.cancel()
    ticker.start()
    assert ticker.time_until_next() == pytest.approx(1.0)
    clock.now = 3.4
    assert ticker.poll() == 0


def test_custom_interval() -> None:
    clock = FakeClock()
    ticker = SecondTicker(interval=0.25, clock=clock)
    ticker.start()
    clock.now = 1.0
    assert ticker.poll() == 4


@pytest.mark.parametrize("interval", [0, -1.0])
def test_rejects_non_positive_interval(interval: float) -> None:
    with pytest.raises(ValueError):
        SecondTicker(interval=interval)
