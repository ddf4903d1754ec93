"""One-second tick scheduling for the game timer."""

from __future__ import annotations

import time
from typing import Callable


class SecondTicker:
    """Deadline-based ticker polled from a frontend's event loop.

    Nothing runs in the background: the loop asks :meth:`time_until_next`
    how long it may block for input, then calls :meth:`poll` to collect the
    ticks that fell due meanwhile.
    """

    def __init__(
        self,
        interval: float = 1.0,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if interval <= 0:
            raise ValueError(f"Tick interval must be positive, got {interval}.")
        self.interval = interval
        self._clock = clock
        self._deadline: float | None = None

    @property
    def running(self) -> bool:
        return self._deadline is not None

    def start(self) -> None:
        self._deadline = self._clock() + self.interval

    def cancel(self) -> None:
        self._deadline = None

    def poll(self) -> int:
        """Return how many ticks fell due since the last poll."""
        if self._deadline is None:
            return 0
        now = self._clock()
        if now < self._deadline:
            return 0
        due = int((now - self._deadline) // self.interval) + 1
        self._deadline += due * self.interval
        return due

    def time_until_next(self) -> float | None:
        if self._deadline is None:
            return None
        return max(0.0, self._deadline - self._clock())
