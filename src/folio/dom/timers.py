"""Virtual-clock timers.

Nothing here sleeps: time only moves when ``Scheduler.advance`` is called,
which makes staggered reveals and debounced input deterministic.
"""

import heapq
import itertools
from collections.abc import Callable
from typing import Any


class TimerHandle:
    """A scheduled callback that can be cancelled before it fires."""

    def __init__(self, due: float, callback: Callable[..., Any], args: tuple) -> None:
        self.due = due
        self._callback = callback
        self._args = args
        self.cancelled = False
        self.fired = False

    def cancel(self) -> None:
        self.cancelled = True

    @property
    def active(self) -> bool:
        return not (self.cancelled or self.fired)

    def _run(self) -> None:
        self.fired = True
        self._callback(*self._args)


class Scheduler:
    """Timer queue ordered by due time, ties broken by scheduling order."""

    def __init__(self) -> None:
        self.now: float = 0.0
        self._queue: list[tuple[float, int, TimerHandle]] = []
        self._counter = itertools.count()

    def call_later(self, delay_ms: float, callback: Callable[..., Any], *args: Any) -> TimerHandle:
        handle = TimerHandle(self.now + max(0.0, delay_ms), callback, args)
        heapq.heappush(self._queue, (handle.due, next(self._counter), handle))
        return handle

    @property
    def pending(self) -> int:
        return sum(1 for _, _, handle in self._queue if handle.active)

    def advance(self, ms: float) -> int:
        """Move the clock forward, firing every timer that falls due.

        Returns:
            Number of callbacks run
        """
        target = self.now + ms
        fired = 0
        while self._queue and self._queue[0][0] <= target:
            due, _, handle = heapq.heappop(self._queue)
            self.now = due
            if handle.active:
                handle._run()
                fired += 1
        self.now = target
        return fired

    def run_all(self, max_callbacks: int = 10_000) -> int:
        """Fire timers until the queue is empty."""
        fired = 0
        while self._queue and fired < max_callbacks:
            due, _, handle = heapq.heappop(self._queue)
            self.now = max(self.now, due)
            if handle.active:
                handle._run()
                fired += 1
        return fired


class Debouncer:
    """Run ``callback`` only after ``delay_ms`` of quiet since the last call."""

    def __init__(self, scheduler: Scheduler, delay_ms: float, callback: Callable[..., Any]) -> None:
        self._scheduler = scheduler
        self._delay_ms = delay_ms
        self._callback = callback
        self._handle: TimerHandle | None = None

    def call(self, *args: Any) -> TimerHandle:
        self.cancel()
        self._handle = self._scheduler.call_later(self._delay_ms, self._callback, *args)
        return self._handle

    def cancel(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    @property
    def pending(self) -> bool:
        return self._handle is not None and self._handle.active
