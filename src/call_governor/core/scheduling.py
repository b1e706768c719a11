"""Deferred-callback facility contract and a virtual-time implementation."""

from __future__ import annotations

import heapq
import itertools
import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, Protocol

logger = logging.getLogger("call_governor")


class Scheduler(Protocol):
    """Deferred-callback contract consumed by governors."""

    def schedule(self, callback: Callable[[], None], delay: float) -> Any:
        """Run ``callback`` once after ``delay`` and return a handle."""

    def cancel(self, handle: Any) -> None:
        """Prevent delivery of a scheduled callback. Idempotent."""


@dataclass(slots=True, eq=False)
class ManualHandle:
    due_at: float
    callback: Callable[[], None] = field(repr=False)
    cancelled: bool = False
    fired: bool = False

    @property
    def active(self) -> bool:
        return not (self.cancelled or self.fired)


class ManualScheduler:
    """Single-threaded scheduler driven by an explicitly advanced virtual clock.

    Callbacks fire in due-time order; callbacks due at the same instant fire
    in the order they were scheduled. The clock is set to each callback's due
    time before it runs, so code reading ``now()`` from inside a callback sees
    the instant it was meant to fire.

    An exception raised by a callback propagates out of ``advance`` /
    ``advance_to`` / ``run_until_idle``. The clock stays at that callback's due
    time and anything still queued is left for the next call.
    """

    def __init__(self, *, start: float = 0.0) -> None:
        self._now = float(start)
        self._queue: list[tuple[float, int, ManualHandle]] = []
        self._seq = itertools.count()

    def now(self) -> float:
        return self._now

    @property
    def pending_count(self) -> int:
        return sum(1 for _, _, handle in self._queue if handle.active)

    def schedule(self, callback: Callable[[], None], delay: float) -> ManualHandle:
        handle = ManualHandle(due_at=self._now + max(0.0, float(delay)), callback=callback)
        heapq.heappush(self._queue, (handle.due_at, next(self._seq), handle))
        return handle

    def cancel(self, handle: ManualHandle) -> None:
        handle.cancelled = True

    def advance(self, seconds: float) -> int:
        """Move the clock forward by ``seconds``, firing everything that comes due."""

        if seconds < 0:
            raise ValueError("seconds must be >= 0")
        return self.advance_to(self._now + seconds)

    def advance_to(self, timestamp: float) -> int:
        """Move the clock to ``timestamp``, firing everything that comes due.

        Returns the number of callbacks that fired.
        """

        if timestamp < self._now:
            raise ValueError("timestamp must not be earlier than now()")
        fired = 0
        while self._queue and self._queue[0][0] <= timestamp:
            due_at, _, handle = heapq.heappop(self._queue)
            if not handle.active:
                continue
            self._now = due_at
            handle.fired = True
            fired += 1
            handle.callback()
        self._now = timestamp
        return fired

    def run_until_idle(self, *, max_callbacks: int = 10_000) -> int:
        """Fire queued callbacks until none remain, advancing the clock as needed."""

        fired = 0
        while True:
            due_at = self._next_due_at()
            if due_at is None:
                return fired
            if fired >= max_callbacks:
                logger.warning("run_until_idle stopped max_callbacks=%s", max_callbacks)
                raise RuntimeError("scheduler did not become idle")
            fired += self.advance_to(max(due_at, self._now))

    def _next_due_at(self) -> float | None:
        while self._queue and not self._queue[0][2].active:
            heapq.heappop(self._queue)
        if not self._queue:
            return None
        return self._queue[0][0]


__all__ = [
    "Scheduler",
    "ManualHandle",
    "ManualScheduler",
]
