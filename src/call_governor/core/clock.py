"""Monotonic clock helpers."""

from __future__ import annotations

import time
from typing import Callable

Clock = Callable[[], float]


def resolve_clock(clock: Clock | None, scheduler: object | None = None) -> Clock:
    """Pick the clock a governor reads.

    An explicit clock wins. Otherwise a scheduler exposing ``now()`` supplies
    its own time base, so timer delays and elapsed-time checks agree.
    """

    if clock is not None:
        return clock
    scheduler_now = getattr(scheduler, "now", None)
    if callable(scheduler_now):
        return scheduler_now
    return time.monotonic


__all__ = [
    "Clock",
    "resolve_clock",
]
