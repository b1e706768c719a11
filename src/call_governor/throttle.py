"""Throttler: at most one execution per window, trailing edge compensated."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from .config import ThrottleConfig
from .core.clock import Clock, resolve_clock
from .core.scheduling import Scheduler
from .governor_shared import (
    GovernorState,
    MethodBinding,
    PendingCall,
    TimerSlot,
    ensure_callable,
    resolve_scheduler,
    validate_governor_config,
)

logger = logging.getLogger("call_governor")


class Throttler(MethodBinding):
    """Run the action at most once per ``limit``.

    A call that finds at least ``limit`` elapsed since the last execution (or
    no execution yet) runs immediately. Calls inside the window are collapsed
    into one trailing execution carrying the latest arguments, scheduled for
    the moment the window closes.
    """

    def __init__(
        self,
        action: Callable[..., Any],
        limit: float,
        *,
        clock: Clock | None = None,
        scheduler: Scheduler | None = None,
    ) -> None:
        config = ThrottleConfig(limit_seconds=limit)
        validate_governor_config(config)
        self._action = ensure_callable(action)
        self._limit = config.limit_seconds
        self._scheduler = resolve_scheduler(scheduler)
        self._clock = resolve_clock(clock, self._scheduler)
        self._explicit_clock = clock
        self._timer = TimerSlot(self._scheduler, "throttle")
        self._latest: PendingCall | None = None
        self._last_run_at: float | None = None

    @classmethod
    def from_config(
        cls,
        action: Callable[..., Any],
        config: ThrottleConfig,
        *,
        clock: Clock | None = None,
        scheduler: Scheduler | None = None,
    ) -> "Throttler":
        return cls(action, config.limit_seconds, clock=clock, scheduler=scheduler)

    @property
    def state(self) -> GovernorState:
        return GovernorState.ARMED if self._timer.armed else GovernorState.IDLE

    def invoke(self, *args: Any, **kwargs: Any) -> None:
        call = PendingCall(args, dict(kwargs))
        now = self._clock()
        remaining = self._remaining(now)
        if remaining <= 0:
            # An immediate run supersedes any queued trailing run.
            self._latest = None
            self._timer.disarm()
            self._execute(call, now)
            return
        self._latest = call
        if not self._timer.armed:
            self._timer.arm(self._on_timer, remaining)

    __call__ = invoke

    def cancel(self) -> None:
        self._latest = None
        if self._timer.disarm():
            logger.debug("throttle cancelled")

    def _remaining(self, now: float) -> float:
        if self._last_run_at is None:
            return 0.0
        remaining = self._limit - (now - self._last_run_at)
        # A remainder too small to move the clock forward closes the window.
        if now + remaining <= now:
            return 0.0
        return remaining

    def _bind(self, action: Callable[..., Any]) -> "Throttler":
        return Throttler(
            action,
            self._limit,
            clock=self._explicit_clock,
            scheduler=self._scheduler,
        )

    def _on_timer(self, generation: int) -> None:
        if not self._timer.claim(generation):
            return
        now = self._clock()
        remaining = self._remaining(now)
        if remaining > 0:
            logger.debug("throttle window still open remaining=%s", remaining)
            self._timer.arm(self._on_timer, remaining)
            return
        call, self._latest = self._latest, None
        if call is None:
            return
        self._execute(call, now)

    def _execute(self, call: PendingCall, now: float) -> None:
        # Cadence is tracked whether or not the action succeeds.
        self._last_run_at = now
        logger.debug("throttle execution at=%s", now)
        call.apply(self._action)


__all__ = [
    "Throttler",
]
