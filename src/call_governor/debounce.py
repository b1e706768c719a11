"""Debouncer: one execution per quiet period."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from .config import DebounceConfig
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


class Debouncer(MethodBinding):
    """Collapse a burst of calls into a single execution.

    Each ``invoke`` restarts a quiet-period timer of ``delay``. When the timer
    runs out the action is executed once with the arguments of the most recent
    call. With ``leading=True`` the first call of a burst also executes
    immediately; the trailing execution then only happens if more calls
    arrived after it.
    """

    def __init__(
        self,
        action: Callable[..., Any],
        delay: float,
        *,
        leading: bool = False,
        trailing: bool = True,
        scheduler: Scheduler | None = None,
    ) -> None:
        config = DebounceConfig(delay_seconds=delay, leading=leading, trailing=trailing)
        validate_governor_config(config)
        self._action = ensure_callable(action)
        self._config = config
        self._scheduler = resolve_scheduler(scheduler)
        self._timer = TimerSlot(self._scheduler, "debounce")
        self._latest: PendingCall | None = None

    @classmethod
    def from_config(
        cls,
        action: Callable[..., Any],
        config: DebounceConfig,
        *,
        scheduler: Scheduler | None = None,
    ) -> "Debouncer":
        return cls(
            action,
            config.delay_seconds,
            leading=config.leading,
            trailing=config.trailing,
            scheduler=scheduler,
        )

    @property
    def state(self) -> GovernorState:
        return GovernorState.ARMED if self._timer.armed else GovernorState.IDLE

    def invoke(self, *args: Any, **kwargs: Any) -> None:
        call = PendingCall(args, dict(kwargs))
        run_leading = self._config.leading and not self._timer.armed
        self._latest = None if run_leading else call
        self._timer.arm(self._on_timer, self._config.delay_seconds)
        if run_leading:
            logger.debug("debounce leading execution")
            call.apply(self._action)

    __call__ = invoke

    def cancel(self) -> None:
        self._latest = None
        if self._timer.disarm():
            logger.debug("debounce cancelled")

    def _bind(self, action: Callable[..., Any]) -> "Debouncer":
        return Debouncer(
            action,
            self._config.delay_seconds,
            leading=self._config.leading,
            trailing=self._config.trailing,
            scheduler=self._scheduler,
        )

    def _on_timer(self, generation: int) -> None:
        if not self._timer.claim(generation):
            return
        call, self._latest = self._latest, None
        if call is None or not self._config.trailing:
            logger.debug("debounce quiet period ended without trailing call")
            return
        logger.debug("debounce trailing execution")
        call.apply(self._action)


__all__ = [
    "Debouncer",
]
