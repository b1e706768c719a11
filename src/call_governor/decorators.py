"""Decorator factories wrapping functions in governors."""

from __future__ import annotations

import functools
from collections.abc import Callable
from typing import Any

from .config import DebounceConfig, ThrottleConfig
from .core.clock import Clock
from .core.scheduling import Scheduler
from .debounce import Debouncer
from .governor_shared import validate_governor_config
from .throttle import Throttler


def debounced(
    delay: float,
    *,
    leading: bool = False,
    trailing: bool = True,
    scheduler: Scheduler | None = None,
) -> Callable[[Callable[..., Any]], Debouncer]:
    """Wrap a function in a :class:`Debouncer`.

    Arguments are validated when the decorator is created, not when it is
    applied.
    """

    validate_governor_config(
        DebounceConfig(delay_seconds=delay, leading=leading, trailing=trailing)
    )

    def decorate(func: Callable[..., Any]) -> Debouncer:
        governor = Debouncer(
            func,
            delay,
            leading=leading,
            trailing=trailing,
            scheduler=scheduler,
        )
        return functools.update_wrapper(governor, func)

    return decorate


def throttled(
    limit: float,
    *,
    clock: Clock | None = None,
    scheduler: Scheduler | None = None,
) -> Callable[[Callable[..., Any]], Throttler]:
    """Wrap a function in a :class:`Throttler`."""

    validate_governor_config(ThrottleConfig(limit_seconds=limit))

    def decorate(func: Callable[..., Any]) -> Throttler:
        governor = Throttler(func, limit, clock=clock, scheduler=scheduler)
        return functools.update_wrapper(governor, func)

    return decorate


__all__ = [
    "debounced",
    "throttled",
]
