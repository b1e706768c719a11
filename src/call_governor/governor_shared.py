"""State-machine pieces shared by the debouncer and the throttler."""

from __future__ import annotations

import enum
import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from functools import partial
from typing import Any, Protocol

from .core.async_scheduling import AsyncioScheduler
from .core.errors import GovernorConfigError
from .core.scheduling import Scheduler

logger = logging.getLogger("call_governor")


class _Validatable(Protocol):
    def validate(self) -> None: ...


class GovernorState(enum.Enum):
    IDLE = "idle"
    ARMED = "armed"


@dataclass(slots=True, frozen=True)
class PendingCall:
    """Arguments captured from one ``invoke`` call."""

    args: tuple[Any, ...] = ()
    kwargs: Mapping[str, Any] = field(default_factory=dict)

    def apply(self, action: Callable[..., Any]) -> None:
        action(*self.args, **self.kwargs)


def validate_governor_config(config: _Validatable) -> None:
    try:
        config.validate()
    except ValueError as exc:
        raise GovernorConfigError(str(exc)) from exc


def ensure_callable(action: object) -> Callable[..., Any]:
    if not callable(action):
        raise GovernorConfigError("action must be callable")
    return action


def resolve_scheduler(scheduler: Scheduler | None) -> Scheduler:
    if scheduler is not None:
        return scheduler
    try:
        return AsyncioScheduler()
    except RuntimeError as exc:
        raise GovernorConfigError(
            "scheduler is required when no event loop is running"
        ) from exc


class MethodBinding:
    """Give each instance its own governor when used as a method decorator.

    The bound governor wraps the action with the instance as first argument
    and is cached in the instance ``__dict__`` under the attribute name, so
    later lookups skip the descriptor.
    """

    _attr_name: str | None = None

    def __set_name__(self, owner: type, name: str) -> None:
        self._attr_name = name

    def __get__(self, instance: object, owner: type | None = None) -> Any:
        if instance is None or self._attr_name is None:
            return self
        bound = self._bind(partial(self._action, instance))
        instance.__dict__[self._attr_name] = bound
        return bound

    def _bind(self, action: Callable[..., Any]) -> Any:
        raise NotImplementedError


class TimerSlot:
    """At most one armed deferred callback, with a stale-fire guard.

    Every arm and every disarm bumps a generation counter. The callback handed
    to the scheduler carries the generation it was armed under, and ``claim``
    only accepts a fire whose generation is still current. A fire the facility
    had already queued before ``disarm`` is therefore dropped.
    """

    def __init__(self, scheduler: Scheduler, owner: str) -> None:
        self._scheduler = scheduler
        self._owner = owner
        self._handle: Any = None
        self._generation = 0

    @property
    def armed(self) -> bool:
        return self._handle is not None

    def arm(self, callback: Callable[[int], None], delay: float) -> None:
        self.disarm()
        delay = max(0.0, delay)
        self._generation += 1
        self._handle = self._scheduler.schedule(partial(callback, self._generation), delay)
        logger.debug("%s armed delay=%s generation=%s", self._owner, delay, self._generation)

    def disarm(self) -> bool:
        if self._handle is None:
            return False
        handle = self._handle
        self._handle = None
        self._generation += 1
        self._scheduler.cancel(handle)
        return True

    def claim(self, generation: int) -> bool:
        """Accept a fire for ``generation`` and clear the slot."""

        if generation != self._generation or self._handle is None:
            logger.debug(
                "%s stale fire ignored generation=%s current=%s",
                self._owner,
                generation,
                self._generation,
            )
            return False
        self._handle = None
        return True


__all__ = [
    "GovernorState",
    "PendingCall",
    "TimerSlot",
    "validate_governor_config",
    "ensure_callable",
    "resolve_scheduler",
    "MethodBinding",
]
