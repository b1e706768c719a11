"""Core primitives: errors, clock, and deferred-callback facilities."""

from .async_scheduling import AsyncioScheduler
from .errors import GovernorConfigError, GovernorError
from .scheduling import ManualScheduler, Scheduler

__all__ = [
    "GovernorError",
    "GovernorConfigError",
    "Scheduler",
    "ManualScheduler",
    "AsyncioScheduler",
]
