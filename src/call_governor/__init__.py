"""Public package exports for call-governor."""

from .config import DebounceConfig, ThrottleConfig
from .core.async_scheduling import AsyncioScheduler
from .core.errors import GovernorConfigError, GovernorError
from .core.scheduling import ManualScheduler, Scheduler
from .debounce import Debouncer
from .decorators import debounced, throttled
from .governor_shared import GovernorState
from .throttle import Throttler

__all__ = [
    "Debouncer",
    "Throttler",
    "debounced",
    "throttled",
    "DebounceConfig",
    "ThrottleConfig",
    "GovernorState",
    "GovernorError",
    "GovernorConfigError",
    "Scheduler",
    "ManualScheduler",
    "AsyncioScheduler",
]
