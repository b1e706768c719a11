"""Governor configuration."""

from __future__ import annotations

import math
from dataclasses import dataclass


def _validate_duration(name: str, value: object) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"{name} must be a number")
    if not math.isfinite(value):
        raise ValueError(f"{name} must be finite")
    if value < 0:
        raise ValueError(f"{name} must be >= 0")


@dataclass(slots=True, frozen=True)
class DebounceConfig:
    """Debouncer settings."""

    delay_seconds: float = 0.0
    leading: bool = False
    trailing: bool = True

    def validate(self) -> None:
        _validate_duration("debounce.delay_seconds", self.delay_seconds)
        if not isinstance(self.leading, bool):
            raise ValueError("debounce.leading must be bool")
        if not isinstance(self.trailing, bool):
            raise ValueError("debounce.trailing must be bool")
        if not (self.leading or self.trailing):
            raise ValueError("debounce.leading or debounce.trailing must be enabled")


@dataclass(slots=True, frozen=True)
class ThrottleConfig:
    """Throttler settings."""

    limit_seconds: float = 0.0

    def validate(self) -> None:
        _validate_duration("throttle.limit_seconds", self.limit_seconds)


__all__ = [
    "DebounceConfig",
    "ThrottleConfig",
]
