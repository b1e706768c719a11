"""Error types."""

from __future__ import annotations


class GovernorError(Exception):
    """Base exception for this package."""


class GovernorConfigError(GovernorError, ValueError):
    """Invalid governor construction arguments."""


__all__ = [
    "GovernorError",
    "GovernorConfigError",
]
