"""Deferred-callback facility backed by an asyncio event loop."""

from __future__ import annotations

import asyncio
from collections.abc import Callable


class AsyncioScheduler:
    """Schedule governor callbacks with ``loop.call_later``.

    With no explicit loop, the running loop is captured at construction, so
    an instance must be created inside a coroutine or handed a loop. Exceptions
    raised by callbacks are reported through the loop's exception handler.
    """

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
        self._loop = loop or asyncio.get_running_loop()

    def now(self) -> float:
        return self._loop.time()

    def schedule(self, callback: Callable[[], None], delay: float) -> asyncio.TimerHandle:
        return self._loop.call_later(max(0.0, delay), callback)

    def cancel(self, handle: asyncio.TimerHandle) -> None:
        handle.cancel()


__all__ = [
    "AsyncioScheduler",
]
