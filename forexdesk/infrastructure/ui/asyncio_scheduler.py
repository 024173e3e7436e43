"""
Adapter: asyncio-backed timer scheduler.

Implements the TimerScheduler port on top of ``loop.call_later``.
asyncio.TimerHandle already satisfies the TimerHandle contract.
"""

import asyncio
from typing import Callable, Optional

from forexdesk.domain.ui.ports import TimerHandle, TimerScheduler


class _AsyncioTimerHandle(TimerHandle):
    def __init__(self, handle: asyncio.TimerHandle) -> None:
        self._handle = handle

    def cancel(self) -> None:
        self._handle.cancel()

    @property
    def cancelled(self) -> bool:
        return self._handle.cancelled()


class AsyncioTimerScheduler(TimerScheduler):
    """Schedule callbacks on an asyncio event loop.

    Args:
        loop: Event loop to use. Defaults to the running loop at call time.
    """

    def __init__(self, loop: Optional[asyncio.AbstractEventLoop] = None) -> None:
        self._loop = loop

    def call_later(
        self, delay_seconds: float, callback: Callable[[], None]
    ) -> TimerHandle:
        loop = self._loop or asyncio.get_running_loop()
        return _AsyncioTimerHandle(loop.call_later(delay_seconds, callback))
