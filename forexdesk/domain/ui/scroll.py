"""
Scroll-restoration hook.

Scrolls the host window back to a target offset when the owning view
activates, optionally smoothly and optionally after a delay.

Lifecycle:
    mount()    ─▶ scroll now (delay == 0) or schedule a timer
    update()   ─▶ if smooth/delay changed: cancel pending timer, re-activate
    unmount()  ─▶ cancel pending timer

Each activation produces exactly one ``scroll_to`` call, or none when the
view is unmounted before the delay elapses.
"""

import logging
from contextlib import contextmanager
from typing import Iterator, Optional

from forexdesk.domain.ui.ports import ScrollTarget, TimerHandle, TimerScheduler

logger = logging.getLogger(__name__)

SMOOTH = "smooth"
AUTO = "auto"


class ScrollToTop:
    """Scroll the window to ``top`` whenever the owning view activates.

    Args:
        target: Host window receiving the scroll call.
        scheduler: Timer facility used when ``delay_ms`` is positive.
        smooth: Use smooth scrolling instead of an instant jump.
        delay_ms: Delay before scrolling, in milliseconds. Values <= 0
            scroll synchronously during activation.
        top: Vertical offset to scroll to.
    """

    def __init__(
        self,
        target: ScrollTarget,
        scheduler: TimerScheduler,
        smooth: bool = True,
        delay_ms: float = 0,
        top: int = 0,
    ) -> None:
        self._target = target
        self._scheduler = scheduler
        self._smooth = smooth
        self._delay_ms = delay_ms
        self._top = top
        self._pending: Optional[TimerHandle] = None
        self._mounted = False

    @property
    def mounted(self) -> bool:
        return self._mounted

    @property
    def pending(self) -> bool:
        """True while a delayed scroll is scheduled and has not fired."""
        return self._pending is not None

    @property
    def behavior(self) -> str:
        return SMOOTH if self._smooth else AUTO

    def mount(self) -> None:
        """Activate the hook for the first time."""
        if self._mounted:
            return
        self._mounted = True
        self._activate()

    def update(
        self,
        smooth: Optional[bool] = None,
        delay_ms: Optional[float] = None,
    ) -> None:
        """Re-render with new parameters.

        Only a change in ``smooth`` or ``delay_ms`` re-activates the hook.
        """
        new_smooth = self._smooth if smooth is None else smooth
        new_delay = self._delay_ms if delay_ms is None else delay_ms
        if new_smooth == self._smooth and new_delay == self._delay_ms:
            return

        self._smooth = new_smooth
        self._delay_ms = new_delay
        if not self._mounted:
            return
        self._cancel_pending()
        self._activate()

    def unmount(self) -> None:
        """Deactivate the hook, dropping any scroll that has not fired yet."""
        self._cancel_pending()
        self._mounted = False

    def _activate(self) -> None:
        if self._delay_ms > 0:
            self._pending = self._scheduler.call_later(
                self._delay_ms / 1000.0, self._fire
            )
            logger.debug("Scroll scheduled in %sms", self._delay_ms)
        else:
            self._scroll()

    def _fire(self) -> None:
        self._pending = None
        self._scroll()

    def _scroll(self) -> None:
        self._target.scroll_to(top=self._top, left=0, behavior=self.behavior)

    def _cancel_pending(self) -> None:
        if self._pending is not None:
            self._pending.cancel()
            self._pending = None
            logger.debug("Pending scroll cancelled")


@contextmanager
def scroll_to_top(
    target: ScrollTarget,
    scheduler: TimerScheduler,
    smooth: bool = True,
    delay_ms: float = 0,
    top: int = 0,
) -> Iterator[ScrollToTop]:
    """Mount a ScrollToTop for the duration of a ``with`` block."""
    hook = ScrollToTop(target, scheduler, smooth=smooth, delay_ms=delay_ms, top=top)
    hook.mount()
    try:
        yield hook
    finally:
        hook.unmount()
