"""
Port interfaces for the UI bounded context.

The scroll hook never touches a real window or clock directly:
the host window and the timer facility are injected through these ports.
"""

from abc import ABC, abstractmethod
from typing import Callable


class ScrollTarget(ABC):
    """Port for the host window that owns the viewport."""

    @abstractmethod
    def scroll_to(self, *, top: int, left: int, behavior: str) -> None:
        """Scroll the viewport to the given offset.

        Args:
            top: Vertical offset in pixels.
            left: Horizontal offset in pixels.
            behavior: "smooth" or "auto".
        """
        raise NotImplementedError


class TimerHandle(ABC):
    """A scheduled callback that can still be cancelled."""

    @abstractmethod
    def cancel(self) -> None:
        """Prevent the callback from running. No-op once it has run."""
        raise NotImplementedError


class TimerScheduler(ABC):
    """Port for scheduling one-shot delayed callbacks."""

    @abstractmethod
    def call_later(
        self, delay_seconds: float, callback: Callable[[], None]
    ) -> TimerHandle:
        """Run ``callback`` once after ``delay_seconds``."""
        raise NotImplementedError
