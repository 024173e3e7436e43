"""
Port interfaces (ABCs) for the notifications bounded context.

Implementations never raise for delivery problems: they return a
DeliveryFailed result instead.
"""

from abc import ABC, abstractmethod
from typing import Union

from forexdesk.domain.notifications.entities import DeliveryResult, EmailPurpose


class EmailNotificationPort(ABC):
    """Port for sending transactional emails."""

    @abstractmethod
    async def send_otp(
        self,
        email: str,
        code: str,
        purpose: Union[EmailPurpose, str] = EmailPurpose.PASSWORD_RESET,
    ) -> DeliveryResult:
        """Send a one-time password to ``email``."""
        raise NotImplementedError

    @abstractmethod
    async def send_password_reset_success(self, email: str) -> DeliveryResult:
        """Confirm to ``email`` that its password was reset."""
        raise NotImplementedError
