"""
Adapter: mock email service for development.

Implements EmailNotificationPort without sending anything. Each call
logs the email it would have sent, waits a fixed delay to imitate
network latency, and returns a synthetic message id:

    send_otp                     ─▶ mock-{ms}          (1.0s delay)
    send_password_reset_success  ─▶ mock-success-{ms}  (0.5s delay)

Any internal failure becomes a DeliveryFailed result; nothing is raised
to the caller.
"""

import asyncio
import logging
import time
from typing import Awaitable, Callable, Optional, Union

from forexdesk.core.config import settings
from forexdesk.domain.notifications.entities import (
    PASSWORD_RESET_SUCCESS_SUBJECT,
    DeliveryFailed,
    DeliveryResult,
    DeliverySucceeded,
    EmailPurpose,
    OtpNotification,
)
from forexdesk.domain.notifications.ports import EmailNotificationPort

logger = logging.getLogger(__name__)

OTP_ID_PREFIX = "mock-"
SUCCESS_ID_PREFIX = "mock-success-"
BANNER_WIDTH = 40

Clock = Callable[[], int]
Sleeper = Callable[[float], Awaitable[None]]


def _epoch_ms() -> int:
    return time.time_ns() // 1_000_000


def _render(title: str, lines: list[str]) -> str:
    rule = "=" * BANNER_WIDTH
    return "\n".join([f"===== {title} =====", *lines, rule])


class MockEmailService(EmailNotificationPort):
    """Email port that logs messages instead of delivering them.

    Args:
        otp_delay_seconds: Simulated latency of an OTP email.
        success_delay_seconds: Simulated latency of a reset-success email.
        otp_valid_minutes: Validity window printed in OTP emails.
        clock: Returns the current Unix time in milliseconds.
        sleep: Awaitable used for the simulated latency.
    """

    def __init__(
        self,
        otp_delay_seconds: float = 1.0,
        success_delay_seconds: float = 0.5,
        otp_valid_minutes: int = 10,
        clock: Clock = _epoch_ms,
        sleep: Sleeper = asyncio.sleep,
    ) -> None:
        self._otp_delay = otp_delay_seconds
        self._success_delay = success_delay_seconds
        self._otp_valid_minutes = otp_valid_minutes
        self._clock = clock
        self._sleep = sleep

    async def send_otp(
        self,
        email: str,
        code: str,
        purpose: Union[EmailPurpose, str] = EmailPurpose.PASSWORD_RESET,
    ) -> DeliveryResult:
        """Log an OTP email and return a ``mock-{ms}`` message id."""
        try:
            notification = OtpNotification(email=email, code=str(code), purpose=purpose)
            body = _render(
                "EMAIL SENT (MOCK)",
                [
                    f"To: {notification.email}",
                    f"Subject: {notification.subject}",
                    f"OTP Code: {notification.code}",
                    f"Valid for: {self._otp_valid_minutes} minutes",
                ],
            )
            return await self._deliver(body, self._otp_delay, OTP_ID_PREFIX)
        except Exception as exc:
            logger.exception("Mock email error for %s", email)
            return DeliveryFailed(error=str(exc))

    async def send_password_reset_success(self, email: str) -> DeliveryResult:
        """Log a password-reset confirmation and return a ``mock-success-{ms}`` id."""
        try:
            body = _render(
                "SUCCESS EMAIL SENT (MOCK)",
                [
                    f"To: {email}",
                    f"Subject: {PASSWORD_RESET_SUCCESS_SUBJECT}",
                    "Message: Your password has been successfully reset!",
                ],
            )
            return await self._deliver(body, self._success_delay, SUCCESS_ID_PREFIX)
        except Exception as exc:
            logger.exception("Mock success email error for %s", email)
            return DeliveryFailed(error=str(exc))

    async def _deliver(self, body: str, delay: float, id_prefix: str) -> DeliverySucceeded:
        logger.info("\n%s", body)
        await self._sleep(delay)
        return DeliverySucceeded(message_id=f"{id_prefix}{self._clock()}")


_default_service: Optional[MockEmailService] = None


def get_mock_email_service() -> MockEmailService:
    """Return the process-wide mock service built from settings."""
    global _default_service
    if _default_service is None:
        _default_service = MockEmailService(
            otp_delay_seconds=settings.mock_email_otp_delay_seconds,
            success_delay_seconds=settings.mock_email_success_delay_seconds,
            otp_valid_minutes=settings.otp_valid_minutes,
        )
    return _default_service


async def send_otp_email(
    email: str,
    code: str,
    purpose: Union[EmailPurpose, str] = EmailPurpose.PASSWORD_RESET,
) -> DeliveryResult:
    """Send an OTP email through the default mock service."""
    return await get_mock_email_service().send_otp(email, code, purpose)


async def send_password_reset_success_email(email: str) -> DeliveryResult:
    """Send a password-reset confirmation through the default mock service."""
    return await get_mock_email_service().send_password_reset_success(email)
