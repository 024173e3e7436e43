"""
Tests for the mock email service.

Time is injected: a fixed clock for message ids and an AsyncMock
in place of asyncio.sleep, so no test actually waits.
"""

import logging
from unittest.mock import AsyncMock

import pytest

from forexdesk.domain.notifications.entities import (
    DeliveryFailed,
    DeliverySucceeded,
    EmailPurpose,
    otp_subject,
)
from forexdesk.infrastructure.notifications import mock_email_service
from forexdesk.infrastructure.notifications.mock_email_service import MockEmailService

FIXED_MS = 1718000000000


@pytest.fixture
def sleep() -> AsyncMock:
    return AsyncMock()


@pytest.fixture
def service(sleep) -> MockEmailService:
    return MockEmailService(clock=lambda: FIXED_MS, sleep=sleep)


class TestSendOtp:
    @pytest.mark.asyncio
    async def test_returns_mock_message_id(self, service, sleep) -> None:
        """An OTP send waits 1s and returns a mock-{ms} id."""
        result = await service.send_otp("trader@example.com", "482913")

        assert result == DeliverySucceeded(message_id=f"mock-{FIXED_MS}")
        assert result.as_dict() == {"success": True, "message_id": f"mock-{FIXED_MS}"}
        sleep.assert_awaited_once_with(1.0)

    @pytest.mark.asyncio
    async def test_logs_password_reset_email(self, service, caplog) -> None:
        """The logged email shows recipient, subject, code and validity."""
        with caplog.at_level(logging.INFO, logger=mock_email_service.__name__):
            await service.send_otp("trader@example.com", "482913")

        assert "To: trader@example.com" in caplog.text
        assert "Subject: Password Reset OTP" in caplog.text
        assert "OTP Code: 482913" in caplog.text
        assert "Valid for: 10 minutes" in caplog.text

    @pytest.mark.asyncio
    async def test_verification_purpose_changes_subject(self, service, caplog) -> None:
        """Email verification uses its own subject."""
        with caplog.at_level(logging.INFO, logger=mock_email_service.__name__):
            await service.send_otp("new@example.com", "111222", EmailPurpose.EMAIL_VERIFICATION)

        assert "Subject: Email Verification OTP" in caplog.text

    @pytest.mark.asyncio
    async def test_failure_is_returned_not_raised(self, sleep) -> None:
        """Internal errors come back as DeliveryFailed."""
        sleep.side_effect = RuntimeError("SMTP down")
        service = MockEmailService(clock=lambda: FIXED_MS, sleep=sleep)

        result = await service.send_otp("trader@example.com", "482913")

        assert isinstance(result, DeliveryFailed)
        assert result.as_dict() == {"success": False, "error": "SMTP down"}


class TestSendPasswordResetSuccess:
    @pytest.mark.asyncio
    async def test_returns_success_message_id(self, service, sleep) -> None:
        """A confirmation waits 0.5s and returns a mock-success-{ms} id."""
        result = await service.send_password_reset_success("trader@example.com")

        assert result.success
        assert result.message_id == f"mock-success-{FIXED_MS}"
        sleep.assert_awaited_once_with(0.5)

    @pytest.mark.asyncio
    async def test_logs_confirmation(self, service, caplog) -> None:
        """The logged confirmation shows subject and message."""
        with caplog.at_level(logging.INFO, logger=mock_email_service.__name__):
            await service.send_password_reset_success("trader@example.com")

        assert "Subject: Password Reset Successful" in caplog.text
        assert "Your password has been successfully reset!" in caplog.text

    @pytest.mark.asyncio
    async def test_clock_failure_is_returned(self, sleep) -> None:
        """A failing clock is reported, not raised."""
        def broken_clock() -> int:
            raise OSError("clock unavailable")

        service = MockEmailService(clock=broken_clock, sleep=sleep)
        result = await service.send_password_reset_success("trader@example.com")

        assert result == DeliveryFailed(error="clock unavailable")


class TestModuleFunctions:
    """The module-level helpers delegate to the shared service."""

    @pytest.mark.asyncio
    async def test_send_otp_email_uses_default_service(self, monkeypatch, service) -> None:
        """send_otp_email goes through the shared service."""
        monkeypatch.setattr(mock_email_service, "_default_service", service)

        result = await mock_email_service.send_otp_email("a@b.c", "123456")

        assert result.message_id == f"mock-{FIXED_MS}"

    @pytest.mark.asyncio
    async def test_success_email_uses_default_service(self, monkeypatch, service) -> None:
        """send_password_reset_success_email goes through the shared service."""
        monkeypatch.setattr(mock_email_service, "_default_service", service)

        result = await mock_email_service.send_password_reset_success_email("a@b.c")

        assert result.message_id == f"mock-success-{FIXED_MS}"

    def test_default_service_is_shared(self, monkeypatch) -> None:
        """The shared service is built once."""
        monkeypatch.setattr(mock_email_service, "_default_service", None)
        first = mock_email_service.get_mock_email_service()
        assert mock_email_service.get_mock_email_service() is first


class TestOtpSubject:
    @pytest.mark.parametrize(
        "purpose, subject",
        [
            (EmailPurpose.PASSWORD_RESET, "Password Reset OTP"),
            ("password_reset", "Password Reset OTP"),
            (EmailPurpose.EMAIL_VERIFICATION, "Email Verification OTP"),
            ("anything-else", "Email Verification OTP"),
        ],
    )
    def test_subject(self, purpose, subject) -> None:
        """Only password_reset gets the reset subject."""
        assert otp_subject(purpose) == subject
