"""
Domain entities for the notifications bounded context.

Delivery outcomes are modeled as two result types instead of exceptions:
callers branch on ``result.success`` and read ``message_id`` or ``error``.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Union


class EmailPurpose(str, Enum):
    """Why an OTP email is being sent."""

    PASSWORD_RESET = "password_reset"
    EMAIL_VERIFICATION = "email_verification"


OTP_SUBJECTS = {
    EmailPurpose.PASSWORD_RESET: "Password Reset OTP",
    EmailPurpose.EMAIL_VERIFICATION: "Email Verification OTP",
}
PASSWORD_RESET_SUCCESS_SUBJECT = "Password Reset Successful"


def otp_subject(purpose: Union[EmailPurpose, str]) -> str:
    """Return the subject line for an OTP email.

    Anything other than a password reset is treated as email verification.
    """
    if purpose == EmailPurpose.PASSWORD_RESET:
        return OTP_SUBJECTS[EmailPurpose.PASSWORD_RESET]
    return OTP_SUBJECTS[EmailPurpose.EMAIL_VERIFICATION]


@dataclass(frozen=True)
class OtpNotification:
    """An OTP email about to be sent. Never persisted."""

    email: str
    code: str
    purpose: Union[EmailPurpose, str] = EmailPurpose.PASSWORD_RESET

    @property
    def subject(self) -> str:
        return otp_subject(self.purpose)


@dataclass(frozen=True)
class DeliverySucceeded:
    """The email was accepted for delivery."""

    message_id: str

    @property
    def success(self) -> bool:
        return True

    def as_dict(self) -> dict:
        return {"success": True, "message_id": self.message_id}


@dataclass(frozen=True)
class DeliveryFailed:
    """The email could not be sent."""

    error: str

    @property
    def success(self) -> bool:
        return False

    def as_dict(self) -> dict:
        return {"success": False, "error": self.error}


DeliveryResult = Union[DeliverySucceeded, DeliveryFailed]
