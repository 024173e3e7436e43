"""
Notifications bounded context.

Outbound email for OTP verification and password reset flows.
"""
