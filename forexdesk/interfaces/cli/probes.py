"""
Manual integration probes.

Each probe issues a fixed sequence of requests against a running
trading backend (or Cloudinary), logs what came back, and returns the
parsed payload so it can also be driven from tests. Requests run
strictly in order, each waiting for the previous response.

Probes never raise for an unreachable server or an error response:
the failure is logged and the probe returns what it has.
"""

import json
import logging
from typing import Any, Optional

import httpx

from forexdesk.domain.errors import (
    StorageNotConfiguredError,
    StorageUnavailableError,
)
from forexdesk.domain.uploads.ports import MediaStoragePort
from forexdesk.infrastructure.http.errors import ApiRequestError
from forexdesk.infrastructure.http.forex_api_client import ForexApiClient
from forexdesk.infrastructure.uploads.cloudinary_storage import CloudinaryCredentials

logger = logging.getLogger(__name__)

SAMPLE_SIGNUP = {
    "accountType": "Standard",
    "email": "quick-test@example.com",
    "password": "test123",
    "repeatPassword": "test123",
    "fullName": "Quick Test",
    "fatherName": "Test Father",
    "motherName": "Test Mother",
    "gender": "male",
    "dateOfBirth": "1990-01-01",
    "mobileCode": "+91",
    "mobileNumber": "1234567890",
    "country": "US",
    "state": "CA",
    "city": "LA",
    "postalCode": "90210",
    "streetAddress": "123 Test St",
    "termsAccepted": True,
    "privacyAccepted": True,
}


def _pretty(payload: Any) -> str:
    return json.dumps(payload, indent=2, default=str)


def _count(payload: Any, key: str) -> Optional[int]:
    if isinstance(payload, dict) and isinstance(payload.get(key), list):
        return len(payload[key])
    return None


def probe_signup(
    client: ForexApiClient, data: Optional[dict] = None
) -> Optional[Any]:
    """POST a sample signup and log the response."""
    logger.info("Testing signup...")
    try:
        status, payload = client.raw("POST", "/auth/signup", json=data or SAMPLE_SIGNUP)
    except httpx.HTTPError as exc:
        logger.error("Signup probe failed: %s", exc)
        return None

    logger.info("Response status: %d", status)
    logger.info("Response: %s", _pretty(payload))
    return payload


def probe_user_deposits(client: ForexApiClient, user_id: str) -> Optional[Any]:
    """List a user's deposit requests through the admin endpoint."""
    logger.info("Testing deposit listing for user %s...", user_id)
    try:
        status, payload = client.raw(
            "GET", f"/admin/users/{user_id}/deposits", admin=True
        )
    except httpx.HTTPError as exc:
        logger.error("Deposit probe failed: %s", exc)
        return None

    logger.info("Response status: %d", status)
    if isinstance(payload, dict) and payload.get("success"):
        logger.info(
            "API working, found %s deposit requests",
            _count(payload, "depositRequests") or 0,
        )
    else:
        message = payload.get("message") if isinstance(payload, dict) else payload
        logger.warning("API error: %s", message)
    return payload


def probe_admin_withdrawals(
    client: ForexApiClient, status_filter: Optional[str] = None
) -> Optional[Any]:
    """List withdrawal requests and log a sample."""
    logger.info("Testing /withdrawals/admin endpoint...")
    params = {"status": status_filter} if status_filter else None
    try:
        status, payload = client.raw("GET", "/withdrawals/admin", params=params)
    except httpx.HTTPError as exc:
        logger.error("Withdrawal probe failed: %s", exc)
        return None

    logger.info("Response status: %d", status)
    requests = payload.get("withdrawalRequests") if isinstance(payload, dict) else None
    if isinstance(payload, dict) and payload.get("success") and requests is not None:
        logger.info("Found %d withdrawal requests", len(requests))
        if requests:
            logger.info("Sample request: %s", _pretty(requests[0]))
    else:
        logger.warning("No withdrawal requests found or API error")
    return payload


def probe_cloudinary(
    credentials: CloudinaryCredentials, storage: MediaStoragePort
) -> bool:
    """Check Cloudinary credentials and connectivity.

    Returns:
        True when the ping succeeded.
    """
    logger.info("Testing Cloudinary configuration...")
    missing = credentials.missing()
    if missing:
        logger.error("Missing environment variables: %s", ", ".join(missing))
        logger.info("Please add these to your .env file")
        return False

    try:
        storage.ping()
    except (StorageNotConfiguredError, StorageUnavailableError) as exc:
        logger.error("Cloudinary connection failed: %s", exc.message)
        return False

    logger.info("Cloudinary connection successful! Cloud name: %s", credentials.cloud_name)
    return True


def probe_trading_session(
    client: ForexApiClient,
    email: str,
    password: str,
    register: bool = True,
) -> dict[str, Any]:
    """Register, sign in, then read market data, orders and portfolio.

    Stops at the first failing step.

    Returns:
        Payloads keyed by step name, for the steps that completed.
    """
    results: dict[str, Any] = {}
    registration = {"email": email, "password": password, "accountType": "individual"}
    steps = []
    if register:
        steps.append(("register", lambda: client.register(registration)))
    steps += [
        ("login", lambda: client.login(email, password)),
        ("market_data", client.market_data),
        ("orders", client.list_orders),
        ("portfolio", client.portfolio),
    ]

    for name, call in steps:
        logger.info("Step %s...", name)
        try:
            results[name] = call()
        except ApiRequestError as exc:
            logger.error("Step %s rejected: %s", name, exc)
            break
        except httpx.HTTPError as exc:
            logger.error("Step %s failed: %s", name, exc)
            break

    market = results.get("market_data")
    if market is not None:
        logger.info("Market data rows: %s", _count(market, "data"))
    if "orders" in results:
        logger.info("Orders: %s", _count(results["orders"], "orders"))
    if "portfolio" in results:
        logger.info("Portfolio received")
    return results
