"""
HTTP client for the trading backend REST API.

Wraps ``httpx.Client`` with the backend's conventions:
    - JSON request and response bodies
    - ``Authorization: Bearer <token>`` on protected routes
    - ``{"success": false, "message": ...}`` bodies on failure

The client only consumes the backend; it implements no endpoint itself.
"""

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional

import httpx

from forexdesk.domain.errors import InvalidOrderError
from forexdesk.domain.trading.orders import validate_order
from forexdesk.infrastructure.http.errors import (
    ADMIN_ERROR_MESSAGE,
    DEFAULT_ERROR_MESSAGE,
    ApiRequestError,
)

logger = logging.getLogger(__name__)

JSON_HEADERS = {"Content-Type": "application/json"}


@dataclass
class TokenStore:
    """Holds the session tokens for the current client.

    Attributes:
        token: Bearer token of the signed-in user.
        admin_token: Bearer token of the signed-in administrator.
    """

    token: Optional[str] = None
    admin_token: Optional[str] = None

    def clear(self) -> None:
        self.token = None
        self.admin_token = None


class ForexApiClient:
    """Synchronous client for the trading backend.

    Args:
        base_url: API root, e.g. ``http://localhost:5000/api``.
        timeout: Request timeout in seconds.
        transport: Optional httpx transport (tests pass ``httpx.MockTransport``).
        tokens: Token store shared with other clients, if any.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        transport: Optional[httpx.BaseTransport] = None,
        tokens: Optional[TokenStore] = None,
    ) -> None:
        self.tokens = tokens or TokenStore()
        self._http = httpx.Client(
            base_url=base_url.rstrip("/"),
            timeout=timeout,
            transport=transport,
            headers=JSON_HEADERS,
        )

    def __enter__(self) -> "ForexApiClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        self._http.close()

    # ------------------------------------------------------------------
    # Transport helpers
    # ------------------------------------------------------------------

    def _headers(self, admin: bool) -> dict[str, str]:
        token = self.tokens.admin_token if admin else self.tokens.token
        return {"Authorization": f"Bearer {token}"} if token else {}

    def _send(
        self,
        method: str,
        path: str,
        json: Optional[Any] = None,
        params: Optional[Mapping[str, str]] = None,
        admin: bool = False,
    ) -> httpx.Response:
        return self._http.request(
            method, path, json=json, params=params, headers=self._headers(admin)
        )

    @staticmethod
    def _decode(response: httpx.Response) -> Optional[Any]:
        try:
            return response.json()
        except ValueError:
            return None

    def raw(
        self,
        method: str,
        path: str,
        json: Optional[Any] = None,
        params: Optional[Mapping[str, str]] = None,
        admin: bool = False,
    ) -> tuple[int, Optional[Any]]:
        """Send a request and return ``(status_code, payload)`` without raising."""
        response = self._send(method, path, json=json, params=params, admin=admin)
        return response.status_code, self._decode(response)

    def request(
        self,
        method: str,
        path: str,
        json: Optional[Any] = None,
        params: Optional[Mapping[str, str]] = None,
        admin: bool = False,
    ) -> Any:
        """Send a request and return the decoded body.

        Raises:
            ApiRequestError: If the response status is not 2xx.
            httpx.HTTPError: On transport failures.
        """
        response = self._send(method, path, json=json, params=params, admin=admin)
        payload = self._decode(response)
        if not response.is_success:
            fallback = ADMIN_ERROR_MESSAGE if admin else DEFAULT_ERROR_MESSAGE
            message = fallback
            if isinstance(payload, dict) and payload.get("message"):
                message = str(payload["message"])
            logger.warning("%s %s -> %d: %s", method, path, response.status_code, message)
            raise ApiRequestError(message, response.status_code, payload)
        return payload

    # ------------------------------------------------------------------
    # Authentication
    # ------------------------------------------------------------------

    def signup(self, data: Mapping[str, Any]) -> Any:
        return self.request("POST", "/auth/signup", json=dict(data))

    def register(self, data: Mapping[str, Any]) -> Any:
        return self.request("POST", "/auth/register", json=dict(data))

    def login(self, email: str, password: str) -> Any:
        """Sign in and keep the returned token for later calls."""
        payload = self.request(
            "POST", "/auth/login", json={"email": email, "password": password}
        )
        if isinstance(payload, dict) and payload.get("token"):
            self.tokens.token = payload["token"]
        return payload

    def admin_login(self, email: str, password: str) -> Any:
        """Sign in as an administrator and keep the token for admin calls."""
        payload = self.request(
            "POST", "/auth/login", json={"email": email, "password": password}
        )
        if isinstance(payload, dict) and payload.get("token"):
            self.tokens.admin_token = payload["token"]
        return payload

    def get_profile(self) -> Any:
        return self.request("GET", "/auth/profile")

    # ------------------------------------------------------------------
    # Trading
    # ------------------------------------------------------------------

    def market_data(self) -> Any:
        return self.request("GET", "/market/data")

    def list_orders(self) -> Any:
        return self.request("GET", "/orders")

    def place_order(self, order: Mapping[str, Any]) -> Any:
        """Validate an order draft locally, then submit it.

        Raises:
            InvalidOrderError: If the draft fails validation; nothing is sent.
        """
        validation = validate_order(order)
        if not validation.valid:
            raise InvalidOrderError(validation.error or "invalid order")
        return self.request("POST", "/orders", json=dict(order))

    def portfolio(self) -> Any:
        return self.request("GET", "/portfolio")

    # ------------------------------------------------------------------
    # Back office
    # ------------------------------------------------------------------

    def user_deposit_requests(self, user_id: str) -> Any:
        return self.request("GET", f"/admin/users/{user_id}/deposits", admin=True)

    def withdrawal_requests(self, status: Optional[str] = None) -> Any:
        params = {"status": status} if status else None
        return self.request("GET", "/withdrawals/admin", params=params)
