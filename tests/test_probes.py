"""
Tests for the manual integration probes.

The probes must log and return instead of raising, whatever the
backend does.
"""

import json
import logging
from unittest.mock import MagicMock

import httpx
import pytest

from forexdesk.domain.errors import StorageUnavailableError
from forexdesk.domain.uploads.ports import MediaStoragePort
from forexdesk.infrastructure.http.forex_api_client import ForexApiClient
from forexdesk.infrastructure.uploads.cloudinary_storage import CloudinaryCredentials
from forexdesk.interfaces.cli import probes

BASE_URL = "http://backend.test/api"


def _client(handler) -> ForexApiClient:
    return ForexApiClient(BASE_URL, transport=httpx.MockTransport(handler))


def _unreachable(request: httpx.Request) -> httpx.Response:
    raise httpx.ConnectError("Connection refused", request=request)


@pytest.fixture(autouse=True)
def _capture_probe_logs(caplog):
    caplog.set_level(logging.INFO, logger=probes.__name__)


class TestProbeSignup:
    def test_posts_sample_payload(self, caplog) -> None:
        """The sample account is posted to /auth/signup."""
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(201, json={"success": True, "message": "User registered"})

        payload = probes.probe_signup(_client(handler))

        assert payload == {"success": True, "message": "User registered"}
        assert seen[0].url.path == "/api/auth/signup"
        assert json.loads(seen[0].content)["accountType"] == "Standard"
        assert "Response status: 201" in caplog.text

    def test_error_status_is_returned(self) -> None:
        """An error response is returned, not raised."""
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(400, json={"success": False, "message": "Email exists"})

        assert probes.probe_signup(_client(handler))["message"] == "Email exists"

    def test_unreachable_server(self, caplog) -> None:
        """An unreachable backend is logged and yields None."""
        assert probes.probe_signup(_client(_unreachable)) is None
        assert "Signup probe failed" in caplog.text


class TestProbeUserDeposits:
    def test_counts_deposits(self, caplog) -> None:
        """The admin token is sent and deposits are counted."""
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.headers["Authorization"] == "Bearer admin-jwt"
            return httpx.Response(200, json={"success": True, "depositRequests": [{}, {}]})

        client = _client(handler)
        client.tokens.admin_token = "admin-jwt"
        probes.probe_user_deposits(client, "u1")

        assert "API working, found 2 deposit requests" in caplog.text

    def test_api_error_logged(self, caplog) -> None:
        """The backend message is logged on failure."""
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(403, json={"success": False, "message": "Forbidden"})

        probes.probe_user_deposits(_client(handler), "u1")
        assert "API error: Forbidden" in caplog.text


class TestProbeAdminWithdrawals:
    def test_logs_count_and_sample(self, caplog) -> None:
        """The count and first request are logged."""
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.url.params["status"] == "pending"
            return httpx.Response(
                200,
                json={"success": True, "withdrawalRequests": [{"id": "w1", "amount": 50}]},
            )

        probes.probe_admin_withdrawals(_client(handler), status_filter="pending")

        assert "Found 1 withdrawal requests" in caplog.text
        assert '"id": "w1"' in caplog.text

    def test_warns_on_error(self, caplog) -> None:
        """A failed listing logs a warning."""
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(401, json={"success": False})

        probes.probe_admin_withdrawals(_client(handler))
        assert "No withdrawal requests found or API error" in caplog.text


class TestProbeCloudinary:
    def test_missing_variables(self, caplog) -> None:
        """Missing variables are listed and no ping is made."""
        storage = MagicMock(spec=MediaStoragePort)

        assert probes.probe_cloudinary(CloudinaryCredentials(cloud_name="demo"), storage) is False
        assert (
            "Missing environment variables: CLOUDINARY_API_KEY, CLOUDINARY_API_SECRET"
            in caplog.text
        )
        storage.ping.assert_not_called()

    def test_successful_ping(self, caplog) -> None:
        """A successful ping reports the cloud name."""
        storage = MagicMock(spec=MediaStoragePort)
        storage.ping.return_value = {"status": "ok"}
        creds = CloudinaryCredentials("demo", "key", "secret")

        assert probes.probe_cloudinary(creds, storage) is True
        assert "Cloud name: demo" in caplog.text

    def test_failed_ping(self, caplog) -> None:
        """A failed ping returns False."""
        storage = MagicMock(spec=MediaStoragePort)
        storage.ping.side_effect = StorageUnavailableError("Invalid api_key")
        creds = CloudinaryCredentials("demo", "key", "secret")

        assert probes.probe_cloudinary(creds, storage) is False
        assert "Cloudinary connection failed" in caplog.text


class TestProbeTradingSession:
    def _backend(self, login_status: int = 200):
        calls = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(request.url.path)
            if request.url.path == "/api/auth/login":
                if login_status != 200:
                    return httpx.Response(login_status, json={"success": False, "message": "Invalid credentials"})
                return httpx.Response(200, json={"success": True, "token": "jwt"})
            if request.url.path == "/api/market/data":
                return httpx.Response(200, json={"success": True, "data": [{"pair": "EUR/USD"}]})
            if request.url.path == "/api/orders":
                return httpx.Response(200, json={"success": True, "orders": []})
            return httpx.Response(200, json={"success": True})

        return handler, calls

    def test_runs_steps_in_order(self) -> None:
        """Steps run one after another in a fixed order."""
        handler, calls = self._backend()

        results = probes.probe_trading_session(_client(handler), "a@b.c", "pw")

        assert calls == [
            "/api/auth/register",
            "/api/auth/login",
            "/api/market/data",
            "/api/orders",
            "/api/portfolio",
        ]
        assert list(results) == ["register", "login", "market_data", "orders", "portfolio"]

    def test_skip_register(self) -> None:
        """Registration can be skipped."""
        handler, calls = self._backend()
        probes.probe_trading_session(_client(handler), "a@b.c", "pw", register=False)
        assert calls[0] == "/api/auth/login"

    def test_stops_at_first_failure(self, caplog) -> None:
        """A rejected step ends the session."""
        handler, calls = self._backend(login_status=401)

        results = probes.probe_trading_session(_client(handler), "a@b.c", "pw")

        assert list(results) == ["register"]
        assert calls == ["/api/auth/register", "/api/auth/login"]
        assert "Step login rejected" in caplog.text

    def test_unreachable_server(self) -> None:
        """No step completes against an unreachable backend."""
        assert probes.probe_trading_session(_client(_unreachable), "a@b.c", "pw") == {}
