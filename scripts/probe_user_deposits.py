#!/usr/bin/env python3
"""
CLI probe: List a user's deposit requests through the admin API.

Without an admin token the backend answers with an error body,
which is still useful to see.

Usage:
    python scripts/probe_user_deposits.py USER_ID [--admin-token=...]
"""

import argparse
import os
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from forexdesk.core.config import settings
from forexdesk.infrastructure.http.forex_api_client import ForexApiClient, TokenStore
from forexdesk.interfaces.cli.probes import probe_user_deposits
from forexdesk.shared.logging import configure_logging


def main() -> int:
    """Run the deposit listing probe."""
    parser = argparse.ArgumentParser(description="Probe admin deposit listing")
    parser.add_argument("user_id", help="Backend id of the user to inspect")
    parser.add_argument("--base-url", default=settings.api_base_url)
    parser.add_argument(
        "--admin-token",
        default=os.getenv("FOREXDESK_ADMIN_TOKEN"),
        help="Admin bearer token (default: $FOREXDESK_ADMIN_TOKEN)",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    args = parser.parse_args()
    configure_logging(args.log_level)

    tokens = TokenStore(admin_token=args.admin_token)
    with ForexApiClient(
        args.base_url, timeout=settings.api_timeout_seconds, tokens=tokens
    ) as client:
        probe_user_deposits(client, args.user_id)
    return 0


if __name__ == "__main__":
    sys.exit(main())
