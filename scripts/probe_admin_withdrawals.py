#!/usr/bin/env python3
"""
CLI probe: List withdrawal requests from the admin endpoint.

Usage:
    python scripts/probe_admin_withdrawals.py [--status=pending] [--token=...]
"""

import argparse
import os
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from forexdesk.core.config import settings
from forexdesk.infrastructure.http.forex_api_client import ForexApiClient, TokenStore
from forexdesk.interfaces.cli.probes import probe_admin_withdrawals
from forexdesk.shared.logging import configure_logging


def main() -> int:
    """Run the withdrawal listing probe."""
    parser = argparse.ArgumentParser(description="Probe withdrawal listing")
    parser.add_argument("--base-url", default=settings.api_base_url)
    parser.add_argument("--status", default=None, help="Optional status filter")
    parser.add_argument(
        "--token",
        default=os.getenv("FOREXDESK_TOKEN"),
        help="Bearer token (default: $FOREXDESK_TOKEN)",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    args = parser.parse_args()
    configure_logging(args.log_level)

    with ForexApiClient(
        args.base_url,
        timeout=settings.api_timeout_seconds,
        tokens=TokenStore(token=args.token),
    ) as client:
        probe_admin_withdrawals(client, args.status)
    return 0


if __name__ == "__main__":
    sys.exit(main())
