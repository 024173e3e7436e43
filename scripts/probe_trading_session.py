#!/usr/bin/env python3
"""
CLI probe: Walk through a trading session against a running backend.

Registers (optional), signs in, then reads market data, orders and
the portfolio, one request after the other.

Usage:
    python scripts/probe_trading_session.py --email=a@b.c --password=secret [--skip-register]
"""

import argparse
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from forexdesk.core.config import settings
from forexdesk.infrastructure.http.forex_api_client import ForexApiClient
from forexdesk.interfaces.cli.probes import probe_trading_session
from forexdesk.shared.logging import configure_logging


def main() -> int:
    """Run the trading session probe."""
    parser = argparse.ArgumentParser(description="Probe auth and trading endpoints")
    parser.add_argument("--base-url", default=settings.api_base_url)
    parser.add_argument("--email", required=True)
    parser.add_argument("--password", required=True)
    parser.add_argument(
        "--skip-register",
        action="store_true",
        help="Sign in with an existing account instead of registering",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    args = parser.parse_args()
    configure_logging(args.log_level)

    with ForexApiClient(args.base_url, timeout=settings.api_timeout_seconds) as client:
        probe_trading_session(
            client, args.email, args.password, register=not args.skip_register
        )
    return 0


if __name__ == "__main__":
    sys.exit(main())
