#!/usr/bin/env python3
"""
CLI probe: Submit a sample signup to a running backend.

Usage:
    python scripts/probe_signup.py [--base-url=http://localhost:5000/api]
"""

import argparse
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from forexdesk.core.config import settings
from forexdesk.infrastructure.http.forex_api_client import ForexApiClient
from forexdesk.interfaces.cli.probes import SAMPLE_SIGNUP, probe_signup
from forexdesk.shared.logging import configure_logging


def main() -> int:
    """Run the signup probe."""
    parser = argparse.ArgumentParser(description="Probe the signup endpoint")
    parser.add_argument("--base-url", default=settings.api_base_url)
    parser.add_argument(
        "--email",
        default=SAMPLE_SIGNUP["email"],
        help="Email for the sample account (default: %(default)s)",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    args = parser.parse_args()
    configure_logging(args.log_level)

    with ForexApiClient(args.base_url, timeout=settings.api_timeout_seconds) as client:
        probe_signup(client, {**SAMPLE_SIGNUP, "email": args.email})
    return 0


if __name__ == "__main__":
    sys.exit(main())
