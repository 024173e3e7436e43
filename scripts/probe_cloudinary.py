#!/usr/bin/env python3
"""
CLI probe: Check Cloudinary credentials and connectivity.

Reads CLOUDINARY_CLOUD_NAME, CLOUDINARY_API_KEY and CLOUDINARY_API_SECRET
from the environment or .env, then pings the Admin API.

Usage:
    python scripts/probe_cloudinary.py
"""

import argparse
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from forexdesk.core.config import settings
from forexdesk.infrastructure.uploads.cloudinary_storage import (
    CloudinaryCredentials,
    CloudinaryStorageAdapter,
)
from forexdesk.interfaces.cli.probes import probe_cloudinary
from forexdesk.shared.logging import configure_logging


def main() -> int:
    """Run the Cloudinary probe. Exit code 1 when it fails."""
    parser = argparse.ArgumentParser(description="Probe Cloudinary connectivity")
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    args = parser.parse_args()
    configure_logging(args.log_level)

    credentials = CloudinaryCredentials.from_settings(settings)
    storage = CloudinaryStorageAdapter(credentials)
    return 0 if probe_cloudinary(credentials, storage) else 1


if __name__ == "__main__":
    sys.exit(main())
