"""
Upload descriptor naming.

Every uploaded file gets a unique remote name:

    {original base name}-{unix timestamp in ms}-{random base36 token}

Uniqueness relies only on the timestamp plus the random token;
nothing is stored or checked.
"""

import random
import string
import time
from pathlib import PurePosixPath, PureWindowsPath
from typing import Optional

BASE36_ALPHABET = string.digits + string.ascii_lowercase
TOKEN_LENGTH = 6
FALLBACK_BASE_NAME = "upload"


def _file_name(original_name: str) -> str:
    return PureWindowsPath(PurePosixPath(original_name or "").name).name


def base_name(original_name: str) -> str:
    """Return the file name without directories, cut at its first dot.

    >>> base_name("reports/eur.usd.chart.png")
    'eur'
    """
    name = _file_name(original_name)
    return name.split(".")[0] or FALLBACK_BASE_NAME


def file_extension(original_name: str) -> str:
    """Return the lower-case text after the last dot, or "" when there is none."""
    name = _file_name(original_name)
    if "." not in name.strip("."):
        return ""
    return name.rsplit(".", 1)[1].lower()


def random_token(length: int = TOKEN_LENGTH, rng: Optional[random.Random] = None) -> str:
    """Return ``length`` random base36 characters."""
    chooser = rng or random
    return "".join(chooser.choice(BASE36_ALPHABET) for _ in range(length))


def now_ms() -> int:
    return time.time_ns() // 1_000_000


def build_public_id(
    original_name: str,
    timestamp_ms: Optional[int] = None,
    token: Optional[str] = None,
) -> str:
    """Build the remote object name for an uploaded file.

    Args:
        original_name: Client-side file name.
        timestamp_ms: Unix timestamp in milliseconds. Defaults to now.
        token: Random suffix. Defaults to six base36 characters.

    Returns:
        The public id, e.g. ``avatar-1718000000000-k3x9qa``.
    """
    if timestamp_ms is None:
        timestamp_ms = now_ms()
    if token is None:
        token = random_token()
    return f"{base_name(original_name)}-{timestamp_ms}-{token}"
