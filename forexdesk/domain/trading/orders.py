"""
Client-side order draft validation.

Catches obviously malformed orders before they are sent to the
trading backend. The backend stays the authority on everything else
(margin, balance, market hours).
"""

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any, Mapping, Optional

REQUIRED_FIELDS = ("pair", "amount", "side")


class OrderSide(str, Enum):
    """Direction of a market order."""

    BUY = "buy"
    SELL = "sell"


@dataclass(frozen=True)
class OrderValidation:
    """Outcome of validating an order draft."""

    valid: bool
    error: Optional[str] = None


def validate_order(draft: Mapping[str, Any]) -> OrderValidation:
    """Validate an order draft such as ``{"pair": "EUR/USD", "amount": 1000, "side": "buy"}``.

    Args:
        draft: Order fields as sent to the backend.

    Returns:
        OrderValidation with ``valid`` set and, when invalid, the reason.
    """
    if any(not draft.get(name) for name in REQUIRED_FIELDS):
        return OrderValidation(valid=False, error="Missing required fields")

    try:
        amount = Decimal(str(draft["amount"]))
    except InvalidOperation:
        return OrderValidation(valid=False, error="Amount must be a number")
    if not amount.is_finite() or amount <= 0:
        return OrderValidation(valid=False, error="Amount must be positive")

    side = draft["side"]
    if not isinstance(side, str) or side not in {member.value for member in OrderSide}:
        return OrderValidation(valid=False, error="Invalid side")

    return OrderValidation(valid=True)
