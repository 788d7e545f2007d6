"""Value Objects for the domain layer.

Value objects are immutable objects that are defined by their attributes
rather than identity. This module holds the alert threshold sum type and
the helpers that coerce the store's loosely typed amounts.
"""

import json
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any

from stockview.domain.base import ValueObject

DEFAULT_MIN_QUANTITY = 5


# ============================================================================
# Alert Configuration
# ============================================================================


@dataclass(frozen=True)
class StructuredAlert(ValueObject):
    """Decoded alert configuration with an explicit threshold."""

    min_quantity: int | Decimal

    def to_payload(self) -> dict[str, int | float]:
        """Serialize for the Product Store."""
        if isinstance(self.min_quantity, Decimal):
            return {"min_quantity": float(self.min_quantity)}
        return {"min_quantity": self.min_quantity}


@dataclass(frozen=True)
class RawAlert(ValueObject):
    """Alert configuration that could not be decoded.

    The original value is kept verbatim so it can be sent back to the
    store unchanged.
    """

    text: str

    def to_payload(self) -> str:
        """Serialize for the Product Store."""
        return self.text


@dataclass(frozen=True)
class AbsentAlert(ValueObject):
    """No usable alert configuration; the default threshold applies."""

    def to_payload(self) -> None:
        """Serialize for the Product Store."""
        return None


AlertConfig = StructuredAlert | RawAlert | AbsentAlert


def coerce_int(value: Any) -> int | None:
    """Return value as an int if it is integer-like, else None."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return None
    return None


def coerce_threshold(value: Any) -> int | Decimal | None:
    """Return a numeric threshold, as int when it is integral."""
    as_int = coerce_int(value)
    if as_int is not None:
        return as_int
    amount = coerce_amount(value)
    if amount is None:
        return None
    if amount == amount.to_integral_value():
        return int(amount)
    return amount


def decode_alert_config(value: Any) -> AlertConfig:
    """Normalize a stored alert configuration.

    Accepts an already structured mapping or its JSON text encoding.
    A fractional threshold such as 5.5 is kept as a Decimal.
    Never raises: anything that cannot be read becomes RawAlert.

    Args:
        value: The ``alert_config`` field as received from the store.

    Returns:
        StructuredAlert, RawAlert or AbsentAlert.
    """
    if value is None:
        return AbsentAlert()
    if isinstance(value, (StructuredAlert, RawAlert, AbsentAlert)):
        return value

    decoded = value
    if isinstance(value, str):
        try:
            decoded = json.loads(value)
        except ValueError:
            return RawAlert(text=value)

    if not isinstance(decoded, dict):
        return AbsentAlert()

    raw_min = decoded.get("min_quantity")
    if raw_min is None:
        return AbsentAlert()

    min_quantity = coerce_threshold(raw_min)
    if min_quantity is None:
        return RawAlert(text=value if isinstance(value, str) else json.dumps(value, default=str))
    return StructuredAlert(min_quantity=min_quantity)


# ============================================================================
# Amounts
# ============================================================================


def coerce_amount(value: Any) -> Decimal | None:
    """Coerce a price field to Decimal.

    Args:
        value: Number or numeric string from the store.

    Returns:
        The amount, or None when the value is missing or not numeric.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, Decimal):
        amount = value
    else:
        try:
            amount = Decimal(str(value).strip())
        except InvalidOperation:
            return None
    if not amount.is_finite():
        return None
    return amount


def format_amount(amount: Decimal | None, currency_label: str = "Ksh") -> str:
    """Format an amount for display.

    Uses thousands separators and at most three fraction digits,
    dropping trailing zeros.

    Example:
        >>> format_amount(Decimal("1234.50"))
        'Ksh 1,234.5'
    """
    if amount is None:
        return "-"
    quantized = amount.quantize(Decimal("0.001"), rounding=ROUND_HALF_UP)
    text = f"{quantized:,f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text in ("-0", ""):
        text = "0"
    return f"{currency_label} {text}"
