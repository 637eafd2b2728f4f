"""Exact currency handling.

Amounts are persisted as integer cents and surfaced as ``Decimal`` values with
two places. Binary floats are rejected outright so that no value picks up
representation error on its way into the store.
"""

from __future__ import annotations

from decimal import Decimal, InvalidOperation

from .exceptions import ValidationFailureError

CENT = Decimal("0.01")
# bounds of a signed 64-bit INTEGER column
MIN_CENTS = -(2**63)
MAX_CENTS = 2**63 - 1


def to_cents(value: Decimal | str | int, *, field: str = "amount") -> int:
    if isinstance(value, bool) or isinstance(value, float):
        raise ValidationFailureError(f"{field} must be a decimal string or Decimal, not {type(value).__name__}")
    try:
        amount = Decimal(value) if not isinstance(value, Decimal) else value
        if not amount.is_finite():
            raise ValidationFailureError(f"{field} must be finite")
        quantized = amount.quantize(CENT)
    except (InvalidOperation, ValueError, TypeError) as exc:
        raise ValidationFailureError(f"{field} is not a valid amount: {value!r}") from exc
    if quantized != amount:
        raise ValidationFailureError(f"{field} has more than two decimal places: {value!r}")
    cents = int(quantized * 100)
    if not MIN_CENTS <= cents <= MAX_CENTS:
        raise ValidationFailureError(f"{field} is out of range: {value!r}")
    return cents


def from_cents(cents: int) -> Decimal:
    return (Decimal(cents) / 100).quantize(CENT)


def format_cents(cents: int) -> str:
    return f"{from_cents(cents):.2f}"


__all__ = ["CENT", "MAX_CENTS", "MIN_CENTS", "to_cents", "from_cents", "format_cents"]
