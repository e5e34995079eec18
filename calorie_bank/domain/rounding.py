"""Rounding rules applied on every output path of the core."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

_WHOLE = Decimal("1")
_ONE_DECIMAL = Decimal("0.1")


def round_calories(value: float) -> int:
    """Round calories half-up to a whole number."""
    return int(Decimal(str(value)).quantize(_WHOLE, rounding=ROUND_HALF_UP))


def round_percent(value: float) -> float:
    """Round a percentage (or any display ratio) half-up to one decimal place."""
    return float(Decimal(str(value)).quantize(_ONE_DECIMAL, rounding=ROUND_HALF_UP))
