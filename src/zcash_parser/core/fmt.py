"""
Formatting helpers: integer subunits -> canonical decimal strings.

Formatting is exact string assembly over the integer's digits. Digits are taken
through Decimal, which is exact for ints and is not subject to the interpreter's
int/str digit limit, so any int is representable.
"""

from __future__ import annotations

from decimal import Decimal

from .constants import MAX_DECIMAL_POINT
from .exc import AmountDomainError


def clamp_decimal_point(decimal_point: int) -> int:
    """Validate a decimal point count and clamp it to MAX_DECIMAL_POINT."""
    if isinstance(decimal_point, bool) or not isinstance(decimal_point, int):
        raise AmountDomainError(f"decimal point must be int, got {type(decimal_point).__name__}")
    if decimal_point < 0:
        raise AmountDomainError(f"decimal point must be >= 0, got {decimal_point}")
    return min(decimal_point, MAX_DECIMAL_POINT)


def amount_to_decimal_string(amount: int, decimal_point: int) -> str:
    """Format an integer amount of subunits as a decimal string.

    The fractional part is cut to `decimal_point` digits with trailing zeros
    stripped; whole amounts carry no separator:
      (300000000, 8)   -> '3'
      (498700000, 8)   -> '4.987'
      (2, 8)           -> '0.00000002'
      (-89012345678, 8) -> '-890.12345678'
    """
    if isinstance(amount, bool) or not isinstance(amount, int):
        raise AmountDomainError(f"amount must be int, got {type(amount).__name__}")
    d = clamp_decimal_point(decimal_point)
    sign = "-" if amount < 0 else ""
    n = str(Decimal(abs(amount)))
    if d == 0:
        return sign + n
    if len(n) <= d:
        n = "0" * (d - len(n) + 1) + n
    i = len(n) - d
    frac = n[i:].rstrip("0")
    if frac:
        return f"{sign}{n[:i]}.{frac}"
    return sign + n[:i]


__all__ = [
    "clamp_decimal_point",
    "amount_to_decimal_string",
]
