"""
Amount parsing: decimal strings (optionally in scientific notation) -> integer subunits.

- Amounts are plain Python ints counting subunits (zatoshis for ZEC); the decimal
  point count is supplied per call, never stored on the value.
- Parsing is exact: the decimal point is shifted with integer arithmetic only.
- Fractional digits beyond the decimal point are truncated toward zero, never rounded.
- Decimal points above MAX_DECIMAL_POINT clamp, matching `amount_to_decimal_string`.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from decimal import Decimal

from .constants import DEFAULT_DECIMAL_POINT, MAX_SHIFT_DIGITS
from .exc import MalformedScientific
from .fmt import amount_to_decimal_string, clamp_decimal_point

# Debug printing control
DEBUG_AMOUNTS = False

def _dbg(msg: str) -> None:
    if DEBUG_AMOUNTS:
        print(msg)


# sign, integer digits, fraction digits, exponent sign, exponent digits
_AMOUNT_RE = re.compile(r"([+-]?)([0-9]*)(?:\.([0-9]*))?(?:[eE]([+-]?)([0-9]+))?")

# Exponents with more significant digits than this are out of any usable range.
_MAX_EXPONENT_LEN = 9


def amount_to_big_int(s: str, decimal_point: int) -> int:
    """Parse a decimal string into an integer count of subunits.

    Examples at decimal_point=8:
      '9.87e-6'         -> 987
      '1.234e-7'        -> 12          (12.34 truncated)
      '0.123456789012'  -> 12345678    (excess digits dropped)
      '-890.12345678'   -> -89012345678

    Raises MalformedScientific on bad syntax, or when the decimal point would
    move more than MAX_SHIFT_DIGITS places to the right.
    """
    d = clamp_decimal_point(decimal_point)
    if not isinstance(s, str):
        raise MalformedScientific(repr(s))
    m = _AMOUNT_RE.fullmatch(s)
    if m is None:
        raise MalformedScientific(s)
    sign, int_part, frac_part, exp_sign, exp_digits = m.groups()
    frac_part = frac_part or ""
    if not int_part and not frac_part:
        raise MalformedScientific(s)

    digit_str = int_part + frac_part
    if not digit_str.strip("0"):
        return 0

    exp_digits = (exp_digits or "0").lstrip("0") or "0"
    if len(exp_digits) > _MAX_EXPONENT_LEN:
        if exp_sign == "-":
            return 0
        raise MalformedScientific(s)
    exponent = -int(exp_digits) if exp_sign == "-" else int(exp_digits)

    # Net move of the decimal point to the right, in digits.
    shift = d + exponent - len(frac_part)
    if shift > MAX_SHIFT_DIGITS:
        raise MalformedScientific(s)
    if DEBUG_AMOUNTS:
        _dbg(f"amount_to_big_int: s_len={len(s)}, exponent={exponent}, shift={shift}")

    if shift < 0 and -shift > len(digit_str):
        return 0
    # Decimal keeps long digit strings clear of the int/str digit limit.
    digits = int(Decimal(digit_str))
    if shift >= 0:
        value = digits * 10 ** shift
    else:
        value = digits // 10 ** (-shift)
    if DEBUG_AMOUNTS:
        _dbg(f"amount_to_big_int: value_bits={value.bit_length()}")
    return -value if sign == "-" else value


@dataclass(frozen=True)
class AmountCodec:
    """Amount codec bound to a fixed decimal point count (immutable, thread-safe)."""
    decimal_point: int = DEFAULT_DECIMAL_POINT

    def __post_init__(self):
        clamp_decimal_point(self.decimal_point)

    def to_decimal_string(self, amount: int) -> str:
        return amount_to_decimal_string(amount, self.decimal_point)

    def to_big_int(self, s: str) -> int:
        return amount_to_big_int(s, self.decimal_point)


__all__ = [
    "amount_to_big_int",
    "AmountCodec",
]
