"""
Zcash Parser Core Constants (integer domain)
============================================

Only integer constants live here. Formatting and parsing helpers that use
them are in `fmt.py` and `amounts.py`.
"""

# NOTE: MAX_DECIMAL_POINT caps the fractional digits handled by the codec; larger
#       decimal points are accepted and clamp to it in both directions.

# ---------------------------------------------------------------------------
# Subunit scales
# ---------------------------------------------------------------------------

#: Zcash amounts are subdivided into 10^8 zatoshis.
DEFAULT_DECIMAL_POINT: int = 8

#: Integer bridge: number of zatoshis per 1 ZEC.
ZATOSHIS_PER_ZEC: int = 10 ** DEFAULT_DECIMAL_POINT

#: Upper bound on fractional digits produced or consumed by the amount codec.
MAX_DECIMAL_POINT: int = 40

#: Upper bound on how many places a parsed amount's decimal point may move right.
MAX_SHIFT_DIGITS: int = 10_000


# ---------------------------------------------------------------------------
# Metadata
# ---------------------------------------------------------------------------

__all__ = [
    "DEFAULT_DECIMAL_POINT",
    "ZATOSHIS_PER_ZEC",
    "MAX_DECIMAL_POINT",
    "MAX_SHIFT_DIGITS",
]
