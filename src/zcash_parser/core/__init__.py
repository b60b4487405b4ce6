"""
Zcash Parser Core
=================

Unified exports for integer-domain amount primitives and shielded-field datatypes.
Amounts are plain ints counting subunits; conversion to and from decimal strings
is exact and never goes through floating point.
"""

# NOTE:
#   The only floating-point path in the package is the legacy `valueBalance`
#   fallback in `zcash_parser.shielded`, which is fixed at 10^8 zatoshis per ZEC.

# Integer-domain constants
from .constants import (
    DEFAULT_DECIMAL_POINT,
    ZATOSHIS_PER_ZEC,
    MAX_DECIMAL_POINT,
    MAX_SHIFT_DIGITS,
)

# Decimal string formatting
from .fmt import (
    clamp_decimal_point,
    amount_to_decimal_string,
)

# Decimal string parsing
from .amounts import (
    amount_to_big_int,
    AmountCodec,
)

# Transaction datatypes
from .datatypes import (
    RawMessage,
    decode_message,
    message_bytes,
    JoinSplit,
    ShieldedFieldSet,
    CoinSpecificData,
    Tx,
)

# Core exceptions
from .exc import (
    AmountDomainError,
    MalformedAmountError,
    MalformedInteger,
    MalformedFloat,
    MalformedScientific,
    MalformedMessage,
    ConfigError,
)

__all__ = [
    # constants
    "DEFAULT_DECIMAL_POINT",
    "ZATOSHIS_PER_ZEC",
    "MAX_DECIMAL_POINT",
    "MAX_SHIFT_DIGITS",
    # fmt
    "clamp_decimal_point",
    "amount_to_decimal_string",
    # amounts
    "amount_to_big_int",
    "AmountCodec",
    # datatypes
    "RawMessage",
    "decode_message",
    "message_bytes",
    "JoinSplit",
    "ShieldedFieldSet",
    "CoinSpecificData",
    "Tx",
    # exceptions
    "AmountDomainError",
    "MalformedAmountError",
    "MalformedInteger",
    "MalformedFloat",
    "MalformedScientific",
    "MalformedMessage",
    "ConfigError",
]
