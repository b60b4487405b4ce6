# Top-level API for zcash_parser.
"""
Top-level API for zcash_parser.

This module exposes the stable interface used by indexing pipelines:
  - amount_to_decimal_string / amount_to_big_int: exact amount codec
  - ShieldedBalanceResolver: net shielded-pool value for fee accounting
  - ZCashParser: generic parse + shielded enrichment

Network parameters, address prefixes and binary transaction packing are owned
by the host and are not part of this package.
"""

from __future__ import annotations

from .core import (
    DEFAULT_DECIMAL_POINT,
    ZATOSHIS_PER_ZEC,
    AmountCodec,
    amount_to_decimal_string,
    amount_to_big_int,
    JoinSplit,
    ShieldedFieldSet,
    CoinSpecificData,
    Tx,
    AmountDomainError,
    MalformedAmountError,
    MalformedInteger,
    MalformedFloat,
    MalformedScientific,
    MalformedMessage,
    ConfigError,
)
from .shielded import ShieldedBalanceResolver, resolve_shielded_value, shielded_pool_value
from .parser import ZCashParser, base_tx_from_message
from .config import CodecConfig, load_codec_config

__all__ = [
    # amount codec
    "DEFAULT_DECIMAL_POINT",
    "ZATOSHIS_PER_ZEC",
    "AmountCodec",
    "amount_to_decimal_string",
    "amount_to_big_int",
    # datatypes
    "JoinSplit",
    "ShieldedFieldSet",
    "CoinSpecificData",
    "Tx",
    # shielded resolution
    "ShieldedBalanceResolver",
    "resolve_shielded_value",
    "shielded_pool_value",
    # parser
    "ZCashParser",
    "base_tx_from_message",
    # config
    "CodecConfig",
    "load_codec_config",
    # exceptions
    "AmountDomainError",
    "MalformedAmountError",
    "MalformedInteger",
    "MalformedFloat",
    "MalformedScientific",
    "MalformedMessage",
    "ConfigError",
]
