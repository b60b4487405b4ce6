"""
Core datatypes for Zcash transaction parsing.

These datatypes are immutable so that a parsed transaction and its side data can
be shared across worker threads without copying.

Notes:
- Numeric fields are kept as their exact source text (JSON-number semantics: a
  JSON number or a string is accepted). Absent, `null` and empty-string values
  all become None, and parsing is only ever attempted on non-None values.
- `Tx` carries the generic fields opaquely; only `coin_specific_data` is
  produced by this package.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

from .exc import MalformedMessage

RawMessage = Union[bytes, bytearray, str]


# ---------------------------------------------------------------------------
# JSON helpers
# ---------------------------------------------------------------------------

def decode_message(raw: RawMessage) -> Dict[str, Any]:
    """Decode a raw JSON transaction message, keeping every number as its source text."""
    try:
        obj = json.loads(raw, parse_float=str, parse_int=str, parse_constant=str)
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise MalformedMessage(f"transaction message is not valid JSON: {exc}") from exc
    if not isinstance(obj, dict):
        raise MalformedMessage(f"transaction message must be a JSON object, got {type(obj).__name__}")
    return obj


def message_bytes(raw: RawMessage) -> bytes:
    if isinstance(raw, str):
        return raw.encode("utf-8")
    return bytes(raw)


def _number_text(obj: Mapping[str, Any], key: str) -> Optional[str]:
    v = obj.get(key)
    if v is None:
        return None
    # bool is an int subclass but never a JSON number
    if isinstance(v, bool):
        raise MalformedMessage(f"field {key} must be a number or string, got bool")
    if isinstance(v, str):
        return v or None
    if isinstance(v, int):
        return str(v)
    if isinstance(v, float):
        return repr(v)
    raise MalformedMessage(f"field {key} must be a number or string, got {type(v).__name__}")


# ---------------------------------------------------------------------------
# Shielded fields
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class JoinSplit:
    """Sprout JoinSplit description; both values are zatoshi-denominated.

    - vpub_old: value leaving the transparent pool (into Sprout).
    - vpub_new: value entering the transparent pool (out of Sprout).
    """

    vpub_old: Optional[str] = None
    vpub_new: Optional[str] = None

    @classmethod
    def from_mapping(cls, obj: Any) -> "JoinSplit":
        if not isinstance(obj, Mapping):
            raise MalformedMessage(f"vjoinsplit entries must be objects, got {type(obj).__name__}")
        return cls(vpub_old=_number_text(obj, "vpub_old"), vpub_new=_number_text(obj, "vpub_new"))


@dataclass(frozen=True)
class ShieldedFieldSet:
    """Optional shielded-pool fields of one transaction message.

    Fields:
    - vjoinsplit: Sprout JoinSplit descriptions (possibly empty).
    - value_balance: legacy Sapling balance in decimal ZEC (`valueBalance`).
    - value_balance_zat: Sapling balance in zatoshis (`valueBalanceZat`), preferred over value_balance.
    - value_balance_sapling: legacy alias in zatoshis (`valueBalanceSapling`), always additive.
    - value_balance_orchard: Orchard balance in zatoshis (`valueBalanceOrchard`).
    """

    vjoinsplit: Tuple[JoinSplit, ...] = ()
    value_balance: Optional[str] = None
    value_balance_zat: Optional[str] = None
    value_balance_sapling: Optional[str] = None
    value_balance_orchard: Optional[str] = None

    @classmethod
    def from_mapping(cls, obj: Mapping[str, Any]) -> "ShieldedFieldSet":
        js = obj.get("vjoinsplit")
        if js is None:
            js = []
        if not isinstance(js, list):
            raise MalformedMessage(f"vjoinsplit must be an array, got {type(js).__name__}")
        return cls(
            vjoinsplit=tuple(JoinSplit.from_mapping(x) for x in js),
            value_balance=_number_text(obj, "valueBalance"),
            value_balance_zat=_number_text(obj, "valueBalanceZat"),
            value_balance_sapling=_number_text(obj, "valueBalanceSapling"),
            value_balance_orchard=_number_text(obj, "valueBalanceOrchard"),
        )

    @classmethod
    def from_message(cls, raw: RawMessage) -> "ShieldedFieldSet":
        return cls.from_mapping(decode_message(raw))


# ---------------------------------------------------------------------------
# Transaction and side data
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class CoinSpecificData:
    """Side data attached to a parsed Zcash transaction.

    Created once during enrichment and owned by the transaction it is attached to.
    `shielded_pool_value` is the net zatoshi flow from shielded pools into the
    transparent pool (negative when value moves into shielded pools).
    """

    raw_message: bytes
    shielded_pool_value: int


@dataclass(frozen=True)
class Tx:
    """Parsed transaction as produced by a generic (non-shielded-aware) parser.

    Generic fields are carried opaquely; enrichment only ever replaces
    `coin_specific_data`.
    """

    txid: str = ""
    version: int = 0
    locktime: int = 0
    vin: List[Dict[str, Any]] = field(default_factory=list)
    vout: List[Dict[str, Any]] = field(default_factory=list)
    blocktime: int = 0
    confirmations: int = 0
    coin_specific_data: Optional[CoinSpecificData] = None


__all__ = [
    "RawMessage",
    "decode_message",
    "message_bytes",
    "JoinSplit",
    "ShieldedFieldSet",
    "CoinSpecificData",
    "Tx",
]
