"""
ZCashParser: generic transaction parse followed by shielded-pool enrichment.

The generic parse is a pluggable callable (decoded message -> Tx). The default,
`base_tx_from_message`, copies the generic fields without interpreting scripts
or addresses; hosts with a full transparent-transaction parser inject their own.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Mapping, Optional

from .core.amounts import AmountCodec
from .core.constants import DEFAULT_DECIMAL_POINT
from .core.datatypes import RawMessage, ShieldedFieldSet, Tx, decode_message
from .core.exc import MalformedInteger, MalformedMessage
from .shielded import ShieldedBalanceResolver

BaseParse = Callable[[Dict[str, Any]], Tx]


def _int_field(obj: Mapping[str, Any], key: str) -> int:
    v = obj.get(key)
    if v is None or v == "":
        return 0
    try:
        return int(v)
    except (TypeError, ValueError):
        raise MalformedInteger(key, str(v))


def _list_field(obj: Mapping[str, Any], key: str) -> List[Any]:
    v = obj.get(key)
    if v is None:
        return []
    if not isinstance(v, list):
        raise MalformedMessage(f"{key} must be an array, got {type(v).__name__}")
    return list(v)


def base_tx_from_message(obj: Dict[str, Any]) -> Tx:
    """Build a Tx from the generic fields of a decoded verbose transaction."""
    return Tx(
        txid=str(obj.get("txid") or ""),
        version=_int_field(obj, "version"),
        locktime=_int_field(obj, "locktime"),
        vin=_list_field(obj, "vin"),
        vout=_list_field(obj, "vout"),
        blocktime=_int_field(obj, "blocktime"),
        confirmations=_int_field(obj, "confirmations"),
    )


class ZCashParser:
    """Parser for Zcash verbose transaction JSON.

    Attributes
    ----------
    codec : AmountCodec
        Amount codec bound to the coin's decimal point (8 for ZEC).
    resolver : ShieldedBalanceResolver
        Shared, stateless shielded-value resolver.
    """

    def __init__(
        self,
        decimal_point: int = DEFAULT_DECIMAL_POINT,
        *,
        base_parse: Optional[BaseParse] = None,
        resolver: Optional[ShieldedBalanceResolver] = None,
    ) -> None:
        self.codec = AmountCodec(decimal_point)
        self.base_parse = base_parse if base_parse is not None else base_tx_from_message
        self.resolver = resolver if resolver is not None else ShieldedBalanceResolver()

    def amount_to_decimal_string(self, amount: int) -> str:
        return self.codec.to_decimal_string(amount)

    def amount_to_big_int(self, s: str) -> int:
        return self.codec.to_big_int(s)

    def parse_tx_from_json(self, msg: RawMessage) -> Tx:
        """Parse a verbose transaction message and attach its shielded-pool value."""
        obj = decode_message(msg)
        tx = self.base_parse(obj)
        return self.resolver.enrich(msg, ShieldedFieldSet.from_mapping(obj), tx)


__all__ = [
    "BaseParse",
    "base_tx_from_message",
    "ZCashParser",
]
