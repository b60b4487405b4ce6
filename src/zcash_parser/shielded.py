"""
Shielded-pool value resolution for Zcash transactions.

Reconciles the optional shielded fields of a verbose transaction message into one
signed zatoshi value: the net flow from shielded pools (Sprout, Sapling, Orchard)
into the transparent pool. Positive values behave like extra transparent inputs
for fee accounting, negative values like extra outputs.

Contributions (all additive):
  - vjoinsplit:          +vpub_new, -vpub_old per description (zatoshis)
  - valueBalanceZat:     Sapling balance (zatoshis); when absent, valueBalance
                         (decimal ZEC, float) x 10^8 truncated toward zero
  - valueBalanceSapling: legacy alias (zatoshis), independent of the pair above
  - valueBalanceOrchard: Orchard balance (zatoshis)
"""

from __future__ import annotations

import dataclasses
import logging
import math
import re
from typing import Optional

from .core.constants import ZATOSHIS_PER_ZEC
from .core.datatypes import (
    CoinSpecificData,
    RawMessage,
    ShieldedFieldSet,
    Tx,
    message_bytes,
)
from .core.exc import MalformedFloat, MalformedInteger

logger = logging.getLogger(__name__)

_INT_RE = re.compile(r"[+-]?[0-9]+")
_FLOAT_RE = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def _parse_int(field: str, raw: str) -> int:
    if _INT_RE.fullmatch(raw) is None:
        raise MalformedInteger(field, raw)
    try:
        return int(raw)
    except ValueError:
        # beyond the interpreter's int/str digit limit
        raise MalformedInteger(field, raw) from None


def _parse_zec_float(field: str, raw: str) -> int:
    """Legacy decimal ZEC -> zatoshis via float, truncated toward zero."""
    if _FLOAT_RE.fullmatch(raw) is None:
        raise MalformedFloat(field, raw)
    zat = float(raw) * ZATOSHIS_PER_ZEC
    if not math.isfinite(zat):
        raise MalformedFloat(field, raw)
    return int(zat)


def resolve_shielded_value(fields: ShieldedFieldSet) -> int:
    """Sum all shielded-pool contributions present in `fields` (zatoshis).

    Raises MalformedInteger / MalformedFloat on the first field that fails to parse.
    """
    total = 0

    for js in fields.vjoinsplit:
        if js.vpub_new is not None:
            total += _parse_int("vpub_new", js.vpub_new)
        if js.vpub_old is not None:
            total -= _parse_int("vpub_old", js.vpub_old)

    # valueBalance is a fallback only, never summed with valueBalanceZat
    if fields.value_balance_zat is not None:
        total += _parse_int("valueBalanceZat", fields.value_balance_zat)
    elif fields.value_balance is not None:
        total += _parse_zec_float("valueBalance", fields.value_balance)

    if fields.value_balance_sapling is not None:
        total += _parse_int("valueBalanceSapling", fields.value_balance_sapling)

    if fields.value_balance_orchard is not None:
        total += _parse_int("valueBalanceOrchard", fields.value_balance_orchard)

    return total


class ShieldedBalanceResolver:
    """Attach the net shielded-pool value to a generically parsed transaction.

    Holds no mutable state; one instance can be shared by many threads. Diagnostics
    go to `log` (defaults to this module's logger).
    """

    def __init__(self, log: Optional[logging.Logger] = None) -> None:
        self.log = log if log is not None else logger

    def resolve(self, raw_message: RawMessage, base_tx: Tx) -> Tx:
        """Return a copy of `base_tx` whose coin_specific_data holds the raw message
        and the net shielded value. `base_tx` itself is never modified; on error the
        exception propagates and no enriched transaction is produced.
        """
        return self.enrich(raw_message, ShieldedFieldSet.from_message(raw_message), base_tx)

    def enrich(self, raw_message: RawMessage, fields: ShieldedFieldSet, base_tx: Tx) -> Tx:
        """Like `resolve`, for callers that already extracted `fields` from `raw_message`."""
        self.log.info(
            "event=zcash.shielded.fields txid=%s vjoinsplit=%d valueBalance=%s valueBalanceZat=%s "
            "valueBalanceSapling=%s valueBalanceOrchard=%s",
            base_tx.txid,
            len(fields.vjoinsplit),
            fields.value_balance,
            fields.value_balance_zat,
            fields.value_balance_sapling,
            fields.value_balance_orchard,
        )

        total = resolve_shielded_value(fields)

        data = CoinSpecificData(raw_message=message_bytes(raw_message), shielded_pool_value=total)
        self.log.info("event=zcash.shielded.resolved txid=%s shieldedPoolValue=%d", base_tx.txid, total)
        return dataclasses.replace(base_tx, coin_specific_data=data)


def shielded_pool_value(tx: Tx) -> int:
    """Net shielded value attached to `tx` for fee computation; 0 when not enriched."""
    if tx.coin_specific_data is None:
        return 0
    return tx.coin_specific_data.shielded_pool_value


__all__ = [
    "resolve_shielded_value",
    "ShieldedBalanceResolver",
    "shielded_pool_value",
]
