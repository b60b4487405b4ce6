from __future__ import annotations

import json
from typing import Any, Dict

import pytest

from zcash_parser import ShieldedBalanceResolver, Tx, ZCashParser


# -----------------------------
# Test helpers (pure functions)
# -----------------------------


def make_message(**fields: Any) -> str:
    """Verbose transaction JSON with the given shielded fields (numbers sent as strings)."""
    msg: Dict[str, Any] = {
        "txid": "a1b2c3",
        "version": 4,
        "locktime": 0,
        "vin": [],
        "vout": [],
    }
    msg.update(fields)
    return json.dumps(msg)


# -----------------------------
# Pytest fixtures
# -----------------------------

@pytest.fixture()
def resolver() -> ShieldedBalanceResolver:
    return ShieldedBalanceResolver()


@pytest.fixture()
def zcash_parser() -> ZCashParser:
    return ZCashParser()


@pytest.fixture()
def base_tx() -> Tx:
    return Tx(
        txid="a1b2c3",
        version=4,
        vin=[{"txid": "ff00", "vout": 1}],
        vout=[{"value": "0.5", "n": 0}],
        blocktime=1700000000,
    )


@pytest.fixture()
def mixed_pool_message() -> str:
    # 1000 - 400 - 200 + 50 = 450
    return make_message(
        vjoinsplit=[{"vpub_old": "400", "vpub_new": "1000"}],
        valueBalanceZat="-200",
        valueBalanceOrchard="50",
    )


@pytest.fixture()
def message_factory():
    return make_message
