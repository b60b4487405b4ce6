#!/usr/bin/env python3
"""Command-line launcher for the amount codec and shielded-pool resolver."""

from __future__ import annotations

import argparse
import logging
import sys
from decimal import Decimal
from pathlib import Path
from typing import Iterator, List, Optional, Tuple

import pandas as pd

from zcash_parser import (
    AmountDomainError,
    ConfigError,
    MalformedAmountError,
    MalformedMessage,
    ZCashParser,
    load_codec_config,
    shielded_pool_value,
)

NDJSON_SUFFIXES = (".ndjson", ".jsonl")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Zcash amount codec and shielded-pool value resolver.")
    parser.add_argument("--config", default=None, help="JSON config file (key: decimal_point)")
    parser.add_argument("--decimal-point", type=int, default=None, help="Overrides env and config file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Emit resolver diagnostics")
    sub = parser.add_subparsers(dest="command", required=True)

    p_fmt = sub.add_parser("format", help="Integer subunits -> decimal string")
    p_fmt.add_argument("amount", type=int)

    p_parse = sub.add_parser("parse", help="Decimal string -> integer subunits")
    p_parse.add_argument("value")

    p_res = sub.add_parser("resolve", help="Net shielded-pool value of verbose transactions")
    p_res.add_argument("path", help="JSON file with one transaction, or .ndjson/.jsonl with one per line")
    p_res.add_argument("--csv", default=None, help="Write a per-transaction summary CSV")
    return parser.parse_args(argv)


def _iter_messages(path: Path) -> Iterator[Tuple[int, bytes]]:
    # Raw bytes: decoding happens per message, so one bad line cannot stop the run.
    if path.suffix in NDJSON_SUFFIXES:
        with open(path, "rb") as f:
            for lineno, line in enumerate(f, start=1):
                if line.strip():
                    yield lineno, line
    else:
        yield 1, path.read_bytes()


def _run_resolve(parser: ZCashParser, path: Path, csv_out: Optional[str]) -> int:
    if not path.is_file():
        print(f"[error] input not found: {path}", file=sys.stderr)
        return 1
    rows = []
    failed = 0
    for lineno, msg in _iter_messages(path):
        try:
            tx = parser.parse_tx_from_json(msg)
        except (MalformedAmountError, MalformedMessage) as exc:
            failed += 1
            print(f"[error] {path}:{lineno}: {exc}", file=sys.stderr)
            continue
        value = shielded_pool_value(tx)
        print(f"{tx.txid}\t{value}")
        rows.append(
            {
                "txid": tx.txid,
                "shielded_pool_value": value,
                "shielded_pool_zec": parser.amount_to_decimal_string(value),
            }
        )

    if csv_out:
        df = pd.DataFrame(rows, columns=["txid", "shielded_pool_value", "shielded_pool_zec"])
        df.to_csv(csv_out, index=False)
        print(f"[info] wrote {len(df)} rows to {csv_out}", file=sys.stderr)

    return 1 if failed else 0


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
    try:
        cfg = load_codec_config(args.config, decimal_point=args.decimal_point)
    except ConfigError as exc:
        raise SystemExit(f"invalid configuration: {exc}")
    parser = ZCashParser(cfg.decimal_point)

    if args.command == "format":
        print(parser.amount_to_decimal_string(args.amount))
        return 0
    if args.command == "parse":
        try:
            # Decimal prints ints of any length
            print(Decimal(parser.amount_to_big_int(args.value)))
        except (MalformedAmountError, AmountDomainError) as exc:
            print(f"[error] {exc}", file=sys.stderr)
            return 1
        return 0
    return _run_resolve(parser, Path(args.path), args.csv)


if __name__ == "__main__":
    raise SystemExit(main())
