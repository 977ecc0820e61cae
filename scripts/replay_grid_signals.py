#!/usr/bin/env python3
"""Replay a close series through the grid signal engine.

Feeds a CSV ``close`` column (or a synthetic random walk) bar by bar into
a ``GridManager`` and prints the signal counts plus the last rows.  The
streaming oscillator is also checked against the vectorised
``grid_rsi()`` over the same closes.
"""
from __future__ import annotations

import argparse
import os
import sys

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

import numpy as np
import pandas as pd
import pandas_ta_grid as ta


def make_close(rows: int, seed: int) -> pd.Series:
    rng = np.random.default_rng(seed)
    idx = pd.date_range("2025-01-01", periods=rows, freq="1min")
    base = 100 + rng.standard_normal(rows).cumsum()
    return pd.Series(base + rng.normal(0, 0.2, rows), index=idx, name="close")


def load_close(path: str, column: str) -> pd.Series:
    df = pd.read_csv(path)
    if column not in df.columns:
        raise SystemExit(f"[X] column '{column}' not in {path}")
    return df[column].astype(float)


def main() -> None:
    ap = argparse.ArgumentParser()
    ap.add_argument("--csv", default=None, help="CSV file with a close column")
    ap.add_argument("--column", default="close")
    ap.add_argument("--rows", type=int, default=1000)
    ap.add_argument("--seed", type=int, default=7)
    ap.add_argument("--length", type=int, default=7)
    ap.add_argument("--grids", type=int, default=10)
    ap.add_argument("--direction", default="neutral", help="up | down | neutral")
    ap.add_argument("--ntz", default="35-65", help="n/a | 45-55 | 40-60 | 35-65 | 30-70")
    ap.add_argument("--aggression", default="low", help="low | med | high")
    ap.add_argument("--rsi-type", default="rsx", help="rsi | rsx")
    ap.add_argument("--tail", type=int, default=10)
    ap.add_argument("--log-level", default=None, help="enable logging at this level")
    ap.add_argument("--json-logs", action="store_true")
    args = ap.parse_args()

    if args.log_level:
        ta.configure_logging(level=args.log_level, serialize=args.json_logs, replace_default=True)

    try:
        config = ta.GridConfig.from_params({
            "length": args.length,
            "grids": args.grids,
            "direction": args.direction,
            "no_trade_zone": args.ntz,
            "aggression": args.aggression,
            "rsi_type": args.rsi_type,
        })
    except ta.ConfigurationError as e:
        raise SystemExit(f"[X] {e}")

    close = load_close(args.csv, args.column) if args.csv else make_close(args.rows, args.seed)

    gm = ta.GridManager(config)
    result = gm.run(close)

    ref = ta.grid_rsi(close, length=config.length, rsi_type=config.rsi_type)
    osc = result[gm.oscillator_name].dropna().astype(float)
    max_abs = float((osc - ref.loc[osc.index]).abs().max()) if len(osc) else 0.0

    print("[i] config:", config.describe())
    print("[i] rows:", len(close))
    print("[i] ladder:", gm.ladder.to_list())
    print("[i] streaming vs vectorised max_abs:", max_abs)
    print("\nSignal counts:")
    print(result["signal"].value_counts(dropna=True))
    print(f"\nLast {args.tail} rows:")
    print(result.tail(args.tail))


if __name__ == "__main__":
    main()
