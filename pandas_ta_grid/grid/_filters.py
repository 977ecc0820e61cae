# -*- coding: utf-8 -*-
"""Suppression filters applied to a bar's buy / sell candidates.

Filters run in FILTER_PIPELINE order.  Each one receives the current
flags and returns new flags built with ``SignalFlags.clear``, so a filter
can drop a candidate but never raise one.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Tuple

from ._config import Aggression, Direction, GridConfig
from ._ladder import GridLadder


@dataclass(frozen=True)
class SignalFlags:
    buy: bool = False
    sell: bool = False

    def clear(self, buy: bool = False, sell: bool = False) -> "SignalFlags":
        return SignalFlags(buy=self.buy and not buy, sell=self.sell and not sell)

    def __str__(self) -> str:
        return f"buy={self.buy}, sell={self.sell}"


@dataclass(frozen=True)
class FilterContext:
    """Everything a filter may look at for one bar."""
    config:      GridConfig
    ladder:      GridLadder
    previous:    float
    current:     float
    signal_line: float


# ---------------------------------------------------------------------------
# Filters
# ---------------------------------------------------------------------------

def aggression_filter(flags: SignalFlags, ctx: FilterContext) -> SignalFlags:
    """Keep new signals away from the line of the last one.

    LOW requires the oscillator to start a full grid step beyond the
    signal line.  MEDIUM / HIGH instead block re-entries unless the
    previous reading is outside a band ``aggression`` lines in from
    either end of the ladder.
    """
    aggression = ctx.config.aggression
    if aggression > Aggression.LOW:
        top_val = ctx.ladder[ctx.ladder.top_index - aggression]
        bot_val = ctx.ladder[1 + aggression]
        return flags.clear(
            buy=ctx.current > ctx.signal_line and ctx.previous >= bot_val,
            sell=ctx.current < ctx.signal_line and ctx.previous <= top_val,
        )

    gi = ctx.ladder.interval
    return flags.clear(
        buy=ctx.previous > ctx.signal_line - gi,
        sell=ctx.previous < ctx.signal_line + gi,
    )


def no_trade_zone_filter(flags: SignalFlags, ctx: FilterContext) -> SignalFlags:
    ntz = ctx.config.no_trade_zone.value
    inside = 50.0 - ntz < ctx.previous < 50.0 + ntz
    return flags.clear(buy=inside, sell=inside)


def direction_filter(flags: SignalFlags, ctx: FilterContext) -> SignalFlags:
    """Drop counter-trend signals within two grid steps of the signal line."""
    direction = ctx.config.direction
    gi = ctx.ladder.interval
    return flags.clear(
        buy=direction == Direction.DOWN and ctx.current >= ctx.signal_line - 2 * gi,
        sell=direction == Direction.UP and ctx.current <= ctx.signal_line + 2 * gi,
    )


FilterFn = Callable[[SignalFlags, FilterContext], SignalFlags]

FILTER_PIPELINE: Tuple[Tuple[str, FilterFn], ...] = (
    ("aggression", aggression_filter),
    ("no_trade_zone", no_trade_zone_filter),
    ("direction", direction_filter),
)


def apply_filters(flags: SignalFlags, ctx: FilterContext) -> Tuple[SignalFlags, List[Tuple[str, SignalFlags]]]:
    """Run the pipeline; also returns the flags after each named step."""
    trace: List[Tuple[str, SignalFlags]] = []
    for name, fn in FILTER_PIPELINE:
        flags = fn(flags, ctx)
        trace.append((name, flags))
    return flags, trace
