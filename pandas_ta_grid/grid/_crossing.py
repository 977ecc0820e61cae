# -*- coding: utf-8 -*-
from __future__ import annotations

from dataclasses import dataclass

from ._ladder import GridLadder


@dataclass(frozen=True)
class Crossing:
    """Highest ladder line crossed on each side this bar (0 = none)."""
    buy_index: int = 0
    sell_index: int = 0

    @property
    def buy(self) -> bool:
        return self.buy_index > 0

    @property
    def sell(self) -> bool:
        return self.sell_index > 0


def buy_line_index(ladder: GridLadder, previous: float, current: float, signal_line: float) -> int:
    """Highest line crossed upward from at or below the signal line."""
    idx = 0
    for x, line in enumerate(ladder):
        if previous < line <= current and previous <= signal_line:
            idx = x
    # re-entry from above the top line
    if previous > 99 and current <= 99:
        idx = ladder.top_index
    return idx


def sell_line_index(ladder: GridLadder, previous: float, current: float, signal_line: float) -> int:
    """Highest line crossed downward from at or above the signal line."""
    idx = 0
    for x, line in enumerate(ladder):
        if previous > line >= current and previous >= signal_line:
            idx = x
    # re-entry from below the bottom line lands on index 0, i.e. no sell
    if previous < 1 and current >= 1:
        idx = 0
    return idx


def detect_crossing(ladder: GridLadder, previous: float, current: float, signal_line: float) -> Crossing:
    return Crossing(
        buy_index=buy_line_index(ladder, previous, current, signal_line),
        sell_index=sell_line_index(ladder, previous, current, signal_line),
    )
