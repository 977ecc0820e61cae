# -*- coding: utf-8 -*-
"""GridManager – turns a stream of closes into BUY / SELL / DO_NOTHING.

Per bar:
  1. oscillator update      (grid_rsi / grid_rsx stateful indicator)
  2. crossing detection     (highest ladder line crossed each way)
  3. suppression filters    (aggression -> no-trade zone -> direction)
  4. decision               (buy beats sell; carry-over state updated)

The very first bar only seeds the oscillator memory and always returns
DO_NOTHING.  Calls must be serialised: one bar is fully processed before
the next begins.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional

from pandas_ta_grid.log import get_logger
from pandas_ta_grid.stateful import get_indicator

from ._config import GridConfig
from ._crossing import Crossing, detect_crossing
from ._filters import FilterContext, SignalFlags, apply_filters
from ._ladder import GridLadder

INITIAL_SIGNAL_LINE = 50.0


class Signal(str, Enum):
    BUY = "BUY"
    SELL = "SELL"
    DO_NOTHING = "DO_NOTHING"

    @property
    def side(self) -> int:
        """1 for BUY, -1 for SELL, 0 otherwise."""
        if self is Signal.BUY:
            return 1
        if self is Signal.SELL:
            return -1
        return 0

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class GridSnapshot:
    """Read-only view of the carry-over state after the last bar."""
    bars:              int
    previous:          Optional[float]
    current:           Optional[float]
    last_signal:       int
    last_signal_index: int
    signal_line:       float


class GridManager:
    """Stateful grid signal engine for one strategy instance.

    Args:
        config: Validated ``GridConfig``.
        logger: Optional loguru-style logger. Default: the package logger
            bound to ``component="grid_manager"``.
    """

    def __init__(self, config: GridConfig, logger: Any = None):
        self.config = config
        self.ladder = GridLadder(config.grids)
        self._indicator = get_indicator(config.rsi_type.kind)
        self._params: Dict[str, Any] = config.indicator_params
        self._log = logger if logger is not None else get_logger("grid_manager")
        self.reset()
        self._log.info("Initialized with {}", config.describe())

    @classmethod
    def from_params(cls, params: Dict[str, Any], logger: Any = None) -> "GridManager":
        return cls(GridConfig.from_params(params), logger=logger)

    def reset(self) -> None:
        """Forget every bar seen so far."""
        self._state = self._indicator.init(self._params)
        self.previous: Optional[float] = None
        self.current: Optional[float] = None
        self.last_signal = 0
        self.last_signal_index = 0
        self.signal_line = INITIAL_SIGNAL_LINE
        self.bars = 0

    @property
    def warming_up(self) -> bool:
        return self.previous is None

    @property
    def oscillator_name(self) -> str:
        return self._indicator.output_names(self._params)[0]

    def snapshot(self) -> GridSnapshot:
        return GridSnapshot(
            bars=self.bars,
            previous=self.previous,
            current=self.current,
            last_signal=self.last_signal,
            last_signal_index=self.last_signal_index,
            signal_line=self.signal_line,
        )

    # -----------------------------------------------------------------------
    # Per-bar entry point
    # -----------------------------------------------------------------------

    def process(self, price: float) -> Signal:
        """Feed one close; returns the signal for this bar."""
        self._log.debug("Processing new bar. price={:.4f}", price)
        self.bars += 1

        values, self._state = self._indicator.update(self._state, {"close": float(price)}, self._params)
        current = values[0]
        self.current = current

        if self.previous is None:
            self.previous = current
            self._log.debug("First bar - warming up. {}={:.2f} => {}",
                            self.oscillator_name, current, Signal.DO_NOTHING)
            return Signal.DO_NOTHING

        previous = self.previous
        self._log.debug("{}={:.2f} (prev={:.2f})", self.oscillator_name, current, previous)

        crossing = detect_crossing(self.ladder, previous, current, self.signal_line)
        flags = SignalFlags(buy=crossing.buy, sell=crossing.sell)
        self._log.debug("buy_index={}, sell_index={} => {}", crossing.buy_index, crossing.sell_index, flags)

        ctx = FilterContext(
            config=self.config,
            ladder=self.ladder,
            previous=previous,
            current=current,
            signal_line=self.signal_line,
        )
        flags, trace = apply_filters(flags, ctx)
        for name, step in trace:
            self._log.debug("After {} => {}", name, step)

        signal = self._decide(flags, crossing)
        self._log.debug("signal_line={:.2f}, last_signal={}, last_signal_index={}, signal={}",
                        self.signal_line, self.last_signal, self.last_signal_index, signal)

        self.previous = current
        return signal

    def _decide(self, flags: SignalFlags, crossing: Crossing) -> Signal:
        if flags.buy:
            signal, idx = Signal.BUY, crossing.buy_index
        elif flags.sell:
            signal, idx = Signal.SELL, crossing.sell_index
        else:
            return Signal.DO_NOTHING

        self.last_signal = signal.side
        self.last_signal_index = idx
        self.signal_line = self.ladder[idx]
        return signal

    # -----------------------------------------------------------------------
    # Batch replay
    # -----------------------------------------------------------------------

    def run(self, close):
        """Feed every value of the *close* Series through ``process``.

        NaN closes are skipped and leave an empty row.  State carries on
        from whatever this instance has already seen; call ``reset()``
        first for a clean replay.

        Returns:
            (DataFrame): oscillator, signal, signal_line, signal_index
        """
        import pandas as pd          # lazy – pandas not required for streaming

        name = self.oscillator_name
        rows: List[Dict[str, Any]] = []
        for v in close:
            if pd.isna(v):
                rows.append({name: None, "signal": None, "signal_line": None, "signal_index": None})
                continue
            signal = self.process(float(v))
            rows.append({
                name: self.current,
                "signal": signal.value,
                "signal_line": self.signal_line,
                "signal_index": self.last_signal_index,
            })

        df = pd.DataFrame(rows, index=close.index, columns=[name, "signal", "signal_line", "signal_index"])
        df.name = f"GRID_{self.config.rsi_type.value.upper()}_{self.config.length}_{self.config.grids}"
        return df
