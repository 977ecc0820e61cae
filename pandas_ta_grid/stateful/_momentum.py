# -*- coding: utf-8 -*-
"""pandas-ta-grid stateful -- momentum oscillators driving the grid.

Each section follows the pattern:
  1. State dataclass
  2. init / update / output_names helpers
  3. STATEFUL_REGISTRY["<kind>"] = StatefulIndicator(...)

Both oscillators emit a value on every bar (50 while warming up) so the
grid always has a reading to compare against.  Seeding is replay_only:
use ``replay_seed()`` to rebuild state from history.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from ._base import (
    _param,
    _as_int,
    _clamp,
    StatefulIndicator,
    STATEFUL_REGISTRY,
)


# ===========================================================================
# GRID_RSI  (replay_only)  -- Wilder smoothing with a raw first-delta seed
# ===========================================================================
# delta = close - prev_close
# gain = max(delta, 0), loss = max(-delta, 0)
# First delta (both averages still 0): avg_gain = gain, avg_loss = loss
# Otherwise: avg = (1 - alpha) * avg + alpha * x,  alpha = 1 / length
# avg_loss == 0 -> 100, else 100 - 100 / (1 + avg_gain / avg_loss)
# First bar: store prev_close only and emit 50.
# Defaults: length=14

@dataclass
class GridRSIState:
    length: int
    prev_close: Optional[float] = None
    avg_gain: float = 0.0
    avg_loss: float = 0.0


def _grid_rsi_init(params: Dict[str, Any]) -> GridRSIState:
    length = _as_int(_param(params, "length", 14), 14)
    return GridRSIState(length=length)


def _grid_rsi_update(
    state: GridRSIState, bar: Dict[str, Any], params: Dict[str, Any]
) -> Tuple[List[Optional[float]], GridRSIState]:
    close = bar["close"]

    if state.prev_close is None:
        state.prev_close = close
        return [50.0], state

    delta = close - state.prev_close
    state.prev_close = close

    gain = max(delta, 0.0)
    loss = max(-delta, 0.0)

    if state.avg_gain == 0.0 and state.avg_loss == 0.0:
        state.avg_gain = gain
        state.avg_loss = loss
    else:
        alpha = 1.0 / state.length
        state.avg_gain = (1.0 - alpha) * state.avg_gain + alpha * gain
        state.avg_loss = (1.0 - alpha) * state.avg_loss + alpha * loss

    if state.avg_loss == 0.0:
        return [100.0], state

    rs = state.avg_gain / state.avg_loss
    return [_clamp(100.0 - 100.0 / (1.0 + rs))], state


def _grid_rsi_output_names(params: Dict[str, Any]) -> List[str]:
    length = _as_int(_param(params, "length", 14), 14)
    return [f"GRSI_{length}"]


STATEFUL_REGISTRY["grid_rsi"] = StatefulIndicator(
    kind="grid_rsi",
    inputs=("close",),
    init=_grid_rsi_init,
    update=_grid_rsi_update,
    output_names=_grid_rsi_output_names,
)


# ===========================================================================
# GRID_RSX  (replay_only)  -- Jurik Relative Strength Xtra, streaming form
# ===========================================================================
# Six paired stages, each: fast = beta*fast + alpha*x
#                          slow = alpha*fast + beta*slow
#                          out  = 1.5*fast - 0.5*slow
# Signed branch:   delta(100*close) -> stage -> stage -> v14
# Unsigned branch: |delta|          -> stage -> stage -> v20
# alpha = 3 / (length + 2), beta = 1 - alpha
# RSX = (v14 / v20 + 1) * 50 once warm and v20 > 0, else 50.
# Defaults: length=14

@dataclass
class JurikStage:
    """One fast/slow exponential pair of the RSX cascade."""
    fast: float = 0.0
    slow: float = 0.0

    def update(self, x: float, alpha: float, beta: float) -> float:
        self.fast = beta * self.fast + alpha * x
        self.slow = alpha * self.fast + beta * self.slow
        return 1.5 * self.fast - 0.5 * self.slow


@dataclass
class GridRSXState:
    length: int
    alpha: float
    beta: float
    price: Optional[float] = None   # last close scaled by 100
    threshold: int = 0              # minimum warm-up bars, max(length - 1, 5)
    progress: int = 0               # warm-up bars seen, saturates at threshold + 1
    gate: int = 0                   # progress, zeroed on a flat bar at the threshold
    active: bool = False
    v14: float = 0.0
    v20: float = 0.0
    delta: JurikStage = field(default_factory=JurikStage)
    delta_smooth: JurikStage = field(default_factory=JurikStage)
    delta_signal: JurikStage = field(default_factory=JurikStage)
    abs_delta: JurikStage = field(default_factory=JurikStage)
    abs_smooth: JurikStage = field(default_factory=JurikStage)
    abs_signal: JurikStage = field(default_factory=JurikStage)


def _grid_rsx_init(params: Dict[str, Any]) -> GridRSXState:
    length = _as_int(_param(params, "length", 14), 14)
    alpha = 3.0 / (length + 2.0)
    return GridRSXState(length=length, alpha=alpha, beta=1.0 - alpha)


def _grid_rsx_update(
    state: GridRSXState, bar: Dict[str, Any], params: Dict[str, Any]
) -> Tuple[List[Optional[float]], GridRSXState]:
    scaled = 100.0 * bar["close"]

    if state.price is None:
        state.price = scaled
        state.threshold = max(state.length - 1, 5)
        state.progress = 1
        return [50.0], state

    prev = state.price
    state.price = scaled
    v8 = scaled - prev
    a, b = state.alpha, state.beta

    vc = state.delta.update(v8, a, b)
    v10 = state.delta_smooth.update(vc, a, b)
    state.v14 = state.delta_signal.update(v10, a, b)

    v18 = state.abs_delta.update(abs(v8), a, b)
    v1c = state.abs_smooth.update(v18, a, b)
    state.v20 = state.abs_signal.update(v1c, a, b)

    if state.progress == 0:
        state.progress = 1
    elif state.threshold <= state.progress:
        state.progress = state.threshold + 1
    else:
        state.progress += 1

    state.active = state.threshold >= state.progress and scaled != prev
    if state.threshold == state.progress and not state.active:
        state.gate = 0
    else:
        state.gate = state.progress

    if state.threshold < state.gate and state.v20 > 0.0:
        return [_clamp((state.v14 / state.v20 + 1.0) * 50.0)], state
    return [50.0], state


def _grid_rsx_output_names(params: Dict[str, Any]) -> List[str]:
    length = _as_int(_param(params, "length", 14), 14)
    return [f"GRSX_{length}"]


STATEFUL_REGISTRY["grid_rsx"] = StatefulIndicator(
    kind="grid_rsx",
    inputs=("close",),
    init=_grid_rsx_init,
    update=_grid_rsx_update,
    output_names=_grid_rsx_output_names,
)
