# -*- coding: utf-8 -*-
"""Grid signal engine: ladder, crossings, filters and the GridManager."""
from ._config import (
    Aggression,
    ConfigurationError,
    Direction,
    GridConfig,
    NoTradeZone,
    RsiType,
)
from ._ladder import GridLadder
from ._crossing import Crossing, buy_line_index, detect_crossing, sell_line_index
from ._filters import (
    FILTER_PIPELINE,
    FilterContext,
    SignalFlags,
    aggression_filter,
    apply_filters,
    direction_filter,
    no_trade_zone_filter,
)
from ._manager import GridManager, GridSnapshot, Signal

__all__ = [
    "Aggression",
    "ConfigurationError",
    "Direction",
    "GridConfig",
    "NoTradeZone",
    "RsiType",
    "GridLadder",
    "Crossing",
    "buy_line_index",
    "sell_line_index",
    "detect_crossing",
    "FILTER_PIPELINE",
    "FilterContext",
    "SignalFlags",
    "aggression_filter",
    "no_trade_zone_filter",
    "direction_filter",
    "apply_filters",
    "GridManager",
    "GridSnapshot",
    "Signal",
]
