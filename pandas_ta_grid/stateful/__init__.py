# -*- coding: utf-8 -*-
"""pandas-ta-grid.stateful – streaming oscillators for the grid engine.

Indicator modules populate STATEFUL_REGISTRY at import time.  This
package re-exports it plus the shared base API.
"""
from __future__ import annotations

# Base API (always available)
from ._base import (
    StatefulIndicator,
    STATEFUL_REGISTRY,
    get_indicator,
    replay_seed,
    stateful_supported_kinds,
    _param,
    _as_int,
)

# ---------------------------------------------------------------------------
# Indicator modules – each populates the shared registry on import
# ---------------------------------------------------------------------------
from . import _momentum     # noqa: F401  grid_rsi, grid_rsx
from ._momentum import GridRSIState, GridRSXState, JurikStage

__all__ = [
    "StatefulIndicator",
    "STATEFUL_REGISTRY",
    "get_indicator",
    "replay_seed",
    "stateful_supported_kinds",
    "GridRSIState",
    "GridRSXState",
    "JurikStage",
]
