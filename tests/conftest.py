"""Pytest configuration for the grid signal engine tests."""

import sys
from pathlib import Path

import numpy as np
import pandas as pd
import pytest

PROJECT_ROOT = Path(__file__).parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from pandas_ta_grid import GridConfig  # noqa: E402


def make_close(rows: int, seed: int) -> pd.Series:
    rng = np.random.default_rng(seed)
    idx = pd.date_range("2025-01-01", periods=rows, freq="1min")
    base = 100 + rng.standard_normal(rows).cumsum()
    return pd.Series(base + rng.normal(0, 0.2, rows), index=idx, name="close")


@pytest.fixture
def close() -> pd.Series:
    return make_close(500, seed=11)


@pytest.fixture
def reference_config() -> GridConfig:
    """period 7, 10 grids, neutral, 35-65 no-trade zone, low aggression, classic RSI."""
    return GridConfig.from_params({
        "length": 7,
        "grids": 10,
        "direction": "neutral",
        "no_trade_zone": "35-65",
        "aggression": "low",
        "rsi_type": "rsi",
    })


class RecordingLogger:
    """Loguru-compatible stand-in that keeps formatted messages in memory."""

    def __init__(self):
        self.records = []

    def _record(self, level, message, *args, **kwargs):
        self.records.append((level, message.format(*args, **kwargs)))

    def debug(self, message, *args, **kwargs):
        self._record("DEBUG", message, *args, **kwargs)

    def info(self, message, *args, **kwargs):
        self._record("INFO", message, *args, **kwargs)

    def warning(self, message, *args, **kwargs):
        self._record("WARNING", message, *args, **kwargs)

    def error(self, message, *args, **kwargs):
        self._record("ERROR", message, *args, **kwargs)


@pytest.fixture
def recording_logger() -> RecordingLogger:
    return RecordingLogger()
