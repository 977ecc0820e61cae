import pytest

from pandas_ta_grid import (
    STATEFUL_REGISTRY,
    get_indicator,
    replay_seed,
    stateful_supported_kinds,
)


def feed(kind, closes, length):
    indicator = get_indicator(kind)
    params = {"length": length}
    state = indicator.init(params)
    out = []
    for c in closes:
        values, state = indicator.update(state, {"close": float(c)}, params)
        out.append(values[0])
    return out, state


def test_registry_kinds():
    assert stateful_supported_kinds() == ["grid_rsi", "grid_rsx"]
    assert STATEFUL_REGISTRY["grid_rsi"].output_names({"length": 7}) == ["GRSI_7"]
    assert STATEFUL_REGISTRY["grid_rsx"].output_names({}) == ["GRSX_14"]


def test_unknown_kind():
    with pytest.raises(ValueError):
        get_indicator("macd")


# ---------------------------------------------------------------------------
# grid_rsi
# ---------------------------------------------------------------------------

def test_rsi_first_bar_is_neutral():
    out, state = feed("grid_rsi", [123.4], 7)
    assert out == [50.0]
    assert state.prev_close == 123.4


def test_rsi_zero_average_loss_is_100():
    out, _ = feed("grid_rsi", [100, 101, 102, 103], 7)
    assert out[1:] == [100.0, 100.0, 100.0]


def test_rsi_flat_prices_keep_zero_loss():
    out, _ = feed("grid_rsi", [100, 100, 100], 7)
    assert out == [50.0, 100.0, 100.0]


def test_rsi_first_delta_seeds_raw_averages():
    out, state = feed("grid_rsi", [100, 99], 7)
    assert state.avg_gain == 0.0
    assert state.avg_loss == 1.0
    assert out[-1] == 0.0


def test_rsi_wilder_smoothing():
    out, state = feed("grid_rsi", [100, 101, 99], 7)
    assert state.avg_gain == pytest.approx(6.0 / 7.0)
    assert state.avg_loss == pytest.approx(2.0 / 7.0)
    assert out[-1] == pytest.approx(75.0)


def test_rsi_is_bounded(close):
    out, _ = feed("grid_rsi", close, 5)
    assert all(0.0 <= v <= 100.0 for v in out)


# ---------------------------------------------------------------------------
# grid_rsx
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("length, threshold", [(2, 5), (3, 5), (6, 5), (7, 6), (14, 13)])
def test_rsx_neutral_until_warm(length, threshold):
    closes = [100 + i for i in range(threshold + 5)]
    out, state = feed("grid_rsx", closes, length)

    assert state.threshold == threshold
    assert out[:threshold] == [50.0] * threshold
    assert out[threshold] != 50.0


def test_rsx_steady_rise_saturates_high():
    out, _ = feed("grid_rsx", [100 + i for i in range(20)], 7)
    assert out[6:] == [100.0] * 14


def test_rsx_steady_fall_saturates_low():
    out, _ = feed("grid_rsx", [200 - i for i in range(20)], 7)
    assert out[6:] == [0.0] * 14


def test_rsx_flat_prices_stay_neutral():
    out, state = feed("grid_rsx", [100.0] * 20, 7)
    assert out == [50.0] * 20
    assert state.v20 == 0.0


def test_rsx_progress_saturates():
    _, state = feed("grid_rsx", [100 + i for i in range(30)], 7)
    assert state.progress == state.threshold + 1
    assert state.gate == state.threshold + 1


def test_rsx_is_bounded(close):
    out, _ = feed("grid_rsx", close, 7)
    assert all(0.0 <= v <= 100.0 for v in out)


def test_rsx_stages_are_separate_records():
    _, state = feed("grid_rsx", [100, 101, 103], 7)
    stages = [state.delta, state.delta_smooth, state.delta_signal,
              state.abs_delta, state.abs_smooth, state.abs_signal]
    assert len({id(s) for s in stages}) == 6
    assert state.delta.fast != 0.0


# ---------------------------------------------------------------------------
# replay_seed
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("kind", ["grid_rsi", "grid_rsx"])
def test_replay_seed_matches_sequential_updates(kind, close):
    seeded = replay_seed(kind, {"close": close}, {"length": 7})
    _, state = feed(kind, close, 7)
    assert seeded == state


def test_replay_seed_skips_nan(close):
    holey = close.copy()
    holey.iloc[[3, 10, 11]] = float("nan")
    seeded = replay_seed("grid_rsi", {"close": holey}, {"length": 7})
    _, state = feed("grid_rsi", holey.dropna(), 7)
    assert seeded == state
