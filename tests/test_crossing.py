import pytest

from pandas_ta_grid import GridLadder, buy_line_index, detect_crossing, sell_line_index


@pytest.fixture
def ladder():
    return GridLadder(10)


def test_buy_takes_highest_line_crossed(ladder):
    assert buy_line_index(ladder, 25.0, 47.0, 50.0) == 4


def test_buy_includes_line_touched_exactly(ladder):
    assert buy_line_index(ladder, 25.0, 40.0, 50.0) == 4


def test_buy_requires_start_at_or_below_signal_line(ladder):
    assert buy_line_index(ladder, 55.0, 75.0, 50.0) == 0
    assert buy_line_index(ladder, 50.0, 75.0, 50.0) == 7


def test_buy_reentry_from_above_top_line(ladder):
    assert buy_line_index(ladder, 100.0, 99.0, 50.0) == 10
    assert buy_line_index(ladder, 100.0, 95.0, 50.0) == 10


def test_sell_takes_highest_line_crossed(ladder):
    assert sell_line_index(ladder, 75.0, 52.0, 50.0) == 7


def test_sell_requires_start_at_or_above_signal_line(ladder):
    assert sell_line_index(ladder, 45.0, 25.0, 50.0) == 0


def test_sell_reentry_from_below_bottom_line_is_no_crossing(ladder):
    crossing = detect_crossing(ladder, 0.5, 15.0, 1.0)
    assert crossing.sell_index == 0
    assert not crossing.sell


def test_crossing_through_bottom_line_is_no_signal(ladder):
    crossing = detect_crossing(ladder, 5.0, 0.0, 1.0)
    assert crossing.sell_index == 0
    assert not crossing.sell


def test_no_movement_no_crossing(ladder):
    crossing = detect_crossing(ladder, 42.0, 42.0, 50.0)
    assert (crossing.buy, crossing.sell) == (False, False)


def test_detect_crossing_flags(ladder):
    crossing = detect_crossing(ladder, 25.0, 47.0, 50.0)
    assert crossing.buy and not crossing.sell
    assert crossing.buy_index == 4
