# -*- coding: utf-8 -*-
from numba import njit
from numpy import fabs, full, nan
from pandas import Series

from pandas_ta_grid.grid._config import ConfigurationError, RsiType


# Wilder RSI seeded from the first raw delta. Bar 0 is the neutral 50.
@njit(cache=True)
def nb_grid_rsi(x, n):
    m = x.size
    result = full(m, 50.0)

    alpha = 1.0 / n
    avg_gain, avg_loss = 0.0, 0.0

    for i in range(1, m):
        delta = x[i] - x[i - 1]
        gain = delta if delta > 0.0 else 0.0
        loss = -delta if delta < 0.0 else 0.0

        if avg_gain == 0.0 and avg_loss == 0.0:
            avg_gain, avg_loss = gain, loss
        else:
            avg_gain = (1.0 - alpha) * avg_gain + alpha * gain
            avg_loss = (1.0 - alpha) * avg_loss + alpha * loss

        if avg_loss == 0.0:
            result[i] = 100.0
            continue

        rsi = 100.0 - 100.0 / (1.0 + avg_gain / avg_loss)
        result[i] = min(max(rsi, 0.0), 100.0)

    return result


# Jurik RSX cascade. f28..f80 are the fast/slow pairs of the six stages.
@njit(cache=True)
def nb_grid_rsx(x, n):
    m = x.size
    result = full(m, 50.0)
    if m == 0:
        return result

    f18 = 3.0 / (n + 2.0)
    f20 = 1.0 - f18
    f28, f30, f38, f40, f48, f50 = 0.0, 0.0, 0.0, 0.0, 0.0, 0.0
    f58, f60, f68, f70, f78, f80 = 0.0, 0.0, 0.0, 0.0, 0.0, 0.0

    f8 = 100.0 * x[0]
    f88 = max(n - 1, 5)
    f90_, f90 = 1, 0

    for i in range(1, m):
        f10 = f8
        f8 = 100.0 * x[i]
        v8 = f8 - f10

        f28 = f20 * f28 + f18 * v8
        f30 = f18 * f28 + f20 * f30
        vC = 1.5 * f28 - 0.5 * f30

        f38 = f20 * f38 + f18 * vC
        f40 = f18 * f38 + f20 * f40
        v10 = 1.5 * f38 - 0.5 * f40

        f48 = f20 * f48 + f18 * v10
        f50 = f18 * f48 + f20 * f50
        v14 = 1.5 * f48 - 0.5 * f50

        f58 = f20 * f58 + f18 * fabs(v8)
        f60 = f18 * f58 + f20 * f60
        v18 = 1.5 * f58 - 0.5 * f60

        f68 = f20 * f68 + f18 * v18
        f70 = f18 * f68 + f20 * f70
        v1C = 1.5 * f68 - 0.5 * f70

        f78 = f20 * f78 + f18 * v1C
        f80 = f18 * f78 + f20 * f80
        v20 = 1.5 * f78 - 0.5 * f80

        if f90_ == 0:
            f90_ = 1
        elif f88 <= f90_:
            f90_ = f88 + 1
        else:
            f90_ += 1

        f0 = f88 >= f90_ and f8 != f10
        if f88 == f90_ and not f0:
            f90 = 0
        else:
            f90 = f90_

        if f88 < f90 and v20 > 0.0:
            rsx = (v14 / v20 + 1.0) * 50.0
            result[i] = min(max(rsx, 0.0), 100.0)

    return result


def grid_rsi(
    close: Series, length: int = None, rsi_type: str = None,
    offset: int = None, **kwargs
) -> Series:
    """Grid Oscillator (GRSI / GRSX)

    The oscillator that drives the grid signal engine, computed over a
    whole Series at once. ``rsi_type="rsi"`` is a Wilder-smoothed RSI
    seeded from the first raw delta; ``rsi_type="rsx"`` is the Jurik
    Relative Strength Xtra cascade. Both emit 50 on the first valid bar and
    the output is identical to feeding the same closes one by one through
    the ``grid_rsi`` / ``grid_rsx`` stateful indicators. NaN closes are
    skipped and read NaN in the result.

    Sources:
        * [Jurik Research](http://www.jurikres.com/catalog1/ms_rsx.htm)
        * [prorealcode](https://www.prorealcode.com/prorealtime-indicators/jurik-rsx/)

    Parameters:
        close (Series): ```close``` Series
        length (int): The period. Default: ```14```
        rsi_type (str): ```"rsi"``` or ```"rsx"```. Default: ```"rsi"```
        offset (int): Post shift. Default: ```0```

    Other Parameters:
        fillna (value): ```pd.DataFrame.fillna(value)```

    Returns:
        (Series): 1 column
    """
    # Validate
    length = int(length) if length is not None and int(length) > 0 else 14
    if not isinstance(close, Series) or close.size < 1:
        return None
    try:
        rsi_type = RsiType.parse(rsi_type)
    except ConfigurationError:
        return None
    offset = int(offset) if offset is not None else 0

    # Calculation: NaN closes are skipped, like replay_seed, and stay NaN
    valid = close.notna().to_numpy()
    np_close = close.to_numpy(dtype=float)[valid]
    if rsi_type == RsiType.RSX:
        values = nb_grid_rsx(np_close, length)
        _name = "GRSX"
    else:
        values = nb_grid_rsi(np_close, length)
        _name = "GRSI"

    result = Series(nan, index=close.index, dtype=float)
    result.iloc[valid] = values

    # Offset
    if offset != 0:
        result = result.shift(offset)

    # Fill
    if "fillna" in kwargs:
        result.fillna(kwargs["fillna"], inplace=True)

    # Name and Category
    result.name = f"{_name}_{length}"
    result.category = "momentum"

    return result
