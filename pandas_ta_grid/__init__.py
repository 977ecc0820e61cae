# -*- coding: utf-8 -*-
from importlib.metadata import PackageNotFoundError, version as _version

from loguru import logger as _logger

try:
    version = _version("pandas_ta_grid")
except PackageNotFoundError:
    version = "0.0.0"

# Library convention: stay silent until the application enables logging.
_logger.disable("pandas_ta_grid")

from pandas_ta_grid.stateful import *
from pandas_ta_grid.stateful import __all__ as stateful_all
from pandas_ta_grid.grid import *
from pandas_ta_grid.grid import __all__ as grid_all
from pandas_ta_grid.momentum import *
from pandas_ta_grid.momentum import __all__ as momentum_all
from pandas_ta_grid.log import configure_logging, disable_logging

__all__ = [
    "version",
    "configure_logging",
    "disable_logging",
]

__all__ += stateful_all + grid_all + momentum_all
