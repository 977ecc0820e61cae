# -*- coding: utf-8 -*-
from .grid_rsi import grid_rsi

__all__ = [
    "grid_rsi",
]
