# -*- coding: utf-8 -*-
from __future__ import annotations

from typing import Iterator, List, Tuple


class GridLadder:
    """Fixed ladder of oscillator lines from 1 to 99.

    ``grids`` divisions give ``grids + 1`` lines spaced ``100 / grids``
    apart.  The end lines are pulled in to 1 and 99 so a clamped
    oscillator (0 or 100) always sits strictly beyond them.

    Indexing out of range returns 0.0 instead of raising; 0.0 is never a
    line value and reads as "no line".
    """

    __slots__ = ("grids", "interval", "_lines")

    def __init__(self, grids: int):
        if grids < 1:
            raise ValueError(f"[!] grids must be >= 1, got {grids}")
        self.grids = grids
        self.interval = 100.0 / grids
        # steps below 1 would put interior lines outside the 1..99 endpoints
        lines = [min(max(self.interval * i, 1.0), 99.0) for i in range(grids + 1)]
        lines[0] = 1.0
        lines[-1] = 99.0
        self._lines: Tuple[float, ...] = tuple(lines)

    def __len__(self) -> int:
        return len(self._lines)

    def __getitem__(self, idx: int) -> float:
        if idx < 0 or idx >= len(self._lines):
            return 0.0
        return self._lines[idx]

    def __iter__(self) -> Iterator[float]:
        return iter(self._lines)

    def __repr__(self) -> str:
        return f"GridLadder(grids={self.grids})"

    @property
    def top_index(self) -> int:
        return len(self._lines) - 1

    def to_list(self) -> List[float]:
        return list(self._lines)
