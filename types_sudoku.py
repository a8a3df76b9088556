# types_sudoku.py
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Sequence

Cells = Sequence[int]
"""Row-major cell values (0 = empty), side * side of them."""

Rows = list[list[int]]
"""The same grid as rows of integers, for display and JSON payloads."""


@dataclass(frozen=True)
class TrialEntry:
    """One successful assignment recorded in the trial log."""

    pos: int  # linear index, row-major
    value: int  # digit written into the cell


class SolveResult(str, Enum):
    """Terminal outcome of a search."""

    SOLVED = "solved"
    UNSOLVABLE = "unsolvable"
