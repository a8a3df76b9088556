"""Depth-first search with chronological backtracking over a single Sudoku grid.

Every assignment goes through `Sudoku.set_value`, which records it in the
trial log; `rollback` pops the log and clears the cell again. The search
always fills the lowest-indexed empty cell and tries candidates in ascending
order, so it is exhaustive but order-driven (no propagation, no heuristics).
"""

# backtracking.py
from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np

from types_sudoku import Cells, Rows, SolveResult, TrialEntry

from .render import format_grid
from .solver_core import (
    EMPTY,
    Geometry,
    RollbackEmpty,
    ValueNotAllowed,
    as_square,
    check_cells,
    duplicates,
    is_complete,
)
from .solver_core import is_allowed as _is_allowed
from .solver_core import is_valid as _is_valid

log = logging.getLogger(__name__)


@dataclass
class SearchStats:
    assignments: int = 0
    rollbacks: int = 0

    def as_dict(self) -> dict:
        return {"assignments": self.assignments, "rollbacks": self.rollbacks}


class Sudoku:
    """A grid plus the trial log that lets the search undo its own assignments."""

    def __init__(self, cells: Cells, block_side: int = 3):
        log.debug("Creating a new sudoku")
        self.geometry = Geometry(block_side)
        self._field = check_cells(cells, self.geometry)
        self._log: list[TrialEntry] = []
        self.stats = SearchStats()

    @property
    def side(self) -> int:
        return self.geometry.side

    @property
    def cells(self) -> tuple[int, ...]:
        """Row-major cell values, 0 for empty."""
        return tuple(self._field.tolist())

    def rows(self) -> Rows:
        return as_square(self._field, self.geometry).tolist()

    def __getitem__(self, pos: int) -> int:
        return int(self._field[pos])

    def __len__(self) -> int:
        return self.geometry.size

    def __str__(self) -> str:
        return format_grid(self.cells, self.geometry.block_side)

    def is_allowed(self, value: int, pos: int) -> bool:
        return _is_allowed(self._field, value, pos, self.geometry)

    def set_value(self, value: int, pos: int) -> None:
        """Write `value` into `pos` and record it in the trial log.

        Raises ValueNotAllowed, leaving the grid untouched, when the cell is
        taken or the value clashes with its row, column or block.
        """
        if not self.is_allowed(value, pos):
            raise ValueNotAllowed(value, pos)
        self._field[pos] = value
        self._log.append(TrialEntry(pos, value))
        self.stats.assignments += 1
        log.debug("Value %d set for position %d", value, pos)

    def rollback(self) -> TrialEntry:
        """Undo the most recent assignment and return it."""
        if not self._log:
            raise RollbackEmpty("Trial log is empty")
        entry = self._log.pop()
        self._field[entry.pos] = EMPTY
        self.stats.rollbacks += 1
        log.debug("Rollback for position %d", entry.pos)
        return entry

    def fill_position(self, pos: int, start: int = 1) -> bool:
        """Try values start..side at `pos`; True once one of them is set."""
        for value in range(start, self.side + 1):
            try:
                self.set_value(value, pos)
            except ValueNotAllowed:
                continue
            return True
        return False

    def next_empty(self) -> int | None:
        empty = np.flatnonzero(self._field == EMPTY)
        return int(empty[0]) if empty.size else None

    def solved(self) -> bool:
        """True if no cell is empty. Says nothing about whether the digits are consistent; see is_valid()."""
        return is_complete(self._field)

    def is_valid(self) -> bool:
        return _is_valid(self._field, self.geometry)

    def duplicates(self) -> list[dict]:
        return duplicates(self._field, self.geometry)

    @property
    def trial_log(self) -> tuple[TrialEntry, ...]:
        return tuple(self._log)

    def solve(self) -> SolveResult:
        self.stats = SearchStats()
        if not self.is_valid():
            # repeated givens: no completion exists
            log.info("Unsolvable, givens repeat a digit: %s", self.duplicates())
            return SolveResult.UNSOLVABLE
        pos = self.next_empty()
        start = 1

        while pos is not None:
            if self.fill_position(pos, start):
                start = 1
                pos = self.next_empty()
                continue
            try:
                entry = self.rollback()
            except RollbackEmpty:
                # nothing left to undo: search space exhausted
                break
            pos = entry.pos
            start = entry.value + 1

        if self.solved():
            log.info(
                "Solved after %d assignments, %d rollbacks",
                self.stats.assignments,
                self.stats.rollbacks,
            )
            return SolveResult.SOLVED
        log.info("Unsolvable after %d assignments, %d rollbacks", self.stats.assignments, self.stats.rollbacks)
        return SolveResult.UNSOLVABLE
