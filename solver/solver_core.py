"""Grid State for the backtracking solver: geometry, index math, constraint checks and the error types."""

# solver_core.py
# Grid is a flat numpy array of side*side cells, row-major. 0 = blank.
# - geometry / index math (row, col, block of a linear position)
# - constraint checks (row, column, block uniqueness)
# - completeness / validity checks
# None of the functions here mutate the field.

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from types_sudoku import Cells

EMPTY = 0
MAX_SIDE = 255  # values are stored as uint8


class SudokuError(Exception):
    """Base class for solver errors."""


class InvalidLength(SudokuError, ValueError):
    """Initial data does not hold exactly side * side cells."""

    def __init__(self, got: int, expected: int):
        super().__init__(f"Expected {expected} cells, got {got}")
        self.got = got
        self.expected = expected


class InvalidValue(SudokuError, ValueError):
    """Initial data holds a value outside 0..side."""

    def __init__(self, pos: int, value, side: int):
        super().__init__(f"Value {value!r} at position {pos} is outside 0..{side}")
        self.pos = pos
        self.value = value


class ValueNotAllowed(SudokuError):
    """An assignment would break row, column or block uniqueness, or the cell is taken."""

    def __init__(self, value: int, pos: int):
        super().__init__(f"Value {value} is not allowed in position {pos}")
        self.value = value
        self.pos = pos


class RollbackEmpty(SudokuError):
    """Nothing left in the trial log to undo."""


class InvalidGeometry(SudokuError, ValueError):
    """Block side outside what a uint8 field can hold."""


@dataclass(frozen=True)
class Geometry:
    """Grid shape: blocks of block_side x block_side, side = block_side ** 2."""

    block_side: int = 3

    def __post_init__(self):
        if self.block_side < 1 or self.side > MAX_SIDE:
            raise InvalidGeometry(f"block_side must give a side in 1..{MAX_SIDE}, got {self.block_side}")

    @property
    def side(self) -> int:
        return self.block_side * self.block_side

    @property
    def size(self) -> int:
        return self.side * self.side

    def row_of(self, pos: int) -> int:
        return pos // self.side

    def col_of(self, pos: int) -> int:
        return pos % self.side

    def block_origin(self, pos: int) -> tuple[int, int]:
        b = self.block_side
        return (self.row_of(pos) // b) * b, (self.col_of(pos) // b) * b

    def rc_to_key(self, pos: int) -> str:
        return f"r{self.row_of(pos) + 1}c{self.col_of(pos) + 1}"


DEFAULT_GEOMETRY = Geometry()


def check_cells(cells: Cells, geometry: Geometry = DEFAULT_GEOMETRY) -> np.ndarray:
    """Validate initial data and return it as a fresh uint8 field.

    Raises InvalidLength when the number of cells is not side * side and
    InvalidValue when any cell is not an integer in 0..side.
    """
    values = list(cells)
    if len(values) != geometry.size:
        raise InvalidLength(len(values), geometry.size)
    for pos, v in enumerate(values):
        if isinstance(v, bool) or not isinstance(v, (int, np.integer)) or not 0 <= v <= geometry.side:
            raise InvalidValue(pos, v, geometry.side)
    return np.array(values, dtype=np.uint8)


def as_square(field: np.ndarray, geometry: Geometry = DEFAULT_GEOMETRY) -> np.ndarray:
    """Return a (side, side) view of the flat field."""
    return field.reshape(geometry.side, geometry.side)


def is_allowed_in_row(field: np.ndarray, value: int, pos: int, geometry: Geometry = DEFAULT_GEOMETRY) -> bool:
    r = geometry.row_of(pos)
    return not bool((as_square(field, geometry)[r, :] == value).any())


def is_allowed_in_col(field: np.ndarray, value: int, pos: int, geometry: Geometry = DEFAULT_GEOMETRY) -> bool:
    c = geometry.col_of(pos)
    return not bool((as_square(field, geometry)[:, c] == value).any())


def is_allowed_in_block(field: np.ndarray, value: int, pos: int, geometry: Geometry = DEFAULT_GEOMETRY) -> bool:
    r0, c0 = geometry.block_origin(pos)
    b = geometry.block_side
    block = as_square(field, geometry)[r0:r0 + b, c0:c0 + b]
    return not bool((block == value).any())


def is_allowed(field: np.ndarray, value: int, pos: int, geometry: Geometry = DEFAULT_GEOMETRY) -> bool:
    """True if `value` may be written into the empty cell at `pos`.

    False when `pos` is off the grid, the cell already holds a value or
    `value` is outside 1..side.
    """
    if not 0 <= pos < geometry.size:
        return False
    if field[pos] != EMPTY or not 1 <= value <= geometry.side:
        return False
    return (
        is_allowed_in_col(field, value, pos, geometry)
        and is_allowed_in_row(field, value, pos, geometry)
        and is_allowed_in_block(field, value, pos, geometry)
    )


def is_complete(field: np.ndarray) -> bool:
    return bool((field != EMPTY).all())


def unit_cells_row(r: int, geometry: Geometry = DEFAULT_GEOMETRY) -> list[int]:
    side = geometry.side
    return [r * side + c for c in range(side)]


def unit_cells_col(c: int, geometry: Geometry = DEFAULT_GEOMETRY) -> list[int]:
    side = geometry.side
    return [r * side + c for r in range(side)]


def unit_cells_block(b: int, geometry: Geometry = DEFAULT_GEOMETRY) -> list[int]:
    bs = geometry.block_side
    r0 = (b // bs) * bs
    c0 = (b % bs) * bs
    return [(r0 + i) * geometry.side + c0 + j for i in range(bs) for j in range(bs)]


def iter_units(geometry: Geometry = DEFAULT_GEOMETRY):
    """Yield (label, positions) for every row, column and block, 1-based labels."""
    for i in range(geometry.side):
        yield f"r{i + 1}", unit_cells_row(i, geometry)
    for i in range(geometry.side):
        yield f"c{i + 1}", unit_cells_col(i, geometry)
    for i in range(geometry.side):
        yield f"b{i + 1}", unit_cells_block(i, geometry)


def duplicates(field: np.ndarray, geometry: Geometry = DEFAULT_GEOMETRY) -> list[dict]:
    """Units holding a repeated digit, e.g. {'unit': 'r1', 'digits': [5], 'cells': ['r1c1', 'r1c2']}."""
    issues = []
    for label, positions in iter_units(geometry):
        vals = field[positions]
        counts = np.bincount(vals, minlength=geometry.side + 1)
        dups = [d for d in range(1, geometry.side + 1) if counts[d] > 1]
        if dups:
            cells = [geometry.rc_to_key(p) for p in positions if int(field[p]) in dups]
            issues.append({"unit": label, "digits": dups, "cells": cells})
    return issues


def is_valid(field: np.ndarray, geometry: Geometry = DEFAULT_GEOMETRY) -> bool:
    """True when no filled digit repeats inside a row, column or block."""
    return not duplicates(field, geometry)
