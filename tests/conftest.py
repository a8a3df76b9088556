# tests/conftest.py
import sys
from pathlib import Path

import pytest

# Add project root to sys.path so "apps", "solver", "types_sudoku" can be imported in tests
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

CLASSIC = [
    5, 3, 0, 0, 7, 0, 0, 0, 0,
    6, 0, 0, 1, 9, 5, 0, 0, 0,
    0, 9, 8, 0, 0, 0, 0, 6, 0,
    8, 0, 0, 0, 6, 0, 0, 0, 3,
    4, 0, 0, 8, 0, 3, 0, 0, 1,
    7, 0, 0, 0, 2, 0, 0, 0, 6,
    0, 6, 0, 0, 0, 0, 2, 8, 0,
    0, 0, 0, 4, 1, 9, 0, 0, 5,
    0, 0, 0, 0, 8, 0, 0, 7, 9,
]

CLASSIC_SOLUTION = [
    5, 3, 4, 6, 7, 8, 9, 1, 2,
    6, 7, 2, 1, 9, 5, 3, 4, 8,
    1, 9, 8, 3, 4, 2, 5, 6, 7,
    8, 5, 9, 7, 6, 1, 4, 2, 3,
    4, 2, 6, 8, 5, 3, 7, 9, 1,
    7, 1, 3, 9, 2, 4, 8, 5, 6,
    9, 6, 1, 5, 3, 7, 2, 8, 4,
    2, 8, 7, 4, 1, 9, 6, 3, 5,
    3, 4, 5, 2, 8, 6, 1, 7, 9,
]


def constraint_cells():
    field = [0] * 81
    # First block is filled except the central cell. Allowed value is 5.
    for pos, v in {0: 1, 1: 2, 2: 3, 9: 4, 11: 6, 18: 7, 19: 8, 20: 9}.items():
        field[pos] = v
    # First row is filled except cell #3. Allowed value is 4.
    for pos, v in {4: 5, 5: 6, 6: 7, 7: 8, 8: 9}.items():
        field[pos] = v
    # First column is filled except cell #27. Allowed value is 2.
    for pos, v in {36: 3, 45: 5, 54: 6, 63: 8, 72: 9}.items():
        field[pos] = v
    return field


@pytest.fixture
def constraint_field():
    from solver.backtracking import Sudoku

    return Sudoku(constraint_cells())


@pytest.fixture
def classic():
    from solver.backtracking import Sudoku

    return Sudoku(CLASSIC)
