"""Read puzzle text into a Sudoku: every decimal digit is a cell, everything else is layout noise."""

# loader.py
from __future__ import annotations

import logging
from pathlib import Path

from .backtracking import Sudoku
from .solver_core import SudokuError

log = logging.getLogger(__name__)


class LoadingError(SudokuError):
    """The puzzle file could not be read or does not describe a grid."""


def parse_cells(text: str) -> list[int]:
    """Keep the decimal digits of `text` in order, e.g. '53..7' -> [5, 3, 7]."""
    return [int(ch) for ch in text if ch in "0123456789"]


def sudoku_from_text(text: str, block_side: int = 3) -> Sudoku:
    cells = parse_cells(text)
    try:
        return Sudoku(cells, block_side=block_side)
    except ValueError as e:
        raise LoadingError(f"Cannot create sudoku from data: {e}") from e


def load_sudoku(path: str | Path, block_side: int = 3) -> Sudoku:
    path = Path(path)
    log.info("Reading %s", path)
    try:
        data = path.read_text(encoding="utf-8")
    except OSError as e:
        raise LoadingError(str(e)) from e
    return sudoku_from_text(data, block_side=block_side)
