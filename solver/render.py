"""Plain-text box rendering of a grid, one line per row with heavier rules between block bands."""

# render.py
from __future__ import annotations

from types_sudoku import Cells


def _rules(block_side: int) -> tuple[str, str]:
    side = block_side * block_side
    heavy = "=" * (4 * side + 1)
    thin = "|" + "|".join("-" * (4 * block_side - 1) for _ in range(block_side)) + "|"
    return heavy, thin


def format_cell(value: int) -> str:
    return " " if value == 0 else str(value)


def format_grid(cells: Cells, block_side: int = 3) -> str:
    """
    =====================================
    | 5 | 3 |   |   | 7 |   |   |   |   |
    |-----------|-----------|-----------|
    ...
    """
    side = block_side * block_side
    heavy, thin = _rules(block_side)
    values = list(cells)
    lines = [heavy]
    for r in range(side):
        row = values[r * side:(r + 1) * side]
        lines.append("".join(f"| {format_cell(v)} " for v in row) + "|")
        lines.append(heavy if r % block_side == block_side - 1 else thin)
    return "\n".join(lines) + "\n"
