"""Hints: reveal a forced single if one exists, otherwise one cell of the solved grid."""

# hints.py
from __future__ import annotations

from solver.backtracking import find_empty, solve
from solver.grid import Grid, SIZE
from solver.rules import candidates
from types_sudoku import CellValue


def forced_single(grid: Grid) -> CellValue | None:
    """First empty cell (row-major) with exactly one legal value."""
    for r in range(SIZE):
        for c in range(SIZE):
            if grid.is_empty(r, c):
                opts = candidates(grid, r, c)
                if len(opts) == 1:
                    return CellValue(r, c, opts[0])
    return None


def one_hint(grid: Grid) -> CellValue | None:
    hint = forced_single(grid)
    if hint is not None:
        return hint
    # no forced move: solve a copy and reveal the first empty cell
    solved = grid.copy()
    if not solve(solved):
        return None
    pos = find_empty(grid)
    if pos is None:
        return None
    r, c = pos
    return CellValue(r, c, solved.get(r, c))
