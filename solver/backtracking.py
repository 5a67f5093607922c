"""Depth-first backtracking: first solution, bounded solution counting, and randomized full-grid fill."""

# backtracking.py
# Search order: first empty cell in row-major order, values 1..9 ascending
# (or shuffled per cell when filling). Placements are undone on the way back.
from __future__ import annotations

import random

from solver.grid import Grid, SIZE
from solver.rules import box_index, is_consistent

DIGITS = tuple(range(1, 10))


class _Search:
    """Working state for one search call: plain rows plus used-digit bitmasks per row, column and box.

    The masks encode the same rule as rules.fits and are only valid for grids that passed is_consistent.
    """

    def __init__(self, rows: list[list[int]]):
        self.rows = rows
        self.row_mask = [0] * SIZE
        self.col_mask = [0] * SIZE
        self.box_mask = [0] * SIZE
        self.empties = []
        for r in range(SIZE):
            for c in range(SIZE):
                v = rows[r][c]
                if v:
                    self._mark(r, c, v)
                else:
                    self.empties.append((r, c))
        self.found = 0

    def _mark(self, r: int, c: int, v: int) -> None:
        bit = 1 << v
        self.row_mask[r] |= bit
        self.col_mask[c] |= bit
        self.box_mask[box_index(r, c)] |= bit

    def allowed(self, r: int, c: int, v: int) -> bool:
        used = self.row_mask[r] | self.col_mask[c] | self.box_mask[box_index(r, c)]
        return not used & (1 << v)

    def place(self, r: int, c: int, v: int) -> None:
        self.rows[r][c] = v
        self._mark(r, c, v)

    def undo(self, r: int, c: int, v: int) -> None:
        bit = ~(1 << v)
        self.rows[r][c] = 0
        self.row_mask[r] &= bit
        self.col_mask[c] &= bit
        self.box_mask[box_index(r, c)] &= bit

    # empties[i] is always the first empty cell in row-major order at depth i,
    # since every cell before it has been filled by the enclosing frames.
    def solve_from(self, i: int, rng: random.Random | None = None) -> bool:
        if i == len(self.empties):
            return True
        r, c = self.empties[i]
        order = list(DIGITS)
        if rng is not None:
            rng.shuffle(order)
        for v in order:
            if self.allowed(r, c, v):
                self.place(r, c, v)
                if self.solve_from(i + 1, rng):
                    return True
                self.undo(r, c, v)
        return False

    def count_from(self, i: int, limit: int) -> None:
        if self.found >= limit:
            return
        if i == len(self.empties):
            self.found += 1
            return
        r, c = self.empties[i]
        for v in DIGITS:
            if self.allowed(r, c, v):
                self.place(r, c, v)
                self.count_from(i + 1, limit)
                self.undo(r, c, v)
                if self.found >= limit:
                    return


def find_empty(grid: Grid) -> tuple[int, int] | None:
    for r in range(SIZE):
        for c in range(SIZE):
            if grid.is_empty(r, c):
                return r, c
    return None


def solve(grid: Grid) -> bool:
    """Fill `grid` in place with the first solution found. On failure the grid is left as it was."""
    if not is_consistent(grid):
        return False
    search = _Search(grid.rows())
    if not search.solve_from(0):
        return False
    grid.load_rows(search.rows)
    return True


def count_solutions(grid: Grid, limit: int) -> int:
    """Count completions of `grid`, stopping as soon as `limit` have been seen.

    Pass limit=2 and compare with 1 to test uniqueness. The grid itself is not modified.
    """
    if limit <= 0 or not is_consistent(grid):
        return 0
    search = _Search(grid.rows())
    search.count_from(0, limit)
    return search.found


def fill_grid(rng: random.Random) -> Grid:
    """A complete valid grid built by randomized backtracking, every cell marked given."""
    search = _Search([[0] * SIZE for _ in range(SIZE)])
    search.solve_from(0, rng)
    grid = Grid(search.rows)
    grid.given[:, :] = True
    return grid
