"""Placement rules: the row/column/box legality check, candidates, unit helpers and a duplicate report."""

# rules.py
# Cells are 0-based (row, col). Unit labels in reports are 1-based (r1, c4, b9) for display.
from __future__ import annotations

from solver.grid import Grid, SIZE

Cell = tuple[int, int]


def in_bounds(r: int, c: int) -> bool:
    return 0 <= r < SIZE and 0 <= c < SIZE


def box_origin(r: int, c: int) -> Cell:
    return (r // 3) * 3, (c // 3) * 3


def box_index(r: int, c: int) -> int:
    return (r // 3) * 3 + c // 3


def unit_cells_row(r: int) -> list[Cell]:
    return [(r, c) for c in range(SIZE)]


def unit_cells_col(c: int) -> list[Cell]:
    return [(r, c) for r in range(SIZE)]


def unit_cells_box(b: int) -> list[Cell]:
    r0 = (b // 3) * 3
    c0 = (b % 3) * 3
    return [(r0 + i, c0 + j) for i in range(3) for j in range(3)]


def peers(r: int, c: int) -> set[Cell]:
    """Every cell sharing a row, column or box with (r, c), excluding (r, c) itself."""
    ps = set(unit_cells_row(r)) | set(unit_cells_col(c)) | set(unit_cells_box(box_index(r, c)))
    ps.discard((r, c))
    return ps


def fits(cells, r: int, c: int, v: int) -> bool:
    """True if v appears nowhere else in the row, column or box of (r, c).

    `cells` is anything indexable as cells[r][c]: nested lists or a 9x9 array.
    """
    row = cells[r]
    for j in range(SIZE):
        if j != c and row[j] == v:
            return False
    for i in range(SIZE):
        if i != r and cells[i][c] == v:
            return False
    br, bc = box_origin(r, c)
    for i in range(br, br + 3):
        for j in range(bc, bc + 3):
            if (i != r or j != c) and cells[i][j] == v:
                return False
    return True


def is_valid_move(grid: Grid, r: int, c: int, v: int) -> bool:
    if not in_bounds(r, c) or not 1 <= v <= 9:
        return False
    return fits(grid.values, r, c, v)


def candidates(grid: Grid, r: int, c: int) -> list[int]:
    return [v for v in range(1, 10) if is_valid_move(grid, r, c, v)]


def duplicates_in_unit(vals) -> set[int]:
    seen = set()
    dups = set()
    for v in vals:
        if v == 0:
            continue
        if v in seen:
            dups.add(v)
        seen.add(v)
    return dups


def _unit_report(label: str, cells: list[Cell], rows: list[list[int]]) -> dict | None:
    vals = [rows[r][c] for r, c in cells]
    dups = duplicates_in_unit(vals)
    if not dups:
        return None
    bad = [f"r{r + 1}c{c + 1}" for (r, c), v in zip(cells, vals) if v in dups]
    return {"type": "duplicate", "unit": label, "digits": sorted(dups), "cells": bad}


def find_conflicts(grid: Grid) -> list[dict]:
    rows = grid.rows()
    issues = []
    for i in range(SIZE):
        for label, cells in (
            (f"r{i + 1}", unit_cells_row(i)),
            (f"c{i + 1}", unit_cells_col(i)),
            (f"b{i + 1}", unit_cells_box(i)),
        ):
            report = _unit_report(label, cells, rows)
            if report:
                issues.append(report)
    return issues


def is_consistent(grid: Grid) -> bool:
    return not find_conflicts(grid)


def sanity_check(original: Grid, current: Grid) -> dict:
    """Report givens that were overwritten plus any duplicate in a row, column or box."""
    issues = []
    for r in range(SIZE):
        for c in range(SIZE):
            if original.is_given(r, c) and current.get(r, c) != original.get(r, c):
                issues.append(
                    {
                        "type": "given_overwritten",
                        "cell": f"r{r + 1}c{c + 1}",
                        "given": original.get(r, c),
                        "found": current.get(r, c),
                    }
                )
    issues.extend(find_conflicts(current))
    return {"ok": len(issues) == 0, "issues": issues}
