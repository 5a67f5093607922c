# board_renderer.py
# Text rendering of the board with 1-based coordinates, '.' for empty cells.
from __future__ import annotations

from solver.grid import Grid, SIZE

HEADER = "    1 2 3   4 5 6   7 8 9"
BORDER = "  +-------+-------+-------+"
LEGEND = "Legend: '.' = empty, given numbers cannot be changed"


def render_row(grid: Grid, r: int) -> str:
    cells = [str(grid.get(r, c)) if grid.get(r, c) else "." for c in range(SIZE)]
    boxes = [" ".join(cells[i : i + 3]) for i in range(0, SIZE, 3)]
    return f"{r + 1} | " + " | ".join(boxes) + " |"


def render(current: Grid, original: Grid | None = None) -> str:
    lines = [HEADER, BORDER]
    for r in range(SIZE):
        lines.append(render_row(current, r))
        if r in (2, 5, 8):
            lines.append(BORDER)
    if original is not None:
        lines.append(f"Givens: {original.given_count()}  Filled: {current.filled_count()}/81")
    lines.append(LEGEND)
    return "\n".join(lines)
