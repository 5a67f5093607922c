"""Puzzle generation: fill a random complete grid, then carve symmetric cell pairs while the solution stays unique."""

# generator.py
from __future__ import annotations

import logging
import random

from solver.backtracking import count_solutions, fill_grid
from solver.grid import Grid, SIZE
from types_sudoku import Difficulty

log = logging.getLogger(__name__)

DEFAULT_MAX_ATTEMPTS = 20


def carve(full: Grid, difficulty: Difficulty, rng: random.Random) -> Grid:
    """Remove values from a copy of `full` down to a random target within the difficulty's range.

    Cells go in point-symmetric pairs (r, c) / (8-r, 8-c); a pair is put back if the
    puzzle no longer has exactly one solution. The loop stops at the target or when
    every cell has been visited, whichever comes first.
    """
    puzzle = full.copy()
    target = rng.randint(difficulty.min_givens, difficulty.max_givens)

    cells = [(r, c) for r in range(SIZE) for c in range(SIZE)]
    rng.shuffle(cells)

    givens = puzzle.filled_count()
    for r, c in cells:
        if givens <= target:
            break
        if not puzzle.is_given(r, c):
            continue
        r2, c2 = SIZE - 1 - r, SIZE - 1 - c
        pair = [(r, c)] if (r, c) == (r2, c2) else [(r, c), (r2, c2)]
        saved = [(rr, cc, puzzle.get(rr, cc)) for rr, cc in pair]
        removed = sum(1 for _, _, v in saved if v)
        if givens - removed < difficulty.min_givens:
            continue

        for rr, cc in pair:
            puzzle.clear(rr, cc)

        if count_solutions(puzzle.copy(), 2) != 1:
            for rr, cc, v in saved:
                puzzle.set(rr, cc, v)
                puzzle.set_given(rr, cc, v != 0)
        else:
            givens -= removed

    puzzle.given[:, :] = puzzle.values != 0
    return puzzle


def generate(
    difficulty: Difficulty,
    rng: random.Random,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
) -> Grid:
    """Return a fresh unique-solution puzzle whose given count lies in the difficulty's range.

    If a carve runs out of removable cells above the maximum, start over from a new full
    grid. After `max_attempts` the attempt with the fewest givens is returned.
    """
    best = None
    for attempt in range(1, max(1, max_attempts) + 1):
        puzzle = carve(fill_grid(rng), difficulty, rng)
        givens = puzzle.given_count()
        if difficulty.min_givens <= givens <= difficulty.max_givens:
            log.debug("generated %s puzzle with %d givens (attempt %d)", difficulty.name.lower(), givens, attempt)
            return puzzle
        log.debug("attempt %d stopped at %d givens, retrying", attempt, givens)
        if best is None or givens < best.given_count():
            best = puzzle
    log.warning(
        "no %s puzzle within %d-%d givens after %d attempts; using one with %d",
        difficulty.name.lower(),
        difficulty.min_givens,
        difficulty.max_givens,
        max_attempts,
        best.given_count(),
    )
    return best
