"""Play state for one game: the generated puzzle (original) and the board being played (current)."""

# session.py
from __future__ import annotations

import random
from enum import Enum

from solver.backtracking import solve
from solver.generator import DEFAULT_MAX_ATTEMPTS, generate
from solver.grid import Grid
from solver.hints import one_hint
from solver.rules import in_bounds, is_valid_move, sanity_check
from types_sudoku import CellValue, Difficulty


class MoveOutcome(Enum):
    PLACED = "placed"
    COMPLETED = "completed"
    CLEARED = "cleared"
    OUT_OF_RANGE = "out_of_range"
    GIVEN_CELL = "given_cell"
    OCCUPIED = "occupied"
    CONFLICT = "conflict"


class GameSession:
    def __init__(self, puzzle: Grid, rng: random.Random | None = None, max_attempts: int = DEFAULT_MAX_ATTEMPTS):
        self.rng = rng or random.Random()
        self.max_attempts = max_attempts
        self.original = puzzle.copy()
        self.current = puzzle.copy()

    @classmethod
    def generated(
        cls,
        difficulty: Difficulty,
        rng: random.Random,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    ) -> "GameSession":
        return cls(generate(difficulty, rng, max_attempts), rng, max_attempts)

    @property
    def is_won(self) -> bool:
        return self.current.is_complete()

    def place(self, r: int, c: int, v: int) -> MoveOutcome:
        if not in_bounds(r, c) or not 1 <= v <= 9:
            return MoveOutcome.OUT_OF_RANGE
        if self.original.is_given(r, c):
            return MoveOutcome.GIVEN_CELL
        if not self.current.is_empty(r, c):
            return MoveOutcome.OCCUPIED
        if not is_valid_move(self.current, r, c, v):
            return MoveOutcome.CONFLICT
        self.current.set(r, c, v)
        return MoveOutcome.COMPLETED if self.is_won else MoveOutcome.PLACED

    def clear(self, r: int, c: int) -> MoveOutcome:
        if not in_bounds(r, c):
            return MoveOutcome.OUT_OF_RANGE
        if self.original.is_given(r, c):
            return MoveOutcome.GIVEN_CELL
        self.current.clear(r, c)
        return MoveOutcome.CLEARED

    def hint(self) -> CellValue | None:
        return one_hint(self.current)

    def solve(self) -> bool:
        solved = self.current.copy()
        if not solve(solved):
            return False
        self.current = solved
        return True

    def check(self) -> dict:
        return sanity_check(self.original, self.current)

    def reset(self) -> None:
        self.current = self.original.copy()

    def new_game(self, difficulty: Difficulty) -> None:
        puzzle = generate(difficulty, self.rng, self.max_attempts)
        self.original = puzzle.copy()
        self.current = puzzle.copy()
