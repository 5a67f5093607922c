# types_sudoku.py
from __future__ import annotations

from enum import Enum
from typing import NamedTuple


class Difficulty(Enum):
    """Puzzle difficulty, as an inclusive range of given-cell counts."""

    EASY = (40, 46)
    MEDIUM = (32, 39)
    HARD = (24, 31)

    @property
    def min_givens(self) -> int:
        return self.value[0]

    @property
    def max_givens(self) -> int:
        return self.value[1]

    @classmethod
    def from_string(cls, name: str) -> "Difficulty":
        # anything unrecognised falls back to medium
        lookup = {"easy": cls.EASY, "medium": cls.MEDIUM, "hard": cls.HARD}
        return lookup.get(name.strip().lower(), cls.MEDIUM)


class CellValue(NamedTuple):
    """A hint: zero-based row/col and the value (1..9) to place there."""

    row: int
    col: int
    value: int
