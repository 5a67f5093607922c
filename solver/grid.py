"""9x9 board storage: a value array plus a parallel given-cell mask, with copy semantics."""

# grid.py
# Values are 0..9 (0 = empty); rows/cols are 0-based.
from __future__ import annotations

import numpy as np

SIZE = 9


class Grid:
    __slots__ = ("values", "given")

    def __init__(self, values=None, given=None):
        # np.array copies, so a Grid never shares buffers with its inputs
        if values is None:
            self.values = np.zeros((SIZE, SIZE), dtype=np.int8)
        else:
            self.values = np.array(values, dtype=np.int8).reshape(SIZE, SIZE)
        if given is None:
            self.given = np.zeros((SIZE, SIZE), dtype=bool)
        else:
            self.given = np.array(given, dtype=bool).reshape(SIZE, SIZE)

    @classmethod
    def from_rows(cls, rows: list[list[int]], given=None) -> "Grid":
        grid = cls(rows)
        grid.given = grid.values != 0 if given is None else np.array(given, dtype=bool).reshape(SIZE, SIZE)
        return grid

    @classmethod
    def from_string(cls, text: str) -> "Grid":
        """Parse 81 cells: digits 1-9, '0' or '.' for blanks. Whitespace is ignored."""
        chars = [ch for ch in text if not ch.isspace()]
        if len(chars) != SIZE * SIZE:
            raise ValueError(f"expected 81 cells, got {len(chars)}")
        vals = []
        for ch in chars:
            if ch == ".":
                vals.append(0)
            elif ch.isdigit():
                vals.append(int(ch))
            else:
                raise ValueError(f"invalid cell character: {ch!r}")
        grid = cls(vals)
        grid.given = grid.values != 0
        return grid

    def copy(self) -> "Grid":
        return Grid(self.values, self.given)

    def get(self, r: int, c: int) -> int:
        return int(self.values[r, c])

    def set(self, r: int, c: int, v: int) -> None:
        self.values[r, c] = v
        if v == 0:
            self.given[r, c] = False

    def clear(self, r: int, c: int) -> None:
        self.values[r, c] = 0
        self.given[r, c] = False

    def is_empty(self, r: int, c: int) -> bool:
        return bool(self.values[r, c] == 0)

    def is_given(self, r: int, c: int) -> bool:
        return bool(self.given[r, c])

    def set_given(self, r: int, c: int, flag: bool) -> None:
        if flag and self.values[r, c] == 0:
            raise ValueError(f"cannot mark empty cell ({r}, {c}) as given")
        self.given[r, c] = flag

    def is_complete(self) -> bool:
        return not (self.values == 0).any()

    def given_count(self) -> int:
        return int(np.count_nonzero(self.given))

    def filled_count(self) -> int:
        return int(np.count_nonzero(self.values))

    def rows(self) -> list[list[int]]:
        return self.values.tolist()

    def load_rows(self, rows: list[list[int]]) -> None:
        self.values[:, :] = np.array(rows, dtype=np.int8)

    def to_string(self) -> str:
        return "".join(str(v) if v else "." for v in self.values.flat)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return bool(np.array_equal(self.values, other.values) and np.array_equal(self.given, other.given))

    def __repr__(self) -> str:
        return f"Grid({self.to_string()!r})"
