# tests/conftest.py
import sys
from pathlib import Path

import pytest

# Add project root to sys.path so "apps", "solver" and "types_sudoku" can be imported in tests
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

PUZZLE = "53..7....6..195....98....6.8...6...34..8.3..17...2...6.6....28....419..5....8..79"
SOLUTION = (
    "534678912"
    "672195348"
    "198342567"
    "859761423"
    "426853791"
    "713924856"
    "961537284"
    "287419635"
    "345286179"
)


@pytest.fixture
def puzzle_text():
    return PUZZLE


@pytest.fixture
def solution_text():
    return SOLUTION


def assert_valid_solution(grid):
    """Every row, column and box of a full grid holds 1..9 exactly once."""
    rows = grid.rows()
    digits = set(range(1, 10))
    for i in range(9):
        assert set(rows[i]) == digits
        assert {rows[r][i] for r in range(9)} == digits
        r0, c0 = (i // 3) * 3, (i % 3) * 3
        assert {rows[r0 + a][c0 + b] for a in range(3) for b in range(3)} == digits


@pytest.fixture
def check_solution():
    return assert_valid_solution
