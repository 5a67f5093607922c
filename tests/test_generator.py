# tests/test_generator.py
import logging
import random

import pytest

import solver.generator as generator
from solver.backtracking import count_solutions, fill_grid, solve
from solver.generator import carve, generate
from types_sudoku import Difficulty


@pytest.mark.parametrize(
    "difficulty,seed",
    [(Difficulty.EASY, 1), (Difficulty.MEDIUM, 2), (Difficulty.HARD, 3)],
)
def test_generate_unique_puzzle_in_range(difficulty, seed, check_solution):
    puzzle = generate(difficulty, random.Random(seed))
    givens = puzzle.given_count()
    assert difficulty.min_givens <= givens <= difficulty.max_givens
    assert puzzle.filled_count() == givens
    assert count_solutions(puzzle.copy(), 2) == 1

    solved = puzzle.copy()
    assert solve(solved)
    check_solution(solved)


def test_given_flags_match_filled_cells():
    puzzle = generate(Difficulty.EASY, random.Random(5))
    for r in range(9):
        for c in range(9):
            assert puzzle.is_given(r, c) == (not puzzle.is_empty(r, c))


def test_generated_puzzle_is_point_symmetric():
    puzzle = generate(Difficulty.MEDIUM, random.Random(8))
    for r in range(9):
        for c in range(9):
            assert puzzle.is_given(r, c) == puzzle.is_given(8 - r, 8 - c)


def test_generate_is_seeded():
    assert generate(Difficulty.EASY, random.Random(21)) == generate(Difficulty.EASY, random.Random(21))


def test_carve_keeps_solution_values():
    rng = random.Random(4)
    full = fill_grid(rng)
    puzzle = carve(full, Difficulty.EASY, rng)
    assert full.given_count() == 81  # carve works on a copy
    for r in range(9):
        for c in range(9):
            if not puzzle.is_empty(r, c):
                assert puzzle.get(r, c) == full.get(r, c)
    assert puzzle.given_count() >= Difficulty.EASY.min_givens
    assert count_solutions(puzzle, 2) == 1


def test_generate_falls_back_after_max_attempts(monkeypatch, caplog):
    calls = []

    def no_carve(full, difficulty, rng):
        calls.append(difficulty)
        return full

    monkeypatch.setattr(generator, "carve", no_carve)
    with caplog.at_level(logging.WARNING, logger="solver.generator"):
        puzzle = generate(Difficulty.HARD, random.Random(0), max_attempts=3)
    assert len(calls) == 3
    assert puzzle.given_count() == 81
    assert "after 3 attempts" in caplog.text
