# tests/test_solver_basics.py
import random

from solver.backtracking import _Search, count_solutions, fill_grid, find_empty, solve
from solver.grid import Grid
from solver.rules import fits, is_consistent


def test_solve_known_puzzle(puzzle_text, solution_text):
    g = Grid.from_string(puzzle_text)
    assert solve(g)
    assert g.to_string() == solution_text
    # given flags are not touched by solving
    assert g.given_count() == 30


def test_solve_empty_grid(check_solution):
    g = Grid()
    assert solve(g)
    assert g.is_complete()
    check_solution(g)


def test_solve_empty_grid_takes_smallest_values_first():
    g = Grid()
    solve(g)
    assert g.rows()[0] == [1, 2, 3, 4, 5, 6, 7, 8, 9]


def test_solve_rejects_duplicate_givens_and_leaves_grid_alone():
    rows = [[0] * 9 for _ in range(9)]
    rows[0][0] = 5
    rows[0][4] = 5
    g = Grid.from_rows(rows)
    before = g.copy()
    assert not solve(g)
    assert g == before


def test_solve_unsatisfiable_without_duplicates(puzzle_text):
    # 4 is the only value left for r1c3 in the solution; 1 and 2 are legal now but lead nowhere
    g = Grid.from_string(puzzle_text)
    g.set(0, 2, 1)
    before = g.copy()
    assert is_consistent(g)
    assert not solve(g)
    assert g == before


def test_solve_full_grid_is_noop(solution_text):
    g = Grid.from_string(solution_text)
    assert solve(g)
    assert g.to_string() == solution_text


def test_count_solutions_unique_puzzle(puzzle_text):
    g = Grid.from_string(puzzle_text)
    before = g.copy()
    assert count_solutions(g, 2) == 1
    assert g == before


def test_count_solutions_stops_at_limit():
    assert count_solutions(Grid(), 2) == 2
    assert count_solutions(Grid(), 5) == 5


def test_count_solutions_edge_cases(solution_text):
    assert count_solutions(Grid(), 0) == 0
    assert count_solutions(Grid.from_string(solution_text), 2) == 1
    rows = [[0] * 9 for _ in range(9)]
    rows[3][3] = rows[3][8] = 2
    assert count_solutions(Grid.from_rows(rows), 2) == 0


def test_find_empty_is_row_major(puzzle_text):
    g = Grid.from_string(puzzle_text)
    assert find_empty(g) == (0, 2)
    assert find_empty(Grid()) == (0, 0)


def test_fill_grid(check_solution):
    g = fill_grid(random.Random(3))
    assert g.is_complete()
    assert g.given_count() == 81
    check_solution(g)


def test_fill_grid_is_seeded():
    assert fill_grid(random.Random(11)) == fill_grid(random.Random(11))
    assert fill_grid(random.Random(11)) != fill_grid(random.Random(12))


def test_search_masks_agree_with_rules():
    rng = random.Random(17)
    for _ in range(10):
        rows = fill_grid(rng).rows()
        for r in range(9):
            for c in range(9):
                if rng.random() < 0.6:
                    rows[r][c] = 0
        search = _Search([row[:] for row in rows])
        for r, c in search.empties:
            for v in range(1, 10):
                assert search.allowed(r, c, v) == fits(rows, r, c, v)
