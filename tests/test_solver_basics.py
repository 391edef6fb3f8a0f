# tests/test_solver_basics.py
from solver.sudoku_tools import compute_candidates_tool, next_moves, sanity_check, solve_tool

from conftest import EASY_SOLUTION, grid_from


def test_compute_candidates_basic(easy_grid):
    cand = compute_candidates_tool(easy_grid)["candidates"]
    # r5c5 sees 8, 3, 1, 4 in its row, 7, 9, 6, 2, 1, 8 in its column and 6, 8, 3, 2 in its box
    assert cand["r5c5"] == [5]
    assert "r1c1" not in cand  # given
    assert all(1 <= d <= 9 for opts in cand.values() for d in opts)


def test_next_moves_does_not_touch_grid(easy_grid):
    before = [row[:] for row in easy_grid]
    moves = next_moves(easy_grid, max_moves=3)
    assert easy_grid == before
    assert len(moves) == 3
    m0 = moves[0]
    assert m0["type"] == "placement"
    assert m0["technique"] == "naked_single"
    assert "cell" in m0 and "digit" in m0
    assert m0["index"] == 1


def test_solve_tool_payload(easy_grid):
    payload = solve_tool(easy_grid)
    assert payload["status"] == "solved"
    assert payload["grid"] == grid_from(EASY_SOLUTION)
    assert payload["candidates"] == {}
    assert len(payload["moves"]) == sum(row.count(0) for row in easy_grid)


def test_sanity_check_reports_duplicates_and_overwrites(easy_grid):
    current = [row[:] for row in easy_grid]
    current[0][0] = 6  # given 5 overwritten, and clashes with the 6 at r2c1
    report = sanity_check(easy_grid, current)
    assert not report["ok"]
    types = {i["type"] for i in report["issues"]}
    assert types == {"given_overwritten", "duplicate"}
    units = {i["unit"] for i in report["issues"] if i["type"] == "duplicate"}
    assert "b1" in units


def test_sanity_check_ok(easy_grid):
    assert sanity_check(easy_grid, easy_grid) == {"ok": True, "issues": []}
