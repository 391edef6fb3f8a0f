# tests/test_api.py
from fastapi.testclient import TestClient

from apps.api.sudoku_tool_api import ConfigModel, app
from solver.config import SolverConfig

from conftest import EASY_SOLUTION, grid_from

client = TestClient(app)


def test_solve(easy_grid):
    resp = client.post("/solve", json={"grid": easy_grid})
    assert resp.status_code == 200
    body = resp.json()
    assert body["status"] == "solved"
    assert body["grid"] == grid_from(EASY_SOLUTION)
    assert body["moves"][0]["technique"] == "naked_single"


def test_solve_stuck_with_max_moves(rectangle_grid):
    resp = client.post("/solve", json={"grid": rectangle_grid, "max_moves": 1})
    body = resp.json()
    assert body["status"] == "stuck"
    assert body["moves"] == []
    assert body["candidates"]["r1c4"] == [6, 7]


def test_solve_with_config(easy_grid):
    resp = client.post("/solve", json={"grid": easy_grid, "config": {"max_passes": 1}})
    assert resp.json()["status"] == "stuck"


def test_solve_rejects_duplicates(easy_grid):
    easy_grid[0][2] = 5
    resp = client.post("/solve", json={"grid": easy_grid})
    assert resp.status_code == 422
    detail = resp.json()["detail"]
    assert any(i["type"] == "duplicate" for i in detail["issues"])


def test_bad_config_is_422(easy_grid):
    resp = client.post("/solve", json={"grid": easy_grid, "config": {"hidden_single_units": "rows"}})
    assert resp.status_code == 422


def test_config_model_mirrors_solver_config():
    assert ConfigModel().model_dump() == SolverConfig().to_dict()


def test_unknown_config_key_is_422(easy_grid):
    resp = client.post("/solve", json={"grid": easy_grid, "config": {"max_pases": 1}})
    assert resp.status_code == 422


def test_negative_max_moves_is_422(easy_grid):
    resp = client.post("/solve", json={"grid": easy_grid, "max_moves": -1})
    assert resp.status_code == 422


def test_max_moves_zero_returns_no_moves(easy_grid):
    resp = client.post("/solve", json={"grid": easy_grid, "max_moves": 0})
    body = resp.json()
    assert body["status"] == "solved"
    assert body["moves"] == []


def test_compute_candidates(easy_grid):
    resp = client.post("/compute_candidates", json={"grid": easy_grid})
    assert resp.json()["candidates"]["r5c5"] == [5]


def test_compute_candidates_shape_checked():
    resp = client.post("/compute_candidates", json={"grid": [[0] * 9]})
    assert resp.status_code == 422


def test_sanity_check(easy_grid):
    current = [row[:] for row in easy_grid]
    current[0][2] = 5
    resp = client.post("/sanity_check", json={"original": easy_grid, "current": current})
    body = resp.json()
    assert body["ok"] is False
    assert body["issues"][0]["type"] == "duplicate"
