# sudoku_tool_api.py
# Optional FastAPI wrapper for the tool functions.
# Run with: uvicorn apps.api.sudoku_tool_api:app --reload
from dataclasses import fields
from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, ConfigDict, Field, create_model
from typing import List, Optional, get_type_hints

from solver.config import SolverConfig
from solver.errors import InvalidPuzzleError, SudokuError
from solver.solver_core import validate_shape
from solver.sudoku_tools import sanity_check, compute_candidates_tool, solve_tool

app = FastAPI(title="Sudoku Deduction Solver API")

class GridModel(BaseModel):
    grid: List[List[int]]

class SanityRequest(BaseModel):
    original: List[List[int]]
    current: List[List[int]]

# request body for SolverConfig: same fields and defaults, unknown keys rejected
_config_hints = get_type_hints(SolverConfig)
ConfigModel = create_model(
    "ConfigModel",
    __config__=ConfigDict(extra="forbid"),
    **{f.name: (_config_hints[f.name], f.default) for f in fields(SolverConfig)},
)

class SolveRequest(BaseModel):
    grid: List[List[int]]
    config: Optional[ConfigModel] = None
    max_moves: Optional[int] = Field(default=None, ge=0)

def _error(e: SudokuError):
    detail = {"error": str(e)}
    if isinstance(e, InvalidPuzzleError):
        detail["issues"] = e.issues
    return HTTPException(status_code=422, detail=detail)

def _check_shape(grid):
    issues = validate_shape(grid)
    if issues:
        raise _error(InvalidPuzzleError(issues))

@app.post("/sanity_check")
def api_sanity(payload: SanityRequest):
    _check_shape(payload.original)
    _check_shape(payload.current)
    return sanity_check(payload.original, payload.current)

@app.post("/compute_candidates")
def api_cands(payload: GridModel):
    _check_shape(payload.grid)
    return compute_candidates_tool(payload.grid)

@app.post("/solve")
def api_solve(req: SolveRequest):
    try:
        cfg = SolverConfig(**req.config.model_dump()) if req.config else None
        result = solve_tool(req.grid, cfg)
    except SudokuError as e:
        raise _error(e)
    if req.max_moves is not None:
        result["moves"] = result["moves"][:req.max_moves]
    return result
