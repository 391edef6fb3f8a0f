"""Logic-only Sudoku solver with a structured deduction trace."""

from .config import SolverConfig, load_config
from .errors import ContradictionError, InvalidPuzzleError, SudokuError
from .sudoku_tools import (
    SolveResult,
    SolveStatus,
    Solver,
    compute_candidates_tool,
    next_moves,
    sanity_check,
    solve_tool,
)
from .trace import Technique, TraceEntry, TraceLog

__all__ = [
    "ContradictionError",
    "InvalidPuzzleError",
    "SolveResult",
    "SolveStatus",
    "Solver",
    "SolverConfig",
    "SudokuError",
    "Technique",
    "TraceEntry",
    "TraceLog",
    "compute_candidates_tool",
    "load_config",
    "next_moves",
    "sanity_check",
    "solve_tool",
]
