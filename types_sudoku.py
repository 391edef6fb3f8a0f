# types_sudoku.py
from __future__ import annotations

from typing import Any, TypedDict

Grid = list[list[int]]
"""A 9x9 Sudoku grid as rows of integers (0 = empty), indexed grid[row][col]."""

Candidates = dict[str, list[int]]
"""Map from cell key (e.g., 'r1c1') to a list of candidate digits (1..9)."""


class Move(TypedDict, total=False):
    """One deduction from the solve trace, in the shape hosts render and serialize."""

    index: int  # 1-based order in the trace
    pass_index: int  # solve-loop pass that produced it
    technique: str  # e.g., 'naked_single', 'hidden_pair', 'x_wing'
    label: str  # human label, e.g., 'Hidden pair'
    type: str  # 'placement' or 'elimination'
    digit: int  # placements: the digit placed
    digits: list[int]  # eliminations: the digits involved in the pattern
    cell: str  # placements: target cell (e.g., 'r4c7')
    cells: list[str]  # eliminations: cells forming the pattern
    eliminate: dict[str, list[int]]  # eliminations: cell -> digits removed there
    highlights: dict[str, Any]  # UI hints for overlay rendering
    caption: str  # human-friendly explanation


class SolvePayload(TypedDict):
    status: str  # 'solved', 'stuck' or 'cancelled'
    passes: int
    grid: Grid
    candidates: Candidates
    moves: list[Move]
