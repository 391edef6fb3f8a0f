"""Exceptions raised by the solver. Techniques themselves never raise; they report progress as bool."""

from __future__ import annotations


class SudokuError(Exception):
    """Base class for solver errors."""


class InvalidPuzzleError(SudokuError):
    def __init__(self, issues: list[dict]):
        self.issues = issues
        kinds = sorted({i["type"] for i in issues})
        super().__init__(f"invalid puzzle: {len(issues)} issue(s) ({', '.join(kinds)})")


class ContradictionError(SudokuError):
    """An empty cell was left with no candidates."""

    def __init__(self, point):
        self.point = point
        super().__init__(f"no candidates left for {point}")
