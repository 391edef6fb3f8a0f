"""Deduction solver: the Solver context and its fixed-priority solve loop, plus tool-friendly wrappers for the API and CLI."""

# sudoku_tools.py
# One Solver owns the grid, the cells, the elimination record and the trace.
# Each pass: recompute candidates (naked singles inline) -> techniques from
# cheapest to most expensive. Any progress restarts the pass; a pass without
# progress ends the loop as STUCK. No guessing.

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Iterable, List, Optional

from types_sudoku import Candidates, Grid, Move, SolvePayload

from .config import SolverConfig
from .eliminator import Eliminator
from .errors import ContradictionError, InvalidPuzzleError
from .solver_core import (
    DIGITS,
    Cell,
    Coordinate,
    RegionKind,
    block_index,
    build_regions,
    clone_grid,
    compute_candidates,
    duplicates_in_unit,
    format_points,
    rc_to_key,
    region_points,
    validate_shape,
)
from .techniques import priority
from .trace import ELIMINATION, PLACEMENT, Technique, TraceEntry, TraceLog

log = logging.getLogger(__name__)


class SolveStatus(str, Enum):
    SOLVED = "solved"
    STUCK = "stuck"
    CANCELLED = "cancelled"


@dataclass
class SolveResult:
    status: SolveStatus
    grid: Grid
    trace: TraceLog
    passes: int
    candidates: Candidates

    @property
    def solved(self) -> bool:
        return self.status is SolveStatus.SOLVED

    def to_payload(self) -> SolvePayload:
        return {
            "status": self.status.value,
            "passes": self.passes,
            "grid": clone_grid(self.grid),
            "candidates": self.candidates,
            "moves": self.trace.to_moves(),
        }


class Solver:
    def __init__(self, grid: Grid, config: Optional[SolverConfig] = None):
        self.config = config or SolverConfig()
        issues = validate_shape(grid)
        if not issues and self.config.validate_givens:
            issues = sanity_check(grid, grid)["issues"]
        if issues:
            raise InvalidPuzzleError(issues)

        self.grid = grid
        self.cells: Dict[Coordinate, Cell] = {}
        for r in range(9):
            for c in range(9):
                p = Coordinate(c, r)
                self.cells[p] = Cell(p, grid[r][c])
        self.regions = build_regions(self.cells)
        self.eliminator = Eliminator(self.cells)
        self.trace = TraceLog()
        self.passes = 0
        self._techniques = priority(self.config)

    @property
    def rows(self):
        return self.regions[RegionKind.ROW]

    @property
    def columns(self):
        return self.regions[RegionKind.COLUMN]

    @property
    def blocks(self):
        return self.regions[RegionKind.BLOCK]

    def cell(self, col: int, row: int) -> Cell:
        return self.cells[Coordinate(col, row)]

    def place(self, p: Coordinate, value: int, technique: Technique, description: str) -> None:
        """Set a forced value and clear the cell's candidates."""
        cell = self.cells[p]
        cell.value = value
        cell.candidates = set()
        self.grid[p.row][p.col] = value
        self.trace.append(TraceEntry(technique, PLACEMENT, (p,), (value,), description, self.passes))
        log.debug("%s %s", technique.label, description)

    def eliminate(
        self,
        points: Iterable[Coordinate],
        values: Iterable[int],
        technique: Technique,
        description: str,
        pattern: Iterable[Coordinate] = (),
        pattern_values: Iterable[int] = (),
    ) -> bool:
        """Eliminate through the Eliminator; a trace entry is written only if something was removed."""
        removed = self.eliminator.remove(points, values)
        if not removed:
            return False
        entry = TraceEntry(
            technique,
            ELIMINATION,
            tuple(pattern),
            tuple(pattern_values),
            description,
            self.passes,
            tuple((p, tuple(vs)) for p, vs in removed.items()),
        )
        self.trace.append(entry)
        log.debug("%s %s (removed from %s)", technique.label, description, format_points(removed))
        return True

    def recompute_candidates(self) -> tuple[bool, bool]:
        """Rebuild candidates of every empty cell, placing naked singles as found.

        Returns (done, changed): done when no cell is empty, changed when a naked single was placed.
        """
        done = True
        changed = False
        for r in range(9):
            for c in range(9):
                p = Coordinate(c, r)
                cell = self.cells[p]
                if cell.value:
                    continue
                done = False
                used = set(self.rows[r].values()) | set(self.columns[c].values())
                used |= set(self.blocks[block_index(p)].values())
                cell.candidates = set(DIGITS) - used - self.eliminator.blacklisted(p)
                if not cell.candidates:
                    raise ContradictionError(p)
                if len(cell.candidates) == 1:
                    v = next(iter(cell.candidates))
                    self.place(p, v, Technique.NAKED_SINGLE, f"{p}: {v}")
                    changed = True
        return done, changed

    def candidates(self) -> Candidates:
        return {p.key: sorted(c.candidates) for p, c in self.cells.items() if c.value == 0}

    def _result(self, status: SolveStatus) -> SolveResult:
        return SolveResult(status, self.grid, self.trace, self.passes, self.candidates())

    def solve(self, should_cancel: Optional[Callable[[], bool]] = None) -> SolveResult:
        """Run passes until solved or no technique makes progress.

        `should_cancel` is only consulted between passes.
        """
        while True:
            if should_cancel is not None and should_cancel():
                log.info("solve cancelled after %d passes", self.passes)
                return self._result(SolveStatus.CANCELLED)
            if self.config.max_passes is not None and self.passes >= self.config.max_passes:
                log.warning("pass budget of %d exhausted, stopping", self.config.max_passes)
                return self._result(SolveStatus.STUCK)

            self.passes += 1
            log.debug("pass %d", self.passes)
            done, changed = self.recompute_candidates()
            if done:
                log.info("solved in %d passes, %d deductions", self.passes, len(self.trace))
                return self._result(SolveStatus.SOLVED)
            if changed:
                continue

            for name, technique in self._techniques:
                if technique(self):
                    log.debug("pass %d: progress from %s", self.passes, name)
                    changed = True
                    break
            if not changed:
                log.info("stuck after %d passes, %d empty cells", self.passes, len(self.candidates()))
                return self._result(SolveStatus.STUCK)


def sanity_check(original: Grid, current: Grid) -> Dict:
    issues = []
    for r in range(9):
        for c in range(9):
            if original[r][c] != 0 and current[r][c] not in (0, original[r][c]):
                issues.append({"type": "given_overwritten", "cell": rc_to_key(r + 1, c + 1),
                               "given": original[r][c], "found": current[r][c]})
    for kind in RegionKind:
        for i in range(9):
            points = region_points(kind, i)
            vals = [current[p.row][p.col] for p in points]
            dups = duplicates_in_unit(vals)
            if dups:
                cells = [p.key for p, v in zip(points, vals) if v in dups]
                unit = f"{kind.value[0]}{i + 1}"
                issues.append({"type": "duplicate", "unit": unit, "digits": sorted(dups), "cells": cells})
    return {"ok": len(issues) == 0, "issues": issues}


def compute_candidates_tool(current: Grid) -> Dict:
    """Compute candidate digits for each empty cell in the current grid. Returns a dict like {'r1c2':[1,2,5], ...}."""
    return {"candidates": compute_candidates(current)}


def solve_tool(current: Grid, config: Optional[SolverConfig] = None) -> SolvePayload:
    """Solve a copy of `current` and return a JSON-ready payload (status, grid, candidates, moves)."""
    return Solver(clone_grid(current), config).solve().to_payload()


def next_moves(current: Grid, max_moves: int = 5, config: Optional[SolverConfig] = None) -> List[Move]:
    """The first `max_moves` deductions the solver would make, without touching `current`."""
    payload = solve_tool(current, config)
    return payload["moves"][:max_moves]
