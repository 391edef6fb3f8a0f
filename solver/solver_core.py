"""Core Sudoku model used by the deduction techniques: coordinates, cells, regions, and index math."""

# solver_core.py
# Board model for the deduction engine:
# - Coordinate (col, row), 0-based, hashable map key
# - Cell: value + live candidate set
# - Region: read-through view over 9 cells (row, column or block)
# Grid is 9x9 list of lists of ints (0..9), indexed grid[row][col]. 0 = blank.

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, NamedTuple

from types_sudoku import Grid

DIGITS = frozenset(range(1, 10))


class Coordinate(NamedTuple):
    col: int
    row: int

    @property
    def key(self) -> str:
        return rc_to_key(self.row + 1, self.col + 1)

    def __str__(self) -> str:
        return self.key


class RegionKind(Enum):
    ROW = "row"
    COLUMN = "column"
    BLOCK = "block"


def rc_to_key(r: int, c: int) -> str:
    return f"r{r}c{c}"


def key_to_rc(key: str) -> tuple[int, int]:
    r = int(key.split("c")[0][1:])
    c = int(key.split("c")[1])
    return (r, c)


def key_to_coordinate(key: str) -> Coordinate:
    r, c = key_to_rc(key)
    return Coordinate(c - 1, r - 1)


def clone_grid(grid: Grid) -> Grid:
    return [row[:] for row in grid]


def block_index(p: Coordinate) -> int:
    """Blocks are numbered 0..8 row-major in 3-cell steps."""
    return (p.col // 3) + 3 * (p.row // 3)


def region_points(kind: RegionKind, index: int) -> tuple[Coordinate, ...]:
    if kind is RegionKind.ROW:
        return tuple(Coordinate(c, index) for c in range(9))
    if kind is RegionKind.COLUMN:
        return tuple(Coordinate(index, r) for r in range(9))
    r0 = 3 * (index // 3)
    c0 = 3 * (index % 3)
    return tuple(Coordinate(c0 + j, r0 + i) for i in range(3) for j in range(3))


def format_points(points: Iterable[Coordinate]) -> str:
    return ", ".join(p.key for p in points)


def format_values(values: Iterable[int]) -> str:
    return ", ".join(str(v) for v in values)


@dataclass
class Cell:
    point: Coordinate
    value: int = 0
    candidates: set[int] = field(default_factory=set)

    @property
    def is_empty(self) -> bool:
        return self.value == 0


class Region:
    """A fixed set of 9 cells. All queries read live cell state."""

    def __init__(self, kind: RegionKind, index: int, cells: dict[Coordinate, Cell]):
        self.kind = kind
        self.index = index
        self.points = region_points(kind, index)
        self.cells = tuple(cells[p] for p in self.points)

    def __repr__(self) -> str:
        return f"Region({self.kind.value}, {self.index})"

    @property
    def label(self) -> str:
        return f"{self.kind.value} {self.index}"

    def values(self) -> list[int]:
        return [c.value for c in self.cells]

    def candidate_sets(self) -> list[set[int]]:
        return [c.candidates for c in self.cells]

    def cells_with_candidates(self, values: Iterable[int]) -> list[Cell]:
        vs = set(values)
        return [c for c in self.cells if vs <= c.candidates]

    def coordinates_with_candidate(self, v: int) -> list[Coordinate]:
        return [c.point for c in self.cells if v in c.candidates]

    def unsolved_count(self) -> int:
        """Cells with more than one live candidate."""
        return sum(1 for c in self.cells if len(c.candidates) > 1)


def build_regions(cells: dict[Coordinate, Cell]) -> dict[RegionKind, tuple[Region, ...]]:
    return {kind: tuple(Region(kind, i, cells) for i in range(9)) for kind in RegionKind}


def validate_shape(grid: Grid) -> list[dict]:
    """Structural problems with an input grid (wrong size, bad entries)."""
    issues = []
    if not isinstance(grid, list) or len(grid) != 9:
        return [{"type": "shape", "detail": "grid must have 9 rows"}]
    for r, row in enumerate(grid, start=1):
        if not isinstance(row, list) or len(row) != 9:
            issues.append({"type": "shape", "detail": f"row {r} must have 9 entries"})
            continue
        for c, v in enumerate(row, start=1):
            if isinstance(v, bool) or not isinstance(v, int) or not 0 <= v <= 9:
                issues.append({"type": "value", "cell": rc_to_key(r, c), "found": v})
    return issues


def duplicates_in_unit(vals: Iterable[int]) -> set[int]:
    seen = set()
    dups = set()
    for v in vals:
        if v == 0:
            continue
        if v in seen:
            dups.add(v)
        seen.add(v)
    return dups


def compute_candidates(grid: Grid) -> dict[str, list[int]]:
    """Plain candidates from placed values only, keyed by cell (e.g. 'r1c2')."""
    cand = {}
    for r in range(9):
        for c in range(9):
            if grid[r][c] == 0:
                used = set(grid[r]) | {grid[i][c] for i in range(9)}
                r0, c0 = 3 * (r // 3), 3 * (c // 3)
                used |= {grid[r0 + i][c0 + j] for i in range(3) for j in range(3)}
                cand[rc_to_key(r + 1, c + 1)] = sorted(DIGITS - used)
    return cand
