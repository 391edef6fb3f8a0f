"""Deduction techniques, cheapest first. Each takes the Solver context and returns True on progress.

Placements go through ``solver.place``; every elimination goes through
``solver.eliminate``, which also writes the trace entry only when a live
candidate was really removed.
"""

from __future__ import annotations

from itertools import combinations
from typing import TYPE_CHECKING, Callable

from .solver_core import DIGITS, Coordinate, Region, RegionKind, block_index, format_points, format_values
from .trace import FISH, HIDDEN, NAKED, Technique

if TYPE_CHECKING:
    from .config import SolverConfig
    from .sudoku_tools import Solver

TechniqueFn = Callable[["Solver"], bool]


def _unique(points) -> list[Coordinate]:
    return list(dict.fromkeys(points))


def _units(solver: Solver) -> list[Region]:
    """Block, row and column of each index, in that order."""
    out = []
    for i in range(9):
        out.extend((solver.blocks[i], solver.rows[i], solver.columns[i]))
    return out


def hidden_singles(solver: Solver) -> bool:
    """A digit with exactly one possible cell in a unit goes there.

    Scans blocks only unless ``hidden_single_units`` is 'all'.
    """
    units = list(solver.blocks)
    if solver.config.hidden_single_units == "all":
        units += list(solver.rows) + list(solver.columns)
    for region in units:
        for v in sorted(DIGITS):
            points = region.coordinates_with_candidate(v)
            if len(points) == 1:
                solver.place(points[0], v, Technique.HIDDEN_SINGLE, f"{points[0]}: {v} (only place in {region.label})")
                return True
    return False


def locked_candidates(solver: Solver) -> bool:
    """Row/column locks a block: a digit confined to one block within a line is removed from the rest of that block."""
    changed = False
    for kind, lines in ((RegionKind.ROW, solver.rows), (RegionKind.COLUMN, solver.columns)):
        for line in lines:
            for v in sorted(DIGITS):
                with_v = line.coordinates_with_candidate(v)
                if len(with_v) not in (2, 3):
                    continue
                blocks = {block_index(p) for p in with_v}
                if len(blocks) != 1:
                    continue
                b = blocks.pop()
                targets = [p for p in solver.blocks[b].points if p not in with_v]
                description = f"{kind.value.capitalize()} {line.index} locks block {b}, {format_points(with_v)}: {v}"
                if solver.eliminate(targets, [v], Technique.LOCKED_CANDIDATE, description, with_v, [v]):
                    changed = True
    return changed


def _line_in_block(region: Region, by_rows: bool, j: int) -> list[Coordinate]:
    if by_rows:
        return [p for p in region.points if p.row % 3 == j]
    return [p for p in region.points if p.col % 3 == j]


def _pointing(solver: Solver, band: list[Region], by_rows: bool, band_index: int) -> bool:
    changed = False
    for k, region in enumerate(band):
        line_cands = []
        for j in range(3):
            vs = set()
            for p in _line_in_block(region, by_rows, j):
                vs |= solver.cells[p].candidates
            line_cands.append(vs)
        for j in range(3):
            distinct = line_cands[j] - line_cands[(j + 1) % 3] - line_cands[(j + 2) % 3]
            if not distinct:
                continue
            values = sorted(distinct)
            targets = []
            for other in range(3):
                if other != k:
                    targets.extend(_line_in_block(band[other], by_rows, j))
            line = "row" if by_rows else "column"
            pattern = [p for p in _line_in_block(region, by_rows, j) if solver.cells[p].candidates & distinct]
            description = (
                f"Starting in block{line} {band_index}'s block {k}, {line} {j}: {format_values(values)}"
            )
            if solver.eliminate(targets, values, Technique.POINTING_COUPLE, description, pattern, values):
                changed = True
    return changed


def pointing_couples(solver: Solver) -> bool:
    """A digit confined to one row (column) inside a block is removed from that row (column) in the band's other blocks."""
    changed = False
    for i in range(3):
        block_row = [solver.blocks[r + i * 3] for r in range(3)]
        block_col = [solver.blocks[i + r * 3] for r in range(3)]
        if _pointing(solver, block_row, True, i):
            changed = True
        if _pointing(solver, block_col, False, i):
            changed = True
    return changed


def _fish_at(solver: Solver, v: int, n: int, combo, base: list[Region], cover: list[Region], by_rows: bool) -> bool:
    points = [base[i].coordinates_with_candidate(v) for i in combo]
    lengths = [len(ps) for ps in points]
    if max(lengths) != n or min(lengths) == 0:
        return False
    pattern = _unique(p for ps in points for p in ps)
    cover_idx = sorted({p.col if by_rows else p.row for p in pattern})
    if len(cover_idx) > n:
        return False
    targets = [p for i in cover_idx for p in cover[i].points if p not in pattern]
    return solver.eliminate(targets, [v], FISH[n], f"{format_points(pattern)}: {v}", pattern, [v])


def find_fish(solver: Solver, n: int) -> bool:
    """X-Wing (2), Swordfish (3), Jellyfish (4): a digit locked into n columns across n rows, or vice versa.

    Each combination of line indices is tried as rows, then as columns.
    """
    rows, columns = list(solver.rows), list(solver.columns)
    for v in sorted(DIGITS):
        for combo in combinations(range(9), n):
            if _fish_at(solver, v, n, combo, rows, columns, True):
                return True
            if _fish_at(solver, v, n, combo, columns, rows, False):
                return True
    return False


def find_naked(solver: Solver, region: Region, n: int) -> bool:
    if region.unsolved_count() == n:
        return False
    open_idx = [i for i, c in enumerate(region.cells) if len(c.candidates) > 1]
    for idx in combinations(open_idx, n):
        combo = set()
        for i in idx:
            combo |= region.cells[i].candidates
        if len(combo) != n:
            continue
        values = sorted(combo)
        pattern = [region.points[i] for i in idx]
        targets = [p for i, p in enumerate(region.points) if i not in idx]
        if solver.eliminate(targets, values, NAKED[n], f"{format_points(pattern)}: {format_values(values)}", pattern, values):
            return True
    return False


def find_hidden(solver: Solver, region: Region, n: int) -> bool:
    if region.unsolved_count() == n:
        return False
    for values in combinations(sorted(DIGITS), n):
        cells = _unique(p for v in values for p in region.coordinates_with_candidate(v))
        if len(cells) != n:
            continue
        seen = set()
        for p in cells:
            seen |= solver.cells[p].candidates
        # already a naked tuple, or a digit of the combo never shows up
        if len(seen) == n or not set(values) <= seen:
            continue
        others = sorted(DIGITS - set(values))
        if solver.eliminate(cells, others, HIDDEN[n], f"{format_points(cells)}: {format_values(values)}", cells, values):
            return True
    return False


def naked_tuples(solver: Solver, n: int) -> bool:
    return any(find_naked(solver, region, n) for region in _units(solver))


def hidden_tuples(solver: Solver, n: int) -> bool:
    return any(find_hidden(solver, region, n) for region in _units(solver))


def priority(config: SolverConfig) -> list[tuple[str, TechniqueFn]]:
    """Techniques tried after naked singles, cheapest first."""
    table: list[tuple[str, TechniqueFn]] = [
        ("hidden_singles", hidden_singles),
        ("locked_candidates", locked_candidates),
        ("pointing_couples", pointing_couples),
    ]
    for n in range(2, config.max_fish_size + 1):
        table.append((FISH[n].slug, lambda s, n=n: find_fish(s, n)))
    for n in range(2, config.max_tuple_size + 1):
        table.append((NAKED[n].slug, lambda s, n=n: naked_tuples(s, n)))
        table.append((HIDDEN[n].slug, lambda s, n=n: hidden_tuples(s, n)))
    return table
