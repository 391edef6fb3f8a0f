"""The single mutation path for candidates, plus the persistent elimination record ("blacklist")."""

from __future__ import annotations

import logging
from collections import defaultdict
from typing import Iterable

from .solver_core import Cell, Coordinate

log = logging.getLogger(__name__)


class Eliminator:
    def __init__(self, cells: dict[Coordinate, Cell]):
        self.cells = cells
        # Values proven impossible by techniques beyond what placed values imply.
        # Only ever grows; consulted on every candidate recomputation.
        self.blacklist: dict[Coordinate, set[int]] = defaultdict(set)

    def blacklisted(self, point: Coordinate) -> frozenset[int]:
        return frozenset(self.blacklist.get(point, ()))

    def remove(self, points: Iterable[Coordinate], values: Iterable[int]) -> dict[Coordinate, list[int]]:
        """Remove each value from each cell where it is a live candidate.

        Returns what was actually removed, per coordinate (empty when nothing changed).
        """
        values = list(values)
        removed: dict[Coordinate, list[int]] = {}
        for p in points:
            cell = self.cells[p]
            for v in values:
                if v in cell.candidates:
                    cell.candidates.discard(v)
                    self.blacklist[p].add(v)
                    removed.setdefault(p, []).append(v)
        if removed:
            log.debug("eliminated %s", {p.key: vs for p, vs in removed.items()})
        return removed

    def eliminate(self, points: Iterable[Coordinate], values: Iterable[int]) -> bool:
        return bool(self.remove(points, values))
