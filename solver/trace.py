"""Structured, append-only record of every deduction the solver makes."""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional

from types_sudoku import Move

from .solver_core import Coordinate, block_index


class Technique(Enum):
    NAKED_SINGLE = "Naked single"
    HIDDEN_SINGLE = "Hidden single"
    LOCKED_CANDIDATE = "Locked candidate"
    POINTING_COUPLE = "Pointing couple"
    X_WING = "X-Wing"
    SWORDFISH = "Swordfish"
    JELLYFISH = "Jellyfish"
    NAKED_PAIR = "Naked pair"
    NAKED_TRIPLE = "Naked triple"
    NAKED_QUADRUPLE = "Naked quadruple"
    HIDDEN_PAIR = "Hidden pair"
    HIDDEN_TRIPLE = "Hidden triple"
    HIDDEN_QUADRUPLE = "Hidden quadruple"

    @property
    def label(self) -> str:
        return self.value

    @property
    def slug(self) -> str:
        return self.name.lower()


FISH = {2: Technique.X_WING, 3: Technique.SWORDFISH, 4: Technique.JELLYFISH}
NAKED = {2: Technique.NAKED_PAIR, 3: Technique.NAKED_TRIPLE, 4: Technique.NAKED_QUADRUPLE}
HIDDEN = {2: Technique.HIDDEN_PAIR, 3: Technique.HIDDEN_TRIPLE, 4: Technique.HIDDEN_QUADRUPLE}

PLACEMENT = "placement"
ELIMINATION = "elimination"


@dataclass(frozen=True)
class TraceEntry:
    technique: Technique
    kind: str
    coordinates: tuple[Coordinate, ...]
    values: tuple[int, ...]
    description: str
    pass_index: int = 0
    # eliminations only: what was actually removed, per cell
    removed: tuple[tuple[Coordinate, tuple[int, ...]], ...] = ()

    @property
    def is_placement(self) -> bool:
        return self.kind == PLACEMENT

    def format(self) -> str:
        return f"{self.technique.label}\t{self.description}"

    def to_move(self, index: Optional[int] = None) -> Move:
        move: Move = {
            "technique": self.technique.slug,
            "label": self.technique.label,
            "type": self.kind,
            "pass_index": self.pass_index,
            "caption": f"{self.technique.label}: {self.description}",
        }
        if index is not None:
            move["index"] = index
        if self.is_placement:
            p = self.coordinates[0]
            move["cell"] = p.key
            move["digit"] = self.values[0]
            move["highlights"] = {
                "cells": [p.key],
                "row": f"r{p.row + 1}",
                "col": f"c{p.col + 1}",
                "box": f"b{block_index(p) + 1}",
            }
        else:
            move["digits"] = list(self.values)
            move["cells"] = [p.key for p in self.coordinates]
            move["eliminate"] = {p.key: list(vs) for p, vs in self.removed}
            move["highlights"] = {
                "cells": [p.key for p, _ in self.removed],
                "pattern": [p.key for p in self.coordinates],
            }
        return move


class TraceLog:
    """Entries in strict chronological order. Never read back by the engine."""

    def __init__(self):
        self._entries: list[TraceEntry] = []

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[TraceEntry]:
        return iter(self._entries)

    def __getitem__(self, i: int) -> TraceEntry:
        return self._entries[i]

    def append(self, entry: TraceEntry) -> None:
        self._entries.append(entry)

    def filter(self, technique: Technique) -> list[TraceEntry]:
        return [e for e in self._entries if e.technique is technique]

    def counts(self) -> dict[str, int]:
        out: dict[str, int] = defaultdict(int)
        for e in self._entries:
            out[e.technique.slug] += 1
        return dict(out)

    def to_moves(self) -> list[Move]:
        return [e.to_move(i) for i, e in enumerate(self._entries, start=1)]

    def format(self) -> str:
        return "\n".join(e.format() for e in self._entries)
