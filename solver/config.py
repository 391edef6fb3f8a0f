from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .errors import SudokuError


class DotDict(dict):
    __getattr__ = dict.get
    __setattr__ = dict.__setitem__
    __delattr__ = dict.__delitem__


@dataclass
class SolverConfig:
    # reject givens that break Sudoku rules before solving
    validate_givens: bool = True
    # None = run until solved or stuck
    max_passes: Optional[int] = None
    max_fish_size: int = 4
    max_tuple_size: int = 4
    # 'block' scans blocks only for hidden singles; 'all' adds rows and columns
    hidden_single_units: str = "block"

    def __post_init__(self):
        if self.hidden_single_units not in ("block", "all"):
            raise SudokuError(f"hidden_single_units must be 'block' or 'all', got {self.hidden_single_units!r}")
        for name in ("max_fish_size", "max_tuple_size"):
            if not 1 <= getattr(self, name) <= 4:
                raise SudokuError(f"{name} must be between 1 and 4")
        if self.max_passes is not None and self.max_passes < 1:
            raise SudokuError("max_passes must be positive")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SolverConfig":
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise SudokuError(f"unknown solver config keys: {', '.join(sorted(unknown))}")
        return cls(**data)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def load_yaml(path: str | Path) -> DotDict:
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    return DotDict(data)


def merge_overrides(cfg: Dict[str, Any], **overrides) -> Dict[str, Any]:
    for k, v in overrides.items():
        if v is None:
            continue
        cfg[k] = v
    return cfg


def load_config(path: str | Path | None = None, **overrides) -> SolverConfig:
    """Read the `solver:` section of a YAML file (or the whole file) and apply non-None overrides."""
    data: Dict[str, Any] = {}
    if path is not None:
        y = load_yaml(path)
        data = dict(y.solver if isinstance(y.solver, dict) else y)
    return SolverConfig.from_dict(merge_overrides(data, **overrides))
