"""Command-line front end: read a puzzle, run the deduction solver, print the trace and the final grid (or a JSON report)."""

# solve_cli.py
# Usage:
#   python -m apps.cli.solve_cli 530070000600195000098000060800060003400803001700020006060000280000419005000080079
#   python -m apps.cli.solve_cli --file puzzle.txt --json
#   python -m apps.cli.solve_cli --file puzzle.txt --config config/solver.yaml --max-passes 50 -v
#
# Exit code: 0 solved, 1 stuck/cancelled, 2 bad input (including unreadable or non-UTF-8 files).

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from solver.config import load_config
from solver.errors import SudokuError
from solver.sudoku_tools import Solver
from types_sudoku import Grid

log = logging.getLogger(__name__)


def parse_puzzle(text: str) -> Grid:
    """81 cells, '0' or '.' for blanks; whitespace and '|', '-', '+' separators are ignored."""
    cells = [ch for ch in text if not ch.isspace() and ch not in "|-+"]
    if len(cells) != 81:
        raise SudokuError(f"expected 81 cells, got {len(cells)}")
    values = []
    for ch in cells:
        if ch == ".":
            values.append(0)
        elif ch in "0123456789":
            values.append(int(ch))
        else:
            raise SudokuError(f"unexpected character {ch!r} in puzzle")
    return [values[r * 9:(r + 1) * 9] for r in range(9)]


def format_grid(grid: Grid) -> str:
    lines = []
    for r, row in enumerate(grid):
        if r and r % 3 == 0:
            lines.append("------+-------+------")
        chunks = [" ".join(str(v) if v else "." for v in row[i:i + 3]) for i in (0, 3, 6)]
        lines.append(" | ".join(chunks))
    return "\n".join(lines)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Solve a 9x9 Sudoku by logic only and explain every step.")
    ap.add_argument("puzzle", nargs="?", help="81-character puzzle string (0 or . for blanks)")
    ap.add_argument("--file", type=str, default=None, help="read the puzzle from a text file")
    ap.add_argument("--config", type=str, default=None, help="YAML solver config")
    ap.add_argument("--max-passes", type=int, default=None)
    ap.add_argument("--all-units", action="store_true", help="scan rows and columns for hidden singles too")
    ap.add_argument("--json", action="store_true", help="print a JSON report instead of text")
    ap.add_argument("-v", "--verbose", action="store_true")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.file:
            text = Path(args.file).read_text(encoding="utf-8")
        elif args.puzzle:
            text = args.puzzle
        else:
            print("error: give a puzzle string or --file", file=sys.stderr)
            return 2
        grid = parse_puzzle(text)
        cfg = load_config(
            args.config,
            max_passes=args.max_passes,
            hidden_single_units="all" if args.all_units else None,
        )
        result = Solver(grid, cfg).solve()
    except (SudokuError, OSError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    if args.json:
        print(json.dumps(result.to_payload(), indent=2))
    else:
        if len(result.trace):
            print(result.trace.format())
            print()
        print(format_grid(result.grid))
        print()
        print(f"{result.status.value} after {result.passes} passes")
    return 0 if result.solved else 1


if __name__ == "__main__":
    sys.exit(main())
