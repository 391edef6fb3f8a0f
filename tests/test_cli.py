# tests/test_cli.py
import json

import pytest

from apps.cli.solve_cli import format_grid, main, parse_puzzle
from solver.errors import SudokuError

from conftest import EASY, EASY_SOLUTION, grid_from


def test_parse_puzzle_accepts_dots_and_separators():
    text = "\n".join(
        "|".join(EASY[r * 9 + i * 3:r * 9 + i * 3 + 3] for i in range(3)) for r in range(9)
    ).replace("0", ".")
    assert parse_puzzle(text) == grid_from(EASY)


@pytest.mark.parametrize("text", ["123", EASY[:-1] + "x", EASY[:-1] + "\u00b2"])
def test_parse_puzzle_rejects_bad_input(text):
    with pytest.raises(SudokuError):
        parse_puzzle(text)


def test_format_grid():
    lines = format_grid(grid_from(EASY)).splitlines()
    assert lines[0] == "5 3 . | . 7 . | . . ."
    assert lines[3] == "------+-------+------"
    assert len(lines) == 11


def test_main_solves(capsys):
    assert main([EASY]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Naked single\t")
    assert "solved after" in out


def test_main_json(capsys):
    assert main([EASY, "--json"]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["status"] == "solved"
    assert payload["grid"] == grid_from(EASY_SOLUTION)


def test_main_reads_file_and_reports_stuck(tmp_path, capsys):
    path = tmp_path / "empty.txt"
    path.write_text("0" * 81, encoding="utf-8")
    assert main(["--file", str(path)]) == 1
    assert "stuck after 1 passes" in capsys.readouterr().out


def test_main_bad_input(capsys):
    assert main(["5" * 81]) == 2
    assert "error:" in capsys.readouterr().err
    assert main([]) == 2


def test_main_rejects_non_ascii_digit(capsys):
    assert main([EASY[:-1] + "\u00b2"]) == 2
    assert "error:" in capsys.readouterr().err


def test_main_rejects_file_that_is_not_utf8(tmp_path, capsys):
    path = tmp_path / "puzzle.bin"
    path.write_bytes(b"\xff" * 81)
    assert main(["--file", str(path)]) == 2
    assert "error:" in capsys.readouterr().err
