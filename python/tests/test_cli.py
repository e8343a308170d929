"""Command line tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from typer.testing import CliRunner

from pinslide.main import app

FIXTURES_DIR = Path(__file__).resolve().parent.parent.parent / "fixtures"
BOOK = str(FIXTURES_DIR / "puzzles.json")

runner = CliRunner()


def test_list_shows_book_entries() -> None:
    result = runner.invoke(app, ["list", "--book", BOOK])
    assert result.exit_code == 0
    assert "first-steps" in result.output
    assert "no solution" in result.output


def test_solve_from_book() -> None:
    result = runner.invoke(app, ["solve", "-p", "first-steps", "-b", BOOK])
    assert result.exit_code == 0
    assert "Solved in 2 moves" in result.output
    assert "pin left leaves the board" in result.output


def test_solve_from_layout() -> None:
    result = runner.invoke(
        app, ["solve", "--layout", "T3 L0 L1 E M0 B1 M2 X T1", "--pin", "0,0"]
    )
    assert result.exit_code == 0
    assert "Solved in 0 moves" in result.output


def test_unsolvable_puzzle_is_not_an_error() -> None:
    result = runner.invoke(app, ["solve", "-p", "boxed", "-b", BOOK])
    assert result.exit_code == 0
    assert "8 boards visited, max depth 4" in result.output


def test_rich_frontend_reports_solution() -> None:
    result = runner.invoke(app, ["solve", "-p", "glide", "-b", BOOK, "-f", "rich"])
    assert result.exit_code == 0
    assert "Solved in 1 moves" in result.output


def test_bad_layout_exits_with_error() -> None:
    result = runner.invoke(
        app, ["show", "--layout", "L0 L0 L0 L0 L0 L0 L0 L0 L0", "--pin", "0,0"]
    )
    assert result.exit_code == 1


def test_unknown_puzzle_exits_with_error() -> None:
    result = runner.invoke(app, ["show", "-p", "nope", "-b", BOOK])
    assert result.exit_code == 1


def test_show_draws_board() -> None:
    result = runner.invoke(app, ["show", "-p", "doorstep", "-b", BOOK])
    assert result.exit_code == 0
    assert "◉" in result.output


@pytest.mark.parametrize("args", [["list"], ["solve", "-p", "x"], ["show", "-p", "x"]])
def test_unreadable_book_exits_with_error(tmp_path: Path, args: list[str]) -> None:
    book = tmp_path / "book.json"
    book.write_text("{not json")
    result = runner.invoke(app, args + ["-b", str(book)])
    assert result.exit_code == 1
    assert "Error:" in result.output
    assert not isinstance(result.exception, ValueError)
