"""Pin Slide command line.

Usage::

    pinslide list                          # puzzles in the book
    pinslide show -p corner                # draw a puzzle
    pinslide solve -p corner -f rich       # solve and print the moves
    pinslide solve --layout "E L1 L0 T3 M0 B1 M2 X T1" --pin 0,1
    pinslide play -p corner                # play it yourself
"""

from __future__ import annotations

import importlib
import logging
from enum import StrEnum
from pathlib import Path
from typing import Optional

import typer

from pinslide.backend.engine.gamesolver import Solver
from pinslide.backend.exceptions import PuzzleError
from pinslide.backend.models.board import Board
from pinslide.backend.models.puzzle_book import PuzzleBook
from pinslide.frontend.cli.glyphs import render_board
from pinslide.utils.logger import configure_logging, get_logger

ROOT = Path(__file__).resolve().parent  # python/pinslide/
PROJECT_ROOT = ROOT.parent.parent
DEFAULT_BOOK = PROJECT_ROOT / "fixtures" / "puzzles.json"

logger = get_logger(__name__)


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    vanilla = "vanilla"
    rich = "rich"


_RUNNERS = {
    Frontend.vanilla: "pinslide.frontend.cli.vanilla.app",
    Frontend.rich: "pinslide.frontend.cli.rich.app",
}


# -- helpers ------------------------------------------------------------------


def _parse_pin(raw: str) -> tuple[int, int]:
    try:
        row, col = (int(part) for part in raw.split(","))
    except ValueError:
        raise typer.BadParameter(f"expected ROW,COL, got {raw!r}") from None
    return row, col


def _fail(exc: PuzzleError) -> typer.Exit:
    typer.secho(f"Error: {exc}", fg=typer.colors.RED, err=True)
    return typer.Exit(code=1)


def _load_board(
    puzzle: Optional[str],
    book: Path,
    layout: Optional[str],
    pin: Optional[str],
) -> tuple[Board, str]:
    """Build the starting board from a book entry or an explicit layout."""
    try:
        if layout is not None:
            if pin is None:
                raise typer.BadParameter("--pin is required with --layout")
            return Board.from_text(layout, _parse_pin(pin)), "Custom puzzle"
        if puzzle is None:
            raise typer.BadParameter("give --puzzle or --layout")
        entry = PuzzleBook(book).get(puzzle)
        return entry.board(), entry.id
    except PuzzleError as exc:
        raise _fail(exc) from exc


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False, help="Pin Slide puzzle solver.")

PuzzleOpt = typer.Option(None, "-p", "--puzzle", help="Puzzle id from the book.")
BookOpt = typer.Option(DEFAULT_BOOK, "-b", "--book", help="Puzzle book (JSON).")
LayoutOpt = typer.Option(
    None, "--layout", help="Nine tile codes, row-major, e.g. 'E L1 L0 T3 M0 B1 M2 X T1'."
)
PinOpt = typer.Option(None, "--pin", help="Pin cell as ROW,COL.")
FrontendOpt = typer.Option(Frontend.vanilla, "-f", "--frontend", help="Output style.")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Debug logging."),
) -> None:
    """Pin Slide puzzle solver."""
    configure_logging(logging.DEBUG if verbose else logging.WARNING)


@app.command("list")
def list_puzzles(book: Path = BookOpt) -> None:
    """List the puzzles in the book."""
    try:
        entries = PuzzleBook(book).entries()
    except PuzzleError as exc:
        raise _fail(exc) from exc
    if not entries:
        typer.echo(f"No puzzles in {book}.")
        return
    for entry in entries:
        expected = "no solution" if entry.moves is None else f"{entry.moves} moves"
        typer.echo(f"  {entry.id:<16} {expected:<12} {entry.note}")


@app.command()
def show(
    puzzle: Optional[str] = PuzzleOpt,
    book: Path = BookOpt,
    layout: Optional[str] = LayoutOpt,
    pin: Optional[str] = PinOpt,
) -> None:
    """Draw a puzzle."""
    board, _ = _load_board(puzzle, book, layout, pin)
    typer.echo(render_board(board))


@app.command()
def solve(
    puzzle: Optional[str] = PuzzleOpt,
    book: Path = BookOpt,
    layout: Optional[str] = LayoutOpt,
    pin: Optional[str] = PinOpt,
    frontend: Frontend = FrontendOpt,
) -> None:
    """Search for the shortest way out and print it."""
    board, name = _load_board(puzzle, book, layout, pin)
    logger.info("Solving %s", name)
    result = Solver.solve(board)
    mod = importlib.import_module(_RUNNERS[frontend])
    mod.show_result(board, result)


@app.command()
def play(
    puzzle: Optional[str] = PuzzleOpt,
    book: Path = BookOpt,
    layout: Optional[str] = LayoutOpt,
    pin: Optional[str] = PinOpt,
    frontend: Frontend = FrontendOpt,
) -> None:
    """Play a puzzle interactively."""
    board, name = _load_board(puzzle, book, layout, pin)
    mod = importlib.import_module(_RUNNERS[frontend])
    mod.run(board, title=name)


if __name__ == "__main__":
    app()
