"""Play session tests."""

from __future__ import annotations

from pinslide.backend.engine.gameplay import GamePlay
from pinslide.backend.models.board import Board
from pinslide.backend.models.move import Move
from pinslide.backend.models.position import Cell, Direction

FIRST_STEPS = ["E", "L1", "L0", "T3", "M0", "B1", "M2", "X", "T1"]


def _game() -> GamePlay:
    return GamePlay(Board.from_flat(FIRST_STEPS, (0, 1)))


def test_illegal_moves_are_rejected_without_counting() -> None:
    game = _game()
    assert not game.slide(Direction.RIGHT)
    assert not game.advance_pin(Direction.LEFT)
    assert game.state.moves == 0
    assert game.board == game.start


def test_playing_the_solution_wins() -> None:
    game = _game()
    assert game.slide(Direction.DOWN)
    assert game.advance_pin(Direction.LEFT)
    assert game.board.pin == Cell(0, 0)
    assert not game.is_won

    assert game.advance_pin(Direction.LEFT)

    assert game.is_won
    assert game.state.moves == 3
    # The last board is the one the pin left from.
    assert game.board.pin == Cell(0, 0)
    assert not game.move(Move.slide(Direction.RIGHT))


def test_restart_returns_to_start() -> None:
    game = _game()
    game.slide(Direction.DOWN)
    game.restart()
    assert game.board == game.start
    assert game.state.moves == 0
    assert not game.is_won


def test_clock_stops_on_escape() -> None:
    game = GamePlay(Board.from_flat(["T3", "L0", "L1", "E", "M0", "B1", "M2", "X", "T1"], (0, 0)))
    game.advance_pin(Direction.LEFT)
    elapsed = game.state.elapsed_time
    assert game.state.elapsed_time == elapsed
