"""Core gameplay logic — processes moves and checks the win condition."""

from __future__ import annotations

from pinslide.backend.engine.gamestate import GameState
from pinslide.backend.models.board import Board
from pinslide.backend.models.move import Move
from pinslide.backend.models.position import SOLUTION, Cell, Direction


class GamePlay:
    """Orchestrates a single game session on one starting board."""

    def __init__(self, board: Board) -> None:
        self.start = board
        self.state = GameState(board)

    def restart(self) -> None:
        self.state = GameState(self.start)

    # -- movement -------------------------------------------------------------

    def slide(self, direction: Direction) -> bool:
        """Slide the empty cell one step in *direction*.

        Returns True if the move was valid.
        """
        return self.move(Move.slide(direction))

    def advance_pin(self, direction: Direction) -> bool:
        """Send the pin off in *direction*.

        Returns True if the pin moved or left the board.
        """
        return self.move(Move.advance(direction))

    def move(self, move: Move) -> bool:
        if self.is_won:
            return False
        board = self.state.board

        if move.pin:
            target = board.move_pin(move.direction)
            if target is SOLUTION:
                self.state.escape()
                return True
            if not isinstance(target, Cell):
                return False
        elif not board.can_slide(move.direction):
            return False

        self.state.advance(board.apply(move))
        return True

    # -- queries --------------------------------------------------------------

    @property
    def board(self) -> Board:
        return self.state.board

    @property
    def is_won(self) -> bool:
        return self.state.escaped
