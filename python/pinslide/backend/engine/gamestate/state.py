"""Tracks the mutable state of a game in progress."""

from __future__ import annotations

import time

from pinslide.backend.models.board import Board


class GameState:
    """Holds the current board, move counter, elapsed time and exit flag."""

    def __init__(self, board: Board) -> None:
        self.board = board
        self.moves: int = 0
        self.escaped: bool = False
        self._start_time: float = time.time()
        self._elapsed_banked: float = 0.0
        self._running: bool = True

    # -- time tracking --------------------------------------------------------

    @property
    def elapsed_time(self) -> float:
        if self._running:
            return self._elapsed_banked + (time.time() - self._start_time)
        return self._elapsed_banked

    def pause(self) -> None:
        if self._running:
            self._elapsed_banked += time.time() - self._start_time
            self._running = False

    # -- moves ----------------------------------------------------------------

    def advance(self, board: Board) -> None:
        self.board = board
        self.moves += 1

    def escape(self) -> None:
        self.escaped = True
        self.moves += 1
        self.pause()
