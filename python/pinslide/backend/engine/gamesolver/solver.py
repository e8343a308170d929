"""Breadth-first solver for the pin slide puzzle.

Boards are explored level by level.  Every distinct board is stored once in
an arena of :class:`SearchNode` values; the frontier and the visited index
refer to nodes by their arena id, and each node points at its parent by id.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Optional

from pinslide.backend.exceptions import GeometryError
from pinslide.backend.models.board import Board
from pinslide.backend.models.move import Move
from pinslide.utils.logger import get_logger

logger = get_logger(__name__)


class SearchPhase(StrEnum):
    EXPANDING = "expanding"
    SOLVED = "solved"
    EXHAUSTED = "exhausted"


@dataclass(frozen=True)
class SearchNode:
    board: Board
    parent: Optional[int]
    generation: int


@dataclass
class SearchResult:
    """Outcome of one search run.

    When solved, ``path`` runs from the starting board to the last board
    before the pin leaves, and ``moves`` counts the links between them.  The
    escaping pin move itself is not counted.
    """

    status: SearchPhase
    path: list[Board] = field(default_factory=list)
    moves: int = 0
    visited: int = 0
    max_depth: int = 0

    @property
    def solved(self) -> bool:
        return self.status is SearchPhase.SOLVED


class BreadthFirstSearch:
    """One breadth-first search run from a single starting board."""

    def __init__(self, board: Board) -> None:
        self._nodes: list[SearchNode] = []
        self._index: dict[Board, int] = {}
        self._frontier: deque[int] = deque()
        self._solution: Optional[int] = None
        self.phase = SearchPhase.EXPANDING
        self.depth = 0

        root = self._insert(board, parent=None, generation=0)
        self._level_last = root

    # -- arena ----------------------------------------------------------------

    def _insert(self, board: Board, parent: Optional[int], generation: int) -> int:
        node_id = len(self._nodes)
        self._nodes.append(SearchNode(board, parent, generation))
        self._index[board] = node_id
        self._frontier.append(node_id)
        return node_id

    @property
    def nodes(self) -> list[SearchNode]:
        return self._nodes

    def __contains__(self, board: Board) -> bool:
        return board in self._index

    # -- expansion ------------------------------------------------------------

    def step(self) -> SearchPhase:
        """Expand the next frontier node and return the resulting phase."""
        if self.phase is not SearchPhase.EXPANDING:
            return self.phase

        node_id = self._frontier.popleft()
        node = self._nodes[node_id]
        moves, solved = node.board.generate_moves()
        if solved:
            self._solution = node_id
            self.phase = SearchPhase.SOLVED
            logger.info(
                "Solution found at depth %d after %d boards",
                node.generation,
                len(self._nodes),
            )
            return self.phase

        for move in moves:
            child = node.board.apply(move)
            if child not in self._index:
                self._insert(child, parent=node_id, generation=node.generation + 1)

        if node_id == self._level_last:
            logger.debug(
                "Depth %d done: %d boards, %d queued",
                self.depth,
                len(self._nodes),
                len(self._frontier),
            )
            if self._frontier:
                self._level_last = self._frontier[-1]
                self.depth += 1

        if not self._frontier:
            self.phase = SearchPhase.EXHAUSTED
            logger.info(
                "No solution: %d boards visited, max depth %d",
                len(self._nodes),
                self.depth,
            )
        return self.phase

    def run(self) -> SearchResult:
        while self.step() is SearchPhase.EXPANDING:
            pass
        return self.result()

    # -- reporting ------------------------------------------------------------

    def path_to(self, node_id: int) -> list[Board]:
        """Boards from the root to *node_id*, following parent links."""
        path: list[Board] = []
        current: Optional[int] = node_id
        while current is not None:
            node = self._nodes[current]
            path.append(node.board)
            current = node.parent
        path.reverse()
        return path

    def result(self) -> SearchResult:
        visited = len(self._nodes)
        if self._solution is not None:
            path = self.path_to(self._solution)
            return SearchResult(
                status=self.phase,
                path=path,
                moves=len(path) - 1,
                visited=visited,
                max_depth=self.depth,
            )
        return SearchResult(
            status=self.phase,
            visited=visited,
            max_depth=self.depth,
        )


class Solver:
    """Stateless solver — all methods are static."""

    @staticmethod
    def solve(board: Board) -> SearchResult:
        """Search for the shortest way to get the pin out of *board*."""
        return BreadthFirstSearch(board).run()

    @staticmethod
    def actions(result: SearchResult) -> list[Move]:
        """Return every move of a solved result, including the escaping one.

        The list is one longer than ``result.moves``.
        """
        if not result.solved:
            return []
        actions: list[Move] = []
        for board, nxt in zip(result.path, result.path[1:]):
            actions.append(Solver.link(board, nxt))
        escape = result.path[-1].winning_move()
        if escape is None:
            raise GeometryError("Solved path does not end next to the exit.")
        actions.append(escape)
        return actions

    @staticmethod
    def link(board: Board, nxt: Board) -> Move:
        """Return the single legal move that turns *board* into *nxt*."""
        moves, _ = board.generate_moves()
        for move in moves:
            if board.apply(move) == nxt:
                return move
        raise ValueError("Boards are not one move apart.")

    @staticmethod
    def hint(board: Board) -> Move | None:
        """Return the single best next move, or ``None`` if there is none."""
        result = Solver.solve(board)
        actions = Solver.actions(result)
        return actions[0] if actions else None

    @staticmethod
    def is_solvable(board: Board) -> bool:
        return Solver.solve(board).solved
