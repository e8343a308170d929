"""Directions and board positions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum, StrEnum
from typing import Union

from pinslide.backend.exceptions import GeometryError

SIZE = 3


class Direction(IntEnum):
    """Cardinal directions.

    The values are chosen so that opposite directions sum to 3, which lets
    tiles describe their internal path as a single "direction sum".
    The declaration order is also the order in which moves are scanned.
    """

    UP = 0
    RIGHT = 1
    LEFT = 2
    DOWN = 3

    @property
    def inverse(self) -> Direction:
        return Direction(3 - self)

    @property
    def offset(self) -> tuple[int, int]:
        return _OFFSETS[self]

    @property
    def label(self) -> str:
        return self.name.lower()


_OFFSETS = {
    Direction.UP: (-1, 0),
    Direction.RIGHT: (0, 1),
    Direction.LEFT: (0, -1),
    Direction.DOWN: (1, 0),
}


class Sentinel(StrEnum):
    """Non-cell outcomes of a pin traversal."""

    INVALID = "invalid"
    SOLUTION = "solution"


INVALID = Sentinel.INVALID
SOLUTION = Sentinel.SOLUTION


@dataclass(frozen=True, slots=True)
class Cell:
    """A concrete square on the 3×3 board."""

    row: int
    col: int

    def __post_init__(self) -> None:
        if not (0 <= self.row < SIZE and 0 <= self.col < SIZE):
            raise GeometryError(f"cell ({self.row}, {self.col}) is off the board")

    def is_edge(self, direction: Direction) -> bool:
        """True when one step in *direction* would leave the board."""
        dr, dc = direction.offset
        r, c = self.row + dr, self.col + dc
        return not (0 <= r < SIZE and 0 <= c < SIZE)

    def step(self, direction: Direction) -> Cell:
        if self.is_edge(direction):
            raise GeometryError(
                f"cannot step {direction.label} from ({self.row}, {self.col})"
            )
        dr, dc = direction.offset
        return Cell(self.row + dr, self.col + dc)

    def __str__(self) -> str:
        return f"({self.row}, {self.col})"


Position = Union[Cell, Sentinel]


def all_cells() -> list[Cell]:
    """Every cell in row-major order."""
    return [Cell(r, c) for r in range(SIZE) for c in range(SIZE)]
