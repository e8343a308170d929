"""Board model for the pin slide puzzle."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field, replace
from typing import Union

from pinslide.backend.exceptions import IllegalMoveError, LayoutError
from pinslide.backend.models.move import Move
from pinslide.backend.models.position import (
    INVALID,
    SIZE,
    SOLUTION,
    Cell,
    Direction,
    Position,
)
from pinslide.backend.models.tile import WALL, Tile

# The only opening through which the pin may leave the board.
EXIT_ROW = 0
EXIT_DIRECTION = Direction.LEFT
EXIT_LEVEL = 1

Grid = tuple[tuple[Tile, ...], ...]


@dataclass(frozen=True)
class Board:
    """Immutable 3×3 grid of tiles with the pin and the empty cell.

    Two boards are equal when their tiles and pin match; ``empty`` always
    follows from the tiles so it is left out of the comparison.
    """

    tiles: Grid
    pin: Cell
    empty: Cell = field(compare=False)

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_flat(
        cls,
        flat: Sequence[Union[str, Tile]],
        pin: Union[Cell, tuple[int, int]],
    ) -> Board:
        """Create a board from a flat row-major tile list and a pin cell.

        Example::

            Board.from_flat(["E", "L1", "L0", "T3", "M0", "B1", "M2", "X", "T1"], (0, 1))
        """
        if len(flat) != SIZE * SIZE:
            raise LayoutError(
                f"Expected {SIZE * SIZE} tiles for a {SIZE}×{SIZE} board, "
                f"got {len(flat)}."
            )
        tiles = [t if isinstance(t, Tile) else Tile.from_code(t) for t in flat]

        holes = [i for i, t in enumerate(tiles) if t.is_hole]
        if len(holes) != 1:
            raise LayoutError(f"Expected exactly one empty cell, found {len(holes)}.")

        if not isinstance(pin, Cell):
            try:
                row, col = pin
            except (TypeError, ValueError):
                row = col = None
            if not (isinstance(row, int) and isinstance(col, int)):
                raise LayoutError(
                    f"Pin must be a (row, col) pair of integers, got {pin!r}."
                )
            if not (0 <= row < SIZE and 0 <= col < SIZE):
                raise LayoutError(f"Pin cell ({row}, {col}) is off the board.")
            pin = Cell(row, col)

        pin_tile = tiles[pin.row * SIZE + pin.col]
        if pin_tile.height_tier != 0:
            raise LayoutError(
                f"The pin cannot rest on tile {pin_tile.code} at {pin}."
            )

        grid = tuple(tuple(tiles[r * SIZE : (r + 1) * SIZE]) for r in range(SIZE))
        empty = Cell(*divmod(holes[0], SIZE))
        return cls(tiles=grid, pin=pin, empty=empty)

    @classmethod
    def from_text(cls, layout: str, pin: Union[Cell, tuple[int, int]]) -> Board:
        """Create a board from codes separated by whitespace or commas."""
        return cls.from_flat(layout.replace(",", " ").split(), pin)

    # -- presentation accessors ---------------------------------------------

    def tile_at(self, cell: Cell) -> Tile:
        return self.tiles[cell.row][cell.col]

    def rows(self) -> Iterator[list[tuple[Tile, bool]]]:
        """Yield each row as ``(tile, has_pin)`` pairs."""
        for r, row in enumerate(self.tiles):
            yield [
                (tile, self.pin.row == r and self.pin.col == c)
                for c, tile in enumerate(row)
            ]

    def codes(self) -> list[str]:
        return [tile.code for row in self.tiles for tile in row]

    # -- pin traversal --------------------------------------------------------

    def cross_from(self, pos: Cell, direction: Direction) -> Position:
        """Cross one connector from *pos* towards *direction*."""
        tile = self.tile_at(pos)
        if not pos.is_edge(direction):
            level = tile.level_of(direction)
            if level == WALL:
                return INVALID
            nxt = pos.step(direction)
            if self.tile_at(nxt).level_of(direction.inverse) == level:
                return nxt
            return INVALID

        if (
            direction is EXIT_DIRECTION
            and pos.row == EXIT_ROW
            and tile.level_of(direction) == EXIT_LEVEL
        ):
            return SOLUTION
        return INVALID

    def move_pin(self, direction: Direction) -> Position:
        """Follow the pin's path from its cell until it can rest or stops.

        The pin glides through pass-through tiles, turning where their path
        turns, and only comes to rest on a tile with height tier 0.
        """
        pos = self.cross_from(self.pin, direction)
        while isinstance(pos, Cell) and self.tile_at(pos).height_tier == 1:
            direction = self.tile_at(pos).route(direction.inverse)
            pos = self.cross_from(pos, direction)
        return pos

    # -- moves ----------------------------------------------------------------

    def can_slide(self, direction: Direction) -> bool:
        """True when the empty cell can swap with its neighbour in *direction*."""
        if self.empty.is_edge(direction):
            return False
        return self.empty.step(direction) != self.pin

    def generate_moves(self) -> tuple[list[Move], bool]:
        """Return the legal moves and whether the pin can leave the board.

        Scanning stops at the first direction in which the pin escapes; the
        moves found up to that point are still returned.
        """
        moves: list[Move] = []
        for direction in Direction:
            if self.can_slide(direction):
                moves.append(Move.slide(direction))
            target = self.move_pin(direction)
            if target is SOLUTION:
                return moves, True
            if isinstance(target, Cell):
                moves.append(Move.advance(direction))
        return moves, False

    def winning_move(self) -> Move | None:
        """The pin move that leaves through the exit, if there is one."""
        for direction in Direction:
            if self.move_pin(direction) is SOLUTION:
                return Move.advance(direction)
        return None

    def apply(self, move: Move) -> Board:
        """Return the board produced by *move*."""
        if move.pin:
            target = self.move_pin(move.direction)
            if not isinstance(target, Cell):
                raise IllegalMoveError(
                    f"Pin cannot move {move.direction.label} from {self.pin} "
                    f"(result: {target})."
                )
            return replace(self, pin=target)

        if not self.can_slide(move.direction):
            raise IllegalMoveError(
                f"Empty cell at {self.empty} cannot slide {move.direction.label}."
            )
        target = self.empty.step(move.direction)
        grid = [list(row) for row in self.tiles]
        grid[self.empty.row][self.empty.col], grid[target.row][target.col] = (
            grid[target.row][target.col],
            grid[self.empty.row][self.empty.col],
        )
        return replace(self, tiles=tuple(tuple(row) for row in grid), empty=target)
