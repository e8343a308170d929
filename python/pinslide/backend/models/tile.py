"""Tile connectivity tables.

Every tile is a ``(kind, rotation)`` pair.  Rotations turn the tile a
quarter clockwise each, so a corner opening right+down at rotation 0 opens
down+left at rotation 1, and so on.

Kinds:

* 0 ``L`` -- landing corner, both openings at level 0, the pin may rest here.
* 1 ``M`` -- raised corner, both openings at level 1, pass-through only.
* 2 ``T`` -- ramp, straight, the ramp side at level 1 and the opposite side
  at level 0.  The pin rests on the landing between them.
* 3 bridges -- ``B0`` vertical and ``B1`` horizontal spans at level 1,
  ``X`` a crossing whose vertical path runs at level 0 under the horizontal
  one at level 1, and ``E`` the empty marker (the hole).

A side at level 2 is a wall.
"""

from __future__ import annotations

from dataclasses import dataclass

from pinslide.backend.exceptions import GeometryError, LayoutError
from pinslide.backend.models.position import Direction

WALL = 2

# Per kind, per rotation: levels in Direction order (up, right, left, down).
_LEVELS: tuple[tuple[tuple[int, int, int, int], ...], ...] = (
    ((2, 0, 2, 0), (2, 2, 0, 0), (0, 2, 0, 2), (0, 0, 2, 2)),
    ((2, 1, 2, 1), (2, 2, 1, 1), (1, 2, 1, 2), (1, 1, 2, 2)),
    ((1, 2, 2, 0), (2, 1, 0, 2), (0, 2, 2, 1), (2, 0, 1, 2)),
    ((1, 2, 2, 1), (2, 1, 1, 2), (0, 1, 1, 0), (2, 2, 2, 2)),
)

_TIERS = (0, 1, 0, 1)

# Sum of the two directions joined by the tile's internal path.  Straight
# paths join opposite sides, which always sum to 3.
_DIRECTION_SUMS: tuple[tuple[int, int, int, int], ...] = (
    (4, 5, 2, 1),
    (4, 5, 2, 1),
    (3, 3, 3, 3),
    (3, 3, 3, 0),
)

_CODES: tuple[tuple[str, str, str, str], ...] = (
    ("L0", "L1", "L2", "L3"),
    ("M0", "M1", "M2", "M3"),
    ("T0", "T1", "T2", "T3"),
    ("B0", "B1", "X", "E"),
)

HOLE_CODE = "E"


@dataclass(frozen=True, slots=True)
class Tile:
    """One tile of the board, identified by kind and rotation."""

    kind: int
    rotation: int

    def __post_init__(self) -> None:
        if not (0 <= self.kind < 4 and 0 <= self.rotation < 4):
            raise LayoutError(f"no tile with kind={self.kind} rotation={self.rotation}")

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_code(cls, code: str) -> Tile:
        try:
            return CATALOGUE[code.strip().upper()]
        except KeyError:
            raise LayoutError(f"Unknown tile code {code!r}.") from None

    # -- queries --------------------------------------------------------------

    @property
    def code(self) -> str:
        return _CODES[self.kind][self.rotation]

    @property
    def is_hole(self) -> bool:
        return self.kind == 3 and self.rotation == 3

    @property
    def height_tier(self) -> int:
        """0 for tiles the pin can rest on, 1 for pass-through tiles."""
        if self.is_hole:
            return 1
        return _TIERS[self.kind]

    def value(self) -> int:
        return self.kind * 4 + self.rotation

    def level_of(self, direction: Direction) -> int:
        return _LEVELS[self.kind][self.rotation][direction]

    def is_open(self, direction: Direction) -> bool:
        return self.level_of(direction) != WALL

    def openings(self) -> list[Direction]:
        return [d for d in Direction if self.is_open(d)]

    def route(self, entry: Direction) -> Direction:
        """Return the side the internal path leaves by, entering at *entry*."""
        if not self.is_open(entry):
            raise GeometryError(f"tile {self.code} has no opening on the {entry.label}")
        return Direction(_DIRECTION_SUMS[self.kind][self.rotation] - entry)

    def __str__(self) -> str:
        return self.code


CATALOGUE: dict[str, Tile] = {
    _CODES[kind][rotation]: Tile(kind, rotation)
    for kind in range(4)
    for rotation in range(4)
}

HOLE = CATALOGUE[HOLE_CODE]
