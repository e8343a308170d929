"""A single action on the board."""

from __future__ import annotations

from dataclasses import dataclass

from pinslide.backend.models.position import Direction


@dataclass(frozen=True, slots=True)
class Move:
    """Slide the empty cell, or advance the pin, one step in ``direction``."""

    direction: Direction
    pin: bool = False

    @classmethod
    def slide(cls, direction: Direction) -> Move:
        return cls(direction, pin=False)

    @classmethod
    def advance(cls, direction: Direction) -> Move:
        return cls(direction, pin=True)

    def __str__(self) -> str:
        return f"{'pin' if self.pin else 'slide'} {self.direction.label}"
