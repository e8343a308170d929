"""Named starting layouts loaded from a JSON file."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from pinslide.backend.exceptions import LayoutError, UnknownPuzzleError
from pinslide.backend.models.board import Board


@dataclass
class PuzzleEntry:
    id: str
    layout: list[str]
    pin: tuple[int, int]
    moves: Optional[int] = None
    note: str = ""

    def board(self) -> Board:
        return Board.from_flat(self.layout, self.pin)


class PuzzleBook:
    """Loads and queries puzzles from a JSON file.

    The file holds a list of objects::

        [{"id": "corner", "layout": ["E", "L1", ...], "pin": [0, 1], "moves": 2}]

    ``moves`` is the expected solution length, or ``null`` when the puzzle
    has no solution.
    """

    def __init__(self, filepath: Path) -> None:
        self.filepath = filepath
        self._entries: dict[str, PuzzleEntry] = {}
        self._load()

    # -- persistence ----------------------------------------------------------

    def _load(self) -> None:
        if not self.filepath.exists():
            return
        try:
            data = json.loads(self.filepath.read_text())
        except json.JSONDecodeError as exc:
            raise LayoutError(f"Puzzle book {self.filepath} is not valid JSON: {exc}") from exc
        for raw in data:
            try:
                entry = PuzzleEntry(
                    id=raw["id"],
                    layout=list(raw["layout"]),
                    pin=tuple(raw["pin"]),
                    moves=raw.get("moves"),
                    note=raw.get("note", ""),
                )
            except (KeyError, TypeError) as exc:
                raise LayoutError(
                    f"Malformed puzzle entry in {self.filepath}: {raw!r}"
                ) from exc
            self._entries[entry.id] = entry

    # -- queries --------------------------------------------------------------

    def get(self, puzzle_id: str) -> PuzzleEntry:
        try:
            return self._entries[puzzle_id]
        except KeyError:
            raise UnknownPuzzleError(puzzle_id) from None

    def names(self) -> list[str]:
        return list(self._entries)

    def entries(self) -> list[PuzzleEntry]:
        return list(self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)
