from pinslide.backend.models.board import Board
from pinslide.backend.models.move import Move
from pinslide.backend.models.position import INVALID, SOLUTION, Cell, Direction, Position
from pinslide.backend.models.puzzle_book import PuzzleBook, PuzzleEntry
from pinslide.backend.models.tile import CATALOGUE, HOLE, Tile

__all__ = [
    "Board",
    "CATALOGUE",
    "Cell",
    "Direction",
    "HOLE",
    "INVALID",
    "Move",
    "Position",
    "PuzzleBook",
    "PuzzleEntry",
    "SOLUTION",
    "Tile",
]
