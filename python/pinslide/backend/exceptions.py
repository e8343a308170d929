"""Exception hierarchy for the pin slide puzzle."""


class PuzzleError(Exception):
    """Base exception for puzzle failures."""


class LayoutError(PuzzleError, ValueError):
    """Raised when an initial board layout cannot be constructed."""


class UnknownPuzzleError(PuzzleError, KeyError):
    """Raised when a puzzle id is not present in the puzzle book."""


class IllegalMoveError(PuzzleError, ValueError):
    """Raised when a move is applied to a board on which it is not legal."""


class GeometryError(PuzzleError, AssertionError):
    """Raised when traversal leaves the grid or follows a walled side.

    This is an internal defect in the tile tables or the traversal code,
    never a user error.
    """
