"""Box-drawing renderer shared by the CLI frontends.

Each tile is drawn as three lines of five characters.  Heavy strokes are
walls, light strokes are openings, shaded tiles are raised.  A resting tile
shows ``○`` in its centre, replaced by ``◉`` when the pin is on it.
"""

from __future__ import annotations

from collections.abc import Sequence

from pinslide.backend.models.board import Board
from pinslide.backend.models.tile import Tile

TILE_HEIGHT = 3
TILE_WIDTH = 5

SPOT = "○"
PIN = "◉"

# _GLYPHS[kind][line][rotation]
_GLYPHS: tuple[tuple[tuple[str, str, str, str], ...], ...] = (
    (
        ("┏━━━┑", "┍━━━┓", "┌───┒", "┎───┐"),
        ("┃ ○ │", "│ ○ ┃", "│ ○ ┃", "┃ ○ │"),
        ("┖───┘", "└───┚", "┕━━━┛", "┗━━━┙"),
    ),
    (
        ("┏━━━┑", "┍━━━┓", "┌───┒", "┎───┐"),
        ("┃░░░│", "│░░░┃", "│░░░┃", "┃░░░│"),
        ("┖───┘", "└───┚", "┕━━━┛", "┗━━━┙"),
    ),
    (
        ("┎▗▄▖┒", "┍━━━┑", "┎───┒", "┍━━━┑"),
        ("┃ ○ ┃", "│ ○ ▌", "┃ ○ ┃", "▐▍○ │"),
        ("┖───┚", "┕━━━┙", "┖▝▀▘┚", "┕━━━┙"),
    ),
    (
        ("┎───┒", "┍━━━┑", " ╲ ╱ ", "░░░░░"),
        ("┃░░░┃", "│░░░│", "  ╳  ", "░░░░░"),
        ("┖───┚", "┕━━━┙", " ╱ ╲ ", "░░░░░"),
    ),
)


def tile_lines(tile: Tile, pinned: bool = False) -> list[str]:
    lines = [_GLYPHS[tile.kind][line][tile.rotation] for line in range(TILE_HEIGHT)]
    if pinned:
        lines = [line.replace(SPOT, PIN) for line in lines]
    return lines


def board_lines(board: Board) -> list[str]:
    out: list[str] = []
    for row in board.rows():
        drawn = [tile_lines(tile, pinned) for tile, pinned in row]
        for line in range(TILE_HEIGHT):
            out.append("".join(cell[line] for cell in drawn))
    return out


def render_board(board: Board) -> str:
    """Return the multi-line diagram of *board*."""
    return "\n".join(board_lines(board))


def render_path(
    boards: Sequence[Board],
    captions: Sequence[str] = (),
    per_line: int = 4,
    gap: int = 3,
) -> str:
    """Lay out several boards side by side, *per_line* at a time.

    ``captions`` are printed above the matching board, truncated to the
    board width.
    """
    width = TILE_WIDTH * 3
    spacer = " " * gap
    blocks: list[str] = []
    for start in range(0, len(boards), per_line):
        chunk = boards[start : start + per_line]
        names = list(captions[start : start + per_line])
        names += [""] * (len(chunk) - len(names))
        lines = [spacer.join(f"{name[:width]:<{width}}" for name in names).rstrip()]
        drawn = [board_lines(b) for b in chunk]
        for i in range(TILE_HEIGHT * 3):
            lines.append(spacer.join(d[i] for d in drawn))
        blocks.append("\n".join(lines))
    return "\n\n".join(blocks)
