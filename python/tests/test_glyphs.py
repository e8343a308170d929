"""Text rendering of boards."""

from __future__ import annotations

from pinslide.backend.models.board import Board
from pinslide.frontend.cli.glyphs import PIN, SPOT, render_board, render_path

FIRST_STEPS = ["E", "L1", "L0", "T3", "M0", "B1", "M2", "X", "T1"]


def test_board_is_nine_lines_of_fifteen_columns() -> None:
    lines = render_board(Board.from_flat(FIRST_STEPS, (0, 1))).splitlines()
    assert len(lines) == 9
    assert all(len(line) == 15 for line in lines)


def test_pin_replaces_resting_spot_on_its_tile_only() -> None:
    text = render_board(Board.from_flat(FIRST_STEPS, (0, 1)))
    lines = text.splitlines()
    assert text.count(PIN) == 1
    assert lines[1][5:10] == "│ ◉ ┃"
    # L0, T3 and T1 still show an empty resting spot.
    assert text.count(SPOT) == 3


def test_hole_is_shaded() -> None:
    lines = render_board(Board.from_flat(FIRST_STEPS, (0, 1))).splitlines()
    assert [line[:5] for line in lines[:3]] == ["░░░░░"] * 3


def test_path_lays_boards_side_by_side() -> None:
    board = Board.from_flat(FIRST_STEPS, (0, 1))
    text = render_path([board] * 5, ["start", "slide down"], per_line=4, gap=3)

    first, second = text.split("\n\n")
    first_lines = first.splitlines()
    assert first_lines[0].startswith("start")
    assert "slide down" in first_lines[0]
    assert len(first_lines) == 10
    assert len(first_lines[1]) == 4 * 15 + 3 * 3
    assert len(second.splitlines()[1]) == 15
