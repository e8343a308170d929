"""Tile table tests."""

from __future__ import annotations

import pytest

from pinslide.backend.exceptions import GeometryError, LayoutError
from pinslide.backend.models.position import Direction
from pinslide.backend.models.tile import CATALOGUE, HOLE, WALL, Tile

_REAL_TILES = [t for t in CATALOGUE.values() if not t.is_hole]


def _code(tile: Tile) -> str:
    return tile.code


def test_catalogue_has_fifteen_tiles_and_one_hole() -> None:
    assert len(CATALOGUE) == 16
    assert len(_REAL_TILES) == 15
    assert HOLE == Tile(3, 3)
    assert HOLE.is_hole
    assert sorted(t.value() for t in CATALOGUE.values()) == list(range(16))


@pytest.mark.parametrize("tile", _REAL_TILES, ids=_code)
def test_route_leaves_by_another_open_side(tile: Tile) -> None:
    for entry in tile.openings():
        exit_side = tile.route(entry)
        assert exit_side != entry
        assert tile.level_of(exit_side) != WALL
        assert tile.route(exit_side) == entry


@pytest.mark.parametrize("tile", _REAL_TILES, ids=_code)
def test_every_tile_has_two_or_four_openings(tile: Tile) -> None:
    expected = 4 if tile.code == "X" else 2
    assert len(tile.openings()) == expected


def test_hole_is_walled_and_cannot_hold_the_pin() -> None:
    assert HOLE.openings() == []
    assert HOLE.height_tier == 1
    with pytest.raises(GeometryError):
        HOLE.route(Direction.UP)


def test_route_through_wall_is_a_defect() -> None:
    with pytest.raises(GeometryError):
        Tile.from_code("L0").route(Direction.UP)


@pytest.mark.parametrize(
    "code, tier",
    [("L0", 0), ("L3", 0), ("T1", 0), ("M2", 1), ("B0", 1), ("B1", 1), ("X", 1)],
)
def test_height_tiers(code: str, tier: int) -> None:
    assert Tile.from_code(code).height_tier == tier


def test_ramp_joins_both_levels() -> None:
    ramp = Tile.from_code("T3")
    assert ramp.level_of(Direction.LEFT) == 1
    assert ramp.level_of(Direction.RIGHT) == 0
    assert ramp.level_of(Direction.UP) == WALL


def test_crossing_runs_vertical_path_under_horizontal() -> None:
    crossing = Tile.from_code("X")
    assert crossing.level_of(Direction.UP) == crossing.level_of(Direction.DOWN) == 0
    assert crossing.level_of(Direction.LEFT) == crossing.level_of(Direction.RIGHT) == 1
    assert crossing.route(Direction.UP) is Direction.DOWN
    assert crossing.route(Direction.RIGHT) is Direction.LEFT


def test_rotation_turns_openings_clockwise() -> None:
    assert Tile.from_code("L0").openings() == [Direction.RIGHT, Direction.DOWN]
    assert Tile.from_code("L1").openings() == [Direction.LEFT, Direction.DOWN]
    assert Tile.from_code("L2").openings() == [Direction.UP, Direction.LEFT]
    assert Tile.from_code("L3").openings() == [Direction.UP, Direction.RIGHT]


def test_codes_are_case_insensitive_and_validated() -> None:
    assert Tile.from_code(" m1 ") == Tile(1, 1)
    with pytest.raises(LayoutError):
        Tile.from_code("Q9")
    with pytest.raises(LayoutError):
        Tile(4, 0)
