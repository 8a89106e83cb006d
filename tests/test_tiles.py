import pytest

from runeclone.tiles import (
    SPAWN_HEIGHT,
    SPAWN_WIDTH,
    SPAWN_X,
    SPAWN_Y,
    Point,
    Tile,
    TileType,
    in_spawn_zone,
)


@pytest.mark.parametrize(
    "value,walkable,gatherable",
    [
        (0, True, False),
        (1, False, True),
        (2, False, True),
        (3, False, True),
    ],
)
def test_tile_built_from_declaration_order_value(value, walkable, gatherable):
    tile = Tile(TileType(value))
    assert tile.is_walkable() is walkable
    assert tile.is_gatherable() is gatherable


def test_default_tile_is_grass():
    assert Tile().type is TileType.GRASS


def test_only_grass_is_walkable():
    assert Tile(TileType.GRASS).is_walkable()
    for kind in (TileType.TREE, TileType.WATER, TileType.ROCK):
        assert not Tile(kind).is_walkable()


@pytest.mark.parametrize(
    "kind,expected",
    [
        (TileType.GRASS, False),
        (TileType.TREE, True),
        (TileType.WATER, True),
        (TileType.ROCK, True),
    ],
)
def test_gatherable(kind, expected):
    assert Tile(kind).is_gatherable() is expected


def test_walkable_and_gatherable_are_exclusive():
    for kind in TileType:
        tile = Tile(kind)
        assert tile.is_walkable() != tile.is_gatherable()


def test_point_equality_and_hashing():
    assert Point(2, 3) == Point(2, 3)
    assert len({Point(1, 1), Point(1, 1), Point(1, 2)}) == 2
    x, y = Point(4, 5)
    assert (x, y) == (4, 5)


def test_spawn_zone_bounds():
    assert in_spawn_zone(SPAWN_X, SPAWN_Y)
    assert in_spawn_zone(SPAWN_X + SPAWN_WIDTH - 1, SPAWN_Y + SPAWN_HEIGHT - 1)
    assert not in_spawn_zone(SPAWN_X + SPAWN_WIDTH, SPAWN_Y)
    assert not in_spawn_zone(SPAWN_X - 1, SPAWN_Y)
    assert not in_spawn_zone(SPAWN_X, SPAWN_Y + SPAWN_HEIGHT)


def test_spawn_zone_pinned_cells():
    assert in_spawn_zone(1, 1)
    assert in_spawn_zone(3, 3)
    assert not in_spawn_zone(0, 0)
    assert not in_spawn_zone(4, 4)