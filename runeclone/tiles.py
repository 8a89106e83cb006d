"""Map geometry constants, tile kinds and grid points."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import NamedTuple

SPAWN_X = 1
SPAWN_Y = 1
SPAWN_WIDTH = 3
SPAWN_HEIGHT = 3
SCREEN_WIDTH = 800
SCREEN_HEIGHT = 600
TILE_SIZE = 32
MAP_WIDTH = 10
MAP_HEIGHT = 8


class TileType(IntEnum):
    """Kinds of terrain a map cell can hold."""

    GRASS = 0
    TREE = 1
    WATER = 2
    ROCK = 3


class Point(NamedTuple):
    """A cell position on the tile grid."""

    x: int
    y: int


# Source rectangles (x, y, width, height) in the terrain atlas.
TILE_ATLAS: dict[TileType, tuple[float, float, float, float]] = {
    TileType.GRASS: (0, 416, TILE_SIZE, TILE_SIZE),
    TileType.TREE: (0, 800, TILE_SIZE, TILE_SIZE),
    TileType.ROCK: (32, 576, TILE_SIZE, TILE_SIZE),
}


def in_spawn_zone(x: int, y: int) -> bool:
    """Whether the cell lies inside the protected spawn area."""
    return (
        SPAWN_X <= x < SPAWN_X + SPAWN_WIDTH
        and SPAWN_Y <= y < SPAWN_Y + SPAWN_HEIGHT
    )


@dataclass
class Tile:
    """A single map cell."""

    type: TileType = TileType.GRASS

    def is_walkable(self) -> bool:
        return self.type == TileType.GRASS

    def is_gatherable(self) -> bool:
        return self.type in (TileType.TREE, TileType.WATER, TileType.ROCK)