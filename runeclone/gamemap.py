"""The tile grid the game is played on."""

from __future__ import annotations

import random

from runeclone.tiles import Tile, TileType, in_spawn_zone


class GameMap:
    """A rectangular grid of tiles, indexed as (x, y)."""

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self.tiles: list[list[Tile]] = [
            [Tile(TileType.GRASS) for _ in range(width)] for _ in range(height)
        ]

    def get_tile(self, x: int, y: int) -> Tile | None:
        """Return the tile at (x, y), or None when outside the map."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            return None
        return self.tiles[y][x]

    def set_tile(self, x: int, y: int, tile_type: TileType) -> None:
        """Change the tile kind at (x, y); positions outside the map are ignored."""
        tile = self.get_tile(x, y)
        if tile is not None:
            tile.type = TileType(tile_type)

    def generate(
        self,
        tree_chance: float,
        rock_chance: float,
        water_chance: float,
        rng: random.Random | None = None,
    ) -> None:
        """Scatter trees, rocks and water at random, keeping the spawn area clear."""
        rng = rng if rng is not None else random.Random()
        rock_limit = tree_chance + rock_chance
        water_limit = rock_limit + water_chance
        for y, row in enumerate(self.tiles):
            for x in range(len(row)):
                if in_spawn_zone(x, y):
                    row[x] = Tile(TileType.GRASS)
                    continue
                r = rng.random()
                if r < tree_chance:
                    kind = TileType.TREE
                elif r < rock_limit:
                    kind = TileType.ROCK
                elif r < water_limit:
                    kind = TileType.WATER
                else:
                    kind = TileType.GRASS
                row[x] = Tile(kind)