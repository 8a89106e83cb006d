"""The player character: movement along paths, gathering and crafting."""

from __future__ import annotations

import logging
import math

from runeclone.gamemap import GameMap
from runeclone.items import Equipment, Inventory, ItemSlot, Recipe, infer_item_type
from runeclone.pathfinding import find_path
from runeclone.tiles import TILE_SIZE, Point, TileType

logger = logging.getLogger(__name__)

# Tile type -> (label, item, seconds).
GATHER_SETTINGS = {
    TileType.TREE: ("Chopping...", "Logs", 2.0),
    TileType.ROCK: ("Mining...", "Ore", 2.5),
    TileType.WATER: ("Fishing...", "Fish", 3.0),
}

_ADJACENT_DIRECTIONS = (Point(0, -1), Point(1, 0), Point(0, 1), Point(-1, 0))


def _manhattan(a: Point, b: Point) -> int:
    return abs(a.x - b.x) + abs(a.y - b.y)


class Player:
    """The controllable character on the map."""

    def __init__(
        self,
        x: float,
        y: float,
        game_map: GameMap,
        texture: object = None,
        item_texture: object = None,
    ) -> None:
        self.pos: tuple[float, float] = (float(x), float(y))
        self.size: tuple[float, float] = (32.0, 32.0)
        self.speed = 180.0
        self.game_map = game_map
        self.path: list[Point] = []
        self.inventory = Inventory(item_texture)
        self.equipment = Equipment()
        self.texture = texture
        self.health = 100
        self.max_health = 100
        self.gathering = False
        self.gather_target = Point(0, 0)
        self.gather_label = ""
        self.gather_timer = 0.0
        self.gather_item = ""
        self.pending_gather: Point | None = None

    def tile_position(self) -> Point:
        """The tile under the centre of the player."""
        return Point(
            int((self.pos[0] + self.size[0] / 2) / TILE_SIZE),
            int((self.pos[1] + self.size[1] / 2) / TILE_SIZE),
        )

    def move_to_tile(self, tile_x: int, tile_y: int) -> bool:
        """Plan a walk to a tile; False, dropping any pending gather, if unreachable."""
        goal = Point(tile_x, tile_y)
        path = find_path(self.tile_position(), goal, self.game_map)
        if not path:
            logger.info("No valid path to target: %s", goal)
            self.pending_gather = None
            return False
        self.path = path
        return True

    def find_adjacent_walkable(self, target: Point) -> Point | None:
        """The walkable neighbour of target with the shortest path from here."""
        start = self.tile_position()
        best: tuple[int, Point] | None = None
        for d in _ADJACENT_DIRECTIONS:
            adj = Point(target.x + d.x, target.y + d.y)
            tile = self.game_map.get_tile(adj.x, adj.y)
            if tile is None or not tile.is_walkable():
                continue
            path = find_path(start, adj, self.game_map)
            if path and (best is None or len(path) < best[0]):
                best = (len(path), adj)
        return best[1] if best else None

    def update(self, dt: float) -> None:
        """Advance movement, gathering and any pending gather by dt seconds."""
        if self.path:
            nxt = self.path[0]
            target = (
                nxt.x * TILE_SIZE + TILE_SIZE // 2 - self.size[0] / 2,
                nxt.y * TILE_SIZE + TILE_SIZE // 2 - self.size[1] / 2,
            )
            dx, dy = target[0] - self.pos[0], target[1] - self.pos[1]
            length = math.hypot(dx, dy)
            if length < 2:
                self.pos = target
                self.path.pop(0)
            else:
                step = self.speed * dt / length
                self.pos = (self.pos[0] + dx * step, self.pos[1] + dy * step)

        if self.gathering:
            self.gather_timer -= dt
            if self.gather_timer <= 0:
                self.finish_gather()

        if self.pending_gather is not None and not self.path:
            target = self.pending_gather
            if _manhattan(self.tile_position(), target) <= 1:
                self.start_gather(target.x, target.y)
            else:
                logger.info("Target not adjacent after walking, skipping gather")
            self.pending_gather = None

    def try_gather_at(self, tile_x: int, tile_y: int) -> bool:
        """Gather now if adjacent, otherwise walk next to the tile first."""
        tile = self.game_map.get_tile(tile_x, tile_y)
        if tile is None or not tile.is_gatherable():
            logger.info("Tile not gatherable")
            return False
        target = Point(tile_x, tile_y)
        if _manhattan(target, self.tile_position()) <= 1:
            return self.start_gather(tile_x, tile_y)
        adj = self.find_adjacent_walkable(target)
        if adj is None:
            logger.info("No adjacent walkable tile to gather target")
            return False
        self.move_to_tile(adj.x, adj.y)
        self.pending_gather = target
        return True

    def start_gather(self, tile_x: int, tile_y: int) -> bool:
        """Begin gathering at a tile; False if the tile yields nothing."""
        self.gathering = True
        self.gather_target = Point(tile_x, tile_y)
        tile = self.game_map.get_tile(tile_x, tile_y)
        setting = GATHER_SETTINGS.get(tile.type) if tile is not None else None
        if setting is None:
            logger.warning("Invalid gather target")
            return False
        self.gather_label, self.gather_item, self.gather_timer = setting
        return True

    def finish_gather(self) -> None:
        """Collect the resource, clearing trees and rocks from the map."""
        tile = self.game_map.get_tile(self.gather_target.x, self.gather_target.y)
        self.gathering = False
        if tile is None:
            return
        if tile.type in (TileType.TREE, TileType.ROCK):
            tile.type = TileType.GRASS
        self.inventory.add(
            ItemSlot(self.gather_item, 1, infer_item_type(self.gather_item))
        )
        self.gather_label = ""

    def try_craft(self, recipe: Recipe) -> bool:
        """Craft the recipe if the inventory holds its inputs."""
        if not self.inventory.has_items(recipe.inputs):
            return False
        self.inventory.consume_items(recipe.inputs)
        self.inventory.add(recipe.output)
        return True