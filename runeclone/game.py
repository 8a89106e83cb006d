"""Game state: enemies, turn-based combat, loot and player interactions."""

from __future__ import annotations

import logging
import math
import random
from dataclasses import dataclass, field

from runeclone.gamemap import GameMap
from runeclone.items import EquipmentSlot, ItemSlot, Recipe, Rect, slot_for_item_type
from runeclone.player import Player
from runeclone.tiles import SPAWN_HEIGHT, SPAWN_WIDTH, SPAWN_X, SPAWN_Y, TILE_SIZE

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LootEntry:
    """An item an enemy may drop, with the chance (0 to 1) that it does."""

    item: ItemSlot
    chance: float


@dataclass
class Enemy:
    name: str
    pos: tuple[float, float]
    health: int
    max_health: int
    frame: Rect = (0.0, 0.0, 0.0, 0.0)
    loot_table: list[LootEntry] = field(default_factory=list)
    texture: object = None

    def health_fraction(self) -> float:
        return self.health / self.max_health if self.max_health > 0 else 0.0


def default_recipes() -> list[Recipe]:
    return [
        Recipe(
            "Sword",
            (ItemSlot("Ore", 2), ItemSlot("Logs", 1)),
            ItemSlot("Sword", 1, "Weapon", (0, 0, 32, 32)),
        )
    ]


def make_slime(x: float, y: float) -> Enemy:
    """A slime at pixel position (x, y) with its usual loot."""
    return Enemy(
        name="Slime",
        pos=(float(x), float(y)),
        health=50,
        max_health=50,
        frame=(0, 64, TILE_SIZE, TILE_SIZE),
        loot_table=[
            LootEntry(ItemSlot("Club", 1, "Weapon", (0, 256, TILE_SIZE, TILE_SIZE)), 0.3),
            LootEntry(ItemSlot("Coins", 5, "Misc", (32, 768, TILE_SIZE, TILE_SIZE)), 0.7),
        ],
    )


@dataclass
class Game:
    """Everything that changes while the game runs."""

    player: Player
    game_map: GameMap
    enemies: list[Enemy] = field(default_factory=list)
    recipes: list[Recipe] = field(default_factory=default_recipes)
    rng: random.Random = field(default_factory=random.Random)
    show_inventory: bool = False
    in_combat: bool = False
    current_enemy: Enemy | None = None
    player_turn: bool = False
    combat_timer: float = 0.0
    combat_interval: float = 1.0
    loot_message: str = ""
    loot_message_timer: float = 0.0

    def handle_inventory_click(self, index: int) -> bool:
        """Equip the clicked item, swapping out what was worn; False if not wearable."""
        inventory, equipment = self.player.inventory, self.player.equipment
        item = inventory.get(index)
        slot = slot_for_item_type(item.item_type)
        if slot is None:
            return False
        swapped = equipment.unequip(slot)
        inventory.set(index, equipment.equip(slot, item))
        if not swapped.is_empty:
            inventory.add(swapped)
        return True

    def handle_equipment_click(self, slot: EquipmentSlot) -> ItemSlot:
        """Take off the item in a slot and put it in the backpack."""
        item = self.player.equipment.unequip(slot)
        if not item.is_empty:
            self.player.inventory.add(item)
        return item

    def handle_map_click(self, tile_x: int, tile_y: int) -> None:
        """Gather from a resource tile, or walk to any other tile."""
        tile = self.game_map.get_tile(tile_x, tile_y)
        if tile is not None and tile.is_gatherable():
            self.player.try_gather_at(tile_x, tile_y)
        else:
            self.player.move_to_tile(tile_x, tile_y)

    def toggle_inventory(self) -> bool:
        self.show_inventory = not self.show_inventory
        return self.show_inventory

    def craft(self, recipe: Recipe) -> bool:
        return self.player.try_craft(recipe)

    def update(self, dt: float) -> None:
        """Advance timers, combat and the player by dt seconds."""
        if self.loot_message_timer > 0:
            self.loot_message_timer -= dt

        if not self.in_combat:
            for enemy in self.enemies:
                if math.dist(self.player.pos, enemy.pos) < TILE_SIZE:
                    self.in_combat = True
                    self.current_enemy = enemy
                    self.player_turn = True
                    self.combat_timer = self.combat_interval
                    break

        if self.in_combat and self.current_enemy is not None:
            self.combat_timer -= dt
            if self.combat_timer <= 0:
                if self._resolve_turn(self.current_enemy):
                    return
                self.player_turn = not self.player_turn
                self.combat_timer = self.combat_interval

        if (
            self.current_enemy is not None
            and math.dist(self.player.pos, self.current_enemy.pos) > TILE_SIZE * 2
        ):
            logger.info("You escaped combat.")
            self._end_combat()

        self.player.update(dt)

    def _resolve_turn(self, enemy: Enemy) -> bool:
        """Play one combat turn; True when the fight is over."""
        if self.player_turn:
            enemy.health -= 10
            if enemy.health > 0:
                return False
            logger.info("%s is defeated!", enemy.name)
            for loot in enemy.loot_table:
                if self.rng.random() <= loot.chance:
                    self.player.inventory.add(loot.item)
                    self.loot_message = f"You looted {loot.item.name} x{loot.item.count}"
                    self.loot_message_timer = 2.0
            self.enemies = [e for e in self.enemies if e.health > 0]
        else:
            self.player.health -= 5
            if self.player.health > 0:
                return False
            logger.info("You died!")
        self._end_combat()
        return True

    def _end_combat(self) -> None:
        self.in_combat = False
        self.current_enemy = None


def new_game(seed: int | None = None) -> Game:
    """A fresh world with a generated map, the player at spawn and one slime."""
    rng = random.Random(seed)
    game_map = GameMap(20, 15)
    game_map.generate(0.1, 0.05, 0.05, rng)
    player = Player(
        float((SPAWN_X + SPAWN_WIDTH // 2) * TILE_SIZE),
        float((SPAWN_Y + SPAWN_HEIGHT // 2) * TILE_SIZE),
        game_map,
    )
    return Game(player=player, game_map=game_map, enemies=[make_slime(100, 100)], rng=rng)