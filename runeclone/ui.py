"""Screen layout of the panels and drawing of the game with pygame."""

from __future__ import annotations

import pygame

from runeclone.game import Enemy, Game
from runeclone.gamemap import GameMap
from runeclone.items import INVENTORY_SIZE, EquipmentSlot, Inventory, Recipe, Rect
from runeclone.player import Player
from runeclone.tiles import SCREEN_HEIGHT, TILE_ATLAS, TILE_SIZE, Tile, TileType

BOX_SIZE = 40
BOX_GAP = 4
INVENTORY_COLUMNS = 7
RECIPE_WIDTH = 180
RECIPE_HEIGHT = 24
RECIPE_GAP = 6

INVENTORY_ORIGIN = (10, 10)
EQUIPMENT_ORIGIN = (400, 10)
CRAFTING_ORIGIN = (600, 10)

RAYWHITE = (245, 245, 245)
WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
RED = (230, 41, 55)
GREEN = (0, 228, 48)
LIGHT_GRAY = (200, 200, 200)
GRAY = (130, 130, 130)
DARK_GRAY = (80, 80, 80)
DARK_BLUE = (0, 82, 172)
DARK_GREEN = (0, 117, 44)
BROWN = (127, 106, 79)
ENEMY_COLOR = (120, 200, 90)

# Used for terrain when no atlas is loaded or the atlas has no frame for it.
TILE_COLORS: dict[TileType, tuple[int, int, int]] = {
    TileType.GRASS: (96, 168, 72),
    TileType.TREE: (34, 100, 34),
    TileType.WATER: (50, 110, 200),
    TileType.ROCK: (128, 128, 128),
}

PLAYER_FRAME: Rect = (0, 32, TILE_SIZE, TILE_SIZE)

_EQUIPMENT_ORDER = tuple(EquipmentSlot)


def _contains(rect: Rect, px: float, py: float) -> bool:
    x, y, w, h = rect
    return x <= px < x + w and y <= py < y + h


def inventory_slot_rect(index: int, x: int, y: int) -> Rect:
    """Screen rectangle of an inventory slot in a panel at (x, y)."""
    col, row = index % INVENTORY_COLUMNS, index // INVENTORY_COLUMNS
    step = BOX_SIZE + BOX_GAP
    return (x + col * step, y + row * step, BOX_SIZE, BOX_SIZE)


def inventory_index_at(x: int, y: int, mouse_x: float, mouse_y: float) -> int | None:
    """Index of the inventory slot under the mouse, or None."""
    return next(
        (
            i
            for i in range(INVENTORY_SIZE)
            if _contains(inventory_slot_rect(i, x, y), mouse_x, mouse_y)
        ),
        None,
    )


def equipment_slot_rect(index: int, x: int, y: int) -> Rect:
    """Screen rectangle of the index-th equipment slot in a panel at (x, y)."""
    return (x, y + index * (BOX_SIZE + BOX_GAP), BOX_SIZE, BOX_SIZE)


def equipment_slot_at(
    x: int, y: int, mouse_x: float, mouse_y: float
) -> EquipmentSlot | None:
    """The equipment slot under the mouse, or None."""
    for i, slot in enumerate(_EQUIPMENT_ORDER):
        if _contains(equipment_slot_rect(i, x, y), mouse_x, mouse_y):
            return slot
    return None


def recipe_rect(index: int, x: int, y: int) -> Rect:
    """Screen rectangle of the index-th recipe button in a list at (x, y)."""
    return (x, y + index * (RECIPE_HEIGHT + RECIPE_GAP), RECIPE_WIDTH, RECIPE_HEIGHT)


def recipe_at(
    x: int, y: int, mouse_x: float, mouse_y: float, count: int
) -> int | None:
    """Index of the recipe button under the mouse among count buttons, or None."""
    return next(
        (i for i in range(count) if _contains(recipe_rect(i, x, y), mouse_x, mouse_y)),
        None,
    )


def recipe_tooltip(recipe: Recipe) -> str:
    """The list of ingredients shown when hovering a recipe."""
    return "".join(f"{item.count}x {item.name}\n" for item in recipe.inputs)


class Renderer:
    """Draws the whole game onto a pygame surface."""

    def __init__(
        self,
        surface: pygame.Surface,
        tile_atlas: pygame.Surface | None = None,
        character_atlas: pygame.Surface | None = None,
        item_atlas: pygame.Surface | None = None,
        enemy_atlas: pygame.Surface | None = None,
    ) -> None:
        pygame.font.init()
        self.surface = surface
        self.tile_atlas = tile_atlas
        self.character_atlas = character_atlas
        self.item_atlas = item_atlas
        self.enemy_atlas = enemy_atlas
        self._fonts: dict[int, pygame.font.Font] = {}

    def draw(self, game: Game, mouse: tuple[float, float]) -> None:
        """Render one frame of the game, with hover effects for the mouse."""
        self.surface.fill(RAYWHITE)
        self._draw_map(game.game_map)
        self._draw_player(game.player)

        if game.show_inventory:
            self._draw_panels(game, mouse)

        player = game.player
        if player.gathering:
            self._text(player.gather_label, 10, SCREEN_HEIGHT - 30, 20, BLACK)

        for enemy in game.enemies:
            self._draw_enemy(enemy)

        if game.in_combat and game.current_enemy is not None:
            name = game.current_enemy.name
            turn = "Turn: Player" if game.player_turn else f"Turn: {name}"
            self._text(f"Fighting {name}", 10, SCREEN_HEIGHT - 60, 20, RED)
            self._text(turn, 10, SCREEN_HEIGHT - 40, 20, DARK_GRAY)

        self._text(f"Player HP: {player.health}", 10, 10, 20, BLACK)

        if game.loot_message_timer > 0:
            self._text(game.loot_message, 10, SCREEN_HEIGHT - 90, 20, DARK_GREEN)

    def _font(self, size: int) -> pygame.font.Font:
        font = self._fonts.get(size)
        if font is None:
            font = self._fonts[size] = pygame.font.Font(None, size)
        return font

    def _text(self, text: str, x: float, y: float, size: int, color) -> None:
        font = self._font(size)
        for row, line in enumerate(text.split("\n")):
            if line:
                self.surface.blit(
                    font.render(line, True, color), (int(x), int(y) + row * size)
                )

    def _blit_frame(self, atlas, frame: Rect, pos: tuple[float, float]) -> bool:
        if atlas is None or frame[2] <= 0 or frame[3] <= 0:
            return False
        area = pygame.Rect(*(int(v) for v in frame))
        self.surface.blit(atlas, (int(pos[0]), int(pos[1])), area)
        return True

    def _box(self, rect: Rect, fill) -> None:
        r = pygame.Rect(*(int(v) for v in rect))
        pygame.draw.rect(self.surface, fill, r)
        pygame.draw.rect(self.surface, DARK_GRAY, r, 1)

    def _draw_map(self, game_map: GameMap) -> None:
        for y, row in enumerate(game_map.tiles):
            for x, tile in enumerate(row):
                self._draw_tile(tile, x, y)

    def _draw_tile(self, tile: Tile, x: int, y: int) -> None:
        dest = (x * TILE_SIZE, y * TILE_SIZE)
        if tile.type in (TileType.TREE, TileType.ROCK):
            self._draw_terrain(TileType.GRASS, dest)
        self._draw_terrain(tile.type, dest)

    def _draw_terrain(self, kind: TileType, dest: tuple[int, int]) -> None:
        frame = TILE_ATLAS.get(kind)
        if frame is not None and self._blit_frame(self.tile_atlas, frame, dest):
            return
        pygame.draw.rect(
            self.surface, TILE_COLORS[kind], pygame.Rect(*dest, TILE_SIZE, TILE_SIZE)
        )

    def _draw_player(self, player: Player) -> None:
        half = TILE_SIZE // 2
        for step in player.path:
            center = (step.x * TILE_SIZE + half, step.y * TILE_SIZE + half)
            pygame.draw.circle(self.surface, RED, center, 2)
        if not self._blit_frame(self.character_atlas, PLAYER_FRAME, player.pos):
            w, h = player.size
            rect = pygame.Rect(int(player.pos[0]), int(player.pos[1]), int(w), int(h))
            pygame.draw.rect(self.surface, BROWN, rect)

    def _draw_enemy(self, enemy: Enemy) -> None:
        x, y = int(enemy.pos[0]), int(enemy.pos[1])
        if not self._blit_frame(self.enemy_atlas, enemy.frame, enemy.pos):
            pygame.draw.rect(
                self.surface, ENEMY_COLOR, pygame.Rect(x, y, TILE_SIZE, TILE_SIZE)
            )
        pygame.draw.rect(self.surface, RED, pygame.Rect(x, y - 6, TILE_SIZE, 4))
        filled = max(0, int(TILE_SIZE * enemy.health_fraction()))
        if filled:
            pygame.draw.rect(self.surface, GREEN, pygame.Rect(x, y - 6, filled, 4))

    def _draw_panels(self, game: Game, mouse: tuple[float, float]) -> None:
        mx, my = mouse
        inventory = game.player.inventory
        equipment = game.player.equipment
        self._draw_inventory(inventory)
        self._draw_equipment(game)

        hovered = inventory_index_at(*INVENTORY_ORIGIN, mx, my)
        if hovered is not None:
            item = inventory.get(hovered)
            if not item.is_empty:
                self._tooltip(item.name, mouse)

        hovered_slot = equipment_slot_at(*EQUIPMENT_ORIGIN, mx, my)
        if hovered_slot is not None:
            item = equipment.slots[hovered_slot]
            if not item.is_empty:
                self._tooltip(item.name, mouse)

        self._draw_crafting(game, mouse)

    def _draw_inventory(self, inventory: Inventory) -> None:
        for i, slot in enumerate(inventory):
            rect = inventory_slot_rect(i, *INVENTORY_ORIGIN)
            self._box(rect, LIGHT_GRAY)
            if slot.is_empty:
                continue
            cx, cy = rect[0], rect[1]
            self._text(slot.name[:1], cx + 4, cy + 2, 20, BLACK)
            self._blit_frame(self.item_atlas, slot.frame, (cx, cy))
            self._text(str(slot.count), cx + 4, cy + 20, 16, DARK_BLUE)

    def _draw_equipment(self, game: Game) -> None:
        for i, slot in enumerate(_EQUIPMENT_ORDER):
            rect = equipment_slot_rect(i, *EQUIPMENT_ORIGIN)
            cx, cy = rect[0], rect[1]
            self._box(rect, LIGHT_GRAY)
            self._text(slot.value, cx + BOX_SIZE + 6, cy + 12, 16, BLACK)
            item = game.player.equipment.slots[slot]
            if not item.is_empty:
                self._blit_frame(self.item_atlas, item.frame, (cx, cy))
                self._text(item.name[:1], cx + 4, cy + 2, 20, BLACK)

    def _draw_crafting(self, game: Game, mouse: tuple[float, float]) -> None:
        mx, my = mouse
        tooltip = ""
        for i, recipe in enumerate(game.recipes):
            rect = recipe_rect(i, *CRAFTING_ORIGIN)
            can_craft = game.player.inventory.has_items(recipe.inputs)
            bg = LIGHT_GRAY if can_craft else GRAY
            if _contains(rect, mx, my):
                bg = DARK_GRAY
                tooltip = recipe_tooltip(recipe)
            r = pygame.Rect(*(int(v) for v in rect))
            pygame.draw.rect(self.surface, bg, r)
            pygame.draw.rect(self.surface, BLACK, r, 1)
            self._text(recipe.name, rect[0] + 6, rect[1] + 4, 16, BLACK)
        if tooltip:
            self._text(tooltip, mx + 8, my + 8, 16, DARK_BLUE)

    def _tooltip(self, text: str, mouse: tuple[float, float]) -> None:
        mx, my = mouse
        padding = 4
        width = self._font(16).size(text)[0] + padding * 2
        backdrop = pygame.Surface((width, 20), pygame.SRCALPHA)
        backdrop.fill((0, 0, 0, 204))
        self.surface.blit(backdrop, (int(mx), int(my) - 24))
        self._text(text, mx + padding, my - 20, 16, WHITE)