import pygame
import pytest

from runeclone.game import Game, default_recipes
from runeclone.gamemap import GameMap
from runeclone.items import INVENTORY_SIZE, EquipmentSlot
from runeclone.player import Player
from runeclone.tiles import TILE_SIZE, TileType
from runeclone.ui import (
    LIGHT_GRAY,
    TILE_COLORS,
    Renderer,
    equipment_slot_at,
    equipment_slot_rect,
    inventory_index_at,
    inventory_slot_rect,
    recipe_at,
    recipe_rect,
    recipe_tooltip,
)


def _game():
    game_map = GameMap(20, 15)
    return Game(player=Player(64.0, 64.0, game_map), game_map=game_map)


def test_first_inventory_slot_sits_at_origin():
    assert inventory_slot_rect(0, 10, 10) == (10, 10, 40, 40)


@pytest.mark.parametrize("index", range(INVENTORY_SIZE))
def test_inventory_rect_round_trip(index):
    x, y, w, h = inventory_slot_rect(index, 10, 10)
    assert inventory_index_at(10, 10, x, y) == index
    assert inventory_index_at(10, 10, x + w - 1, y + h - 1) == index


def test_inventory_rows_hold_seven_slots():
    assert inventory_slot_rect(7, 10, 10)[0] == inventory_slot_rect(0, 10, 10)[0]
    assert inventory_slot_rect(7, 10, 10)[1] > inventory_slot_rect(6, 10, 10)[1]


def test_inventory_gap_and_outside_hit_nothing():
    x, y, w, _ = inventory_slot_rect(0, 10, 10)
    assert inventory_index_at(10, 10, x + w, y) is None
    assert inventory_index_at(10, 10, 0, 0) is None


@pytest.mark.parametrize("index", range(len(EquipmentSlot)))
def test_equipment_rect_round_trip(index):
    x, y, w, h = equipment_slot_rect(index, 400, 10)
    assert equipment_slot_at(400, 10, x + w / 2, y + h / 2) == list(EquipmentSlot)[index]


def test_equipment_order_starts_with_head_and_ends_with_shield():
    first = equipment_slot_rect(0, 400, 10)
    last = equipment_slot_rect(4, 400, 10)
    assert equipment_slot_at(400, 10, first[0], first[1]) is EquipmentSlot.HEAD
    assert equipment_slot_at(400, 10, last[0], last[1]) is EquipmentSlot.SHIELD
    assert equipment_slot_at(400, 10, 399, 10) is None


def test_recipe_rect_round_trip_and_count_limit():
    x, y, _, _ = recipe_rect(1, 600, 10)
    assert recipe_at(600, 10, x + 1, y + 1, 2) == 1
    assert recipe_at(600, 10, x + 1, y + 1, 1) is None


def test_recipe_tooltip_lists_inputs():
    assert recipe_tooltip(default_recipes()[0]) == "2x Ore\n1x Logs\n"


def test_renderer_draws_fallback_grass():
    surface = pygame.Surface((800, 600))
    game = _game()
    Renderer(surface).draw(game, (0, 0))
    px, py = 15 * TILE_SIZE + 16, 10 * TILE_SIZE + 16
    assert tuple(surface.get_at((px, py)))[:3] == TILE_COLORS[TileType.GRASS]


def test_renderer_draws_water_colour():
    surface = pygame.Surface((800, 600))
    game = _game()
    game.game_map.set_tile(15, 10, TileType.WATER)
    Renderer(surface).draw(game, (0, 0))
    px, py = 15 * TILE_SIZE + 16, 10 * TILE_SIZE + 16
    assert tuple(surface.get_at((px, py)))[:3] == TILE_COLORS[TileType.WATER]


def test_renderer_shows_inventory_panel():
    surface = pygame.Surface((800, 600))
    game = _game()
    game.show_inventory = True
    Renderer(surface).draw(game, (0, 0))
    x, y, w, h = inventory_slot_rect(6, 10, 10)
    assert tuple(surface.get_at((x + w // 2, y + h // 2)))[:3] == LIGHT_GRAY