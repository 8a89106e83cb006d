"""Command-line entry point that opens the game window and runs the loop."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Sequence

import pygame

from runeclone.game import Game, new_game
from runeclone.tiles import SCREEN_HEIGHT, SCREEN_WIDTH, TILE_SIZE
from runeclone.ui import (
    CRAFTING_ORIGIN,
    EQUIPMENT_ORIGIN,
    INVENTORY_ORIGIN,
    Renderer,
    equipment_slot_at,
    inventory_index_at,
    recipe_at,
)

TARGET_FPS = 60


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse the command line."""
    parser = argparse.ArgumentParser(prog="runeclone", description="RuneClone game.")
    parser.add_argument("--seed", type=int, default=None, help="map generation seed")
    parser.add_argument(
        "--assets", type=Path, default=Path("assets"), help="directory of sprite sheets"
    )
    parser.add_argument("--fps", type=int, default=TARGET_FPS, help="frame rate cap")
    return parser.parse_args(argv)


def _handle_click(game: Game, mouse_x: float, mouse_y: float) -> None:
    """Dispatch a left click to the panels or, if none was hit, the map."""
    clicked_ui = False
    if game.show_inventory:
        index = inventory_index_at(*INVENTORY_ORIGIN, mouse_x, mouse_y)
        if index is not None:
            clicked_ui = True
            game.handle_inventory_click(index)
        slot = equipment_slot_at(*EQUIPMENT_ORIGIN, mouse_x, mouse_y)
        if slot is not None:
            clicked_ui = True
            game.handle_equipment_click(slot)

    if not clicked_ui:
        game.handle_map_click(int(mouse_x) // TILE_SIZE, int(mouse_y) // TILE_SIZE)

    if game.show_inventory:
        picked = recipe_at(*CRAFTING_ORIGIN, mouse_x, mouse_y, len(game.recipes))
        if picked is not None:
            recipe = game.recipes[picked]
            if game.player.inventory.has_items(recipe.inputs):
                game.craft(recipe)


def _load_texture(path: Path) -> pygame.Surface | None:
    if not path.is_file():
        return None
    return pygame.image.load(str(path)).convert_alpha()


def main(argv: Sequence[str] | None = None) -> int:
    """Open the window and run the game until it is closed."""
    args = parse_args(argv)
    pygame.init()
    try:
        screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        pygame.display.set_caption("RuneClone")
        renderer = Renderer(
            screen,
            tile_atlas=_load_texture(args.assets / "tiles.png"),
            character_atlas=_load_texture(args.assets / "rogues.png"),
            item_atlas=_load_texture(args.assets / "items.png"),
            enemy_atlas=_load_texture(args.assets / "monsters.png"),
        )
        game = new_game(args.seed)
        clock = pygame.time.Clock()
        running = True
        while running:
            dt = clock.tick(args.fps) / 1000.0
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_b:
                    game.toggle_inventory()
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    _handle_click(game, *event.pos)
            if not running:
                break
            game.update(dt)
            renderer.draw(game, pygame.mouse.get_pos())
            pygame.display.flip()
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())