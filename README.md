# runeclone

A small top-down, tile-based role-playing game. Walk around a randomly
generated map, chop trees, mine rocks and fish in water, fill a 28-slot
inventory, equip weapons and armour, craft items from recipes, and fight
enemies in turn-based combat that drops random loot.

## Installing

```
pip install .
```

The game window is drawn with pygame, which is installed as a dependency.

## Playing

Start the game with:

```
runeclone
```

Options:

- `--seed N` – seed for map generation and loot rolls, for a repeatable world.
- `--assets DIR` – directory holding the sprite sheets `tiles.png`,
  `rogues.png`, `items.png` and `monsters.png` (default: `assets`). Any sheet
  that is missing is replaced by plain coloured rectangles.
- `--fps N` – frame rate cap (default: 60).

Run `runeclone --help` for the same list.

Controls:

- **Left click on a grass tile** – walk there along the shortest path.
- **Left click on a tree, rock or water tile** – walk next to it and gather
  from it. Trees give Logs, rocks give Ore, water gives Fish. Trees and rocks
  become grass once gathered.
- **B** – show or hide the inventory, equipment and crafting panels.
- **Click an inventory item** – equip it if its type is Head, Body, Legs,
  Weapon or Shield; whatever was in that slot goes back to the inventory.
- **Click an equipment slot** – take the item off and put it in the inventory.
- **Click a recipe** – craft it when you hold the ingredients. Hovering a
  recipe lists what it needs (a Sword takes 2 Ore and 1 Logs).

Coming within one tile of an enemy starts combat. Player and enemy take turns
once a second: you hit for 10, the enemy hits back for 5. Moving more than two
tiles away ends the fight. A defeated enemy may drop items from its loot table
(a Slime drops a Club 30% of the time and 5 Coins 70% of the time).

Status messages (paths not found, enemies defeated, escapes) are sent to the
standard `logging` module rather than shown on screen.

## Using the game logic

The rules of the game work without a window, which makes them easy to script
and test:

```python
from runeclone.game import new_game

game = new_game(seed=42)
game.handle_map_click(3, 2)
for _ in range(120):
    game.update(1 / 60)
print(game.player.inventory.get(0))
```

The modules are:

- `runeclone.tiles` – map constants, `TileType`, `Point` and `Tile`.
- `runeclone.gamemap` – `GameMap`, including random map generation.
- `runeclone.pathfinding` – A* search over walkable tiles with `find_path`.
- `runeclone.items` – `ItemSlot`, `Recipe`, `EquipmentSlot`, `Inventory` and
  `Equipment`.
- `runeclone.player` – `Player` movement, gathering and crafting.
- `runeclone.game` – `Game`, `Enemy`, `LootEntry`, combat, loot and
  `new_game`.
- `runeclone.ui` – `Renderer` for drawing with pygame, and hit-testing helpers
  for the panels.
- `runeclone.app` – the `runeclone` command (`main` and `parse_args`).

## Limitations

There is no saving or loading of a game. When the player's health runs out
the fight simply ends; there is no game-over screen or respawn.

## Running the tests

```
pip install ".[test]"
pytest
```