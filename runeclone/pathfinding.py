"""A* search over the walkable tiles of a map."""

from __future__ import annotations

import heapq
import itertools
from dataclasses import dataclass

from runeclone.gamemap import GameMap
from runeclone.tiles import Point


@dataclass
class _Node:
    point: Point
    parent: _Node | None


def heuristic(a: Point, b: Point) -> float:
    """Manhattan distance between two cells."""
    return float(abs(a.x - b.x) + abs(a.y - b.y))


def neighbors(p: Point) -> list[Point]:
    """The four orthogonal neighbours of a cell."""
    return [
        Point(p.x + 1, p.y),
        Point(p.x - 1, p.y),
        Point(p.x, p.y + 1),
        Point(p.x, p.y - 1),
    ]


def _walkable(game_map: GameMap, p: Point) -> bool:
    tile = game_map.get_tile(p.x, p.y)
    return tile is not None and tile.is_walkable()


def find_path(start: Point, goal: Point, game_map: GameMap) -> list[Point]:
    """Shortest path from start to goal, both included; empty if none exists."""
    start, goal = Point(*start), Point(*goal)
    counter = itertools.count()
    open_heap: list[tuple[float, int, _Node]] = [
        (heuristic(start, goal), next(counter), _Node(start, None))
    ]
    cost_so_far: dict[Point, float] = {start: 0.0}
    visited: set[Point] = set()

    while open_heap:
        _, _, current = heapq.heappop(open_heap)
        if current.point == goal:
            return _reconstruct(current)
        visited.add(current.point)

        for nxt in neighbors(current.point):
            if not _walkable(game_map, nxt) or nxt in visited:
                continue
            new_cost = cost_so_far[current.point] + 1
            old_cost = cost_so_far.get(nxt)
            if old_cost is None or new_cost < old_cost:
                cost_so_far[nxt] = new_cost
                priority = new_cost + heuristic(nxt, goal)
                heapq.heappush(
                    open_heap, (priority, next(counter), _Node(nxt, current))
                )
    return []


def _reconstruct(end: _Node) -> list[Point]:
    path: list[Point] = []
    node: _Node | None = end
    while node is not None:
        path.append(node.point)
        node = node.parent
    path.reverse()
    return path