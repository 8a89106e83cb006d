import pytest

from runeclone.gamemap import GameMap
from runeclone.pathfinding import find_path, heuristic, neighbors
from runeclone.tiles import Point, TileType


def _assert_valid_path(path, start, goal, game_map):
    assert path[0] == start
    assert path[-1] == goal
    for a, b in zip(path, path[1:]):
        assert heuristic(a, b) == 1.0
    for p in path[1:]:
        assert game_map.get_tile(p.x, p.y).is_walkable()


def test_heuristic_is_manhattan_and_symmetric():
    a, b = Point(1, 5), Point(4, 1)
    assert heuristic(a, b) == heuristic(b, a)
    assert heuristic(a, a) == 0.0
    assert heuristic(Point(0, 0), Point(0, 1)) == 1.0


def test_neighbors_order_and_adjacency():
    p = Point(3, 3)
    result = neighbors(p)
    assert result == [Point(4, 3), Point(2, 3), Point(3, 4), Point(3, 2)]
    assert all(heuristic(p, n) == 1.0 for n in result)


def test_start_equals_goal():
    game_map = GameMap(4, 4)
    assert find_path(Point(2, 2), Point(2, 2), game_map) == [Point(2, 2)]


def test_open_map_path_is_shortest():
    game_map = GameMap(10, 8)
    start, goal = Point(0, 0), Point(6, 5)
    path = find_path(start, goal, game_map)
    _assert_valid_path(path, start, goal, game_map)
    assert len(path) == heuristic(start, goal) + 1


def test_path_detours_around_wall():
    game_map = GameMap(7, 7)
    for y in range(0, 6):
        game_map.set_tile(3, y, TileType.ROCK)
    start, goal = Point(0, 0), Point(6, 0)
    path = find_path(start, goal, game_map)
    _assert_valid_path(path, start, goal, game_map)
    assert Point(3, 6) in path
    assert len(path) > heuristic(start, goal) + 1


@pytest.mark.parametrize("kind", [TileType.TREE, TileType.ROCK, TileType.WATER])
def test_unwalkable_goal_has_no_path(kind):
    game_map = GameMap(5, 5)
    game_map.set_tile(4, 4, kind)
    assert find_path(Point(0, 0), Point(4, 4), game_map) == []


def test_out_of_bounds_goal_has_no_path():
    assert find_path(Point(0, 0), Point(9, 9), GameMap(5, 5)) == []


def test_enclosed_goal_has_no_path():
    game_map = GameMap(5, 5)
    for p in neighbors(Point(2, 2)):
        game_map.set_tile(p.x, p.y, TileType.WATER)
    assert find_path(Point(0, 0), Point(2, 2), game_map) == []


def test_start_tile_need_not_be_walkable():
    game_map = GameMap(5, 1)
    game_map.set_tile(0, 0, TileType.TREE)
    path = find_path(Point(0, 0), Point(4, 0), game_map)
    assert path[0] == Point(0, 0)
    assert path[-1] == Point(4, 0)
    assert len(path) == 5


def test_accepts_plain_tuples():
    game_map = GameMap(3, 3)
    path = find_path((0, 0), (2, 0), game_map)
    _assert_valid_path(path, Point(0, 0), Point(2, 0), game_map)