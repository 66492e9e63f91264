import pytest

from darkjaghou.maps import Tile, level_map
from darkjaghou.movement import Direction, move_hero


@pytest.fixture
def grid_with_hero():
    grid = level_map(1)
    grid[1][1] = Tile.HERO
    return grid


@pytest.mark.parametrize(
    "key, direction",
    [
        ("z", Direction.UP),
        ("s", Direction.DOWN),
        ("q", Direction.LEFT),
        ("d", Direction.RIGHT),
    ],
)
def test_from_key(key, direction):
    assert Direction.from_key(key) is direction


@pytest.mark.parametrize("key", ["x", "Z", "", "\x1b"])
def test_from_key_unknown(key):
    assert Direction.from_key(key) is None


def test_opposite_steps_cancel():
    start = (5, 5)
    assert Direction.DOWN.step(Direction.UP.step(start)) == start
    assert Direction.RIGHT.step(Direction.LEFT.step(start)) == start


def test_move_down_onto_floor(grid_with_hero):
    assert move_hero(grid_with_hero, (1, 1), "s") == (2, 1)
    assert grid_with_hero[1][1] == Tile.FLOOR
    assert grid_with_hero[2][1] == Tile.HERO


@pytest.mark.parametrize("key", ["z", "q", "d"])
def test_walls_block(grid_with_hero, key):
    before = [row[:] for row in grid_with_hero]
    assert move_hero(grid_with_hero, (1, 1), key) == (1, 1)
    assert grid_with_hero == before


def test_unknown_key_does_nothing(grid_with_hero):
    before = [row[:] for row in grid_with_hero]
    assert move_hero(grid_with_hero, (1, 1), "x") == (1, 1)
    assert grid_with_hero == before


def test_round_trip(grid_with_hero):
    position = move_hero(grid_with_hero, (1, 1), "s")
    position = move_hero(grid_with_hero, position, "z")
    assert position == (1, 1)
    assert grid_with_hero[1][1] == Tile.HERO
    assert grid_with_hero[2][1] == Tile.FLOOR


def test_characters_block():
    grid = [[Tile.HERO, Tile.PRINCESS, Tile.FLOOR]]
    assert move_hero(grid, (0, 0), "d") == (0, 0)
    assert grid == [[Tile.HERO, Tile.PRINCESS, Tile.FLOOR]]


def test_grid_edge_blocks():
    grid = [[Tile.HERO, Tile.FLOOR]]
    assert move_hero(grid, (0, 0), "q") == (0, 0)
    assert move_hero(grid, (0, 0), "z") == (0, 0)
    assert move_hero(grid, (0, 0), "d") == (0, 1)
    assert grid == [[Tile.FLOOR, Tile.HERO]]
    assert move_hero(grid, (0, 1), "d") == (0, 1)


def test_hero_count_is_preserved(grid_with_hero):
    position = (1, 1)
    for key in "sssdddzzqqsd":
        position = move_hero(grid_with_hero, position, key)
        heroes = [
            (r, c)
            for r, row in enumerate(grid_with_hero)
            for c, code in enumerate(row)
            if code == Tile.HERO
        ]
        assert heroes == [position]