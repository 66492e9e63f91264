import pytest

from darkjaghou.maps import SIZE, Tile, level_map, level_numbers


def test_level_numbers():
    assert level_numbers() == (1, 2, 3, 4)


@pytest.mark.parametrize("number", [1, 2, 3, 4])
def test_grid_is_square(number):
    grid = level_map(number)
    assert len(grid) == SIZE
    assert all(len(row) == SIZE for row in grid)


@pytest.mark.parametrize("number", [1, 2, 3, 4])
def test_only_scenery_tiles(number):
    grid = level_map(number)
    codes = {code for row in grid for code in row}
    assert codes <= set(range(Tile.CORNER_BOTTOM_RIGHT + 1))
    assert Tile.FLOOR in codes


@pytest.mark.parametrize("number", [1, 2, 3, 4])
def test_outer_corners(number):
    grid = level_map(number)
    assert grid[0][0] == Tile.CORNER_TOP_LEFT
    assert grid[0][-1] == Tile.CORNER_TOP_RIGHT
    assert grid[-1][0] == Tile.CORNER_BOTTOM_LEFT
    assert grid[-1][-1] == Tile.CORNER_BOTTOM_RIGHT


@pytest.mark.parametrize("number", [1, 2, 3, 4])
def test_border_is_walled(number):
    grid = level_map(number)
    assert all(code == Tile.WALL_HORIZONTAL for code in grid[0][1:-1])
    assert all(code == Tile.WALL_HORIZONTAL for code in grid[-1][1:-1])
    assert all(row[0] == Tile.WALL_VERTICAL for row in grid[1:-1])
    assert all(row[-1] == Tile.WALL_VERTICAL for row in grid[1:-1])


def test_first_three_levels_share_layout():
    assert level_map(1) == level_map(2) == level_map(3)
    assert level_map(4) != level_map(1)


def test_known_cells():
    assert level_map(1)[1][1] == Tile.FLOOR
    assert level_map(1)[1][2] == Tile.WALL_VERTICAL
    assert level_map(4)[1][1] == Tile.CORNER_BOTTOM_RIGHT
    assert level_map(4)[1][19] == Tile.CORNER_BOTTOM_LEFT


def test_returns_independent_copies():
    first = level_map(1)
    first[1][1] = Tile.HERO
    assert level_map(1)[1][1] == Tile.FLOOR
    assert level_map(2)[1][1] == Tile.FLOOR


def test_digit_character_accepted():
    assert level_map("4") == level_map(4)


@pytest.mark.parametrize("number", [0, 5, "x", None])
def test_unknown_level(number):
    with pytest.raises(ValueError):
        level_map(number)


def test_map_cells_use_fixed_codes():
    grid = level_map(4)
    assert grid[0][0] == 3
    assert grid[0][1] == 1
    assert grid[1][0] == 2
    assert grid[1][1] == 6
    assert grid[1][19] == 5
    assert grid[2][1] == 0
    assert Tile(grid[0][-1]) is Tile.CORNER_TOP_RIGHT
    assert grid[0][-1] == 4
    assert Tile.MINOTAUR == 7
    assert Tile.HERO == 8
    assert Tile.PRINCESS == 9