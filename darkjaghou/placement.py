"""Random placement of the hero, the princess and the minotaur."""

from __future__ import annotations

import random

from .maps import Tile

Position = tuple[int, int]


def _place(grid: list[list[int]], rng: random.Random, tile: Tile) -> Position:
    if not any(code == Tile.FLOOR for row in grid for code in row):
        raise ValueError(f"no free floor cell to place {tile.name.lower()}")
    rows = len(grid)
    cols = len(grid[0])
    while True:
        row = rng.randrange(rows)
        col = rng.randrange(cols)
        if grid[row][col] == Tile.FLOOR:
            grid[row][col] = int(tile)
            return row, col


def place_hero(grid: list[list[int]], rng: random.Random) -> Position:
    """Put the hero on a random floor cell; return its (row, column)."""
    return _place(grid, rng, Tile.HERO)


def place_princess(grid: list[list[int]], rng: random.Random) -> Position:
    """Put the princess on a random floor cell; return its (row, column)."""
    return _place(grid, rng, Tile.PRINCESS)


def place_minotaur(grid: list[list[int]], rng: random.Random) -> Position:
    """Put the minotaur on a random floor cell; return its (row, column)."""
    return _place(grid, rng, Tile.MINOTAUR)