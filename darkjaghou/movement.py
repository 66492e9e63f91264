"""Moving the hero one cell through the labyrinth."""

from __future__ import annotations

from enum import Enum

from .maps import Tile

Position = tuple[int, int]


class Direction(Enum):
    """A step as (row offset, column offset)."""

    UP = (-1, 0)
    DOWN = (1, 0)
    LEFT = (0, -1)
    RIGHT = (0, 1)

    @classmethod
    def from_key(cls, key: str) -> Direction | None:
        """Return the direction bound to a key (z, s, q, d), or None."""
        return _KEYS.get(key)

    def step(self, position: Position) -> Position:
        """Return the position one cell away in this direction."""
        row, col = position
        d_row, d_col = self.value
        return row + d_row, col + d_col


_KEYS = {
    "z": Direction.UP,
    "s": Direction.DOWN,
    "q": Direction.LEFT,
    "d": Direction.RIGHT,
}


def move_hero(grid: list[list[int]], position: Position, key: str) -> Position:
    """Move the hero one cell for the given key and return its new position.

    The hero only moves onto a floor cell inside the grid; any other key or
    a blocked target leaves the grid and the position unchanged.
    """
    direction = Direction.from_key(key)
    if direction is None:
        return position
    row, col = direction.step(position)
    if not (0 <= row < len(grid) and 0 <= col < len(grid[row])):
        return position
    if grid[row][col] != Tile.FLOOR:
        return position
    old_row, old_col = position
    grid[old_row][old_col] = int(Tile.FLOOR)
    grid[row][col] = int(Tile.HERO)
    return row, col