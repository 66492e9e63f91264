"""Tile codes and the labyrinths of the four levels."""

from __future__ import annotations

from enum import IntEnum

SIZE = 21


class Tile(IntEnum):
    """Codes stored in a labyrinth grid."""

    FLOOR = 0
    WALL_HORIZONTAL = 1
    WALL_VERTICAL = 2
    CORNER_TOP_LEFT = 3
    CORNER_TOP_RIGHT = 4
    CORNER_BOTTOM_LEFT = 5
    CORNER_BOTTOM_RIGHT = 6
    MINOTAUR = 7
    HERO = 8
    PRINCESS = 9


_CLASSIC = (
    (3, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 4),
    (2, 0, 2, 0, 2, 0, 2, 0, 2, 0, 0, 0, 2, 0, 0, 0, 2, 0, 2, 0, 2),
    (2, 0, 2, 0, 2, 0, 2, 0, 2, 0, 2, 0, 2, 0, 0, 0, 2, 0, 2, 0, 2),
    (2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 2, 0, 0, 0, 0, 0, 0, 0, 2, 0, 2),
    (2, 2, 0, 2, 2, 0, 2, 0, 1, 1, 4, 1, 0, 0, 2, 0, 0, 0, 0, 0, 2),
    (2, 2, 0, 2, 2, 0, 2, 0, 0, 0, 2, 0, 4, 0, 2, 0, 0, 3, 1, 1, 2),
    (2, 2, 0, 2, 2, 0, 0, 0, 0, 0, 3, 1, 5, 1, 5, 1, 0, 2, 0, 0, 2),
    (2, 0, 0, 0, 5, 1, 2, 0, 2, 0, 2, 0, 0, 0, 2, 0, 0, 2, 0, 2, 2),
    (2, 0, 2, 0, 0, 0, 2, 0, 2, 0, 2, 0, 0, 0, 2, 0, 0, 2, 0, 2, 2),
    (2, 0, 2, 0, 2, 0, 2, 0, 2, 0, 2, 0, 1, 1, 5, 1, 0, 2, 0, 2, 2),
    (2, 0, 2, 0, 5, 1, 6, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 2),
    (2, 0, 2, 0, 0, 0, 0, 0, 0, 6, 5, 2, 0, 1, 4, 0, 2, 0, 1, 0, 2),
    (2, 0, 2, 1, 3, 3, 1, 0, 0, 0, 0, 2, 0, 0, 2, 0, 5, 4, 0, 0, 2),
    (2, 0, 0, 0, 2, 2, 0, 0, 2, 0, 3, 6, 0, 0, 0, 0, 0, 2, 0, 0, 2),
    (2, 2, 0, 0, 0, 2, 0, 2, 6, 0, 2, 0, 0, 0, 2, 0, 0, 0, 0, 2, 2),
    (2, 5, 1, 4, 0, 2, 0, 2, 2, 0, 2, 0, 2, 0, 2, 0, 0, 1, 4, 2, 2),
    (2, 0, 0, 2, 0, 2, 0, 5, 6, 0, 0, 0, 2, 0, 2, 0, 0, 0, 2, 0, 2),
    (2, 2, 0, 0, 0, 2, 0, 0, 0, 0, 1, 0, 0, 0, 2, 0, 2, 0, 2, 0, 2),
    (2, 2, 0, 1, 0, 0, 0, 2, 2, 0, 0, 0, 0, 1, 6, 0, 2, 0, 0, 0, 2),
    (2, 0, 0, 0, 0, 2, 0, 2, 2, 1, 1, 1, 0, 0, 0, 0, 2, 0, 2, 0, 2),
    (5, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 6),
)

_OPEN_HALLS = (
    (3, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 4),
    (2, 6, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 5, 2),
    (2, 0, 0, 3, 4, 0, 0, 0, 3, 0, 0, 3, 4, 0, 0, 2, 0, 6, 0, 0, 2),
    (2, 0, 0, 2, 0, 2, 0, 2, 0, 4, 0, 2, 0, 6, 0, 2, 3, 0, 0, 0, 2),
    (2, 0, 0, 2, 0, 2, 0, 2, 1, 2, 0, 3, 4, 0, 0, 0, 5, 0, 0, 0, 2),
    (2, 0, 0, 5, 6, 0, 0, 2, 0, 2, 0, 2, 0, 2, 0, 0, 0, 4, 0, 0, 2),
    (2, 4, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 3, 2),
    (2, 2, 0, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 0, 0, 1, 1, 0, 0, 2, 2),
    (2, 6, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 3, 6, 2),
    (2, 0, 0, 1, 4, 0, 0, 3, 0, 0, 0, 4, 0, 0, 2, 0, 2, 0, 2, 2, 2),
    (2, 0, 0, 0, 2, 0, 2, 0, 4, 0, 3, 0, 4, 0, 2, 0, 2, 0, 2, 1, 2),
    (2, 4, 0, 0, 2, 0, 2, 1, 2, 0, 2, 0, 0, 0, 5, 1, 6, 0, 2, 0, 2),
    (2, 2, 0, 0, 2, 0, 2, 0, 2, 0, 3, 1, 4, 0, 3, 1, 4, 0, 2, 0, 2),
    (2, 2, 0, 0, 2, 0, 2, 0, 2, 0, 2, 0, 2, 0, 2, 0, 2, 0, 2, 0, 2),
    (2, 6, 0, 0, 6, 0, 2, 0, 2, 0, 2, 0, 6, 0, 2, 0, 2, 0, 0, 0, 2),
    (2, 0, 0, 1, 0, 0, 2, 0, 2, 0, 0, 1, 0, 0, 2, 0, 2, 0, 3, 4, 2),
    (2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 2, 2),
    (2, 0, 1, 4, 0, 0, 0, 0, 3, 1, 1, 0, 1, 1, 4, 0, 0, 2, 0, 2, 2),
    (2, 0, 0, 5, 1, 1, 0, 1, 6, 0, 0, 0, 0, 0, 5, 1, 1, 6, 0, 2, 2),
    (2, 4, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 2, 2),
    (5, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 6),
)

_LEVELS = {
    1: _CLASSIC,
    2: _CLASSIC,
    3: _CLASSIC,
    4: _OPEN_HALLS,
}


def level_numbers() -> tuple[int, ...]:
    """Return the numbers of the available levels, in order."""
    return tuple(sorted(_LEVELS))


def level_map(number: int | str) -> list[list[int]]:
    """Return a fresh, mutable copy of the labyrinth for a level.

    The level may be given as an int or as its digit character.
    Raises ValueError for an unknown level.
    """
    try:
        key = int(number)
    except (TypeError, ValueError):
        raise ValueError(f"unknown level: {number!r}") from None
    try:
        layout = _LEVELS[key]
    except KeyError:
        raise ValueError(f"unknown level: {number!r}") from None
    return [list(row) for row in layout]