"""Turning a labyrinth grid into the text shown on screen."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from .maps import Tile


class MapError(ValueError):
    """Raised when a grid holds a code that is not a known tile."""


_SYMBOLS = {
    Tile.FLOOR: "\u2591",
    Tile.WALL_HORIZONTAL: "\u2550",
    Tile.WALL_VERTICAL: "\u2551",
    Tile.CORNER_TOP_LEFT: "\u2554",
    Tile.CORNER_TOP_RIGHT: "\u2557",
    Tile.CORNER_BOTTOM_LEFT: "\u255A",
    Tile.CORNER_BOTTOM_RIGHT: "\u255D",
    Tile.MINOTAUR: "\u2620",
    Tile.HERO: "\u263A",
    Tile.PRINCESS: "\u2654",
}


def tile_symbol(code: int) -> str:
    """Return the character drawn for a tile code.

    Raises MapError for a code that is not a tile.
    """
    try:
        return _SYMBOLS[Tile(code)]
    except (ValueError, TypeError):
        raise MapError(f"Erreur de map: unknown tile code {code!r}") from None


def render_map(grid: Iterable[Sequence[int]]) -> str:
    """Return the grid as text: each symbol followed by a space, one row per line."""
    return "".join(
        "".join(f"{tile_symbol(code)} " for code in row) + "\n" for row in grid
    )