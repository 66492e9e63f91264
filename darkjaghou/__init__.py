"""Dark Jaghou: a terminal labyrinth game with its maps, placement, movement and menus."""

__version__ = "0.1.0"