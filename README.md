# darkjaghou

A small labyrinth game for the terminal. You are lost in the maze of the
bloodthirsty Dark Jaghou, who wants only to fall upon you and drain your soul.
Find your way to the princess before he reaches her, or you.

## Installing

```
pip install .
```

## Running

```
darkjaghou
darkjaghou --seed 42
```

`--seed` fixes the random source used to place the characters, so the same
seed gives the same placement.

The home menu is driven by single key presses, with no Enter needed:

- `1` shows the introduction; press `1` to go back to the home menu
- `2` asks for the hero's name (typed and confirmed with Enter), shows it,
  and goes back to the home menu on `1`
- `3` shows the four labyrinths one after another (any key moves on), then
  asks which level to play; a key other than `1` to `4` shows them again
- `4` plays a short "GAME OVER" animation and exits

Any other key on the home menu prints an error and waits for a valid key.

When a level is chosen, the hero (☺) and the princess (♔) and, from level 2
on, Dark Jaghou (☠) are placed at random on free squares (░) of the
labyrinth, and the level is drawn.

Keys are read straight from the terminal without echo where the input is a
POSIX terminal; otherwise characters are simply read from standard input.
The end of input, or Ctrl-C, ends the program.

## What it does not do

The command stops once the chosen level has been drawn: there is no play
loop, so the hero cannot be moved from the command, and nothing checks
whether the hero reaches the princess or meets Dark Jaghou. Dark Jaghou does
not move. The hero's name is only shown on the renaming screen. Moving the
hero is available only through the library, as described below.

## Using it as a library

- `darkjaghou.maps.level_map(number)` returns a fresh, mutable copy of a
  level's 21×21 grid (the level may be an int or its digit character;
  unknown levels raise `ValueError`), and `level_numbers()` returns the
  levels that exist, `(1, 2, 3, 4)`. Each cell holds a `Tile` value.
- `darkjaghou.placement.place_hero`, `place_princess` and `place_minotaur`
  put a character on a random floor cell of a grid, using a `random.Random`
  you pass in, and return its `(row, column)`. They raise `ValueError` if
  the grid has no floor cell left.
- `darkjaghou.movement.move_hero(grid, position, key)` moves the hero one
  cell in the `Direction` bound to the key (`z` up, `s` down, `q` left,
  `d` right) and returns the new position. The hero only moves onto a floor
  cell inside the grid; otherwise nothing changes.
- `darkjaghou.render.render_map(grid)` turns a grid into the text drawn on
  screen, and `tile_symbol(code)` gives the character for one cell; both
  raise `MapError` on a code that is not a tile.
- `darkjaghou.terminal.getch()` reads one key and `clear_screen()` clears
  the screen.
- `darkjaghou.menu.Game` runs the menus with the key reader, line reader,
  output, screen clearing, sleeping and random source you give it, which
  makes it easy to drive from a script or a test. `Game.quit()` raises
  `SystemExit(0)`.

## Running the tests

```
pip install .[test]
pytest
```