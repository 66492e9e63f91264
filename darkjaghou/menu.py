"""The game's menus, level selection and entry point."""

from __future__ import annotations

import argparse
import random
import sys
import time
from collections.abc import Callable

from .maps import level_map, level_numbers
from .placement import place_hero, place_minotaur, place_princess
from .render import render_map
from .terminal import clear_screen, getch

_RULE = "  ||===============================||\n"

_HOME = (
    _RULE
    + "  ||             HOME              ||\n"
    + _RULE
    + "  ||     |1| Lire l'introduction   ||\n"
    + _RULE
    + "  ||     |2| Renommer héro         ||\n"
    + _RULE
    + "  ||     |3| Choix du niveau       ||\n"
    + _RULE
    + "  ||     |4| Quitter               ||\n"
    + _RULE
    + "\n\n"
)

_BACK = _RULE + "  ||     |1| Retour                ||\n" + _RULE + "\n\n"

_STARS = "**********************************************************\n"
_BLANK = "*                                                        *\n"

_INTRO = (
    _RULE
    + "  ||         INTRODUCTION          ||\n"
    + _RULE
    + "\n\n"
    + _STARS
    + _BLANK
    + "*     Bienvenue dans le labyrinthe de l'effroyable       *\n"
    + "*   et sanguinaire Dark Jaghou qui ne cherchera qu'a     *\n"
    + "*      vous tomber dessus pour aspirer votre ame.        *\n"
    + _BLANK
    + "*  Trouvez votre chemin vers la princesse Mohamed avant  *\n"
    + "*   que Dark Jaghou ne lui tombe dessus... ou sur vous.  *\n"
    + _BLANK
    + _STARS
    + "\n"
)

_NAME_HEADER = _RULE + "  ||         Choix du nom          ||\n" + _RULE + "\n\n"

_MENU_ERROR = "Error ! Veuillez entrer en chiffre de 1 à 4"


def _write_stdout(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


def _read_stdin_line() -> str:
    return sys.stdin.readline()


class Game:
    """The menus of the game, driven through injectable input and output."""

    def __init__(
        self,
        read_key: Callable[[], str] | None = None,
        read_line: Callable[[], str] | None = None,
        write: Callable[[str], object] | None = None,
        clear: Callable[[], object] | None = None,
        sleep: Callable[[float], object] | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.read_key = read_key or getch
        self.read_line = read_line or _read_stdin_line
        self.write = write or _write_stdout
        self.clear = clear or clear_screen
        self.sleep = sleep or time.sleep
        self.rng = rng or random.Random()
        self.hero_name: str | None = None

    def _key(self) -> str:
        key = self.read_key()
        if not key:
            raise EOFError("end of input")
        return key

    def _line(self) -> str:
        line = self.read_line()
        if not line:
            raise EOFError("end of input")
        return line.rstrip("\n")

    def banner(self) -> None:
        """Clear the screen and draw the game title."""
        self.clear()
        self.write(
            "\n\n\n\n"
            "  ###################################\n"
            "  #           Dark JAGHOU           #\n"
            "  ###################################\n"
        )

    def main_menu(self) -> None:
        """Show the home menu and act on the choices until a level starts or the game ends."""
        while True:
            self.banner()
            self.write(_HOME)
            choice = self._key()
            while choice not in ("1", "2", "3", "4"):
                self.write(_MENU_ERROR)
                choice = self._key()
            if choice == "1":
                self.intro()
            elif choice == "2":
                self.rename()
            elif choice == "3":
                self.start_level(self.choose_level())
                return
            else:
                self.quit()

    def intro(self) -> None:
        """Show the introduction until the back key is pressed."""
        while True:
            self.banner()
            self.write(_INTRO)
            self.write(_BACK)
            if self._key() == "1":
                return

    def rename(self) -> str:
        """Ask for the hero's name until confirmed with the back key; return it."""
        while True:
            self.banner()
            self.write(_NAME_HEADER)
            self.write(
                _STARS
                + "*       Veuillez entrer le nom de votre hero :           *\n"
                + _BLANK
                + _STARS
                + "\n"
            )
            self.write(_BACK)
            name = self._line()
            self.write(f"Vous avez choisi : {name}\n")
            self.banner()
            self.write(_NAME_HEADER)
            self.write(
                _STARS
                + "*              Votre hero se nomme :                     *\n"
                + f"                     {name}                             \n"
                + _STARS
                + "\n"
            )
            self.write(_BACK)
            self.hero_name = name
            if self._key() == "1":
                return name

    def show_maps(self) -> None:
        """Show every level's labyrinth, one screen per key press."""
        for number in level_numbers():
            self.banner()
            self.write(
                _RULE
                + f"  ||            Niveau {number}           ||\n"
                + _RULE
                + "\n\n"
            )
            self.write(render_map(level_map(number)))
            self._key()

    def choose_level(self) -> int:
        """Show the levels and ask for one until a valid level is chosen."""
        valid = {str(number): number for number in level_numbers()}
        while True:
            self.show_maps()
            self.clear()
            self.write("Quel niveau choisissez-vous ?")
            key = self._key()
            if key in valid:
                self.write(key)
                self._key()
                return valid[key]

    def start_level(self, level: int | str) -> list[list[int]] | None:
        """Set up a level with its characters, draw it and return its grid.

        An unknown level writes a failure message and returns None.
        """
        self.clear()
        try:
            grid = level_map(level)
        except ValueError:
            self.write("ECHEC\n")
            return None
        place_hero(grid, self.rng)
        place_princess(grid, self.rng)
        if int(level) != 1:
            place_minotaur(grid, self.rng)
        self.write(render_map(grid))
        return grid

    def quit(self) -> None:
        """Play the game-over animation and end the program."""
        for step in range(4):
            self.clear()
            self.write("\n" * step + "\t\t\tGAME OVER" + "\n" * (5 - step))
            self.sleep(0.5 if step < 3 else 3.0)
        raise SystemExit(0)


def main(argv: list[str] | None = None) -> int:
    """Start the game from the home menu."""
    parser = argparse.ArgumentParser(prog="darkjaghou", description="Dark Jaghou labyrinth game.")
    parser.add_argument("--seed", type=int, default=None, help="seed for character placement")
    args = parser.parse_args(argv)
    game = Game(rng=random.Random(args.seed))
    try:
        game.main_menu()
    except (EOFError, KeyboardInterrupt):
        return 0
    return 0


if __name__ == "__main__":
    sys.exit(main())