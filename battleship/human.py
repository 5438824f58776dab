"""The board of the human player and its interactive setup."""

from __future__ import annotations

from typing import Callable

from .board import SIZE, Board, Direction, Ship
from .console import Console

_ORDINALS = ("first", "second", "third", "forth")

_BATTLESHIP_PICTURE = "     X\n     #\n     #\n     #\n\n"
_FIGHTERJET_PICTURE = "   # X #\n     #\n     #\n\n"


def _on_board(x: int, y: int) -> bool:
    return 1 <= x <= SIZE and 1 <= y <= SIZE


def _read_coordinates(
    console: Console, retry: str, accept: Callable[[int, int], bool]
) -> tuple[int, int]:
    """Read 1-based coordinates until accepted; return them 0-based."""
    while True:
        try:
            x, y = console.read_pair()
        except ValueError:
            pass
        else:
            if accept(x, y):
                return x - 1, y - 1
        console.write(retry)


class HumanBoard(Board):
    """Board of the human player."""

    def mark(self, x, y, opponent):
        """Strike the opponent's cell, record the result and tell if it hit."""
        self.add_prediction(x, y, 2 - opponent.get_cell(x, y))
        return bool(opponent.get_cell(x, y))

    def _place_shaped(
        self,
        console: Console,
        ship: Ship,
        name: str,
        picture: str,
        place: Callable[[int, int, Direction], None],
    ) -> None:
        problem = False
        placed = 0
        while placed < 2:
            console.clear()
            console.write(self.render(False))
            console.write(
                f">> Now place your {_ORDINALS[placed]} {name}, "
                "that looks like this in Down direction:\n\n"
            )
            console.write(picture)
            console.write(
                ">> The 'X' represents which cell you will be entering the coordinates for.\n"
            )
            if problem:
                console.write(
                    f">> Your previous coordinates had no possible directions to place a {name} "
                    "(Check rules for more).\n"
                )
                console.write(">> Please enter valid coordinates: ")
            else:
                console.write(f">> Please enter the {name}'s coordinates: ")
            problem = False
            x, y = _read_coordinates(
                console,
                f">> Please enter Valid coordinates for the {name}: ",
                _on_board,
            )
            free = [d for d in Direction if self.available_space(x, y, ship, d) >= 1]
            if not free:
                problem = True
                continue
            if len(free) == 1:
                console.write(
                    f">> Direction set to the only possible way a {name} "
                    f"could fit in ({x}, {y}).\n"
                )
                direction = free[0]
            else:
                console.write(">> Now enter a direction for the ship:\n")
                for number, option in enumerate(free, start=1):
                    console.write(f"{number}> {option.name.title()}\n")
                direction = free[console.read_choice(1, len(free)) - 1]
            place(x, y, direction)
            placed += 1

    def start_up(self, console):
        """Let the player place two battleships, two fighter jets and four submarines."""
        self._place_shaped(
            console, Ship.BATTLESHIP, "battleship", _BATTLESHIP_PICTURE, self.place_battleship
        )
        self._place_shaped(
            console, Ship.FIGHTERJET, "fighter jet", _FIGHTERJET_PICTURE, self.place_fighterjet
        )

        def submarine_fits(x: int, y: int) -> bool:
            return _on_board(x, y) and self.available_space(x - 1, y - 1, Ship.SUBMARINE, 0) >= 1

        for ordinal in _ORDINALS:
            console.clear()
            console.write(self.render(False))
            console.write(f">> Now place your {ordinal} submarine, that is just a 1 cell ship:\n\n")
            console.write("     X\n\n")
            console.write(">> Please enter the submarine's coordinates: ")
            x, y = _read_coordinates(
                console,
                ">> Please enter Valid coordinates for the submarine: ",
                submarine_fits,
            )
            self.place_submarine(x, y)
        console.clear()