"""The 10x10 game board shared by the human and the computer player."""

from __future__ import annotations

from enum import IntEnum
from typing import Callable, Iterable

SIZE = 10

LIGHT = "\u2591"
DARK = "\u2593"

HIT = 1
MISS = 2

Region = tuple[range, range]


class Ship(IntEnum):
    """Kinds of ship that can be placed on a board."""

    SUBMARINE = 1
    FIGHTERJET = 2
    BATTLESHIP = 3


class Direction(IntEnum):
    """Directions a ship can extend in from its anchor cell."""

    UP = 1
    DOWN = 2
    LEFT = 3
    RIGHT = 4


def _span(first: int, last: int) -> range:
    return range(first, last + 1)


def _battleship_area(x: int, y: int, direction: int) -> list[Region] | None:
    if direction == Direction.LEFT:
        if y - 3 < 0:
            return None
        return [(_span(x - (x > 0), x + (x < 9)), _span(y - 3 - (y > 3), y + (y < 9)))]
    if direction == Direction.RIGHT:
        if y + 3 > 9:
            return None
        return [(_span(x - (x > 0), x + (x < 9)), _span(y - (y > 0), y + 3 + (y < 6)))]
    if direction == Direction.UP:
        if x - 3 < 0:
            return None
        return [(_span(x - 3 - (x > 3), x + (x < 9)), _span(y - (y > 0), y + (y < 9)))]
    if x + 3 > 9:
        return None
    return [(_span(x - (x > 0), x + 3 + (x < 6)), _span(y - (y > 0), y + (y < 9)))]


def _fighterjet_area(x: int, y: int, direction: int) -> list[Region] | None:
    if direction == Direction.LEFT:
        if y - 2 < 0 or x < 1 or x > 8:
            return None
        return [
            (_span(x - 1, x + 1), _span(y - 2 - (y > 2), y + (y < 9))),
            (_span(x - 1 - (x > 1), x + 1 + (x < 8)), _span(y - 1, y + (y < 9))),
        ]
    if direction == Direction.RIGHT:
        if y + 2 > 9 or x < 1 or x > 8:
            return None
        return [
            (_span(x - 1, x + 1), _span(y - (y > 0), y + 2 + (y < 7))),
            (_span(x - 1 - (x > 1), x + 1 + (x < 8)), _span(y - 1, y + (y < 9))),
        ]
    if direction == Direction.UP:
        if x - 2 < 0 or y < 1 or y > 8:
            return None
        return [
            (_span(x - 2 - (x > 2), x + (x < 9)), _span(y - 1, y + 1)),
            (_span(x - 1, x + (x < 9)), _span(y - 1 - (y > 1), y + 1 + (y < 8))),
        ]
    if x + 2 > 9 or y < 1 or y > 8:
        return None
    return [
        (_span(x - (x > 0), x + 2 + (x < 7)), _span(y - 1, y + 1)),
        (_span(x - (x > 0), x + 1), _span(y - 1 - (y > 1), y + 1 + (y < 8))),
    ]


_AREAS: dict[int, Callable[[int, int, int], list[Region] | None]] = {
    Ship.BATTLESHIP: _battleship_area,
    Ship.FIGHTERJET: _fighterjet_area,
}


def _battleship_cells(x: int, y: int, direction: int) -> Iterable[tuple[int, int]]:
    if direction == Direction.LEFT:
        return [(x, k) for k in _span(y - 3, y)]
    if direction == Direction.RIGHT:
        return [(x, k) for k in _span(y, y + 3)]
    if direction == Direction.UP:
        return [(k, y) for k in _span(x - 3, x)]
    if direction == Direction.DOWN:
        return [(k, y) for k in _span(x, x + 3)]
    return []


def _fighterjet_cells(x: int, y: int, direction: int) -> Iterable[tuple[int, int]]:
    if direction == Direction.LEFT:
        return [(x, k) for k in _span(y - 2, y)] + [(k, y) for k in _span(x - 1, x + 1)]
    if direction == Direction.RIGHT:
        return [(x, k) for k in _span(y, y + 2)] + [(k, y) for k in _span(x - 1, x + 1)]
    if direction == Direction.UP:
        return [(x, k) for k in _span(y - 1, y + 1)] + [(k, y) for k in _span(x - 2, x)]
    if direction == Direction.DOWN:
        return [(x, k) for k in _span(y - 1, y + 1)] + [(k, y) for k in _span(x, x + 2)]
    return []


def _in_bounds(x: int, y: int) -> bool:
    return 0 <= x < SIZE and 0 <= y < SIZE


class Board:
    """A player's own ships plus the marks made on the opponent's map."""

    def __init__(self):
        self._cells = [[0] * SIZE for _ in range(SIZE)]
        self._predictions = [[0] * SIZE for _ in range(SIZE)]

    def _is_clear(self, regions: Iterable[Region]) -> bool:
        return all(
            self._cells[row][col] == 0
            for rows, cols in regions
            for row in rows
            for col in cols
        )

    def available_space(self, x, y, ship, direction):
        """Check whether a ship fits at (x, y).

        Returns 1 when it fits, 0 when it would touch another ship, -1 when
        it would leave the board and -2 for an unknown ship or direction.
        """
        if ship == Ship.SUBMARINE:
            region = (_span(x - (x > 0), x + (x < 9)), _span(y - (y > 0), y + (y < 9)))
            return int(self._is_clear([region]))
        area = _AREAS.get(ship)
        if area is None or direction not in Direction.__members__.values():
            return -2
        regions = area(x, y, direction)
        if regions is None:
            return -1
        return int(self._is_clear(regions))

    def _fill(self, cells: Iterable[tuple[int, int]]) -> None:
        for row, col in cells:
            self._cells[row][col] = 1

    def place_submarine(self, x, y):
        """Put a one-cell submarine at (x, y)."""
        self._cells[x][y] = 1

    def place_fighterjet(self, x, y, direction):
        """Put a T-shaped fighter jet anchored at (x, y)."""
        self._fill(_fighterjet_cells(x, y, direction))

    def place_battleship(self, x, y, direction):
        """Put a four-cell battleship anchored at (x, y)."""
        self._fill(_battleship_cells(x, y, direction))

    def already_targeted(self, x, y):
        """Tell whether the opponent's cell at (x, y) has already been struck."""
        return _in_bounds(x, y) and self._predictions[x][y] != 0

    @staticmethod
    def _render_grid(values: list[list[int]], marks: dict[int, str]) -> str:
        lines = ["   " + "".join(f" {n} " for n in range(1, SIZE + 1))]
        for i, row in enumerate(values):
            label = f"{i + 1}  " if i + 1 < 10 else f"{i + 1} "
            squares = []
            for j, value in enumerate(row):
                shade = LIGHT if (j - i) % 2 == 0 else DARK
                mark = marks.get(value)
                squares.append(shade + mark + shade if mark else shade * 3)
            lines.append(label + "".join(squares))
        return "\n".join(lines) + "\n\n"

    def render(self, opponent):
        """Draw the own map and, if opponent is true, the targeting map too."""
        text = self._render_grid(self._cells, {1: "#"})
        if opponent:
            text += self._render_grid(self._predictions, {MISS: "x", HIT: "#"})
        return text

    def get_cell(self, x, y):
        """Return the own map's value at (x, y), or -1 off the board."""
        if not _in_bounds(x, y):
            return -1
        return self._cells[x][y]

    def add_prediction(self, x, y, prediction):
        """Record a mark on the targeting map; cells off the board are ignored."""
        if _in_bounds(x, y):
            self._predictions[x][y] = prediction

    def has_undiscovered(self, opponent):
        """Tell whether some ship cell of opponent has not been hit yet."""
        return any(
            opponent._cells[i][j] == 1 and self._predictions[i][j] != HIT
            for i in range(SIZE)
            for j in range(SIZE)
        )