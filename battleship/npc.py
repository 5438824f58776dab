"""The computer player's board and its targeting strategy."""

from __future__ import annotations

import random
from typing import Callable

from .board import SIZE, Board, Direction, Ship
from .console import Console

UNKNOWN = "."
STRUCK = "#"
WATER = "x"
CANDIDATE = "1"

NO_TARGET = (-1, -1)
DEAD_END = (-2, -2)

# Up, right, down, left: the order in which neighbours of a hit are considered.
_STEPS = ((-1, 0), (0, 1), (1, 0), (0, -1))

Cell = tuple[int, int]
Shape = list[Cell]


def _clamp(value: int) -> int:
    return max(0, min(SIZE - 1, value))


def _in_bounds(x: int, y: int) -> bool:
    return 0 <= x < SIZE and 0 <= y < SIZE


def _second_occupied(freq: list[int]) -> int:
    """Index of the second non-zero entry, as the targeting heuristic counts it."""
    k = -1
    for index, value in enumerate(freq):
        if value:
            if k == 0:
                return index
            k += 1
    return k


def _battleship_shapes(i: int, j: int) -> list[Shape]:
    shapes = []
    if i > 2:
        shapes.append([(k, j) for k in range(i - 3, i + 1)])
    if j > 2:
        shapes.append([(i, k) for k in range(j - 3, j + 1)])
    if i < 7:
        shapes.append([(k, j) for k in range(i, i + 4)])
    if j < 7:
        shapes.append([(i, k) for k in range(j, j + 4)])
    return shapes


def _fighterjet_shapes(i: int, j: int) -> list[Shape]:
    shapes: list[Shape] = []

    def add(stem: Shape, wings: list[Shape]) -> None:
        shapes.extend(stem + wing for wing in wings)

    if i > 1:
        wings = []
        if 0 < j < 9:
            wings += [[(i - 2, j - 1), (i - 2, j + 1)], [(i, j - 1), (i, j + 1)]]
        if j > 1:
            wings.append([(i - 1, j - 2), (i - 1, j - 1)])
        if j < 8:
            wings.append([(i - 1, j + 2), (i - 1, j + 1)])
        add([(k, j) for k in range(i - 2, i + 1)], wings)
    if j > 1:
        wings = []
        if 0 < i < 9:
            wings += [[(i - 1, j - 2), (i + 1, j - 2)], [(i - 1, j), (i + 1, j)]]
        if i < 8:
            wings.append([(i + 2, j - 1), (i + 1, j - 1)])
        if i > 1:
            wings.append([(i - 2, j - 1), (i - 1, j - 1)])
        add([(i, k) for k in range(j - 2, j + 1)], wings)
    if i < 8:
        wings = []
        if 0 < j < 9:
            wings += [[(i + 2, j - 1), (i + 2, j + 1)], [(i, j - 1), (i, j + 1)]]
        if j > 1:
            wings.append([(i + 1, j - 2), (i + 1, j - 1)])
        if j < 8:
            wings.append([(i + 1, j + 2), (i + 1, j + 1)])
        add([(k, j) for k in range(i, i + 3)], wings)
    if j < 8:
        wings = []
        if 0 < i < 9:
            wings += [[(i - 1, j + 2), (i + 1, j + 2)], [(i - 1, j), (i + 1, j)]]
        if i < 8:
            wings.append([(i + 2, j + 1), (i + 1, j + 1)])
        if i > 1:
            wings.append([(i - 2, j + 1), (i - 1, j + 1)])
        add([(i, k) for k in range(j, j + 3)], wings)
    return shapes


class NPCBoard(Board):
    """Board of the computer player, which places its fleet and picks its own shots."""

    def __init__(self, rng=None):
        super().__init__()
        self._rng = random.Random() if rng is None else rng
        self._next: Cell | None = None
        self._submarines = 0
        self._fighterjets = 0
        self._battleships = 0
        self._hits: list[Cell] = []
        self._finished: list[Cell] = []
        self._available = [True] * SIZE
        self._grid = [[UNKNOWN] * SIZE for _ in range(SIZE)]
        self._place_fleet()

    def _place_fleet(self) -> None:
        rng = self._rng
        for ship, count, place in (
            (Ship.BATTLESHIP, 2, self.place_battleship),
            (Ship.FIGHTERJET, 2, self.place_fighterjet),
        ):
            placed = 0
            while placed < count:
                x, y = rng.randrange(SIZE), rng.randrange(SIZE)
                direction = Direction(rng.randrange(4) + 1)
                if self.available_space(x, y, ship, direction) == 1:
                    place(x, y, direction)
                    placed += 1
        placed = 0
        while placed < 4:
            x, y = rng.randrange(SIZE), rng.randrange(SIZE)
            if self.available_space(x, y, Ship.SUBMARINE, 0) == 1:
                self.place_submarine(x, y)
                placed += 1

    def _random_open_cell(self) -> Cell:
        start = self._rng.randrange(SIZE)
        for offset in range(SIZE):
            row = (start + offset) % SIZE
            if not self._available[row]:
                continue
            first = self._rng.randrange(SIZE)
            for shift in range(SIZE):
                col = (first + shift) % SIZE
                if self._grid[row][col] == UNKNOWN:
                    return row, col
            self._available[row] = False
        return NO_TARGET

    def get_coords(self):
        """Choose the next cell to strike.

        Returns (-1, -1) when no unknown cell is left and (-2, -2) when the
        last hit has no open neighbour to follow.
        """
        if not self._hits:
            return self._random_open_cell()
        g = self._grid
        tx, ty = self._hits[-1]
        up, down = _clamp(tx - 1), _clamp(tx + 1)
        left, right = _clamp(ty - 1), _clamp(ty + 1)
        blocked = (
            g[up][ty] != UNKNOWN or g[up][right] == STRUCK or g[up][left] == STRUCK,
            g[tx][right] != UNKNOWN or g[down][right] == STRUCK or g[up][right] == STRUCK,
            g[down][ty] != UNKNOWN or g[down][right] == STRUCK or g[down][left] == STRUCK,
            g[tx][left] != UNKNOWN or g[down][left] == STRUCK or g[up][left] == STRUCK,
        )
        open_steps = [step for step, closed in zip(_STEPS, blocked) if not closed]
        if not open_steps:
            return DEAD_END
        if len(open_steps) == 1:
            dx, dy = open_steps[0]
        else:
            dx, dy = open_steps[self._rng.randrange(len(open_steps))]
        return tx + dx, ty + dy

    def _surround(self, cells: list[Cell]) -> None:
        for cx, cy in cells:
            for row in range(max(0, cx - 1), min(SIZE - 1, cx + 1) + 1):
                for col in range(max(0, cy - 1), min(SIZE - 1, cy + 1) + 1):
                    if self._grid[row][col] == UNKNOWN:
                        self._grid[row][col] = WATER

    def _sink(self) -> None:
        self._surround(self._finished)
        self._finished.clear()
        self._hits.clear()

    def _set_next(self, x: int, y: int) -> None:
        self._next = None if x == -1 else (x, y)

    def _show_grid(self, console: Console) -> None:
        console.write("".join("".join(row) + "\n" for row in self._grid))
        console.read_key()

    def _analyse_four_hits(self) -> None:
        xfreq = [0] * SIZE
        yfreq = [0] * SIZE
        for row, col in self._finished:
            xfreq[row] += 1
            yfreq[col] += 1
        xm = xfreq.index(max(xfreq))
        ym = yfreq.index(max(yfreq))
        if xfreq[xm] == 4 or yfreq[ym] == 4:
            self._sink()
            self._battleships += 1
        elif xfreq[xm] == 3:
            p = (0, 0)
            for cell in self._finished:
                if cell[0] != xm:
                    p = cell
            k = _second_occupied(yfreq)
            if k == p[1]:
                k = p[0] - 1 if p[0] < xm else p[0] + 1
            else:
                k = p[0] + 2 if p[0] < xm else p[0] - 2
            self._set_next(k, p[1])
        else:
            p = (0, 0)
            for cell in self._finished:
                if cell[1] != ym:
                    p = cell
            k = _second_occupied(xfreq)
            if k == p[0]:
                k = p[1] - 1 if p[1] < ym else p[1] + 1
            else:
                k = p[1] + 2 if p[1] < ym else p[1] - 2
            self._set_next(p[0], k)

    def _on_hit(self, target: Cell, console: Console) -> None:
        x, y = target
        console.write(
            f"\n>> Oh no! The enemy launched a successful strike at ({x + 1}, {y + 1}).\n"
        )
        self._hits.append(target)
        self._finished.append(target)
        self._grid[x][y] = STRUCK
        self._show_grid(console)
        if len(self._finished) == 5:
            self._sink()
            self._fighterjets += 1
        elif len(self._finished) == 4:
            self._analyse_four_hits()

    def _sweep(self, shapes_at: Callable[[int, int], list[Shape]]) -> None:
        """Aim at the unknown cell that anchors the most fitting shapes.

        Unknown cells that no remaining shape could cover are written off.
        """
        g = self._grid
        best = 0
        target: Cell | None = None
        for i in range(SIZE):
            for j in range(SIZE):
                if g[i][j] != UNKNOWN:
                    continue
                fits = [
                    shape
                    for shape in shapes_at(i, j)
                    if all(g[r][c] in (UNKNOWN, CANDIDATE) for r, c in shape)
                ]
                for shape in fits:
                    for r, c in shape:
                        g[r][c] = CANDIDATE
                if len(fits) > best:
                    best, target = len(fits), (i, j)
        if target is not None:
            self._next = target
        swap = {UNKNOWN: WATER, CANDIDATE: UNKNOWN}
        for row in g:
            row[:] = [swap.get(value, value) for value in row]

    def _on_miss(self, target: Cell, console: Console) -> None:
        x, y = target
        console.write(f"\n>> Ha ha! The enemy launched a failed strike at ({x + 1}, {y + 1}).\n")
        if _in_bounds(x, y):
            self._grid[x][y] = WATER
        self._show_grid(console)
        if self._hits or self._submarines != 4:
            return
        if self._battleships != 2 and self._fighterjets == 2:
            self._sweep(_battleship_shapes)
        if self._fighterjets != 2 and self._battleships == 2:
            self._sweep(_fighterjet_shapes)

    def _all_sunk(self) -> bool:
        return self._battleships == 2 and self._submarines == 4 and self._fighterjets == 2

    def play(self, opponent, console):
        """Take one turn against opponent; return False once the computer stops."""
        if self._next is not None:
            target = self._next
            console.write(f"{target[0]} {target[1]}\n")
            self._next = None
        else:
            target = self.get_coords()
        if target[0] == -1:
            return False
        if target[0] == -2:
            if len(self._finished) == 1:
                self._sink()
                self._submarines += 1
            elif self._hits:
                self._hits.pop()
            self.play(opponent, console)
        elif opponent.get_cell(*target) == 1:
            self._on_hit(target, console)
        else:
            self._on_miss(target, console)
        return not self._all_sunk()