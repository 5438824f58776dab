# battleship

Battleship in the terminal. You place your fleet on a 10×10 map. Then you
and the computer take turns firing at each other's maps. The game ends when
one side has uncovered the whole of the other's fleet.

It needs Python 3.10 or later and no other libraries.

## Installing

```
pip install .
```

## Playing

```
battleship
```

The command takes no options apart from `--help`. When the input ends, it
stops with exit status 1.

The main menu offers three choices. You pick one with a single key press:

1. Start a new game.
2. Read the rules.
3. Exit.

On a terminal, a key is read without waiting for Enter. Ctrl-C interrupts
the game. Ctrl-D counts as the end of the input. The screen is cleared with
ANSI escape codes.

### Your fleet

Each side has:

- **2 battleships**: four squares in a straight line.
- **2 fighter jets**: a T shape of five squares.
- **4 submarines**: a single square each.

Ships may not overlap and may not touch, not even at a corner. You place
them in that order.

For a battleship or a fighter jet:

1. Enter the row and column of its anchor cell. Each is a number from 1 to
   10, and the two are separated by whitespace.
2. Pick, by number, one of the directions in which the ship fits. If only
   one direction fits, it is chosen for you.

Coordinates that fall off the board, or that leave no direction in which the
ship fits, are asked for again. For a submarine you enter only its cell. That
cell must be clear of every other ship.

### Firing

On each turn you enter the row and column of a cell on the opponent's map.
Your targeting map is drawn below your own map. It shows `#` for a hit and
`x` for a miss. A cell you have already tried is refused, and so is a cell
off the board. After each of your shots, press a key to go on.

The computer then fires back. It prints its own view of your map: `#` for a
hit, `x` for water and `.` for unknown. Press a key after each of its shots.

When the computer hits a ship, it follows that ship's neighbouring cells.
When it sinks a ship, it rules out the cells around it. Once only one kind of
ship is left to find, it aims at the cells where that shape could still fit.

The game ends when either side has found every square of the other's fleet.

## Using it from Python

- `battleship.cli.run(console, rng)` runs the menu and one game.
  - `console` is a `battleship.console.Console`, built on any pair of text
    streams.
  - `rng` is a `random.Random`.
- `battleship.board.Board` holds one map and its targeting marks.
- `battleship.human.HumanBoard` adds your interactive placement and your
  shots.
- `battleship.npc.NPCBoard` places the computer's fleet at random and picks
  its shots.

## What it does not do

The game is always one person against the computer on one terminal. There is
no two-player mode, no network play, and no way to save or resume a game.

## Running the tests

```
pip install .[test]
pytest
```