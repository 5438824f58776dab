"""The game's menu and turn loop."""

from __future__ import annotations

import argparse
import random

from .board import SIZE
from .console import Console, InputClosed
from .human import HumanBoard
from .npc import NPCBoard

TITLE = "*~-+-+-+-=[{ Battleship game }]=-+-+-+-~*\n\n"

MENU = (
    ">> Choose what you'd like to do:\n\n"
    "1> Start a new game.\n\n"
    "2> Learn the rules of the game.\n\n"
    "3> Exit.\n\n"
)

RULES = (
    ">> This is a board game, that relies on expectation, observation, and guessing.\n\n"
    ">> You start out with a 10x10 table that will be your \"map\", and you will fill\n"
    "   it with 3 types of ships:\n\n"
    "1> Battleships, you get 2 of them, and they are formed of 4 consecutive squares.\n"
    "2> Fighter jets, they look like the letter T, and you get two of them as well.\n"
    "3> Submarines, you get four of these one-squared ships.\n\n"
    ">> You cannot place two shapes so that they are touching (even from corners).\n"
    ">> You cannot place two shapes crossing each other.\n\n"
    ">> After you've finished planning your map, you get another blank map on which\n"
    "   you'll be making your prediction for opponent's map.\n"
    ">> The players take turn, in each turn, the player must choose some coordinates\n"
    "   to check that cell on the opponent's map, if it is filled (colored/used) the\n"
    "   second empty map of that player will color as well, else it would put an X.\n"
    ">> The winner is the first player to have discovered the other's complete map!\n"
    ">> Remember once you completely discover a ship from the opponent's map, don't\n"
    "   hit the cells surrounding that ship because no two ships can be touching.\n"
    ">> Press any key to go back to main menu.\n"
)

FAREWELL = ">> Thanks for using this program ^__^\n"


def _menu(console: Console) -> bool:
    """Show the main menu until a game is started; False means quit."""
    while True:
        console.clear()
        console.write(TITLE)
        console.write(MENU)
        choice = console.read_choice(1, 3)
        if choice == 1:
            return True
        console.clear()
        console.write(TITLE)
        if choice == 3:
            console.write(FAREWELL)
            console.read_key()
            return False
        console.write(RULES)
        console.read_key()


def _read_target(console: Console, player: HumanBoard) -> tuple[int, int]:
    while True:
        console.clear()
        console.write(player.render(True))
        console.write(">> Enter the coordinates of the cell to hit on opponent map: ")
        try:
            x, y = console.read_pair()
        except ValueError:
            continue
        x, y = x - 1, y - 1
        if 0 <= x < SIZE and 0 <= y < SIZE and not player.already_targeted(x, y):
            return x, y


def run(console, rng):
    """Run the menu and, if started, a game between the player and the computer."""
    player = HumanBoard()
    computer = NPCBoard(rng)
    if not _menu(console):
        return
    player.start_up(console)
    while True:
        x, y = _read_target(console, player)
        console.clear()
        console.write(player.render(True))
        if player.mark(x, y, computer):
            console.write(">> Congrats! you hit an opponent's ship! ")
        else:
            console.write(">> Too bad! You hit water! ")
        console.read_key()
        still_going = computer.play(player, console)
        if not (player.has_undiscovered(computer) and still_going):
            return


def main(argv=None):
    """Start the game on the terminal; return the exit status."""
    parser = argparse.ArgumentParser(
        prog="battleship", description="Play battleship against the computer."
    )
    parser.parse_args(argv)
    try:
        run(Console(), random.Random())
    except InputClosed:
        return 1
    return 0