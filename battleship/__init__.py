"""Terminal Battleship game: boards, the player's setup, the computer opponent and the command."""

__version__ = "1.0.0"