"""Terminal input and output used by the game."""

from __future__ import annotations

import os
import sys

CLEAR_SCREEN = "\x1b[2J\x1b[H"


class InputClosed(EOFError):
    """Raised when the input stream has ended."""


def _read_raw_key(stream) -> str:
    try:
        import msvcrt
    except ImportError:
        import termios
        import tty

        fd = stream.fileno()
        saved = termios.tcgetattr(fd)
        try:
            tty.setraw(fd)
            return os.read(fd, 1).decode(errors="replace")
        finally:
            termios.tcsetattr(fd, termios.TCSADRAIN, saved)
    return msvcrt.getwch()


class Console:
    """Reads keys and numbers from one stream and writes text to another."""

    def __init__(self, stdin=None, stdout=None):
        self.stdin = sys.stdin if stdin is None else stdin
        self.stdout = sys.stdout if stdout is None else stdout

    def write(self, text):
        """Write text and flush it at once."""
        self.stdout.write(text)
        self.stdout.flush()

    def clear(self):
        """Clear the screen."""
        self.write(CLEAR_SCREEN)

    def _interactive(self) -> bool:
        isatty = getattr(self.stdin, "isatty", None)
        return bool(isatty and isatty())

    def read_key(self):
        """Read one key press, without waiting for Enter on a terminal."""
        self.stdout.flush()
        if self._interactive():
            key = _read_raw_key(self.stdin)
            if key == "\x03":
                raise KeyboardInterrupt
            if key == "\x04":
                raise InputClosed("input closed")
        else:
            key = self.stdin.read(1)
        if not key:
            raise InputClosed("input closed")
        return key

    def read_choice(self, low, high):
        """Read keys until a digit between low and high is pressed."""
        while True:
            choice = ord(self.read_key()) - ord("0")
            if low <= choice <= high:
                return choice

    def read_pair(self):
        """Read two integers, which may span lines.

        Any further text on the line holding the second number is dropped.
        Raises ValueError for a token that is not a number (dropping the rest
        of its line) and InputClosed when the input ends.
        """
        self.stdout.flush()
        values: list[int] = []
        while len(values) < 2:
            line = self.stdin.readline()
            if not line:
                raise InputClosed("input closed")
            for token in line.split():
                try:
                    values.append(int(token))
                except ValueError as exc:
                    raise ValueError(f"not a number: {token!r}") from exc
                if len(values) == 2:
                    break
        return values[0], values[1]