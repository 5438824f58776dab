import io

import pytest

from battleship.board import Board, Direction
from battleship.console import Console, InputClosed
from battleship.human import HumanBoard


def _occupied(board):
    return {(x, y) for x in range(10) for y in range(10) if board.get_cell(x, y) == 1}


def test_mark_hit():
    target = Board()
    target.place_submarine(2, 3)
    player = HumanBoard()
    assert player.has_undiscovered(target)
    assert player.mark(2, 3, target) is True
    assert player.already_targeted(2, 3)
    assert not player.has_undiscovered(target)
    assert "#" in player.render(True)[len(player.render(False)):]


def test_mark_miss():
    target = Board()
    target.place_submarine(2, 3)
    player = HumanBoard()
    assert player.mark(5, 5, target) is False
    assert player.already_targeted(5, 5)
    assert player.has_undiscovered(target)
    assert player.render(True).count("x") == 1


SCRIPT = (
    "abc def\n"
    "11 1\n"
    "1 1\n2\n"
    "1 10\n1\n"
    "6 6\n2\n"
    "10 1\n"
    "9 2\n1\n"
    "1 2\n"
    "10 10\n"
    "10 8\n"
    "3 6\n"
    "4 4\n"
)


def _run_start_up(script):
    out = io.StringIO()
    board = HumanBoard()
    board.start_up(Console(io.StringIO(script), out))
    return board, out.getvalue()


def test_start_up_places_whole_fleet():
    board, _ = _run_start_up(SCRIPT)
    expected = (
        {(0, 0), (0, 1), (0, 2), (0, 3)}
        | {(0, 9), (1, 9), (2, 9), (3, 9)}
        | {(5, 4), (5, 5), (5, 6), (6, 5), (7, 5)}
        | {(8, 0), (8, 1), (8, 2), (6, 1), (7, 1)}
        | {(9, 9), (9, 7), (2, 5), (3, 3)}
    )
    assert _occupied(board) == expected


def test_start_up_prompts():
    _, output = _run_start_up(SCRIPT)
    assert output.count(">> Please enter Valid coordinates for the battleship: ") == 2
    assert output.count(">> Please enter Valid coordinates for the submarine: ") == 1
    assert output.count(
        ">> Your previous coordinates had no possible directions to place a fighter jet"
    ) == 1
    assert "1> Down\n2> Right\n" in output
    assert "1> Up\n2> Down\n3> Left\n4> Right\n" in output
    assert ">> Now place your forth submarine" in output


def test_start_up_stops_when_input_ends():
    board = HumanBoard()
    with pytest.raises(InputClosed):
        board.start_up(Console(io.StringIO("1 1\n"), io.StringIO()))
    assert _occupied(board) == set()


def test_start_up_result_is_consistent_with_rules():
    board, _ = _run_start_up(SCRIPT)
    seeker = HumanBoard()
    for x, y in _occupied(board):
        assert seeker.mark(x, y, board)
    assert not seeker.has_undiscovered(board)
    assert board.available_space(1, 1, 3, Direction.DOWN) == 0