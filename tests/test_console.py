import io

import pytest

from battleship.console import Console, InputClosed


def _console(text=""):
    return Console(io.StringIO(text), io.StringIO())


def test_read_pair_on_one_line():
    assert _console("3 4\n").read_pair() == (3, 4)


def test_read_pair_across_lines():
    assert _console("3\n\n4\n").read_pair() == (3, 4)


def test_read_pair_drops_rest_of_line():
    console = _console("1 2 7 8\n5 6\n")
    assert console.read_pair() == (1, 2)
    assert console.read_pair() == (5, 6)


def test_read_pair_rejects_junk_and_recovers():
    console = _console("a 1\n2 9\n")
    with pytest.raises(ValueError):
        console.read_pair()
    assert console.read_pair() == (2, 9)


def test_read_pair_at_end_of_input():
    with pytest.raises(InputClosed):
        _console("").read_pair()
    with pytest.raises(EOFError):
        _console("4\n").read_pair()


def test_read_key_sequence_and_end():
    console = _console("ab")
    assert console.read_key() == "a"
    assert console.read_key() == "b"
    with pytest.raises(InputClosed):
        console.read_key()


def test_read_choice_skips_out_of_range_keys():
    console = _console("9a\n02")
    assert console.read_choice(1, 3) == 2
    with pytest.raises(InputClosed):
        console.read_choice(1, 3)


def test_write_and_clear():
    out = io.StringIO()
    console = Console(io.StringIO(), out)
    console.write("hello")
    assert out.getvalue() == "hello"
    console.clear()
    console.write("again")
    assert out.getvalue().startswith("hello")
    assert out.getvalue().endswith("again")
    assert len(out.getvalue()) > len("helloagain")