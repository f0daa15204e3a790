import re

import pytest

from solitaire.ansi import clear_screen, goto


def test_clear_screen_sequence():
    assert clear_screen() == "\x1b[H\x1b[2J"


def test_goto_origin():
    assert goto(0, 0) == "\x1b[1;1H"


@pytest.mark.parametrize("row, col", [(0, 5), (3, 0), (12, 40), (99, 1)])
def test_goto_is_one_based(row, col):
    match = re.fullmatch(r"\x1b\[(\d+);(\d+)H", goto(row, col))
    assert match is not None
    assert int(match.group(1)) - 1 == row
    assert int(match.group(2)) - 1 == col


def test_goto_distinguishes_row_and_col():
    assert goto(2, 7) != goto(7, 2)
    assert goto(2, 7).startswith("\x1b[3;")