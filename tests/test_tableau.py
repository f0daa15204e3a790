import random

import pytest

from solitaire.ansi import clear_screen, goto
from solitaire.cards import Card
from solitaire.graphics import BACK, EMPTY, card_graphic
from solitaire.tableau import (
    Action,
    Command,
    IllegalMoveError,
    Solitaire,
    stack_index,
)


def up(suit, rank):
    return Card(suit, rank, face_up=True)


def down(suit, rank):
    return Card(suit, rank, face_up=False)


@pytest.fixture
def game():
    return Solitaire(random.Random(1))


@pytest.mark.parametrize(
    "suit, index", [("spade", 0), ("heart", 1), ("club", 2), ("diamond", 3)]
)
def test_stack_index(suit, index):
    assert stack_index(suit) == index


def test_stack_index_invalid():
    with pytest.raises(ValueError):
        stack_index("star")


def test_descending_run_alternating(game):
    game.board = [[down("club", 2), up("spade", 13), up("heart", 12), up("club", 11)]]
    assert game.is_descending_run(1, 3) is True
    assert game.is_descending_run(1, 1) is True


def test_descending_run_same_colour_fails(game):
    game.board = [[up("spade", 13), up("club", 12)]]
    assert game.is_descending_run(1, 2) is False


def test_descending_run_wrong_rank_fails(game):
    game.board = [[up("spade", 13), up("heart", 11)]]
    assert game.is_descending_run(1, 2) is False


def test_descending_run_too_many(game):
    game.board = [[up("spade", 13), up("heart", 12)]]
    assert game.is_descending_run(1, 5) is False


def test_move_board_to_stack_flips_next(game):
    hidden = down("heart", 9)
    game.board = [[hidden, up("spade", 1)]]
    game.move_board_to_stack(1, "spade", False)
    assert [c.rank for c in game.stacks[0]] == [1]
    assert game.board[0] == [hidden]
    assert hidden.face_up is True


def test_move_board_to_stack_illegal_raises(game):
    game.board = [[up("spade", 2)]]
    with pytest.raises(IllegalMoveError):
        game.move_board_to_stack(1, "spade", False)
    assert len(game.board[0]) == 1


def test_move_board_to_stack_automatic_is_silent(game):
    game.board = [[up("heart", 5)]]
    game.move_board_to_stack(1, "heart", True)
    assert len(game.board[0]) == 1
    assert game.stacks[1] == []


def test_auto_move_board_reports_progress(game):
    game.board = [[up("spade", 1)], [up("club", 9)]]
    assert game.auto_move_board() is True
    assert game.auto_move_board() is False
    assert len(game.stacks[0]) == 1


def test_auto_move_runs_to_completion(game):
    game.board = [[up("spade", 2), up("heart", 1)], [up("heart", 2), up("spade", 1)]]
    game.auto_move()
    assert game.board == [[], []]
    assert [c.rank for c in game.stacks[0]] == [1, 2]
    assert [c.rank for c in game.stacks[1]] == [1, 2]


def test_auto_move_free_has_nothing(game):
    assert game.auto_move_free() is False


def test_is_won(game):
    assert game.is_won() is False
    game.stacks = [[up(suit, r) for r in range(1, 14)] for suit in ("spade", "heart", "club", "diamond")]
    assert game.is_won() is True


def test_is_won_needs_every_stack(game):
    game.stacks = [[up(suit, r) for r in range(1, 14)] for suit in ("spade", "heart", "club")]
    game.stacks.append([up("diamond", 1)])
    assert game.is_won() is False


def test_stack_graphics_empty_and_full(game):
    game.stacks[0] = [up("spade", 1)]
    rows = [""] * 9
    first = game.stack_graphics(rows, 0)
    assert first == [line + "  " for line in card_graphic("spade", 1)]
    last = game.stack_graphics(rows, 3)
    assert last == list(EMPTY)


def test_board_row_single_card(game):
    card = up("diamond", 7)
    game.board = [[card]]
    assert [game.board_row(r, 0) for r in range(9)] == list(card_graphic("diamond", 7))
    assert game.board_row(9, 0) == ""


def test_board_row_covered_cards(game):
    game.board = [[down("club", 3), up("heart", 8)]]
    assert game.board_row(0, 0) == BACK[0]
    assert game.board_row(1, 0) == BACK[1]
    assert game.board_row(2, 0) == BACK[2]
    assert game.board_row(3, 0) == card_graphic("heart", 8)[0]
    assert game.board_row(11, 0) == card_graphic("heart", 8)[8]
    assert game.board_row(12, 0) == ""


def test_board_row_empty_pile(game):
    game.board = [[]]
    assert game.board_row(0, 0) == ""


def test_top_row_full_deck(game):
    rows = game.top_row()
    assert len(rows) == 9
    assert rows[1].startswith(BACK[1] + "  " + EMPTY[1])


def test_render_layout(game):
    game.board = [[down("club", 3), up("heart", 8)], []]
    text = game.render()
    prefix = clear_screen() + goto(0, 0)
    assert text.startswith(prefix)
    lines = text[len(prefix):].splitlines()
    assert len(lines) == 9 + 1 + 3 * 2 + 9
    assert lines[9].startswith("      1      ")
    assert "2" in lines[9]
    assert lines[10] == BACK[0] + "  " + EMPTY[0]
    assert lines[-1].endswith(" " * 13)


def test_apply_exit_and_stop(game):
    game.board = [[up("spade", 1)]]
    assert game.apply(Command(Action.EXIT)) is False
    assert game.apply(Command(Action.STOP)) is True
    assert len(game.board[0]) == 1


def test_apply_auto_moves_cards(game):
    game.board = [[up("club", 1)]]
    assert game.apply(Command(Action.AUTO)) is True
    assert game.board == [[]]
    assert [c.rank for c in game.stacks[2]] == [1]


def test_execute_unsupported(game):
    with pytest.raises(IllegalMoveError):
        game.execute(Command(Action.DRAW))