"""Shared table layout, rules and rendering for solitaire games."""

from __future__ import annotations

import enum
import random
from dataclasses import dataclass

from .ansi import clear_screen, goto
from .cards import Card, Deck
from .graphics import BACK, EMPTY, SUITS

CARD_HEIGHT = len(BACK)
_BLANK = " " * len(BACK[0])
_GAP = "  "


class IllegalMoveError(Exception):
    """Raised when a requested move breaks the rules of the game."""


class Action(enum.Enum):
    """What the player asked to do."""

    DRAW = "draw"
    AUTO = "auto"
    MOVE = "move"
    STOP = "stop"
    EXIT = "exit"


@dataclass(frozen=True)
class Command:
    """A complete player request.

    ``source`` is ``"free"``, ``"stack"`` or a 1-based pile number;
    ``target`` is ``"stack"`` or a 1-based pile number; ``suit`` names the
    stack a card is taken from; ``amount`` is how many cards move.
    """

    action: Action
    source: str | int | None = None
    target: str | int | None = None
    suit: str | None = None
    amount: int = 1


def stack_index(suit: str) -> int:
    """Return the position of the foundation stack for a suit."""
    try:
        return SUITS.index(suit)
    except ValueError:
        raise ValueError(f"invalid stack: {suit!r}") from None


class Solitaire:
    """The table every solitaire game is played on.

    ``board`` holds the tableau piles, ``stacks`` the foundations in suit
    order, and ``free`` the cards drawn from the deck.
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        self.deck = Deck(rng)
        self.free: list[Card] = []
        self.board: list[list[Card]] = []
        self.stacks: list[list[Card]] = [[] for _ in SUITS]

    # Rules -----------------------------------------------------------------

    def is_descending_run(self, pile: int, amount: int = 1) -> bool:
        """Tell whether the top ``amount`` cards of a pile alternate colour
        and descend by one rank."""
        if amount == 1:
            return True
        cards = self.board[pile - 1]
        if amount < 1 or amount > len(cards):
            return False
        run = cards[-amount:]
        return all(
            lower.color() != upper.color() and upper.rank == lower.rank + 1
            for upper, lower in zip(run, run[1:])
        )

    def auto_move_free(self) -> bool:
        """Move drawn cards to the stacks; this table has none to move."""
        return False

    def auto_move_board(self) -> bool:
        """Move every playable top card of the board to the stacks."""
        moved = False
        for number, pile in enumerate(self.board, start=1):
            if pile:
                size = len(pile)
                self.move_board_to_stack(number, pile[-1].suit, True)
                moved = len(pile) != size or moved
        return moved

    def auto_move(self) -> None:
        """Keep moving cards to the stacks until nothing more can go."""
        while self.auto_move_free() or self.auto_move_board():
            pass

    def move_board_to_stack(self, pile: int, suit: str, automatic: bool = False) -> None:
        """Put the top card of a board pile on its suit's stack.

        An illegal move raises IllegalMoveError unless ``automatic`` is set,
        in which case it is silently skipped.
        """
        stack = self.stacks[stack_index(suit)]
        cards = self.board[pile - 1]
        card = cards[-1] if cards else None
        fits = card is not None and card.suit == suit and (
            (not stack and card.rank == 1)
            or (stack and stack[-1].rank == card.rank - 1)
        )
        if not fits:
            if not automatic:
                raise IllegalMoveError(
                    "Make sure the stack and card match suits.\n"
                    "Make sure the rank is one higher!"
                )
            return
        stack.append(cards.pop())
        if cards and not cards[-1].face_up:
            cards[-1].flip()

    def is_won(self) -> bool:
        """Tell whether every stack holds a full suit."""
        return all(len(stack) >= len(BACK) + 4 for stack in self.stacks)

    # Rendering -------------------------------------------------------------

    def stack_graphics(self, rows: list[str], stack: int) -> list[str]:
        """Return ``rows`` with the picture of one stack appended to each."""
        cards = self.stacks[stack]
        picture = cards[-1].graphic() if cards else EMPTY
        gap = _GAP if stack != len(self.stacks) - 1 else ""
        return [row + picture[i] + gap for i, row in enumerate(rows)]

    def board_row(self, row: int, pile: int) -> str:
        """Return the text of one screen row of a 0-based board pile, or ""."""
        cards = self.board[pile]
        if not cards:
            return ""
        covered = 3 * (len(cards) - 1)
        if row < covered:
            return cards[row // 3].graphic()[row % 3]
        if row < covered + CARD_HEIGHT:
            return cards[-1].graphic()[row - covered]
        return ""

    def top_row(self) -> list[str]:
        """Return the rows showing the deck and the stacks."""
        deck_picture = EMPTY if len(self.deck) == 0 else BACK
        rows = [line + _GAP for line in deck_picture]
        for stack in range(len(self.stacks)):
            rows = self.stack_graphics(rows, stack)
        return rows

    def _screen(self) -> list[str]:
        screen = list(self.top_row())
        screen.append(
            _GAP.join(f"      {number}      " for number in range(1, len(self.board) + 1))
        )
        max_cards = max((len(pile) for pile in self.board), default=0)
        for row in range(3 * max_cards + CARD_HEIGHT):
            parts = []
            for index, pile in enumerate(self.board):
                text = self.board_row(row, index)
                if not pile and row < CARD_HEIGHT and text == "":
                    parts.append(EMPTY[row])
                elif text == "":
                    parts.append(_BLANK)
                else:
                    parts.append(text)
            screen.append(_GAP.join(parts))
        return screen

    def render(self) -> str:
        """Return the text that clears the terminal and draws the table."""
        body = "".join(f"{line}\n" for line in self._screen())
        return clear_screen() + goto(0, 0) + body

    # Commands --------------------------------------------------------------

    def execute(self, command: Command) -> None:
        """Carry out a command; this table only supports automatic moves."""
        if command.action is Action.AUTO:
            self.auto_move()
        elif command.action in (Action.DRAW, Action.MOVE):
            raise IllegalMoveError(f"{command.action.value} is not supported by this game")

    def apply(self, command: Command) -> bool:
        """Carry out a command and tell whether the game goes on."""
        if command.action is Action.EXIT:
            return False
        if command.action is Action.STOP:
            return True
        self.execute(command)
        return True