"""Klondike solitaire played in draw-three or draw-one mode."""

from __future__ import annotations

import random

from .cards import Card
from .graphics import BACK, EMPTY
from .tableau import (
    Action,
    Command,
    IllegalMoveError,
    Solitaire,
    stack_index,
)

PILES = 7
ACE = 1
KING = 13
FREE_WIDTH = 30
_PEEK = 4
_GAP = "  "

_BOARD_ERROR = (
    "Make sure the piles selected are in range.\n"
    "Make sure the amount is positive.\n"
    "Make sure you are moving the right amount of cards!"
)
_PILE_ERROR = "Make sure the pile selected is in range."
_STACK_ERROR = (
    "Make sure the stack and card match suits.\n"
    "Make sure the rank is one higher!"
)


class Klondike(Solitaire):
    """A game of Klondike: seven board piles, four stacks and a stock."""

    def __init__(self, draw_one: bool = False, rng: random.Random | None = None) -> None:
        super().__init__(rng)
        self.draw_one = draw_one

    @staticmethod
    def _in_bounds(pile: object) -> bool:
        return isinstance(pile, int) and 1 <= pile <= PILES

    def deal(self) -> None:
        """Shuffle the deck and lay out the seven board piles."""
        self.deck.shuffle()
        self.stacks = [[] for _ in self.stacks]
        self.free = []
        self.board = []
        for size in range(1, PILES + 1):
            pile = [self.deck.draw() for _ in range(size)]
            pile[-1].flip()
            self.board.append(pile)

    def auto_move_free(self) -> bool:
        """Move the top drawn card to its stack; tell whether it moved."""
        if not self.free:
            return False
        size = len(self.free)
        self.move_free_to_stack(self.free[-1].suit, True)
        return len(self.free) != size

    def move_board_to_board(self, source: int, target: int, amount: int = 1) -> None:
        """Move the top ``amount`` cards of one board pile onto another."""
        if not (self._in_bounds(source) and self._in_bounds(target)) or amount < 1:
            raise IllegalMoveError(_BOARD_ERROR)
        cards = self.board[source - 1]
        dest = self.board[target - 1]
        if not cards or amount > len(cards) or not self.is_descending_run(source, amount):
            raise IllegalMoveError(_BOARD_ERROR)
        moving = cards[-amount]
        if not moving.face_up:
            raise IllegalMoveError(_BOARD_ERROR)
        if dest:
            fits = dest[-1].rank == moving.rank + 1 and moving.color() != dest[-1].color()
        else:
            fits = moving.rank == KING
        if not fits:
            raise IllegalMoveError(_BOARD_ERROR)
        run = cards[-amount:]
        del cards[-amount:]
        dest.extend(run)
        if cards and not cards[-1].face_up:
            cards[-1].flip()

    def move_free_to_board(self, target: int) -> None:
        """Put the top drawn card on a board pile."""
        if not self._in_bounds(target) or not self.free:
            raise IllegalMoveError(_PILE_ERROR)
        dest = self.board[target - 1]
        card = self.free[-1]
        if dest:
            fits = (
                dest[-1].rank == card.rank + 1
                and card.color() != dest[-1].color()
                and dest[-1].face_up
                and card.face_up
            )
        else:
            fits = card.rank == KING
        if not fits:
            raise IllegalMoveError(_PILE_ERROR)
        dest.append(self.free.pop())

    def move_free_to_stack(self, suit: str, automatic: bool = False) -> None:
        """Put the top drawn card on its suit's stack.

        An illegal move raises IllegalMoveError unless ``automatic`` is set.
        """
        stack = self.stacks[stack_index(suit)]
        card = self.free[-1] if self.free else None
        fits = (
            card is not None
            and card.face_up
            and card.suit == suit
            and (
                (not stack and card.rank == ACE)
                or (bool(stack) and stack[-1].rank == card.rank - 1)
            )
        )
        if fits:
            stack.append(self.free.pop())
        elif not automatic:
            raise IllegalMoveError(_STACK_ERROR)

    def move_board_to_stack(self, pile: int, suit: str, automatic: bool = False) -> None:
        """Put the top card of a board pile on its suit's stack."""
        if not self._in_bounds(pile):
            if automatic:
                return
            raise IllegalMoveError(_STACK_ERROR)
        super().move_board_to_stack(pile, suit, automatic)

    def move_stack_to_board(self, target: int, suit: str) -> None:
        """Take the top card of a stack back onto a board pile."""
        stack = self.stacks[stack_index(suit)]
        if not self._in_bounds(target):
            raise IllegalMoveError(_STACK_ERROR)
        dest = self.board[target - 1]
        fits = (
            bool(stack)
            and bool(dest)
            and dest[-1].rank == stack[-1].rank + 1
            and dest[-1].color() != stack[-1].color()
        )
        if not fits:
            raise IllegalMoveError(_STACK_ERROR)
        dest.append(stack.pop())

    def draw_cards(self) -> None:
        """Turn cards from the stock, recycling the drawn cards when it is empty."""
        amount = 3
        if 0 < len(self.deck) < 3:
            amount = len(self.deck)
        elif len(self.deck) == 0:
            recycled: list[Card] = []
            while self.free:
                card = self.free.pop()
                if card.face_up:
                    card.flip()
                recycled.append(card)
            self.deck.refill(recycled)
        if self.draw_one:
            amount = 1
        for _ in range(min(amount, len(self.deck))):
            card = self.deck.draw()
            if not card.face_up:
                card.flip()
            self.free.append(card)

    def free_cards_graphic(self) -> list[str]:
        """Return the rows showing up to three fanned drawn cards."""
        if not self.free or not self.free[-1].face_up:
            return [" " * FREE_WIDTH for _ in BACK]
        rows = list(self.free[-1].graphic())
        for behind in self.free[-3:-1][::-1]:
            if behind.face_up:
                picture = behind.graphic()
                rows = [picture[i][:_PEEK] + row for i, row in enumerate(rows)]
        padding = " " * (FREE_WIDTH - len(rows[0]))
        return [row + padding for row in rows]

    def top_row(self) -> list[str]:
        """Return the rows showing the stock, the drawn cards and the stacks."""
        deck_picture = EMPTY if len(self.deck) == 0 else BACK
        rows = [
            line + _GAP + free
            for line, free in zip(deck_picture, self.free_cards_graphic())
        ]
        for stack in range(len(self.stacks)):
            rows = self.stack_graphics(rows, stack)
        return rows

    def execute(self, command: Command) -> None:
        """Carry out a draw, auto or move command."""
        if command.action is Action.DRAW:
            self.draw_cards()
        elif command.action is Action.AUTO:
            self.auto_move()
        elif command.action is Action.MOVE:
            self._execute_move(command)

    def _execute_move(self, command: Command) -> None:
        source, target = command.source, command.target
        if source == "free":
            if not self.free:
                raise IllegalMoveError("Make sure there are free cards to move!")
            if target == "stack":
                self.move_free_to_stack(self.free[-1].suit, False)
            else:
                self.move_free_to_board(int(target))
        elif source == "stack":
            suit = command.suit or ""
            if not self.stacks[stack_index(suit)]:
                raise IllegalMoveError("Make sure there are stack cards to move!")
            self.move_stack_to_board(int(target), suit)
        else:
            pile = int(source)
            if not self._in_bounds(pile) or not self.board[pile - 1]:
                raise IllegalMoveError("Make sure there are board cards to move!")
            if target == "stack":
                self.move_board_to_stack(pile, self.board[pile - 1][-1].suit, False)
            else:
                self.move_board_to_board(pile, int(target), command.amount)