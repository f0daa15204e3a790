"""Interactive terminal front end for a game of Klondike."""

from __future__ import annotations

import argparse
import random
import sys
from collections.abc import Callable, Iterable
from typing import TextIO

from .graphics import SUITS
from .klondike import PILES, Klondike
from .tableau import Action, Command, IllegalMoveError

Ask = Callable[[str], str]

_PILE_NAMES = frozenset(str(number) for number in range(1, PILES + 1))

_ACTIONS = {
    "draw": Action.DRAW, "d": Action.DRAW,
    "auto": Action.AUTO, "a": Action.AUTO,
    "move": Action.MOVE, "m": Action.MOVE,
    "exit": Action.EXIT, "e": Action.EXIT,
    "stop": Action.STOP, "s": Action.STOP,
}
_QUIT = {"exit": Action.EXIT, "e": Action.EXIT, "stop": Action.STOP, "s": Action.STOP}

_ACTION_PROMPT = (
    "Please enter your input.\n"
    'Type "draw" to draw a card, "auto" to auto fill the stacks, '
    '"move" to move cards,\n'
    ' "stop" to reset your inputs, or "exit" to quit/give-up. '
)
_SOURCE_PROMPT = (
    "Please enter where you would like to move cards from.\n"
    'Type "free", "stack", a number 1 to 7, "stop" to reset your inputs, '
    'or "exit" to quit/give-up. '
)
_FREE_TARGET_PROMPT = (
    "Please enter where you would like to move cards to.\n"
    'Type "stack", a number 1 to 7, "stop" to reset your inputs, '
    'or "exit" to quit/give-up. '
)
_SUIT_PROMPT = (
    "Please enter where you would like to move cards to.\n"
    "Type the suit of the stack you would like to move from, "
    '"stop" to reset your inputs, or "exit" to quit/give-up. '
)
_STACK_TARGET_PROMPT = (
    "Please enter where you would like to move cards to.\n"
    'Type a number 1 to 7, "stop" to reset your inputs, '
    'or "exit" to quit/give-up. '
)
_BOARD_TARGET_PROMPT = (
    "Please enter where you would like to move cards to.\n"
    'Type "stack" or a number 1 to 7, "stop" to reset your inputs, '
    'or "exit" to quit/give-up. '
)
_AMOUNT_PROMPT = "Please enter the amount of cards you would like to move. "
_MODE_PROMPT = 'Would you like to play a draw "3" game or a draw "1" game? '
_START_PROMPT = 'Type "start" to start. '


def _ask_until(ask: Ask, prompt: str, accepted: Callable[[str], bool]) -> str:
    while True:
        answer = ask(prompt)
        if accepted(answer):
            return answer


def _ask_choice(ask: Ask, prompt: str, choices: Iterable[str]) -> str:
    allowed = frozenset(choices)
    return _ask_until(ask, prompt, allowed.__contains__)


def _ask_amount(ask: Ask, available: int) -> int:
    while True:
        answer = ask(_AMOUNT_PROMPT)
        try:
            amount = int(answer)
        except ValueError:
            continue
        if 1 <= amount <= available:
            return amount


def prompt_command(game: Klondike, ask: Ask) -> Command:
    """Ask the player, one answer at a time, for a complete command."""
    first = _ask_choice(ask, _ACTION_PROMPT, _ACTIONS)
    action = _ACTIONS[first]
    if action is not Action.MOVE:
        return Command(action)

    source = _ask_choice(ask, _SOURCE_PROMPT, {"free", "f", "stack", *_PILE_NAMES, *_QUIT})
    if source in _QUIT:
        return Command(_QUIT[source])

    if source in ("free", "f"):
        target = _ask_choice(ask, _FREE_TARGET_PROMPT, {"stack", *_PILE_NAMES, *_QUIT})
        if target in _QUIT:
            return Command(_QUIT[target])
        return Command(
            Action.MOVE,
            source="free",
            target="stack" if target == "stack" else int(target),
        )

    if source == "stack":
        suit = _ask_choice(ask, _SUIT_PROMPT, {*SUITS, *_QUIT})
        if suit in _QUIT:
            return Command(_QUIT[suit])
        target = _ask_choice(ask, _STACK_TARGET_PROMPT, {*_PILE_NAMES, *_QUIT})
        if target in _QUIT:
            return Command(_QUIT[target])
        return Command(Action.MOVE, source="stack", target=int(target), suit=suit)

    pile = int(source)
    allowed = {"stack", *_QUIT, *(_PILE_NAMES - {source})}
    target = _ask_choice(ask, _BOARD_TARGET_PROMPT, allowed)
    if target in _QUIT:
        return Command(_QUIT[target])
    if target == "stack":
        return Command(Action.MOVE, source=pile, target="stack")
    available = len(game.board[pile - 1])
    amount = _ask_amount(ask, available) if available else 1
    return Command(Action.MOVE, source=pile, target=int(target), amount=amount)


def play(game: Klondike, ask: Ask, out: TextIO | None = None) -> bool:
    """Set up and play a whole game; tell whether the player won."""
    out = out if out is not None else sys.stdout
    out.write("This is Klondike Solitaire!!\n")
    mode = _ask_choice(ask, _MODE_PROMPT, {"1", "3"})
    if mode == "1":
        game.draw_one = True
    _ask_choice(ask, _START_PROMPT, {"start"})

    game.deal()
    while True:
        out.write(game.render())
        if game.is_won():
            break
        command = prompt_command(game, ask)
        try:
            going_on = game.apply(command)
        except IllegalMoveError as error:
            out.write(f"{error}\n\n")
            continue
        if not going_on:
            break

    won = game.is_won()
    out.write("YOU WIN!\n" if won else "YOU LOSE!!\n")
    return won


def _token_asker(stream: TextIO, out: TextIO) -> Ask:
    tokens = (token for line in stream for token in line.split())

    def ask(prompt: str) -> str:
        out.write(prompt)
        out.flush()
        try:
            return next(tokens)
        except StopIteration:
            raise EOFError("no more input") from None

    return ask


def main(argv: list[str] | None = None) -> int:
    """Play Klondike in the terminal."""
    parser = argparse.ArgumentParser(prog="solitaire", description="Play Klondike solitaire.")
    parser.add_argument("--seed", type=int, default=None, help="seed for shuffling the deck")
    args = parser.parse_args(argv)

    game = Klondike(rng=random.Random(args.seed))
    out = sys.stdout
    try:
        play(game, _token_asker(sys.stdin, out), out)
    except EOFError:
        out.write("\n")
        return 1
    return 0