"""Playing cards that can lie face up or face down, and a deck to draw them from."""

from __future__ import annotations

import random
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from .graphics import BACK, RANKS, SUITS, card_graphic

RED_SUITS = frozenset({"heart", "diamond"})


@dataclass
class Card:
    """A standard playing card with a side that shows."""

    suit: str
    rank: int
    face_up: bool = False

    def __post_init__(self) -> None:
        if self.suit not in SUITS:
            raise ValueError(f"unknown suit: {self.suit!r}")
        if self.rank not in RANKS:
            raise ValueError(f"rank out of range: {self.rank!r}")

    def flip(self) -> None:
        """Turn the card over."""
        self.face_up = not self.face_up

    def color(self) -> str:
        """Return "red" for hearts and diamonds, "black" otherwise."""
        return "red" if self.suit in RED_SUITS else "black"

    def graphic(self) -> tuple[str, ...]:
        """Return the nine rows that draw the side of the card that shows."""
        if self.face_up:
            return card_graphic(self.suit, self.rank)
        return BACK


class Deck:
    """A pile of face-down cards that starts in out-of-the-box order."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self._cards: list[Card] = [Card(suit, rank) for suit in SUITS for rank in RANKS]

    @property
    def cards(self) -> tuple[Card, ...]:
        """The cards left, bottom first; the last one is drawn next."""
        return tuple(self._cards)

    def shuffle(self) -> None:
        """Put the cards in random order."""
        self._rng.shuffle(self._cards)

    def draw(self) -> Card:
        """Take the top card off the deck."""
        if not self._cards:
            raise IndexError("the deck is empty")
        return self._cards.pop()

    def refill(self, cards: Iterable[Card]) -> None:
        """Replace the deck's contents with the given cards, bottom first."""
        self._cards = list(cards)

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)