import random

import pytest

from solitaire.cards import Card, Deck
from solitaire.graphics import BACK, RANKS, SUITS, card_graphic


def test_new_card_is_face_down_and_flips():
    card = Card("spade", 1)
    assert card.face_up is False
    card.flip()
    assert card.face_up is True
    card.flip()
    assert card.face_up is False


def test_colors_pair_up_by_suit():
    assert Card("heart", 5).color() == "red"
    assert Card("heart", 5).color() == Card("diamond", 9).color()
    assert Card("spade", 5).color() == Card("club", 2).color()
    assert Card("spade", 5).color() != Card("heart", 5).color()


def test_graphic_depends_on_face():
    card = Card("club", 12)
    assert card.graphic() == BACK
    card.flip()
    assert card.graphic() == card_graphic("club", 12)


@pytest.mark.parametrize("suit, rank", [("star", 1), ("spade", 0), ("heart", 14)])
def test_invalid_card_raises(suit, rank):
    with pytest.raises(ValueError):
        Card(suit, rank)


def test_new_deck_holds_every_card_once_face_down():
    deck = Deck(random.Random(1))
    cards = list(deck)
    assert len(deck) == len(SUITS) * len(RANKS)
    assert {(c.suit, c.rank) for c in cards} == {(s, r) for s in SUITS for r in RANKS}
    assert not any(c.face_up for c in cards)


def test_draw_takes_from_top():
    deck = Deck(random.Random(1))
    top = deck.cards[-1]
    size = len(deck)
    drawn = deck.draw()
    assert drawn is top
    assert len(deck) == size - 1
    assert drawn not in deck.cards


def test_draw_from_empty_deck_raises():
    deck = Deck(random.Random(1))
    deck.refill([])
    with pytest.raises(IndexError):
        deck.draw()


def test_shuffle_keeps_cards_and_is_seeded():
    first = Deck(random.Random(42))
    second = Deck(random.Random(42))
    before = sorted((c.suit, c.rank) for c in first)
    first.shuffle()
    second.shuffle()
    assert sorted((c.suit, c.rank) for c in first) == before
    assert [(c.suit, c.rank) for c in first] == [(c.suit, c.rank) for c in second]


def test_refill_replaces_contents():
    deck = Deck(random.Random(3))
    cards = [Card("heart", 3), Card("spade", 13)]
    deck.refill(cards)
    assert len(deck) == 2
    assert deck.draw() is cards[1]
    assert deck.draw() is cards[0]
    assert len(deck) == 0


def test_draw_all_cards_empties_deck():
    deck = Deck(random.Random(7))
    deck.shuffle()
    drawn = [deck.draw() for _ in range(len(deck))]
    assert len(deck) == 0
    assert len({(c.suit, c.rank) for c in drawn}) == len(SUITS) * len(RANKS)