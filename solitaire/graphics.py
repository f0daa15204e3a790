"""Text-art graphics and lookup tables for a standard deck of playing cards."""

from __future__ import annotations

SUITS: tuple[str, ...] = ("spade", "heart", "club", "diamond")
RANKS: tuple[int, ...] = tuple(range(1, 14))

SUIT_SYMBOLS: dict[str, str] = {
    "spade": "\u2660",
    "heart": "\u2665",
    "club": "\u2663",
    "diamond": "\u2666",
}

_BORDER = "+-----------+"

BACK: tuple[str, ...] = (
    _BORDER,
    "|***********|",
    "|****@@@****|",
    "|***@###@***|",
    "|**@<(o)>@**|",
    "|***@###@***|",
    "|****@@@****|",
    "|***********|",
    _BORDER,
)

EMPTY: tuple[str, ...] = (
    _BORDER,
    "|*****^*****|",
    "|****/ \\****|",
    "|***/   \\***|",
    "|**(     )**|",
    "|***\\   /***|",
    "|****\\ /****|",
    "|*****v*****|",
    _BORDER,
)

# Inner rows of each card; "x" stands for the suit symbol.
_PIPS: dict[int, tuple[str, ...]] = {
    1: ("|A          |", "|x          |", "|           |", "|     x     |",
        "|           |", "|          x|", "|          A|"),
    2: ("|2          |", "|x    x     |", "|           |", "|           |",
        "|           |", "|     x    x|", "|          2|"),
    3: ("|3          |", "|x    x     |", "|           |", "|     x     |",
        "|           |", "|     x    x|", "|          3|"),
    4: ("|4          |", "|x  x   x   |", "|           |", "|           |",
        "|           |", "|   x   x  x|", "|          4|"),
    5: ("|5          |", "|x  x   x   |", "|           |", "|     x     |",
        "|           |", "|   x   x  x|", "|          5|"),
    6: ("|6          |", "|x  x   x   |", "|           |", "|   x   x   |",
        "|           |", "|   x   x  x|", "|          6|"),
    7: ("|7          |", "|x  x   x   |", "|     x     |", "|   x   x   |",
        "|           |", "|   x   x  x|", "|          7|"),
    8: ("|8          |", "|x  x   x   |", "|     x     |", "|   x   x   |",
        "|     x     |", "|   x   x  x|", "|          8|"),
    9: ("|9  x   x   |", "|x          |", "|   x   x   |", "|     x     |",
        "|   x   x   |", "|          x|", "|   x   x  9|"),
    10: ("|10 x   x   |", "|x    x     |", "|   x   x   |", "|           |",
         "|   x   x   |", "|     x    x|", "|   x   x 10|"),
}

_JACK_MIDDLE = ("|   J   JJ  |", "|  J  J  J  |", "|  JJ   J   |")
_QUEEN_MIDDLE = ("|   Q   Q   |", "|  Q  Q  Q  |", "|   Q Q Q   |")
_KING_MIDDLE = ("|   K   K   |", "|  K K K K  |", "|   K K K   |")

# Per suit: (top row, second row, second-to-last row, last row) of each face.
_FACES: dict[str, dict[int, tuple[str, str, str, str]]] = {
    "spade": {
        11: ("|J x JJJ J  |", "|x   JJO J  |", "|  J OJJ   x|", "|  J JJJ x J|"),
        12: ("|Q x QQQ    |", "|x Q QOO    |", "|    OOQ Q x|", "|    QQQ x Q|"),
        13: ("|K x KKK K  |", "|x   KOO K  |", "|  K OOK   x|", "|  K KKK x K|"),
    },
    "heart": {
        11: ("|J x JJJ J  |", "|x J OJJ J  |", "|  J JJO J x|", "|  J JJJ x J|"),
        12: ("|Q x QQQ    |", "|x   OOQ Q  |", "|  Q QOO   x|", "|    QQQ x Q|"),
        13: ("|K x KKK<K  |", "|x   OOK K  |", "|  K KOO   x|", "|  K>KKK x K|"),
    },
    "club": {
        11: ("|J x JJJ J  |", "|x   JOO J  |", "|  J OOJ   x|", "|  J JJJ x J|"),
        12: ("|Q x QQQ    |", "|x Q OOQ    |", "|    QOO Q x|", "|    QQQ x Q|"),
        13: ("|K x KKK K  |", "|x   OOK K  |", "|  K KOO   x|", "|  K KKK x K|"),
    },
    "diamond": {
        11: ("|J x JJJ J  |", "|x   OOJ J  |", "|  J JOO   x|", "|  J JJJ x J|"),
        12: ("|Q x QQQ    |", "|x Q OOQ    |", "|    QOO Q x|", "|    QQQ x Q|"),
        13: ("|K x KKK K  |", "|x   OKK K  |", "|  K KKO   x|", "|  K KKK x K|"),
    },
}

_FACE_MIDDLES = {11: _JACK_MIDDLE, 12: _QUEEN_MIDDLE, 13: _KING_MIDDLE}


def _inner_rows(suit: str, rank: int) -> tuple[str, ...]:
    if rank in _PIPS:
        return _PIPS[rank]
    top, second, second_last, last = _FACES[suit][rank]
    return (top, second, *_FACE_MIDDLES[rank], second_last, last)


def _build() -> dict[tuple[str, int], tuple[str, ...]]:
    table = {}
    for suit in SUITS:
        symbol = SUIT_SYMBOLS[suit]
        for rank in RANKS:
            inner = tuple(row.replace("x", symbol) for row in _inner_rows(suit, rank))
            table[(suit, rank)] = (_BORDER, *inner, _BORDER)
    return table


GRAPHICS: dict[tuple[str, int], tuple[str, ...]] = _build()


def card_graphic(suit: str, rank: int) -> tuple[str, ...]:
    """Return the nine text rows that draw the face of the given card."""
    try:
        return GRAPHICS[(suit, rank)]
    except (KeyError, TypeError):
        raise ValueError(f"no such card: suit={suit!r}, rank={rank!r}") from None