"""
Card constants, the 52-card catalog, and human-readable I/O helpers.

A card is an immutable (rank, suit) pair. Its point value depends on rank only:
    Ace = 1, Two..Ten = face value, Jack/Queen/King = 10

ALL_CARDS is built once at import time and shared by reference wherever a
"full deck" of possibilities is needed. It is a tuple, so it cannot be depleted.

Short codes (<rank><suit>, suit is the last character) are used at I/O and
test-setup boundaries only, e.g. 'AS', '10H', 'KD'.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Suit(Enum):
    SPADES = 'Spades'
    HEARTS = 'Hearts'
    CLUBS = 'Clubs'
    DIAMONDS = 'Diamonds'


class Rank(Enum):
    ACE = 'Ace'
    TWO = 'Two'
    THREE = 'Three'
    FOUR = 'Four'
    FIVE = 'Five'
    SIX = 'Six'
    SEVEN = 'Seven'
    EIGHT = 'Eight'
    NINE = 'Nine'
    TEN = 'Ten'
    JACK = 'Jack'
    QUEEN = 'Queen'
    KING = 'King'


# Point value lookup, the only place rank values are defined.
RANK_POINTS: dict[Rank, int] = {
    Rank.ACE: 1,
    Rank.TWO: 2,
    Rank.THREE: 3,
    Rank.FOUR: 4,
    Rank.FIVE: 5,
    Rank.SIX: 6,
    Rank.SEVEN: 7,
    Rank.EIGHT: 8,
    Rank.NINE: 9,
    Rank.TEN: 10,
    Rank.JACK: 10,
    Rank.QUEEN: 10,
    Rank.KING: 10,
}

# Short-code symbols, index-aligned with the enum declaration order.
RANK_CODES: dict[Rank, str] = dict(
    zip(Rank, ['A', '2', '3', '4', '5', '6', '7', '8', '9', '10', 'J', 'Q', 'K'])
)
SUIT_CODES: dict[Suit, str] = dict(zip(Suit, ['S', 'H', 'C', 'D']))

_RANK_BY_CODE: dict[str, Rank] = {code: rank for rank, code in RANK_CODES.items()}
_SUIT_BY_CODE: dict[str, Suit] = {code: suit for suit, code in SUIT_CODES.items()}

# Ranks worth 10 points (the bust cards at a total of 12)
TEN_VALUE_RANKS: frozenset[Rank] = frozenset({Rank.TEN, Rank.JACK, Rank.QUEEN, Rank.KING})


@dataclass(frozen=True)
class Card:
    """A single playing card.

    Frozen (hashable) so cards can be compared, counted, and used in sets.

    Examples:
        >>> Card(Rank.KING, Suit.HEARTS).points
        10
        >>> Card(Rank.ACE, Suit.SPADES).description
        'Ace of Spades'
    """
    rank: Rank
    suit: Suit

    @property
    def points(self) -> int:
        return RANK_POINTS[self.rank]

    @property
    def description(self) -> str:
        return f"{self.rank.value} of {self.suit.value}"

    def __str__(self) -> str:
        return self.description


def build_catalog() -> tuple[Card, ...]:
    """Return one card for every suit x rank combination, suit-major.

    Examples:
        >>> len(build_catalog())
        52
        >>> build_catalog()[0]
        Card(rank=<Rank.ACE: 'Ace'>, suit=<Suit.SPADES: 'Spades'>)
    """
    return tuple(Card(rank, suit) for suit in Suit for rank in Rank)


ALL_CARDS: tuple[Card, ...] = build_catalog()


def card_to_str(card: Card) -> str:
    """Convert a card to its short code.

    Examples:
        >>> card_to_str(Card(Rank.ACE, Suit.SPADES))
        'AS'
        >>> card_to_str(Card(Rank.TEN, Suit.CLUBS))
        '10C'
    """
    return RANK_CODES[card.rank] + SUIT_CODES[card.suit]


def str_to_card(s: str) -> Card:
    """Parse a short code such as 'AS', '7H' or '10C' into a Card.

    Raises:
        ValueError: If the rank or suit symbol is not recognised.

    Examples:
        >>> str_to_card('QD')
        Card(rank=<Rank.QUEEN: 'Queen'>, suit=<Suit.DIAMONDS: 'Diamonds'>)
    """
    rank_str, suit_char = s[:-1].upper(), s[-1:].upper()
    if rank_str not in _RANK_BY_CODE or suit_char not in _SUIT_BY_CODE:
        raise ValueError(f"Invalid card code: {s!r}")
    return Card(_RANK_BY_CODE[rank_str], _SUIT_BY_CODE[suit_char])


def cards_from_str(*card_strs: str) -> list[Card]:
    """Parse several short codes at once.

    Examples:
        >>> [card_to_str(c) for c in cards_from_str('AS', 'KH')]
        ['AS', 'KH']
    """
    return [str_to_card(s) for s in card_strs]


def hand_to_str(cards) -> str:
    """Join card descriptions with commas, in dealing order.

    Examples:
        >>> hand_to_str(cards_from_str('AS', '2H'))
        'Ace of Spades, Two of Hearts'
    """
    return ', '.join(card.description for card in cards)
