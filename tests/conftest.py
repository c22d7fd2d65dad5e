"""
Shared pytest fixtures for the round simulator tests.

Provides convenience wrappers around str_to_card for building known hands
and stacked decks.
"""

from __future__ import annotations

import pytest

from src.engine.cards import str_to_card
from src.engine.deck import Deck
from src.engine.hand import Hand
from src.engine.player import Player
from src.engine.probability import BustProbabilityCalculator


def cards(*card_strs: str) -> list:
    """Build a list of Cards from short codes.

    Examples:
        >>> [c.description for c in cards('AS', 'KH')]
        ['Ace of Spades', 'King of Hearts']
    """
    return [str_to_card(s) for s in card_strs]


def stacked_deck(*card_strs: str) -> Deck:
    """Build a deck that deals the given cards in order."""
    return Deck(cards(*card_strs))


def hand(*card_strs: str, skip_first_card: bool = False) -> Hand:
    """Build a hand holding the given cards, owned by a throwaway player."""
    result = Hand(Player('Test', BustProbabilityCalculator()), skip_first_card=skip_first_card)
    for card in cards(*card_strs):
        result.add_card(card)
    return result


class FixedCalculator:
    """Calculator stand-in that returns a fixed value and records queries."""

    def __init__(self, value: float) -> None:
        self.value = value
        self.queries: list[int] = []

    def bust_probability(self, current_points: int) -> float:
        self.queries.append(current_points)
        return self.value


@pytest.fixture
def calculator() -> BustProbabilityCalculator:
    """Return a calculator over the full 52-card catalog."""
    return BustProbabilityCalculator()


@pytest.fixture
def harry(calculator) -> Player:
    return Player('Harry', calculator)


@pytest.fixture
def joe(calculator) -> Player:
    return Player('Joe', calculator)
