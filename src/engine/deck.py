"""
Deck creation, shuffling, and dealing.

The deck is an ordered list of Card objects. Dealing always removes the
first card, so the current order is the order cards will be dealt in.

Shuffling is pluggable. Two strategies are provided:
    sample_with_replacement — the inherited algorithm: every output position
        draws a uniform index into the original list. Length is preserved
        but a card may appear more than once (and another not at all).
    permutation             — a true uniform permutation of the cards.

Randomness comes from an injected numpy Generator; nothing else in the
engine consumes random numbers.
"""

from __future__ import annotations

from typing import Callable, Iterable

import numpy as np

from .cards import ALL_CARDS, Card

# shuffle_strategy(cards, rng) -> new ordering
ShuffleStrategy = Callable[[list[Card], np.random.Generator], list[Card]]


class EmptyDeckError(ValueError):
    """Raised when a card is dealt from a deck with no cards remaining."""


def make_rng(seed: int | None = None) -> np.random.Generator:
    """Build the random source used for shuffling.

    Examples:
        >>> int(make_rng(7).integers(0, 52)) == int(make_rng(7).integers(0, 52))
        True
    """
    return np.random.default_rng(seed)


# ─── Shuffle strategies ───────────────────────────────────────────────────────

def sample_with_replacement(cards: list[Card], rng: np.random.Generator) -> list[Card]:
    """Reorder by sampling positions of the original list with replacement.

    Not a permutation: the result has the same length as the input, but
    duplicates and omissions are possible. Kept for parity with the
    legacy game's shuffle.

    Examples:
        >>> from .cards import cards_from_str
        >>> len(sample_with_replacement(cards_from_str('AS', '2S', '3S'), make_rng(0)))
        3
    """
    original = list(cards)
    n = len(original)
    return [original[int(rng.integers(0, n))] for _ in range(n)]


def permutation(cards: list[Card], rng: np.random.Generator) -> list[Card]:
    """Reorder into a uniform random permutation (every card exactly once).

    Examples:
        >>> from .cards import cards_from_str
        >>> sorted(map(str, permutation(cards_from_str('AS', '2S'), make_rng(0))))
        ['Ace of Spades', 'Two of Spades']
    """
    original = list(cards)
    return [original[i] for i in rng.permutation(len(original))]


SHUFFLE_STRATEGIES: dict[str, ShuffleStrategy] = {
    'sample_with_replacement': sample_with_replacement,
    'permutation': permutation,
}


# ─── Deck ─────────────────────────────────────────────────────────────────────

class Deck:
    """The cards remaining to be dealt, in dealing order.

    A fresh deck is a copy of the full catalog in catalog order; shuffle
    it before dealing or cards come out in that sequence.

    Args:
        cards: Optional starting sequence. Copied, never aliased, so the
               shared catalog is not consumed by dealing.
    """

    def __init__(self, cards: Iterable[Card] | None = None) -> None:
        self._cards: list[Card] = list(ALL_CARDS if cards is None else cards)

    def __len__(self) -> int:
        return len(self._cards)

    def __repr__(self) -> str:
        return f"Deck({len(self._cards)} cards)"

    @property
    def cards(self) -> tuple[Card, ...]:
        """The remaining cards in the order they will be dealt."""
        return tuple(self._cards)

    @property
    def cards_remaining(self) -> int:
        return len(self._cards)

    def shuffle(
        self,
        rng: np.random.Generator,
        strategy: ShuffleStrategy = sample_with_replacement,
    ) -> None:
        """Replace the current order with the strategy's reordering."""
        self._cards = list(strategy(self._cards, rng))

    def deal(self) -> Card:
        """Remove and return the top card.

        Raises:
            EmptyDeckError: If no cards remain.

        Examples:
            >>> deck = Deck()
            >>> deck.deal().description
            'Ace of Spades'
            >>> len(deck)
            51
        """
        if not self._cards:
            raise EmptyDeckError("Cannot deal from an empty deck.")
        return self._cards.pop(0)
