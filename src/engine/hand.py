"""
Hand evaluation: running total, bust detection, and the win comparison.

Scoring is a plain sum of card points (Ace is always 1). The legacy game
skipped the first card when summing; Hand reproduces that when built with
skip_first_card=True. Whatever mode is chosen, the same total drives scoring,
bust detection, and the player's hit/stand decision.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .cards import Card, hand_to_str

if TYPE_CHECKING:
    from .player import Player

BUST_LIMIT: int = 21


def is_bust(total: int) -> bool:
    """Return True if a total exceeds 21 (bust).

    Examples:
        >>> is_bust(21)
        False
        >>> is_bust(22)
        True
    """
    return total > BUST_LIMIT


class Hand:
    """The cards dealt to one player during a round.

    Created empty at round start and only ever grows. The player reference
    is an association, not ownership.
    """

    def __init__(self, player: Player, skip_first_card: bool = False) -> None:
        self.player = player
        self.skip_first_card = skip_first_card
        self._cards: list[Card] = []

    def __len__(self) -> int:
        return len(self._cards)

    def __repr__(self) -> str:
        return f"Hand({self.player.name!r}, {len(self._cards)} cards, total={self.total_points()})"

    @property
    def cards(self) -> tuple[Card, ...]:
        return tuple(self._cards)

    def add_card(self, card: Card) -> None:
        self._cards.append(card)

    def total_points(self) -> int:
        """Sum the points of the cards in the hand.

        Examples:
            >>> from .cards import cards_from_str
            >>> from .player import Player
            >>> hand = Hand(Player('Harry', None))
            >>> for card in cards_from_str('KS', '9H'):
            ...     hand.add_card(card)
            >>> hand.total_points()
            19
        """
        scored = self._cards[1:] if self.skip_first_card else self._cards
        return sum(card.points for card in scored)

    def is_bust(self) -> bool:
        return is_bust(self.total_points())

    def beats(self, other: Hand) -> bool:
        """Return True if this hand wins against the other hand.

        A hand wins when it has not bust and either the other hand has bust
        or this hand has strictly more points. Both bust, or equal non-bust
        totals, is a draw: neither hand beats the other, so callers must
        check both directions.
        """
        my_score = self.total_points()
        if is_bust(my_score):
            return False
        other_score = other.total_points()
        return is_bust(other_score) or my_score > other_score

    def description(self) -> str:
        """Summarise the hand for the round trace, e.g. '2 cards: Ace of Spades, Two of Hearts.'"""
        return f"{len(self._cards)} cards: {hand_to_str(self._cards)}."
