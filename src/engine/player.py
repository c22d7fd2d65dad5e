"""
Player identity and the hit/stand decision policy.

Policy (re-derived from the current total on every call, nothing retained):
    total >= 21        → STAND
    total <= 10        → HIT   (no single card can bust)
    11 <= total <= 20  → HIT iff bust_probability(total) < risk_threshold
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from .probability import BustProbabilityCalculator
from .rules import ALWAYS_HIT_MAX, BLACKJACK, DEFAULT_RISK_THRESHOLD


class PlayerAction(Enum):
    HIT = auto()
    STAND = auto()


@dataclass(frozen=True)
class Player:
    """A named player and the shared calculator it consults.

    The calculator is injected, not owned: one instance can serve both
    players of a round.
    """
    name: str
    calculator: BustProbabilityCalculator
    risk_threshold: float = DEFAULT_RISK_THRESHOLD

    def wants_to_hit(self, current_points: int) -> bool:
        """Return True to take another card, False to stand.

        Examples:
            >>> player = Player('Harry', BustProbabilityCalculator())
            >>> player.wants_to_hit(21), player.wants_to_hit(5)
            (False, True)
            >>> player.wants_to_hit(12), player.wants_to_hit(13)
            (True, False)
        """
        if current_points >= BLACKJACK:
            return False
        if current_points <= ALWAYS_HIT_MAX:
            return True
        return self.calculator.bust_probability(current_points) < self.risk_threshold

    def decide(self, current_points: int) -> PlayerAction:
        return PlayerAction.HIT if self.wants_to_hit(current_points) else PlayerAction.STAND
