"""
Game rule configuration and round outcomes.

The legacy game carried three quirks. Each one is a GameRules switch so a
caller can choose between bit-for-bit parity and the corrected game:

    skip_first_card               — hand totals ignore the first card dealt
    deal_both_pairs_to_first_hand — all four starting cards go to player 1
    shuffle_strategy              — sampling with replacement instead of a
                                    true permutation

DEFAULT_RULES is the corrected game. LEGACY_RULES reproduces all three quirks.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from .deck import ShuffleStrategy, permutation, sample_with_replacement

BLACKJACK: int = 21
ALWAYS_HIT_MAX: int = 10          # no single card can bust a total this low
DEFAULT_RISK_THRESHOLD: float = 0.5
CARDS_PER_STARTING_HAND: int = 2


class Outcome(Enum):
    PLAYER1_WINS = auto()
    PLAYER2_WINS = auto()
    DRAW = auto()


@dataclass(frozen=True)
class GameRules:
    skip_first_card: bool = False
    deal_both_pairs_to_first_hand: bool = False
    shuffle_strategy: ShuffleStrategy = permutation


DEFAULT_RULES = GameRules()

LEGACY_RULES = GameRules(
    skip_first_card=True,
    deal_both_pairs_to_first_hand=True,
    shuffle_strategy=sample_with_replacement,
)
