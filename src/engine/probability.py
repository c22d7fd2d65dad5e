"""
Bust probability estimation for the hit/stand decision.

The estimate ignores which cards have already been dealt (no card counting):
every card of the full catalog is considered a possible next draw.

The returned value is the ratio of bust outcomes to NON-bust outcomes, not to
the catalog size, matching the legacy game's strategy:
    total 12 → 16 busts (ten-value cards) / 36 non-busts ≈ 0.444
    total 19 → 44 busts / 8 non-busts (Aces, Twos)        = 5.5

Degenerate inputs never raise:
    empty catalog   → 0.5 (neutral)
    zero non-busts  → 1.0 (every draw busts)
"""

from __future__ import annotations

from typing import Sequence

import numpy as np

from .cards import ALL_CARDS, Card
from .hand import BUST_LIMIT

EMPTY_CATALOG_PROBABILITY: float = 0.5
ALL_BUST_PROBABILITY: float = 1.0


class BustProbabilityCalculator:
    """Estimate the risk of busting on the next card.

    One calculator may be shared by any number of players; it holds nothing
    but a read-only reference to the catalog (and its point values).

    Args:
        catalog: All possible cards. Defaults to the shared 52-card catalog.
    """

    def __init__(self, catalog: Sequence[Card] = ALL_CARDS) -> None:
        self.catalog = catalog
        self._points = np.array([card.points for card in catalog], dtype=np.int64)

    def count_outcomes(self, current_points: int) -> tuple[int, int]:
        """Return (busts, non_busts) over the catalog for one more draw.

        Examples:
            >>> BustProbabilityCalculator().count_outcomes(12)
            (16, 36)
        """
        busts = int(np.count_nonzero(self._points + current_points > BUST_LIMIT))
        return busts, len(self._points) - busts

    def bust_probability(self, current_points: int) -> float:
        """Ratio of bust draws to non-bust draws at the given total.

        Examples:
            >>> round(BustProbabilityCalculator().bust_probability(12), 4)
            0.4444
            >>> BustProbabilityCalculator().bust_probability(19)
            5.5
            >>> BustProbabilityCalculator([]).bust_probability(15)
            0.5
        """
        if len(self._points) == 0:
            return EMPTY_CATALOG_PROBABILITY
        busts, non_busts = self.count_outcomes(current_points)
        if non_busts == 0:
            return ALL_BUST_PROBABILITY
        return busts / non_busts
