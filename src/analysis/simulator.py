"""
Monte Carlo simulator for the two-player round.

Plays many independent rounds (fresh catalog deck, reshuffled every round)
and accumulates outcome statistics with a confidence interval on player 1's
win rate. Each round is a separate game: nothing carries over between rounds.

Primary use: compare the corrected rules against the legacy quirks. Under
LEGACY_RULES player 2 starts with an empty hand, so player 1's advantage is
visible immediately in the win rates.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

from src.engine.deck import make_rng
from src.engine.game import play_round
from src.engine.probability import BustProbabilityCalculator
from src.engine.rules import DEFAULT_RULES, LEGACY_RULES, GameRules, Outcome

# Integer codes stored in SimulationResult.outcomes
OUTCOME_CODES: dict[Outcome, int] = {
    Outcome.PLAYER1_WINS: 1,
    Outcome.PLAYER2_WINS: 2,
    Outcome.DRAW: 0,
}

# ─── Result type ──────────────────────────────────────────────────────────────


@dataclass
class SimulationResult:
    """Aggregate statistics from a Monte Carlo run.

    Attributes:
        n_rounds:          Number of rounds simulated.
        player1_wins:      Rounds won by player 1.
        player2_wins:      Rounds won by player 2.
        draws:             Rounds with no winner.
        player1_busts:     Rounds where player 1 finished over 21.
        player2_busts:     Rounds where player 2 finished over 21.
        mean_player1_total: Mean final total of player 1's hand.
        mean_player2_total: Mean final total of player 2's hand.
        ci_95_low:         Lower bound of the 95% CI for player 1's win rate.
        ci_95_high:        Upper bound of the 95% CI for player 1's win rate.
        outcomes:          Per-round outcome codes (OUTCOME_CODES), or None if
                           simulate_rounds() was called with return_outcomes=False.
    """

    n_rounds: int
    player1_wins: int
    player2_wins: int
    draws: int
    player1_busts: int
    player2_busts: int
    mean_player1_total: float
    mean_player2_total: float
    ci_95_low: float
    ci_95_high: float
    outcomes: np.ndarray | None = None

    @property
    def player1_win_rate(self) -> float:
        return self.player1_wins / self.n_rounds

    @property
    def player2_win_rate(self) -> float:
        return self.player2_wins / self.n_rounds

    @property
    def draw_rate(self) -> float:
        return self.draws / self.n_rounds

    def __str__(self) -> str:
        return (
            f"Rounds: {self.n_rounds:,} | "
            f"P1 wins: {self.player1_win_rate:.2%} | "
            f"P2 wins: {self.player2_win_rate:.2%} | "
            f"Draws: {self.draw_rate:.2%} | "
            f"P1 95% CI: [{self.ci_95_low:.4f}, {self.ci_95_high:.4f}]"
        )


# ─── Core simulation loop ─────────────────────────────────────────────────────


def simulate_rounds(
    n_rounds: int = 10_000,
    seed: int | None = 42,
    rules: GameRules = DEFAULT_RULES,
    return_outcomes: bool = False,
) -> SimulationResult:
    """Simulate n_rounds independent rounds and return aggregate statistics.

    Args:
        n_rounds:        Number of rounds to play. Must be positive.
        seed:            Seed for the numpy Generator. None for a
                         non-deterministic run.
        rules:           Rule switches applied to every round.
        return_outcomes: If True, attach the per-round outcome codes (int8,
                         length n_rounds) to SimulationResult.outcomes.

    Returns:
        SimulationResult for the run.

    Raises:
        ValueError: If n_rounds is not positive.
    """
    if n_rounds <= 0:
        raise ValueError(f"n_rounds must be positive, got {n_rounds}.")

    rng = make_rng(seed)
    calculator = BustProbabilityCalculator()

    outcomes = np.empty(n_rounds, dtype=np.int8)
    totals = np.empty((n_rounds, 2), dtype=np.int64)

    for i in range(n_rounds):
        result = play_round(rng, rules=rules, calculator=calculator)
        outcomes[i] = OUTCOME_CODES[result.outcome]
        totals[i] = (result.player1_total, result.player2_total)

    player1_wins = int(np.count_nonzero(outcomes == OUTCOME_CODES[Outcome.PLAYER1_WINS]))
    player2_wins = int(np.count_nonzero(outcomes == OUTCOME_CODES[Outcome.PLAYER2_WINS]))
    busts = np.count_nonzero(totals > 21, axis=0)

    win_rate = player1_wins / n_rounds
    ci_margin = 1.96 * math.sqrt(win_rate * (1.0 - win_rate) / n_rounds)

    return SimulationResult(
        n_rounds=n_rounds,
        player1_wins=player1_wins,
        player2_wins=player2_wins,
        draws=n_rounds - player1_wins - player2_wins,
        player1_busts=int(busts[0]),
        player2_busts=int(busts[1]),
        mean_player1_total=float(totals[:, 0].mean()),
        mean_player2_total=float(totals[:, 1].mean()),
        ci_95_low=max(0.0, win_rate - ci_margin),
        ci_95_high=min(1.0, win_rate + ci_margin),
        outcomes=outcomes if return_outcomes else None,
    )


# ─── __main__ ─────────────────────────────────────────────────────────────────

if __name__ == "__main__":
    from src.analysis.strategy_report import print_simulation_summary

    print(play_round(make_rng()).output)
    print_simulation_summary(simulate_rounds(10_000), title="Corrected rules")
    print_simulation_summary(simulate_rounds(10_000, rules=LEGACY_RULES), title="Legacy rules")
