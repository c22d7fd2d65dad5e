"""Printed reports for the hit/stand policy and simulation runs.

    print_bust_table(calculator)       — busts, non-busts and ratio per total
    print_policy_table(player)         — HIT/STAND decision per total
    print_simulation_summary(result)   — win/draw rates and bust counts
"""

from __future__ import annotations

from src.analysis.simulator import SimulationResult
from src.engine.player import Player
from src.engine.probability import BustProbabilityCalculator

# Totals where the policy actually consults the calculator
_DECISION_TOTALS = range(11, 21)


def print_bust_table(calculator: BustProbabilityCalculator) -> None:
    """Print bust/non-bust counts and the bust ratio for totals 11–20."""
    print("=" * 44)
    print("Bust Ratio by Current Total")
    print("=" * 44)
    print(f"  {'Total':>5}  {'Busts':>5}  {'Safe':>5}  {'Ratio':>8}")
    print(f"  {'-----':>5}  {'-----':>5}  {'-----':>5}  {'--------':>8}")
    for total in _DECISION_TOTALS:
        busts, non_busts = calculator.count_outcomes(total)
        ratio = calculator.bust_probability(total)
        print(f"  {total:>5}  {busts:>5}  {non_busts:>5}  {ratio:>8.4f}")
    print()


def print_policy_table(player: Player) -> None:
    """Print the player's decision at every total from 2 to 21."""
    print("=" * 44)
    print(f"Decision Policy — {player.name} (threshold {player.risk_threshold})")
    print("=" * 44)
    row = []
    for total in range(2, 22):
        row.append(f"{total}:{player.decide(total).name[0]}")
        if len(row) == 10:
            print("  " + "  ".join(row))
            row = []
    if row:
        print("  " + "  ".join(row))
    print()


def print_simulation_summary(result: SimulationResult, title: str = "Simulation") -> None:
    print("=" * 44)
    print(title)
    print("=" * 44)
    print(f"  Rounds:          {result.n_rounds:,}")
    print(f"  Player 1 wins:   {result.player1_wins:,}  ({result.player1_win_rate:.2%})")
    print(f"  Player 2 wins:   {result.player2_wins:,}  ({result.player2_win_rate:.2%})")
    print(f"  Draws:           {result.draws:,}  ({result.draw_rate:.2%})")
    print(f"  Player 1 busts:  {result.player1_busts:,}")
    print(f"  Player 2 busts:  {result.player2_busts:,}")
    print(f"  Mean totals:     {result.mean_player1_total:.2f} / {result.mean_player2_total:.2f}")
    print(f"  P1 win 95% CI:   [{result.ci_95_low:.4f}, {result.ci_95_high:.4f}]")
    print()
