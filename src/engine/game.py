"""
Round controller and the textual round trace.

Implements one complete two-player round:
    DEALING → PLAYER1_TURN → PLAYER2_TURN → RESOLUTION → DONE

    1. Deal two cards to each hand (all four to hand 1 under
       GameRules.deal_both_pairs_to_first_hand).
    2. Each player in turn hits until their policy says stand or the hand
       busts.
    3. Resolve with Hand.beats in both directions: player 1, player 2, or draw.

The controller is the sole owner of the deck and both hands for the duration
of the round. No randomness is consumed here; given a fixed deck order the
trace and verdict are fully reproducible.

Every step is recorded as a TraceEvent; format_event() renders the
line-oriented text shown to a human.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto

import numpy as np

from .cards import Card
from .deck import Deck
from .hand import Hand, is_bust
from .player import Player
from .probability import BustProbabilityCalculator
from .rules import CARDS_PER_STARTING_HAND, DEFAULT_RULES, GameRules, Outcome


# ─── Enumerations ─────────────────────────────────────────────────────────────

class Phase(Enum):
    DEALING = auto()
    PLAYER1_TURN = auto()
    PLAYER2_TURN = auto()
    RESOLUTION = auto()
    DONE = auto()


class EventKind(Enum):
    START = auto()    # starting hand shown
    TURN = auto()     # player's turn begins
    HIT = auto()      # card dealt on a hit
    STAND = auto()    # turn ended at <= 21
    BUST = auto()     # turn ended at > 21
    RESULT = auto()   # final verdict


# ─── Trace / Result types ─────────────────────────────────────────────────────

@dataclass(frozen=True)
class TraceEvent:
    """One entry in the round trace.

    Only the fields relevant to the event kind are set: `card` for HIT,
    `hand_description` for START, `outcome` for RESULT. The RESULT event's
    `player` is the winner's name, or None on a draw.
    """
    kind: EventKind
    player: str | None = None
    card: Card | None = None
    hand_description: str | None = None
    outcome: Outcome | None = None


def format_event(event: TraceEvent) -> str:
    """Render a trace event as a single line of text.

    Examples:
        >>> format_event(TraceEvent(EventKind.STAND, player='Joe'))
        'Joe stands.'
        >>> format_event(TraceEvent(EventKind.RESULT, outcome=Outcome.DRAW))
        "It's a DRAW!"
    """
    if event.kind is EventKind.START:
        return f"{event.player} starts with {event.hand_description}"
    if event.kind is EventKind.TURN:
        return f"{event.player}'s turn..."
    if event.kind is EventKind.HIT:
        return f"{event.player} hits: {event.card.description}"
    if event.kind is EventKind.STAND:
        return f"{event.player} stands."
    if event.kind is EventKind.BUST:
        return f"{event.player} busts."
    if event.outcome is Outcome.DRAW:
        return "It's a DRAW!"
    return f"{event.player} WINS!"


@dataclass
class RoundResult:
    """Result of a completed round."""
    outcome: Outcome
    player1_cards: tuple[Card, ...]
    player2_cards: tuple[Card, ...]
    player1_total: int
    player2_total: int
    winner: str | None                       # None on a draw
    events: list[TraceEvent] = field(default_factory=list)

    @property
    def lines(self) -> list[str]:
        return [format_event(event) for event in self.events]

    @property
    def output(self) -> str:
        """The full trace as newline-terminated text."""
        return ''.join(line + '\n' for line in self.lines)

    @property
    def player1_busted(self) -> bool:
        return is_bust(self.player1_total)

    @property
    def player2_busted(self) -> bool:
        return is_bust(self.player2_total)

    def __str__(self) -> str:
        return self.output


# ─── Round controller ─────────────────────────────────────────────────────────

class Game:
    """Dealer for a single two-player round.

    Args:
        deck:    Cards in dealing order. Shuffle it beforehand; play() never does.
        player1: Takes the first turn.
        player2: Takes the second turn.
        rules:   Quirk switches (scoring, starting deal). Shuffling is the
                 caller's job, see play_round().
    """

    def __init__(
        self,
        deck: Deck,
        player1: Player,
        player2: Player,
        rules: GameRules = DEFAULT_RULES,
    ) -> None:
        self.deck = deck
        self.player1 = player1
        self.player2 = player2
        self.rules = rules
        self.phase = Phase.DEALING
        self._events: list[TraceEvent] = []
        self._played = False

    def play(self) -> RoundResult:
        """Play the round to completion and return its result.

        Raises:
            RuntimeError: If the round has already been played.
            EmptyDeckError: If the deck runs out (only possible with a short,
                            caller-supplied deck).
        """
        if self._played:
            raise RuntimeError("This round has already been played.")
        self._played = True

        # ── Dealing ───────────────────────────────────────────────────────────
        self.phase = Phase.DEALING
        hand1 = Hand(self.player1, skip_first_card=self.rules.skip_first_card)
        hand2 = Hand(self.player2, skip_first_card=self.rules.skip_first_card)
        self._deal_starting_hands(hand1, hand2)
        for hand in (hand1, hand2):
            self._record(EventKind.START, hand.player.name, hand_description=hand.description())

        # ── Turns ─────────────────────────────────────────────────────────────
        self.phase = Phase.PLAYER1_TURN
        self._take_turn(hand1)
        self.phase = Phase.PLAYER2_TURN
        self._take_turn(hand2)

        # ── Resolution ────────────────────────────────────────────────────────
        self.phase = Phase.RESOLUTION
        if hand1.beats(hand2):
            outcome, winner = Outcome.PLAYER1_WINS, self.player1.name
        elif hand2.beats(hand1):
            outcome, winner = Outcome.PLAYER2_WINS, self.player2.name
        else:
            outcome, winner = Outcome.DRAW, None
        self._record(EventKind.RESULT, winner, outcome=outcome)

        self.phase = Phase.DONE
        return RoundResult(
            outcome=outcome,
            player1_cards=hand1.cards,
            player2_cards=hand2.cards,
            player1_total=hand1.total_points(),
            player2_total=hand2.total_points(),
            winner=winner,
            events=list(self._events),
        )

    def _deal_starting_hands(self, hand1: Hand, hand2: Hand) -> None:
        # Legacy deal: the second pair also goes into hand 1.
        second = hand1 if self.rules.deal_both_pairs_to_first_hand else hand2
        for hand in (hand1, second):
            for _ in range(CARDS_PER_STARTING_HAND):
                hand.add_card(self.deck.deal())

    def _take_turn(self, hand: Hand) -> None:
        name = hand.player.name
        self._record(EventKind.TURN, name)
        while not hand.is_bust() and hand.player.wants_to_hit(hand.total_points()):
            card = self.deck.deal()
            self._record(EventKind.HIT, name, card=card)
            hand.add_card(card)
        self._record(EventKind.BUST if hand.is_bust() else EventKind.STAND, name)

    def _record(self, kind: EventKind, player: str | None, **details) -> None:
        self._events.append(TraceEvent(kind, player, **details))


# ─── Entry-point wiring ───────────────────────────────────────────────────────

def play_round(
    rng: np.random.Generator,
    player_names: tuple[str, str] = ("Harry", "Joe"),
    rules: GameRules = DEFAULT_RULES,
    calculator: BustProbabilityCalculator | None = None,
) -> RoundResult:
    """Shuffle a fresh catalog deck and play one round.

    Both players share a single calculator over the full catalog.

    Args:
        rng:          Random source for the shuffle.
        player_names: Names of the first and second player.
        rules:        Quirk switches, including the shuffle strategy.
        calculator:   Optional shared calculator; built over the full
                      catalog when omitted.
    """
    deck = Deck()
    deck.shuffle(rng, rules.shuffle_strategy)
    if calculator is None:
        calculator = BustProbabilityCalculator()
    name1, name2 = player_names
    game = Game(deck, Player(name1, calculator), Player(name2, calculator), rules)
    return game.play()
