"""
Tests for src/engine/game.py — the round controller and its trace.

Every round here is played from a stacked deck, so the expected trace can be
worked out by hand:
    17 → stand, 12 → hit (16/36 < 0.5), 13+ → stand, <= 10 → hit.
"""

from __future__ import annotations

import pytest

from src.engine.deck import Deck, EmptyDeckError, make_rng
from src.engine.game import (
    EventKind,
    Game,
    Phase,
    RoundResult,
    TraceEvent,
    format_event,
    play_round,
)
from src.engine.rules import DEFAULT_RULES, LEGACY_RULES, GameRules, Outcome
from tests.conftest import cards, stacked_deck


def play(harry, joe, *card_strs: str, rules: GameRules = DEFAULT_RULES) -> RoundResult:
    return Game(stacked_deck(*card_strs), harry, joe, rules).play()


# ─── Full traces ──────────────────────────────────────────────────────────────

class TestRoundTraces:
    def test_player2_hits_to_21_and_wins(self, harry, joe):
        result = play(harry, joe, 'KS', '7H', '10D', '2C', '9H')
        assert result.lines == [
            "Harry starts with 2 cards: King of Spades, Seven of Hearts.",
            "Joe starts with 2 cards: Ten of Diamonds, Two of Clubs.",
            "Harry's turn...",
            "Harry stands.",
            "Joe's turn...",
            "Joe hits: Nine of Hearts",
            "Joe stands.",
            "Joe WINS!",
        ]
        assert result.outcome is Outcome.PLAYER2_WINS
        assert result.winner == 'Joe'
        assert (result.player1_total, result.player2_total) == (17, 21)

    def test_player1_wins_with_higher_total(self, harry, joe):
        result = play(harry, joe, 'KS', '9H', '10D', '7C')
        assert result.outcome is Outcome.PLAYER1_WINS
        assert result.lines[-1] == "Harry WINS!"
        assert result.winner == 'Harry'

    def test_equal_totals_draw(self, harry, joe):
        result = play(harry, joe, 'KS', '7H', '10D', '2C', '5S')
        assert result.outcome is Outcome.DRAW
        assert result.winner is None
        assert result.lines[-1] == "It's a DRAW!"
        assert (result.player1_total, result.player2_total) == (17, 17)

    def test_player1_busts(self, harry, joe):
        result = play(harry, joe, 'QS', '2H', '3C', '4C', 'KD', '10H')
        assert result.lines == [
            "Harry starts with 2 cards: Queen of Spades, Two of Hearts.",
            "Joe starts with 2 cards: Three of Clubs, Four of Clubs.",
            "Harry's turn...",
            "Harry hits: King of Diamonds",
            "Harry busts.",
            "Joe's turn...",
            "Joe hits: Ten of Hearts",
            "Joe stands.",
            "Joe WINS!",
        ]
        assert result.player1_busted
        assert not result.player2_busted

    def test_both_bust_is_draw(self, harry, joe):
        result = play(harry, joe, 'QS', '2H', 'JS', '2D', 'KD', '10H')
        assert result.player1_busted and result.player2_busted
        assert result.outcome is Outcome.DRAW

    def test_multiple_hits(self, harry, joe):
        # 2+3=5 → 9 → 11 → 21
        result = play(harry, joe, '2S', '3S', 'KC', 'QC', '4S', '2D', 'KH')
        hits = [e.card for e in result.events if e.kind is EventKind.HIT]
        assert hits == cards('4S', '2D', 'KH')
        assert result.player1_total == 21

    def test_output_is_newline_terminated(self, harry, joe):
        result = play(harry, joe, 'KS', '9H', '10D', '7C')
        assert result.output.endswith("Harry WINS!\n")
        assert result.output.count("\n") == len(result.lines)
        assert str(result) == result.output


# ─── Event sequence ───────────────────────────────────────────────────────────

class TestEvents:
    def test_event_kinds_in_order(self, harry, joe):
        result = play(harry, joe, 'QS', '2H', '3C', '4C', 'KD', '10H')
        assert [e.kind for e in result.events] == [
            EventKind.START, EventKind.START,
            EventKind.TURN, EventKind.HIT, EventKind.BUST,
            EventKind.TURN, EventKind.HIT, EventKind.STAND,
            EventKind.RESULT,
        ]

    def test_result_event_carries_outcome(self, harry, joe):
        result = play(harry, joe, 'KS', '9H', '10D', '7C')
        assert result.events[-1] == TraceEvent(
            EventKind.RESULT, 'Harry', outcome=Outcome.PLAYER1_WINS
        )

    def test_hands_recorded(self, harry, joe):
        result = play(harry, joe, 'KS', '7H', '10D', '2C', '9H')
        assert result.player1_cards == tuple(cards('KS', '7H'))
        assert result.player2_cards == tuple(cards('10D', '2C', '9H'))


class TestFormatEvent:
    def test_start(self):
        event = TraceEvent(EventKind.START, 'Joe', hand_description='0 cards: .')
        assert format_event(event) == "Joe starts with 0 cards: ."

    def test_bust(self):
        assert format_event(TraceEvent(EventKind.BUST, 'Joe')) == "Joe busts."

    def test_win(self):
        event = TraceEvent(EventKind.RESULT, 'Joe', outcome=Outcome.PLAYER2_WINS)
        assert format_event(event) == "Joe WINS!"


# ─── Controller state ─────────────────────────────────────────────────────────

class TestController:
    def test_starts_in_dealing(self, harry, joe):
        assert Game(Deck(), harry, joe).phase is Phase.DEALING

    def test_finishes_done(self, harry, joe):
        game = Game(stacked_deck('KS', '9H', '10D', '7C'), harry, joe)
        game.play()
        assert game.phase is Phase.DONE

    def test_play_twice_raises(self, harry, joe):
        game = Game(stacked_deck('KS', '9H', '10D', '7C'), harry, joe)
        game.play()
        with pytest.raises(RuntimeError):
            game.play()

    def test_consumes_exactly_the_dealt_cards(self, harry, joe):
        deck = stacked_deck('KS', '7H', '10D', '2C', '9H', 'AS', 'AH')
        Game(deck, harry, joe).play()
        assert deck.cards == tuple(cards('AS', 'AH'))

    def test_short_deck_raises(self, harry, joe):
        with pytest.raises(EmptyDeckError):
            Game(stacked_deck('KS', '7H', '10D'), harry, joe).play()

    def test_full_catalog_deck_never_runs_out(self, harry, joe):
        # Unshuffled catalog: Ace..King of Spades first
        result = Game(Deck(), harry, joe).play()
        assert result.outcome in Outcome


# ─── Legacy quirks ────────────────────────────────────────────────────────────

class TestLegacyRules:
    def test_both_pairs_dealt_to_first_hand(self, harry, joe):
        # Hand 1 scores 7+10+2 = 19 (first card skipped) and stands.
        # Hand 2 starts empty: 0 → hit 5S (still 0) → hit 9H (9) → hit 8D (17).
        result = play(
            harry, joe, 'KS', '7H', '10D', '2C', '5S', '9H', '8D',
            rules=LEGACY_RULES,
        )
        assert result.lines == [
            "Harry starts with 4 cards: King of Spades, Seven of Hearts, Ten of Diamonds, Two of Clubs.",
            "Joe starts with 0 cards: .",
            "Harry's turn...",
            "Harry stands.",
            "Joe's turn...",
            "Joe hits: Five of Spades",
            "Joe hits: Nine of Hearts",
            "Joe hits: Eight of Diamonds",
            "Joe stands.",
            "Harry WINS!",
        ]
        assert (result.player1_total, result.player2_total) == (19, 17)

    def test_skip_first_card_only(self, harry, joe):
        rules = GameRules(skip_first_card=True)
        # Hand 1: KS skipped → 7, hits 10D → 17. Hand 2: 5C skipped → 9, hits 3C → 12, hits 8D → 20.
        result = play(harry, joe, 'KS', '7H', '5C', '9D', '10D', '3C', '8D', rules=rules)
        assert (result.player1_total, result.player2_total) == (17, 20)
        assert result.outcome is Outcome.PLAYER2_WINS

    def test_presets(self):
        assert DEFAULT_RULES.skip_first_card is False
        assert DEFAULT_RULES.deal_both_pairs_to_first_hand is False
        assert LEGACY_RULES.skip_first_card is True
        assert LEGACY_RULES.deal_both_pairs_to_first_hand is True


# ─── Reproducibility ──────────────────────────────────────────────────────────

class TestReproducibility:
    def test_same_deck_same_trace(self, harry, joe):
        order = cards('QS', '2H', '3C', '4C', 'KD', '10H', '5D', '6D')
        first = Game(Deck(order), harry, joe).play()
        second = Game(Deck(order), harry, joe).play()
        assert first.output == second.output
        assert first.outcome is second.outcome

    @pytest.mark.parametrize("rules", [DEFAULT_RULES, LEGACY_RULES])
    def test_play_round_seeded(self, rules):
        first = play_round(make_rng(123), rules=rules)
        second = play_round(make_rng(123), rules=rules)
        assert first.output == second.output

    def test_play_round_names(self):
        result = play_round(make_rng(0), player_names=('Ann', 'Bob'))
        assert result.lines[0].startswith('Ann starts with 2 cards')
        assert result.lines[1].startswith('Bob starts with 2 cards')
