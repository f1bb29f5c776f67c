"""
Tests for flush_sim/engine/strategy.py
"""

from itertools import product

import pytest

from flush_sim.engine.cards import DECK_SIZE, HAND_SIZE, NUM_PLAYERS, RANKS
from flush_sim.engine.deck import Deck
from flush_sim.engine.flush import Flush, best_flush
from flush_sim.engine.strategy import (
    FOLD_RESULT,
    SIGNAL_TABLE,
    STRATEGY_CODES,
    AlwaysPlayStrategy,
    JacobsonStrategy,
    MousseauStrategy,
    PerfectCollusionStrategy,
    SignalTableError,
    _apply_rules,
    decide_always_play,
    decide_heuristic,
    decide_signal_based,
    derive_signal,
    get_strategy,
    signal_code,
    signal_domain,
    suit_scarcity,
)
from tests.conftest import PLAYER_SPADE_FLUSH, POOL_NEVER_QUALIFIES, cards

# Three low diamonds, dealt against a pool that always holds four spades
WEAK_HAND = [0, 14, 28, 3, 17, 31, 6]
SPADE_HEAVY_POOL = [39, 40, 41, 42, 43, 44, 45, 26, 27, 29]


class TestAlwaysPlay:
    def test_constant(self):
        assert decide_always_play() is True


class TestHeuristic:
    @pytest.mark.parametrize("hand,expected", [
        ("2d 3d 4d 5d 6d 7d 8d", 3),
        ("2d 3d 4d 5d 6d 7d 8c", 3),
        ("2d 3d 4d 5d 6d 7c 8c", 2),
        ("2d 3d 4d 5d 6c 7c 8h", 1),
        ("Td 8d 6d 5c 4h", 1),
        ("Ad Kd Qd", 1),
        ("Td 8d 5d", 0),
        ("9d 8d 7d", 0),
        ("Ad Kd", 0),
        ("", 0),
    ])
    def test_raise_size(self, hand, expected):
        assert decide_heuristic(best_flush(cards(hand))) == expected


class TestSignalTable:
    @pytest.mark.parametrize("scarcities,code", [
        ((0, 0, 0, 10), 7),
        ((0, 0, 1, 9), 7),
        ((0, 0, 2, 8), 5),
        ((0, 0, 5, 5), 5),
        ((0, 1, 1, 8), 6),
        ((0, 1, 2, 7), 5),
        ((0, 1, 3, 6), 4),
        ((0, 2, 2, 6), 4),
        ((0, 2, 3, 5), 11),
        ((0, 3, 3, 4), 10),
        ((1, 1, 1, 7), 5),
        ((1, 1, 2, 6), 4),
        ((1, 1, 3, 5), 11),
        ((1, 2, 2, 5), 10),
        ((1, 2, 3, 4), 9),
        ((1, 3, 3, 3), 8),
        ((2, 2, 2, 4), 12),
        ((2, 2, 3, 3), 12),
    ])
    def test_codes(self, scarcities, code):
        assert signal_code(scarcities) == code

    def test_order_does_not_matter(self):
        assert signal_code((10, 0, 0, 0)) == 7
        assert signal_code((3, 1, 2, 4)) == 9

    def test_domain_matches_every_possible_deal(self):
        # Brute force over every way 42 dealt cards can split across suits
        dealt = NUM_PLAYERS * HAND_SIZE
        reachable = set()
        for counts in product(range(RANKS + 1), repeat=3):
            last = dealt - sum(counts)
            if 0 <= last <= RANKS:
                scarcities = sorted(RANKS - c for c in counts + (last,))
                reachable.add(tuple(scarcities[:3]))
        assert reachable == set(signal_domain())

    def test_table_is_total(self):
        assert set(SIGNAL_TABLE) == set(signal_domain())
        for triple in signal_domain():
            assert SIGNAL_TABLE[triple] in STRATEGY_CODES

    def test_unreachable_triple(self):
        with pytest.raises(SignalTableError):
            signal_code((3, 3, 3, 3))
        with pytest.raises(SignalTableError):
            _apply_rules((3, 3, 3))

    def test_error_is_lookup_error(self):
        assert issubclass(SignalTableError, LookupError)


class TestDeriveSignal:
    def test_unshuffled_deck(self):
        # Players hold every diamond, club and heart plus three spades
        hands = Deck.from_order(range(DECK_SIZE)).player_hands()
        assert suit_scarcity(hands) == (0, 0, 0, 10)
        assert derive_signal(hands) == 7

    def test_seeded_deals_always_map(self):
        deck = Deck.seeded(99)
        for _ in range(200):
            deck.shuffle()
            assert derive_signal(deck.player_hands()) in STRATEGY_CODES


class TestSignalDecision:
    @pytest.mark.parametrize("length,code,expected", [
        (5, 5, True),
        (4, 5, False),
        (7, 7, True),
        (6, 7, False),
        (4, 4, True),
        (3, 4, False),
    ])
    def test_length_codes(self, length, code, expected):
        assert decide_signal_based(Flush(tuple(range(length))), code) is expected

    def test_rank_codes(self):
        assert decide_signal_based(best_flush(cards("Td 3d 2d")), 8)
        assert not decide_signal_based(best_flush(cards("9d 3d 2d")), 8)
        assert decide_signal_based(best_flush(cards("Kd 3d 2d")), 11)
        assert not decide_signal_based(best_flush(cards("Qd 3d 2d")), 11)
        assert decide_signal_based(best_flush(cards("5d 4d 3d 2d")), 11)
        assert not decide_signal_based(best_flush(cards("Ad Kd")), 8)

    def test_code_twelve_always_plays(self):
        assert decide_signal_based(Flush(), 12)

    @pytest.mark.parametrize("code", [3, 13, -1])
    def test_unknown_code(self, code):
        with pytest.raises(ValueError):
            decide_signal_based(Flush(), code)


class TestStrategyClasses:
    def test_weak_hand_loses_two_every_time(self):
        played, result = AlwaysPlayStrategy().wager(WEAK_HAND, SPADE_HEAVY_POOL)
        assert played
        assert result == -2.0

    def test_collusion_folds_when_playing_is_worse(self):
        assert PerfectCollusionStrategy().wager(WEAK_HAND, SPADE_HEAVY_POOL) == (False, FOLD_RESULT)

    def test_collusion_plays_good_hand(self):
        assert PerfectCollusionStrategy().wager(PLAYER_SPADE_FLUSH, POOL_NEVER_QUALIFIES) == (True, 1.0)

    def test_mousseau(self):
        strategy = MousseauStrategy()
        assert strategy.wager(WEAK_HAND, SPADE_HEAVY_POOL) == (False, FOLD_RESULT)
        assert strategy.wager(PLAYER_SPADE_FLUSH, POOL_NEVER_QUALIFIES) == (True, 1.0)

    def test_jacobson_uses_signal(self):
        strategy = JacobsonStrategy()
        assert strategy.wager(WEAK_HAND, SPADE_HEAVY_POOL, 12) == (True, -2.0)
        assert strategy.wager(WEAK_HAND, SPADE_HEAVY_POOL, 4) == (False, FOLD_RESULT)
        with pytest.raises(ValueError):
            strategy.wager(WEAK_HAND, SPADE_HEAVY_POOL)

    def test_read_table(self):
        hands = Deck.from_order(range(DECK_SIZE)).player_hands()
        assert JacobsonStrategy().read_table(hands) == 7
        assert MousseauStrategy().read_table(hands) is None

    def test_get_strategy(self):
        assert isinstance(get_strategy("jacobson"), JacobsonStrategy)
        with pytest.raises(ValueError, match="Unknown strategy"):
            get_strategy("martingale")
