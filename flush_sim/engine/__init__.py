"""
High Card Flush evaluation engine components.
"""

from .cards import (
    Suit, InvalidCardError, RANKS, SUITS, DECK_SIZE, HAND_SIZE, NUM_PLAYERS, DEALER_CARDS,
    rank_of, suit_of, card_to_str, cards_to_strings, parse_card, parse_cards,
)
from .deck import Deck, Deal
from .flush import Flush, best_flush
from .comparator import compare_hands, settle, play_multiplier, dealer_qualifies
from .enumerator import Enumeration, iter_dealer_hands, enumerate_outcomes, expected_outcome
from .strategy import (
    SignalTableError, decide_always_play, decide_heuristic, derive_signal, decide_signal_based,
    AlwaysPlayStrategy, PerfectCollusionStrategy, MousseauStrategy, JacobsonStrategy, get_strategy,
)
