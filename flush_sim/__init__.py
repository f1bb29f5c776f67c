"""
High Card Flush Simulator
"""

from .engine.cards import Suit, InvalidCardError, card_to_str, cards_to_strings, parse_cards
from .engine.deck import Deck, Deal
from .engine.flush import Flush, best_flush
from .engine.comparator import compare_hands
from .engine.enumerator import expected_outcome
from .engine.strategy import derive_signal, decide_heuristic, decide_signal_based, SignalTableError

__version__ = "0.1.0"
