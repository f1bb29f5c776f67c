#!/usr/bin/env python3
"""
Demo script for High Card Flush simulation.
Shows card encoding, flush extraction, hand settlement, expected values
and a short strategy comparison.
"""

from .engine.cards import card_to_str, cards_to_strings
from .engine.comparator import compare_hands
from .engine.enumerator import enumerate_outcomes
from .engine.flush import best_flush
from .engine.strategy import SIGNAL_TABLE, decide_heuristic, derive_signal
from .engine.deck import Deck
from .logging_utils import setup_logging
from .simulator import Simulator


def demo_cards():
    """Demonstrate card encoding."""
    print("=" * 60)
    print("CARD ENCODING DEMO")
    print("=" * 60)

    for card in (0, 12, 24, 51):
        print(f"  {card:>2} -> {card_to_str(card)}")
    print(f"  [0, 13, 26, 39] -> {cards_to_strings([0, 13, 26, 39])}")


def demo_flushes():
    """Demonstrate best-flush extraction."""
    print("\n" + "=" * 60)
    print("FLUSH DEMO")
    print("=" * 60)

    test_hands = [
        [12, 11, 9, 25, 24, 23, 40],    # three diamonds vs three higher clubs
        [39, 40, 41, 42, 51, 5, 18],    # five spades
        [0, 14, 28, 42, 3, 17, 31],     # nothing longer than two
    ]
    for hand in test_hands:
        flush = best_flush(hand)
        print(f"\nCards: {' '.join(cards_to_strings(hand))}")
        print(f"  Best: {flush}")
        print(f"  Mousseau raise: {decide_heuristic(flush)}")


def demo_settlement():
    """Demonstrate settling a player hand against dealer hands."""
    print("\n" + "=" * 60)
    print("SETTLEMENT DEMO")
    print("=" * 60)

    player = [39, 40, 41, 42, 51, 5, 18]
    dealers = {
        "5-card heart flush": [26, 27, 28, 29, 4, 17, 30],
        "3-card flush, too low": [0, 1, 2, 15, 16, 30, 43],
    }
    print(f"\nPlayer: {' '.join(cards_to_strings(player))}")
    for label, dealer in dealers.items():
        print(f"  vs {label}: {compare_hands(player, dealer):+d}")

    pool = [0, 1, 2, 13, 14, 15, 26, 27, 28, 43]
    enumeration = enumerate_outcomes(player, pool)
    print(f"\n  vs non-qualifying pool: {enumeration.expected:+.4f} "
          f"over {enumeration.count} dealer hands")

    seven_flush = [0, 1, 2, 3, 4, 5, 6]
    pool = [12, 7, 8, 25, 14, 15, 16, 26, 27, 39]
    enumeration = enumerate_outcomes(seven_flush, pool)
    print(f"  7-card flush vs mixed pool: {enumeration.expected:+.4f} "
          f"over {enumeration.count} dealer hands")


def demo_signal():
    """Demonstrate the suit-count signal on a seeded deal."""
    print("\n" + "=" * 60)
    print("SIGNAL DEMO")
    print("=" * 60)

    deal = Deck.seeded(7).deal()
    print(f"\n{deal}")
    print(f"\n  Round strategy code: {derive_signal(deal.player_hands)}")
    print(f"  Table covers {len(SIGNAL_TABLE)} scarcity triples")


def demo_comparison():
    """Run a short seeded comparison."""
    print("\n" + "=" * 60)
    print("STRATEGY COMPARISON (500 rounds)")
    print("=" * 60)

    print(Simulator().run_preset("quick", seed=2024))


if __name__ == "__main__":
    setup_logging()
    demo_cards()
    demo_flushes()
    demo_settlement()
    demo_signal()
    demo_comparison()

    print("\n" + "=" * 60)
    print("DEMO COMPLETE")
    print("=" * 60)
