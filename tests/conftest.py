import random

import pytest

from flush_sim.engine.cards import DECK_SIZE, HAND_SIZE, parse_cards


def cards(text: str) -> list[int]:
    """Shorthand for writing hands as strings in tests."""
    return parse_cards(text)


# Five-card spade flush 5-4-3-2 with an ace, plus two sevens
PLAYER_SPADE_FLUSH = [39, 40, 41, 42, 51, 5, 18]
# Five-card heart flush 6-5-4-3-2
DEALER_HEART_FLUSH = [26, 27, 28, 29, 4, 17, 30]
# Best flush is three low diamonds, so the dealer never qualifies
DEALER_LOW = [0, 1, 2, 15, 16, 30, 43]
# Any 7 of these hold at most three of a suit, topped by a 4
POOL_NEVER_QUALIFIES = [0, 1, 2, 13, 14, 15, 26, 27, 28, 43]


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def random_hands(rng):
    """Fifty random pairs of disjoint 7-card hands."""
    pairs = []
    for _ in range(50):
        drawn = rng.sample(range(DECK_SIZE), 2 * HAND_SIZE)
        pairs.append((drawn[:HAND_SIZE], drawn[HAND_SIZE:]))
    return pairs
