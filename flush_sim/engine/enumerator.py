"""
Expected value of a player hand over every dealer hand the unseen pool
can form.
"""

from dataclasses import dataclass
from itertools import combinations
from typing import Iterator

from .cards import HAND_SIZE, InvalidCardError, validate_cards, validate_disjoint
from .comparator import settle
from .flush import extract_flush


@dataclass(frozen=True)
class Enumeration:
    """Sum and count of outcomes over all dealer hands."""
    total: int
    count: int

    @property
    def expected(self) -> float:
        return self.total / self.count


def iter_dealer_hands(pool, size: int = HAND_SIZE) -> Iterator[tuple[int, ...]]:
    """
    Yield every size-card subset of the pool exactly once.

    Subsets come out with pool indices strictly increasing, so no subset is
    repeated and no permutations are built. Calling again restarts.
    """
    if size < 1 or len(pool) < size:
        raise InvalidCardError(
            f"Cannot draw {size}-card dealer hands from {len(pool)} cards"
        )
    return combinations(pool, size)


def enumerate_outcomes(player_hand, dealer_pool, size: int = HAND_SIZE) -> Enumeration:
    """Settle the player hand against every dealer hand in the pool."""
    player_hand = validate_cards(player_hand, HAND_SIZE)
    dealer_pool = validate_cards(dealer_pool)
    validate_disjoint(player_hand, dealer_pool)

    player_flush = extract_flush(player_hand)
    total = 0
    count = 0
    for dealer_hand in iter_dealer_hands(dealer_pool, size):
        total += settle(player_flush, extract_flush(dealer_hand))
        count += 1

    return Enumeration(total=total, count=count)


def expected_outcome(player_hand, dealer_pool, size: int = HAND_SIZE) -> float:
    """
    Average net antes for the player over all C(P, size) dealer hands.

    With the standard 10-card pool this is an average over 120 hands.
    """
    return enumerate_outcomes(player_hand, dealer_pool, size).expected
