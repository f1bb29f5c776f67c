"""
Flush extraction for High Card Flush.
A hand is only ever judged by its longest same-suit group, ranked by
length and then card by card from the top.
"""

from dataclasses import dataclass
from typing import Optional

from .cards import SUITS, Suit, rank_of, suit_of, card_to_str, validate_cards


@dataclass(frozen=True)
class Flush:
    """Cards of one suit, highest rank first."""
    cards: tuple[int, ...] = ()

    def __len__(self) -> int:
        return len(self.cards)

    @property
    def ranks(self) -> tuple[int, ...]:
        return tuple(rank_of(c) for c in self.cards)

    @property
    def top_rank(self) -> int:
        """Highest rank index, or -1 for the empty flush."""
        return rank_of(self.cards[0]) if self.cards else -1

    @property
    def suit(self) -> Optional[Suit]:
        return Suit(suit_of(self.cards[0])) if self.cards else None

    @property
    def strength(self) -> tuple[int, tuple[int, ...]]:
        """Ordering key: longer beats shorter, then rank by rank."""
        return len(self.cards), self.ranks

    def __str__(self) -> str:
        if not self.cards:
            return "no flush"
        return f"{len(self.cards)}-card flush: {' '.join(card_to_str(c) for c in self.cards)}"


def extract_flush(cards) -> Flush:
    """best_flush without input validation, for use in the hot loops."""
    buckets = [[] for _ in range(SUITS)]
    for card in cards:
        buckets[suit_of(card)].append(card)
    for bucket in buckets:
        bucket.sort(key=rank_of, reverse=True)
    # max() keeps the first of equal groups, so ties go to the lower suit id
    best = max(buckets, key=lambda b: (len(b), [rank_of(c) for c in b]))
    return Flush(tuple(best))


def best_flush(cards) -> Flush:
    """
    Find the strongest same-suit group in a card set.

    Any set size is accepted; an empty set gives the empty flush, which
    loses to everything. When two suits tie exactly the lower suit id
    (diamonds, clubs, hearts, spades) is returned; either is a correct
    answer since they settle identically.
    """
    return extract_flush(validate_cards(cards))
