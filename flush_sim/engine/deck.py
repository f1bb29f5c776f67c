"""
Deck management for High Card Flush simulation.
Handles shuffling and splitting the 52 cards into player hands and the
dealer's unseen pool.
"""

import random
from dataclasses import dataclass, field
from typing import Optional

from .cards import (
    DECK_SIZE, HAND_SIZE, NUM_PLAYERS, DEALER_CARDS,
    InvalidCardError, cards_to_strings,
)


@dataclass(frozen=True)
class Deal:
    """One round's cards: a hand per player plus the dealer pool."""
    player_hands: tuple[tuple[int, ...], ...]
    dealer_pool: tuple[int, ...]

    def __str__(self) -> str:
        lines = [f"Player {i + 1}: {' '.join(cards_to_strings(hand))}"
                 for i, hand in enumerate(self.player_hands)]
        lines.append(f"Dealer pool: {' '.join(cards_to_strings(self.dealer_pool))}")
        return "\n".join(lines)


@dataclass
class Deck:
    cards: list[int] = field(default_factory=list)
    rng: random.Random = field(default_factory=random.Random, repr=False, compare=False)

    def __post_init__(self):
        self.cards = list(self.cards)
        if not self.cards:
            self.cards = list(range(DECK_SIZE))
            self.shuffle()
        elif sorted(self.cards) != list(range(DECK_SIZE)):
            raise InvalidCardError("A deck must hold each card id 0-51 exactly once")

    @classmethod
    def seeded(cls, seed: Optional[int] = None) -> "Deck":
        """Create a shuffled deck driven by its own seeded generator."""
        return cls(rng=random.Random(seed))

    @classmethod
    def from_order(cls, cards: list[int], rng: random.Random = None) -> "Deck":
        """Create a deck with a fixed, already-shuffled order."""
        return cls(cards=list(cards), rng=rng or random.Random())

    def shuffle(self) -> None:
        """Shuffle the deck in place."""
        self.rng.shuffle(self.cards)

    def player_hands(self, num_players: int = NUM_PLAYERS,
                     hand_size: int = HAND_SIZE) -> tuple[tuple[int, ...], ...]:
        """Consecutive hand_size slices from the top of the deck."""
        if num_players * hand_size > DECK_SIZE:
            raise InvalidCardError("Not enough cards for that many hands")
        return tuple(
            tuple(self.cards[p * hand_size:(p + 1) * hand_size])
            for p in range(num_players)
        )

    def dealer_cards(self, count: int = DEALER_CARDS,
                     num_players: int = NUM_PLAYERS,
                     hand_size: int = HAND_SIZE) -> tuple[int, ...]:
        """The cards following the player hands."""
        start = num_players * hand_size
        if start + count > DECK_SIZE:
            raise InvalidCardError("Not enough cards left for the dealer pool")
        return tuple(self.cards[start:start + count])

    def deal(self) -> Deal:
        return Deal(player_hands=self.player_hands(), dealer_pool=self.dealer_cards())

    def size(self) -> int:
        return len(self.cards)
