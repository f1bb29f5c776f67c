"""
Card encoding for High Card Flush simulation.
Cards are plain integers 0-51: diamonds 0-12, clubs 13-25, hearts 26-38,
spades 39-51. Within a suit, 0 is a deuce and 12 is an ace.
"""

import re
from enum import Enum


RANKS = 13
SUITS = 4
DECK_SIZE = 52
HAND_SIZE = 7
NUM_PLAYERS = 6
DEALER_CARDS = 10

RANK_CHARS = "23456789TJQKA"
RANK_ORDER = {char: i for i, char in enumerate(RANK_CHARS)}


class Suit(Enum):
    DIAMONDS = 0
    CLUBS = 1
    HEARTS = 2
    SPADES = 3

    @property
    def symbol(self) -> str:
        return self.name[0].lower()


SUIT_BY_SYMBOL = {suit.symbol: suit for suit in Suit}


class InvalidCardError(ValueError):
    """A card or card set breaks the caller contract."""


def rank_of(card: int) -> int:
    return card % RANKS


def suit_of(card: int) -> int:
    return card // RANKS


def make_card(rank: int, suit: Suit) -> int:
    """Build a card id from a rank index and a suit."""
    if not 0 <= rank < RANKS:
        raise InvalidCardError(f"Invalid rank index: {rank}")
    return Suit(suit).value * RANKS + rank


def card_to_str(card: int) -> str:
    """Two-character form, e.g. 0 -> '2d', 51 -> 'As'."""
    validate_card(card)
    return f"{RANK_CHARS[rank_of(card)]}{Suit(suit_of(card)).symbol}"


def cards_to_strings(cards) -> list[str]:
    return [card_to_str(c) for c in cards]


def parse_card(text: str) -> int:
    """Inverse of card_to_str. Accepts '10' for tens."""
    token = text.strip()
    if len(token) < 2:
        raise InvalidCardError(f"Cannot parse card: {text!r}")
    rank_text, suit_text = token[:-1].upper(), token[-1].lower()
    if rank_text == "10":
        rank_text = "T"
    if rank_text not in RANK_ORDER or suit_text not in SUIT_BY_SYMBOL:
        raise InvalidCardError(f"Cannot parse card: {text!r}")
    return make_card(RANK_ORDER[rank_text], SUIT_BY_SYMBOL[suit_text])


def parse_cards(text: str) -> list[int]:
    """Parse a whitespace or comma separated list like 'As Kd, 2c'."""
    return [parse_card(tok) for tok in re.split(r"[\s,]+", text.strip()) if tok]


def validate_card(card) -> None:
    # bool is an int subclass but never a card
    if isinstance(card, bool) or not isinstance(card, int):
        raise InvalidCardError(f"Card ids must be integers, got {card!r}")
    if not 0 <= card < DECK_SIZE:
        raise InvalidCardError(f"Card id out of range [0, {DECK_SIZE}): {card}")


def validate_cards(cards, size: int = None) -> tuple[int, ...]:
    """
    Check a card set at an API boundary and return it as a tuple.

    Raises InvalidCardError for out-of-range ids, a wrong set size or a
    card appearing twice.
    """
    cards = tuple(cards)
    if size is not None and len(cards) != size:
        raise InvalidCardError(f"Expected {size} cards, got {len(cards)}")
    for card in cards:
        validate_card(card)
    if len(set(cards)) != len(cards):
        raise InvalidCardError(f"Duplicate cards in {cards_to_strings(cards)}")
    return cards


def validate_disjoint(*card_sets) -> None:
    """Raise if any card appears in more than one of the given sets."""
    seen = set()
    for cards in card_sets:
        overlap = seen.intersection(cards)
        if overlap:
            raise InvalidCardError(
                f"Cards dealt twice: {cards_to_strings(sorted(overlap))}"
            )
        seen.update(cards)
