"""
Payout rules for one player hand against one dealer hand.
Outcomes are net antes: +1 when the dealer fails to qualify, otherwise
ante plus play bet won or lost, or 0 on a push.
"""

from .cards import HAND_SIZE, validate_cards, validate_disjoint
from .flush import Flush, extract_flush

# Dealer needs a 3-card nine-high flush (rank index 7) or any 4-card flush
QUALIFY_LENGTH = 3
QUALIFY_TOP_RANK = 7


def play_multiplier(flush: Flush) -> int:
    """Play bet size in antes: 1x up to 4 cards, 2x for 5, 3x for 6 or 7."""
    length = len(flush)
    if length <= 4:
        return 1
    if length == 5:
        return 2
    return 3


def dealer_qualifies(flush: Flush) -> bool:
    length = len(flush)
    if length > QUALIFY_LENGTH:
        return True
    return length == QUALIFY_LENGTH and flush.top_rank >= QUALIFY_TOP_RANK


def settle(player_flush: Flush, dealer_flush: Flush) -> int:
    """
    Net result for the player, given both flushes.

    Order matters: only the second argument must qualify and the stake is
    sized by the first, so settle(a, b) == -settle(b, a) only when both
    qualify at the same play multiplier.
    """
    if not dealer_qualifies(dealer_flush):
        return 1

    stake = 1 + play_multiplier(player_flush)
    player, dealer = player_flush.strength, dealer_flush.strength
    if player > dealer:
        return stake
    if player < dealer:
        return -stake
    return 0


def compare_hands(player_hand, dealer_hand) -> int:
    """
    Settle a 7-card player hand against a 7-card dealer hand.

    Player hand is ALWAYS the first argument. Raises InvalidCardError if
    either set is malformed or the two share a card.
    """
    player_hand = validate_cards(player_hand, HAND_SIZE)
    dealer_hand = validate_cards(dealer_hand, HAND_SIZE)
    validate_disjoint(player_hand, dealer_hand)
    return settle(extract_flush(player_hand), extract_flush(dealer_hand))
