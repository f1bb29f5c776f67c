"""
Play/fold strategies for High Card Flush simulation.

Each player either plays, realizing the hand's expected value against the
unseen dealer pool, or folds and loses the ante.
"""

from collections import Counter

from .cards import RANKS, SUITS, HAND_SIZE, NUM_PLAYERS, DECK_SIZE, suit_of
from .enumerator import expected_outcome
from .flush import Flush, extract_flush

FOLD_RESULT = -1.0


class SignalTableError(LookupError):
    """A suit scarcity combination the signal table has no code for."""


def decide_always_play() -> bool:
    return True


def decide_heuristic(flush: Flush) -> int:
    """
    Mousseau's non-collusion raise size: 0 to fold, else 1-3 antes.

    Three-card flushes play only when at least T-8-6 (rank indices 8, 6, 4).
    """
    length = len(flush)
    if length >= 6:
        return 3
    if length == 5:
        return 2
    if length == 4:
        return 1
    if length == 3:
        first, second, third = flush.ranks
        if first >= 8 and second >= 6 and third >= 4:
            return 1
    return 0


# Jacobson's collusion table, keyed on the three scarcest suits in order.
# OTHERWISE matches any value not listed at that level.
OTHERWISE = None

SIGNAL_RULES = {
    0: {
        0: {0: 7, 1: 7, OTHERWISE: 5},
        1: {1: 6, 2: 5, OTHERWISE: 4},
        2: {2: 4, OTHERWISE: 11},
        OTHERWISE: 10,
    },
    1: {
        1: {1: 5, 2: 4, OTHERWISE: 11},
        2: {2: 10, OTHERWISE: 9},
        OTHERWISE: 8,
    },
    2: 12,
}


def _apply_rules(triple: tuple[int, int, int]) -> int:
    node = SIGNAL_RULES
    for value in triple:
        if isinstance(node, int):
            break
        if value in node:
            node = node[value]
        elif OTHERWISE in node:
            node = node[OTHERWISE]
        else:
            raise SignalTableError(f"No strategy for scarcities {triple}")
    return node


def signal_domain(num_players: int = NUM_PLAYERS, hand_size: int = HAND_SIZE):
    """
    Every sorted (s0, s1, s2) triple a real deal can produce.

    The four scarcities are each in [0, 13] and sum to the cards not dealt
    to players, so the domain is small enough to list outright.
    """
    remaining = DECK_SIZE - num_players * hand_size
    triples = set()
    for s0 in range(RANKS + 1):
        for s1 in range(s0, RANKS + 1):
            for s2 in range(s1, RANKS + 1):
                s3 = remaining - s0 - s1 - s2
                if s2 <= s3 <= RANKS:
                    triples.add((s0, s1, s2))
    return sorted(triples)


# Expanded once at import; a reachable triple without a rule fails here
SIGNAL_TABLE = {triple: _apply_rules(triple) for triple in signal_domain()}

STRATEGY_CODES = frozenset(range(4, 13))


def suit_scarcity(player_hands) -> tuple[int, ...]:
    """Cards of each suit not seen in any player hand, smallest first."""
    counts = Counter(suit_of(card) for hand in player_hands for card in hand)
    return tuple(sorted(RANKS - counts[suit] for suit in range(SUITS)))


def signal_code(scarcities) -> int:
    """Map suit scarcities (any order) to a strategy code 4-12."""
    triple = tuple(sorted(scarcities)[:3])
    try:
        return SIGNAL_TABLE[triple]
    except KeyError:
        raise SignalTableError(f"Unreachable suit scarcities: {tuple(scarcities)}") from None


def derive_signal(player_hands) -> int:
    """The round's strategy code, read from every player hand at the table."""
    return signal_code(suit_scarcity(player_hands))


def decide_signal_based(flush: Flush, code: int) -> bool:
    """
    Whether to play under a round strategy code.

    4-7: play a flush of at least that many cards.
    8-11: play any 4+ card flush, or a 3-card flush topped by rank >= code.
    12: always play.
    """
    if 4 <= code <= 7:
        return len(flush) >= code
    if 8 <= code <= 11:
        return len(flush) > 3 or (len(flush) == 3 and flush.top_rank >= code)
    if code == 12:
        return True
    raise ValueError(f"Unknown strategy code: {code}")


class AlwaysPlayStrategy:
    """
    Plays every hand.
    The baseline the other strategies are measured against.
    """

    name = "always_play"
    description = "Play every hand"

    def read_table(self, player_hands):
        """Round-level information taken from all player hands."""
        return None

    def plays(self, flush: Flush, signal=None) -> bool:
        return decide_always_play()

    def wager(self, hand, dealer_pool, signal=None) -> tuple[bool, float]:
        """Return (played, net antes) for one hand."""
        if self.plays(extract_flush(hand), signal):
            return True, expected_outcome(hand, dealer_pool)
        return False, FOLD_RESULT


class PerfectCollusionStrategy(AlwaysPlayStrategy):
    """
    Full-information ceiling: every player's expected value is known, and a
    hand is folded whenever playing it is no better than losing the ante.
    """

    name = "perfect_collusion"
    description = "Fold only when expected value is at most -1"

    def wager(self, hand, dealer_pool, signal=None) -> tuple[bool, float]:
        ev = expected_outcome(hand, dealer_pool)
        if ev > FOLD_RESULT:
            return True, ev
        return False, FOLD_RESULT


class MousseauStrategy(AlwaysPlayStrategy):
    """Published non-collusion threshold play."""

    name = "mousseau"
    description = "Play 4+ card flushes and 3-card flushes of T-8-6 or better"

    def plays(self, flush: Flush, signal=None) -> bool:
        return decide_heuristic(flush) > 0


class JacobsonStrategy(AlwaysPlayStrategy):
    """
    Collusion by suit counting.
    The table's combined suit counts pick one strategy code for the round,
    then each player compares their own flush to it.
    """

    name = "jacobson"
    description = "Play/fold threshold chosen from the table's suit scarcity"

    def read_table(self, player_hands):
        return derive_signal(player_hands)

    def plays(self, flush: Flush, signal=None) -> bool:
        if signal is None:
            raise ValueError("Jacobson strategy needs the round signal")
        return decide_signal_based(flush, signal)


STRATEGIES = {
    cls.name: cls
    for cls in (AlwaysPlayStrategy, PerfectCollusionStrategy, MousseauStrategy, JacobsonStrategy)
}


def get_strategy(name: str) -> AlwaysPlayStrategy:
    """Instantiate a strategy by name."""
    try:
        return STRATEGIES[name]()
    except KeyError:
        raise ValueError(f"Unknown strategy: {name}. Available: {list(STRATEGIES)}") from None
