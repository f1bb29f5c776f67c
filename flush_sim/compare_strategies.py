#!/usr/bin/env python3
"""
Compare play/fold strategies for High Card Flush, or evaluate one hand.
"""

import argparse
import json
import sys

from .engine.cards import DEALER_CARDS, HAND_SIZE, InvalidCardError, cards_to_strings, parse_cards
from .engine.enumerator import enumerate_outcomes
from .engine.flush import best_flush
from .engine.strategy import decide_heuristic
from .logging_utils import LOG_LEVEL, setup_logging
from .presets import SimulationConfig, StrategyType, list_presets
from .simulator import Simulator


def evaluate_hand(hand_text: str, pool_text: str) -> dict:
    """Expected value of one player hand against an explicit dealer pool."""
    hand = parse_cards(hand_text)
    pool = parse_cards(pool_text)
    if len(hand) != HAND_SIZE:
        raise InvalidCardError(f"--hand needs {HAND_SIZE} cards, got {len(hand)}")
    if len(pool) < HAND_SIZE:
        raise InvalidCardError(f"--pool needs at least {HAND_SIZE} cards, got {len(pool)}")

    enumeration = enumerate_outcomes(hand, pool)
    flush = best_flush(hand)
    return {
        "hand": cards_to_strings(hand),
        "pool": cards_to_strings(pool),
        "flush": cards_to_strings(flush.cards),
        "mousseau_raise": decide_heuristic(flush),
        "dealer_hands": enumeration.count,
        "total": enumeration.total,
        "expected": enumeration.expected,
    }


def print_evaluation(info: dict) -> None:
    print("=" * 50)
    print(f"  Hand:  {' '.join(info['hand'])}")
    print(f"  Pool:  {' '.join(info['pool'])}")
    print(f"  Flush: {' '.join(info['flush']) or '-'} ({len(info['flush'])} cards)")
    print(f"  Mousseau raise: {info['mousseau_raise']}x" if info["mousseau_raise"] else "  Mousseau: fold")
    print(f"  Dealer hands enumerated: {info['dealer_hands']}")
    print(f"  Expected result: {info['expected']:+.4f} antes")
    print("=" * 50)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Compare High Card Flush strategies")
    parser.add_argument("--preset", choices=list_presets(),
                        help="Named strategy line-up and run length")
    parser.add_argument("--runs", type=int, help="Rounds to deal per strategy")
    parser.add_argument("--seed", type=int, help="Seed for reproducible deals")
    parser.add_argument("--workers", type=int, help="Worker processes")
    parser.add_argument("--strategy", action="append", dest="strategies",
                        choices=[s.value for s in StrategyType],
                        help="Strategy to run (repeatable)")
    parser.add_argument("--json", action="store_true", help="Print results as JSON")
    parser.add_argument("--log-level", type=str.upper, default=None,
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Logging level")
    parser.add_argument("--hand", help=f"Evaluate a {HAND_SIZE}-card hand, e.g. '2s 3s 4s 5s As 7d 7c'")
    parser.add_argument("--pool", help=f"Dealer pool for --hand ({DEALER_CARDS} cards)")
    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.log_level or LOG_LEVEL)

    if bool(args.hand) != bool(args.pool):
        parser.error("--hand and --pool must be given together")

    try:
        if args.hand:
            info = evaluate_hand(args.hand, args.pool)
            if args.json:
                print(json.dumps(info, indent=2))
            else:
                print_evaluation(info)
            return 0

        config = SimulationConfig.from_env(seed=args.seed, workers=args.workers)
        sim = Simulator(config)
        if args.preset:
            comparison = sim.run_preset(args.preset, iterations=args.runs, workers=args.workers)
        else:
            strategies = [StrategyType(s) for s in args.strategies] if args.strategies else None
            comparison = sim.compare(strategies, iterations=args.runs)
    except ValueError as e:
        parser.error(str(e))

    if args.json:
        print(json.dumps(comparison.to_dict(), indent=2))
    else:
        print(comparison)
        best = comparison.best
        if best is not None and len(comparison.results) > 1:
            print(f"\nBest: {best.strategy} ({best.average_per_hand:+.4f} per hand)")
    return 0


if __name__ == "__main__":
    sys.exit(main())
