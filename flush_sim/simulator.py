"""
Main API for High Card Flush simulation.
Provides clean interface for running strategy simulations.
"""

import random
import time
from concurrent.futures import ProcessPoolExecutor
from dataclasses import dataclass, field
from typing import Optional, Union

from .engine.deck import Deck, Deal
from .engine.strategy import get_strategy
from .logging_utils import get_logger
from .presets import Preset, SimulationConfig, StrategyType, get_preset, list_presets

logger = get_logger(__name__)


@dataclass
class HandResult:
    """One player's decision and net result in a round."""
    played: bool
    result: float


@dataclass
class ChunkTotals:
    """Running totals for a block of rounds."""
    rounds: int = 0
    hands: int = 0
    hands_played: int = 0
    total_winnings: float = 0.0

    def add(self, other: "ChunkTotals") -> None:
        self.rounds += other.rounds
        self.hands += other.hands
        self.hands_played += other.hands_played
        self.total_winnings += other.total_winnings


@dataclass
class StrategyResult:
    """Summary of one strategy over many rounds."""
    strategy: str
    iterations: int
    hands: int
    hands_played: int
    total_winnings: float
    seed: Optional[int] = None
    workers: int = 1
    elapsed: float = 0.0

    @property
    def hands_folded(self) -> int:
        return self.hands - self.hands_played

    @property
    def average_per_hand(self) -> float:
        if self.hands == 0:
            return 0.0
        return self.total_winnings / self.hands

    @property
    def play_rate(self) -> float:
        if self.hands == 0:
            return 0.0
        return self.hands_played / self.hands * 100

    def __str__(self):
        lines = [
            f"{'='*50}",
            f"  {self.strategy} strategy ({self.iterations:,} rounds)",
            f"{'='*50}",
            f"  Total simulated hands: {self.hands:,}",
            f"  Hands played: {self.hands_played:,} ({self.play_rate:.1f}%)",
            f"  Hands folded: {self.hands_folded:,}",
            f"  Total winnings: {self.total_winnings:.2f}",
            f"  Average winnings per hand: {self.average_per_hand:.4f}",
            f"  Time: {self.elapsed:.1f}s",
            f"{'='*50}",
        ]
        return "\n".join(lines)

    def to_dict(self):
        return {
            "strategy": self.strategy,
            "iterations": self.iterations,
            "hands": self.hands,
            "hands_played": self.hands_played,
            "hands_folded": self.hands_folded,
            "total_winnings": self.total_winnings,
            "average_per_hand": self.average_per_hand,
            "seed": self.seed,
            "workers": self.workers,
            "elapsed": self.elapsed,
        }


@dataclass
class ComparisonResult:
    """Results from running several strategies on the same deals."""
    results: list[StrategyResult] = field(default_factory=list)
    preset_used: Optional[str] = None

    @property
    def best(self) -> Optional[StrategyResult]:
        if not self.results:
            return None
        return max(self.results, key=lambda r: r.average_per_hand)

    def __str__(self):
        lines = [f"{'='*70}"]
        title = "STRATEGY COMPARISON"
        if self.preset_used:
            title += f" - {self.preset_used}"
        lines.append(f"  {title}")
        lines.append(f"{'='*70}")
        lines.append(f"  {'Strategy':<20} {'Rounds':>10} {'Play %':>8} {'Winnings':>14} {'Per hand':>10}")
        lines.append(f"  {'-'*66}")
        for r in self.results:
            lines.append(f"  {r.strategy:<20} {r.iterations:>10,} {r.play_rate:>7.1f}% "
                         f"{r.total_winnings:>14.2f} {r.average_per_hand:>10.4f}")
        lines.append(f"{'='*70}")
        return "\n".join(lines)

    def to_dict(self):
        return {
            "preset_used": self.preset_used,
            "results": [r.to_dict() for r in self.results],
        }


def play_round(deal: Deal, strategy) -> list[HandResult]:
    """Every player at the table decides and settles against the dealer pool."""
    signal = strategy.read_table(deal.player_hands)
    results = []
    for hand in deal.player_hands:
        played, result = strategy.wager(hand, deal.dealer_pool, signal)
        results.append(HandResult(played=played, result=result))
    return results


def simulate_rounds(strategy_name: str, rounds: int, seed: Optional[int] = None,
                    progress_every: int = 0) -> ChunkTotals:
    """Shuffle and play a block of rounds with a generator of its own."""
    strategy = get_strategy(strategy_name)
    deck = Deck(rng=random.Random(seed))
    totals = ChunkTotals()

    for i in range(rounds):
        deck.shuffle()
        for hand in play_round(deck.deal(), strategy):
            totals.hands += 1
            totals.total_winnings += hand.result
            if hand.played:
                totals.hands_played += 1
        totals.rounds += 1

        if progress_every and (i + 1) % progress_every == 0:
            logger.debug("%s: round %d/%d (seed=%s)", strategy_name, i + 1, rounds, seed)

    return totals


def _simulate_chunk(args) -> ChunkTotals:
    return simulate_rounds(*args)


def _chunk_plan(rounds: int, workers: int, seed: Optional[int]) -> list[tuple]:
    """Split rounds across workers; chunk i is seeded with seed + i."""
    chunk = rounds // workers
    plan = []
    for i in range(workers):
        size = chunk if i < workers - 1 else rounds - chunk * (workers - 1)
        if size == 0:
            continue
        plan.append((size, None if seed is None else seed + i))
    return plan


class Simulator:
    """
    Main simulator class.

    Usage:
        sim = Simulator()
        result = sim.run("jacobson", iterations=10_000, seed=7)
        print(result)

        # Or compare several:
        comparison = sim.compare(["mousseau", "jacobson"], iterations=10_000)
        print(comparison)
    """

    def __init__(self, config: SimulationConfig = None):
        self.config = config or SimulationConfig()

    def _strategy_name(self, strategy: Union[str, StrategyType]) -> str:
        if isinstance(strategy, StrategyType):
            return strategy.value
        try:
            return StrategyType(strategy).value
        except ValueError:
            raise ValueError(
                f"Unknown strategy: {strategy}. Available: {[s.value for s in StrategyType]}"
            ) from None

    def run(self, strategy: Union[str, StrategyType] = StrategyType.JACOBSON,
            iterations: int = None, seed: int = None,
            workers: int = None) -> StrategyResult:
        """
        Simulate one strategy over many independently shuffled rounds.

        Args:
            strategy: Strategy name or StrategyType
            iterations: Rounds to deal (six hands each); config default if None
            seed: Base seed; the same seed and worker count repeat a run exactly
            workers: Processes to spread rounds across; 1 runs in-process

        Returns:
            StrategyResult with aggregated winnings
        """
        name = self._strategy_name(strategy)
        iterations = self.config.iterations if iterations is None else iterations
        seed = self.config.seed if seed is None else seed
        workers = self.config.workers if workers is None else workers
        if iterations < 1:
            raise ValueError(f"iterations must be positive, got {iterations}")
        if workers < 1:
            raise ValueError(f"workers must be positive, got {workers}")

        logger.info("Running %s for %d rounds (seed=%s, workers=%d)", name, iterations, seed, workers)
        start_time = time.time()
        totals = ChunkTotals()
        plan = _chunk_plan(iterations, workers, seed)

        if len(plan) == 1:
            size, chunk_seed = plan[0]
            totals.add(simulate_rounds(name, size, chunk_seed, self.config.progress_every))
        else:
            args_list = [(name, size, chunk_seed, self.config.progress_every)
                         for size, chunk_seed in plan]
            with ProcessPoolExecutor(max_workers=len(plan)) as ex:
                for chunk_totals in ex.map(_simulate_chunk, args_list):
                    totals.add(chunk_totals)

        elapsed = time.time() - start_time
        result = StrategyResult(
            strategy=name,
            iterations=totals.rounds,
            hands=totals.hands,
            hands_played=totals.hands_played,
            total_winnings=totals.total_winnings,
            seed=seed,
            workers=workers,
            elapsed=elapsed,
        )
        logger.info("%s finished: %.4f per hand over %d hands in %.1fs",
                    name, result.average_per_hand, result.hands, elapsed)
        return result

    def compare(self, strategies: list = None, iterations: int = None,
                seed: int = None, workers: int = None) -> ComparisonResult:
        """
        Run several strategies. With a seed, every strategy sees the same deals.
        """
        strategies = strategies or self.config.strategies
        seed = self.config.seed if seed is None else seed
        if seed is None:
            # every strategy still gets the same deals
            seed = random.randrange(2**32)

        comparison = ComparisonResult()
        for strategy in strategies:
            comparison.results.append(self.run(strategy, iterations, seed, workers))
        return comparison

    def run_preset(self, preset: Union[str, Preset] = "standard", seed: int = None,
                   iterations: int = None, workers: int = None) -> ComparisonResult:
        """
        Compare the strategies a preset names, with its config overrides.
        Explicit iterations/workers win over the preset's own values.
        """
        if isinstance(preset, str):
            p = get_preset(preset)
            if p is None:
                raise ValueError(f"Unknown preset: {preset}. Available: {list_presets()}")
        else:
            p = preset

        config = SimulationConfig(
            seed=self.config.seed,
            workers=self.config.workers,
            progress_every=self.config.progress_every,
        )
        for key, value in p.config_overrides.items():
            if hasattr(config, key):
                setattr(config, key, value)

        sim = Simulator(config)
        comparison = sim.compare(p.strategies, iterations=iterations, seed=seed, workers=workers)
        comparison.preset_used = p.name
        return comparison


# Convenience functions
def run(strategy: str = "jacobson", iterations: int = 10_000,
        seed: int = None, workers: int = 1) -> StrategyResult:
    """Quick run with default simulator."""
    sim = Simulator()
    return sim.run(strategy, iterations, seed, workers)


def compare(strategies: list = None, iterations: int = 10_000,
            seed: int = None, workers: int = 1) -> ComparisonResult:
    """Quick comparison with default simulator."""
    sim = Simulator()
    return sim.compare(strategies, iterations, seed, workers)
