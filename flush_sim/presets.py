"""
Preset configurations for High Card Flush simulation.
Allows easy setup of different strategy line-ups and run lengths.
"""

import os
from dataclasses import dataclass, field
from typing import Optional
from enum import Enum


class StrategyType(Enum):
    ALWAYS_PLAY = "always_play"
    PERFECT_COLLUSION = "perfect_collusion"
    MOUSSEAU = "mousseau"
    JACOBSON = "jacobson"


DEFAULT_STRATEGIES = [
    StrategyType.PERFECT_COLLUSION,
    StrategyType.MOUSSEAU,
    StrategyType.JACOBSON,
]


@dataclass
class SimulationConfig:
    """Configuration for a simulation run."""
    iterations: int = 10_000
    seed: Optional[int] = None
    workers: int = 1
    strategies: list = field(default_factory=lambda: list(DEFAULT_STRATEGIES))
    progress_every: int = 1_000  # rounds between DEBUG progress lines

    @classmethod
    def from_env(cls, **overrides) -> "SimulationConfig":
        """Defaults, then FLUSH_SIM_* environment variables, then overrides."""
        config = cls()
        env = {
            "iterations": os.getenv("FLUSH_SIM_ITERATIONS"),
            "seed": os.getenv("FLUSH_SIM_SEED"),
            "workers": os.getenv("FLUSH_SIM_WORKERS"),
        }
        for key, value in env.items():
            if value is not None:
                try:
                    setattr(config, key, int(value))
                except ValueError:
                    raise ValueError(f"FLUSH_SIM_{key.upper()} must be an integer, got {value!r}") from None
        for key, value in overrides.items():
            if value is not None and hasattr(config, key):
                setattr(config, key, value)
        config.validate()
        return config

    def validate(self) -> None:
        if self.iterations < 1:
            raise ValueError(f"iterations must be positive, got {self.iterations}")
        if self.workers < 1:
            raise ValueError(f"workers must be positive, got {self.workers}")
        if not self.strategies:
            raise ValueError("at least one strategy is required")


@dataclass
class Preset:
    """A complete preset configuration for a comparison."""
    name: str
    description: str
    strategies: list[StrategyType] = field(default_factory=lambda: list(DEFAULT_STRATEGIES))
    config_overrides: dict = field(default_factory=dict)


# Built-in presets
PRESETS = {
    "quick": Preset(
        name="Quick",
        description="Short smoke run of every strategy",
        strategies=list(StrategyType),
        config_overrides={"iterations": 500},
    ),

    "standard": Preset(
        name="Standard",
        description="Collusion ceiling against both practical strategies",
        config_overrides={"iterations": 10_000},
    ),

    "full": Preset(
        name="Full",
        description="One million rounds per strategy",
        config_overrides={"iterations": 1_000_000, "workers": os.cpu_count() or 1},
    ),

    "collusion": Preset(
        name="Collusion",
        description="Perfect information against suit-count signalling",
        strategies=[StrategyType.PERFECT_COLLUSION, StrategyType.JACOBSON],
        config_overrides={"iterations": 20_000},
    ),

    "public_play": Preset(
        name="Public Play",
        description="Strategies that need no information from other players",
        strategies=[StrategyType.ALWAYS_PLAY, StrategyType.MOUSSEAU],
        config_overrides={"iterations": 20_000},
    ),
}


def get_preset(name: str) -> Optional[Preset]:
    """Get a preset by name."""
    return PRESETS.get(name.lower().replace(" ", "_"))


def list_presets() -> list[str]:
    """List all available preset names."""
    return list(PRESETS.keys())


def get_preset_info(name: str) -> Optional[dict]:
    """Get info about a preset."""
    preset = get_preset(name)
    if preset:
        return {
            "name": preset.name,
            "description": preset.description,
            "strategies": [s.value for s in preset.strategies],
            "config_overrides": preset.config_overrides,
        }
    return None
