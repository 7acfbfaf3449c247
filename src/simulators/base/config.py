"""Simulation configuration."""

from dataclasses import dataclass, field, fields
from typing import Any, Dict, List, Optional


@dataclass
class SimulationConfig:
    """Configuration for a synthetic market simulation."""

    # Trader
    initial_cash: float = 1000.0
    window: int = 50
    buy_threshold: float = 0.95
    sell_threshold: float = 1.05

    # Loop
    tick_count: int = 1000
    interval: int = 50
    blocks: int = 10  # reporting checkpoints

    # Price paths
    mu: List[float] = field(default_factory=lambda: [0.0, 0.0, 0.0])
    sigma: List[float] = field(default_factory=lambda: [1e-3, 1e-2, 1e-1])
    asset_names: Optional[List[str]] = None
    seed: Optional[int] = None

    def validate(self) -> None:
        """Validate configuration settings."""
        if self.initial_cash < 0:
            raise ValueError("Can't have a negative amount of cash")

        if self.window < 1:
            raise ValueError("Window must be at least 1")

        if self.interval < 1:
            raise ValueError("Interaction interval must be at least 1")

        if self.tick_count < 1:
            raise ValueError("Tick count must be positive")

        if not 1 <= self.blocks <= self.tick_count:
            raise ValueError("Blocks must be between 1 and the tick count")

        if not 0 < self.buy_threshold <= 1.0:
            raise ValueError("Buy threshold must be in (0, 1]")

        if self.sell_threshold < 1.0:
            raise ValueError("Sell threshold cannot be below 1")

        if not self.mu or len(self.mu) != len(self.sigma):
            raise ValueError("mu and sigma must be non-empty and of equal length")

        if any(s < 0 for s in self.sigma):
            raise ValueError("Volatility cannot be negative")

        if self.asset_names is not None:
            if len(self.asset_names) != len(self.mu):
                raise ValueError("Need exactly one asset name per drift value")
            if len(set(self.asset_names)) != len(self.asset_names):
                raise ValueError("Asset names must be unique")

    def __post_init__(self):
        """Fill default names and validate after initialization."""
        self.mu = [float(m) for m in self.mu]
        self.sigma = [float(s) for s in self.sigma]
        self.validate()
        if self.asset_names is None:
            self.asset_names = [f"Asset {i}" for i in range(len(self.mu))]

    @property
    def block_sizes(self) -> List[int]:
        """Ticks per reporting block; the last block takes any remainder."""
        size, remainder = divmod(self.tick_count, self.blocks)
        return [size] * (self.blocks - 1) + [size + remainder]

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SimulationConfig":
        """Build from a mapping, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known})
