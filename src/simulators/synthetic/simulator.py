"""End-to-end simulation over synthetic price paths."""

import logging
from pathlib import Path
from typing import Callable, List, Optional, Union

import numpy as np

from ..base import SimulationConfig, SimulationResult, SimulationSnapshot
from ..market import Market
from ..trading import MovingAveragePolicy, Trader
from .generator import PathGenerator, default_generator, log_to_price
from .price_file import read_history, write_history

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[SimulationSnapshot, float], None]


class SyntheticSimulator:
    """Generate price paths, replay them and let a trader act on them."""

    def __init__(
        self,
        config: Optional[SimulationConfig] = None,
        generator: Optional[PathGenerator] = None
    ):
        """
        Initialize the simulator.

        Args:
            config: Simulation configuration. If None, uses defaults.
            generator: Price path source. If None, a stream seeded from
                config.seed, or the shared process-wide stream when unseeded.
        """
        self.config = config or SimulationConfig()
        if generator is None:
            generator = (
                default_generator() if self.config.seed is None
                else PathGenerator(seed=self.config.seed)
            )
        self.generator = generator

    def generate_history(self, history_path: Union[str, Path]) -> np.ndarray:
        """Write a fresh log-price history file and return the matrix."""
        return write_history(
            history_path,
            self.config.asset_names,
            self.config.mu,
            self.config.sigma,
            self.config.tick_count,
            generator=self.generator,
        )

    def load_market(self, history_path: Union[str, Path]) -> Market:
        """Build a market from a history file written by generate_history."""
        history = read_history(
            history_path,
            max_assets=len(self.config.asset_names),
            max_ticks=self.config.tick_count,
        )
        return Market(history.asset_names, history.to_prices())

    def build_market(self) -> Market:
        """Build a market from an in-memory path, without touching disk."""
        log_prices = self.generator.generate(
            self.config.mu, self.config.sigma, self.config.tick_count
        )
        return Market(self.config.asset_names, log_to_price(log_prices))

    def build_trader(self, market: Market) -> Trader:
        policy = MovingAveragePolicy(
            self.config.window,
            buy_threshold=self.config.buy_threshold,
            sell_threshold=self.config.sell_threshold,
        )
        trader = Trader(
            self.config.initial_cash,
            market.asset_names,
            self.config.window,
            market,
            policy=policy,
        )
        trader.set_up()
        return trader

    def run(
        self,
        history_path: Optional[Union[str, Path]] = None,
        progress_callback: Optional[ProgressCallback] = None
    ) -> SimulationResult:
        """
        Run the full simulation in reporting blocks.

        Args:
            history_path: If given, the path is written to and replayed from
                this file; otherwise it stays in memory.
            progress_callback: Called after every block with the block
                snapshot and the completed fraction

        Returns:
            SimulationResult with one snapshot per block
        """
        if history_path is not None:
            self.generate_history(history_path)
            market = self.load_market(history_path)
        else:
            market = self.build_market()

        trader = self.build_trader(market)

        result = SimulationResult(
            initial_value=trader.initial_cash,
            final_value=trader.initial_cash,
            tick_count=market.tick_count,
        )

        logger.info(
            "Starting simulation: %d ticks, %d assets, cash %.2f",
            market.tick_count, len(market.asset_names), trader.initial_cash
        )

        # a history file may hold fewer ticks than configured
        block_sizes = self.config.block_sizes
        if market.tick_count < self.config.tick_count:
            logger.warning(
                "History holds %d of %d configured ticks",
                market.tick_count, self.config.tick_count
            )
            block_sizes = _truncate_blocks(block_sizes, market.tick_count)

        for i, block in enumerate(block_sizes):
            market.run(block, trader, self.config.interval)

            positions_value = trader.portfolio.liquidated_total(market.price)
            snapshot = SimulationSnapshot(
                tick=market.tick,
                total_value=trader.cash + positions_value,
                cash=trader.cash,
                positions_value=positions_value,
                holdings=dict(trader.portfolio.holdings),
                profits=trader.liquidated_profits(market),
            )
            result.snapshots.append(snapshot)

            logger.info(
                "Liquidated total after %d ticks: %.4f (profits %.4f)",
                snapshot.tick, snapshot.total_value, snapshot.profits
            )

            if progress_callback:
                progress_callback(snapshot, (i + 1) / len(block_sizes))

        result.final_value = trader.liquidated_total(market)
        result.trades = [t.to_dict() for t in trader.portfolio.transactions]
        result.calculate_metrics()

        return result


def _truncate_blocks(block_sizes: List[int], available: int) -> List[int]:
    """Cut block sizes down so they sum to at most `available` ticks."""
    truncated: List[int] = []
    for size in block_sizes:
        size = min(size, available - sum(truncated))
        if size <= 0:
            break
        truncated.append(size)
    return truncated
