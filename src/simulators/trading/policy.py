"""Moving-average buy/sell rule."""

from dataclasses import dataclass
from typing import Optional, Sequence

import numpy as np


@dataclass(frozen=True)
class TradeDecision:
    """Order sizes for one asset at one interaction."""
    buy: float = 0.0
    sell: float = 0.0
    average: Optional[float] = None

    @property
    def is_noop(self) -> bool:
        return self.buy <= 0.0 and self.sell <= 0.0


class MovingAveragePolicy:
    """
    Compare the current price with the mean of the last `window` prices.

    Below buy_threshold * mean: spend an equal share of cash across the traded
    assets. Above sell_threshold * mean: sell the whole position. With fewer
    than `window` prices observed, do nothing.
    """

    def __init__(
        self,
        window: int,
        buy_threshold: float = 0.95,
        sell_threshold: float = 1.05
    ):
        if window < 1:
            raise ValueError("Window must be at least 1")
        if buy_threshold <= 0:
            raise ValueError("Buy threshold must be positive")
        if sell_threshold < buy_threshold:
            raise ValueError("Sell threshold cannot be below buy threshold")

        self.window = window
        self.buy_threshold = buy_threshold
        self.sell_threshold = sell_threshold

    def moving_average(self, history: Sequence[float]) -> Optional[float]:
        """Mean of the window, or None while fewer than `window` values exist."""
        if len(history) < self.window:
            return None
        return float(np.mean(history[-self.window:]))

    def buy_amount(
        self,
        price: float,
        average: Optional[float],
        cash: float,
        asset_count: int
    ) -> float:
        if average is None or not price < self.buy_threshold * average:
            return 0.0
        return (cash / asset_count) / price

    def sell_amount(self, price: float, average: Optional[float], holding: float) -> float:
        if average is None or not price > self.sell_threshold * average:
            return 0.0
        return holding

    def decide(
        self,
        price: float,
        history: Sequence[float],
        cash: float,
        holding: float,
        asset_count: int
    ) -> TradeDecision:
        """
        Compute buy and sell sizes from one price/average snapshot.

        Args:
            price: Current asset price
            history: Recent prices, oldest first
            cash: Cash available to the trader
            holding: Quantity of the asset currently held
            asset_count: Number of assets the trader splits cash across

        Returns:
            TradeDecision with independent buy and sell sizes
        """
        average = self.moving_average(history)
        return TradeDecision(
            buy=self.buy_amount(price, average, cash, asset_count),
            sell=self.sell_amount(price, average, holding),
            average=average,
        )
