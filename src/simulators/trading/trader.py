"""Trader driven by a moving-average policy."""

import logging
from typing import Dict, List, Optional, Sequence

from ..market import Asset, Market
from ..observers import HistoryObserver
from ..portfolio import CashManager, Portfolio
from .policy import MovingAveragePolicy

logger = logging.getLogger(__name__)


class Trader:
    """
    Hold cash and a portfolio, watch recent prices and trade on them.

    Cash never goes negative: buys are capped at what the cash can afford.
    """

    def __init__(
        self,
        initial_cash: float,
        asset_names: Sequence[str],
        window: int,
        market: Market,
        policy: Optional[MovingAveragePolicy] = None
    ):
        """
        Initialize the trader.

        Args:
            initial_cash: Starting cash
            asset_names: Assets to trade, processed in this order
            window: Number of recent prices the moving average spans
            market: Market to trade in
            policy: Decision rule; defaults to 0.95 / 1.05 thresholds

        Raises:
            ValueError: If initial_cash is negative
        """
        self.cash_manager = CashManager(initial_cash)
        self.initial_cash = float(initial_cash)
        self.asset_names: List[str] = list(asset_names)
        self.window = window
        self.market = market
        self.policy = policy or MovingAveragePolicy(window)
        self.portfolio = Portfolio()
        self._history: Dict[str, HistoryObserver] = {}

    @property
    def cash(self) -> float:
        return self.cash_manager.get_balance()

    def set_up(self) -> None:
        """Register one history observer per traded asset with the market."""
        if self._history:
            return

        for name in self.asset_names:
            observer = HistoryObserver(self.window)
            self._history[name] = observer
            self.market.add_observer(name, observer)

    def history(self, asset_name: str) -> HistoryObserver:
        return self._history[asset_name]

    def buy(self, name: str, price: float, amount: float) -> float:
        """
        Buy up to `amount` units, capped at cash / price.

        Returns:
            Units actually bought
        """
        if amount <= 0.0:
            return 0.0

        amount = min(self.cash / price, amount)

        self.portfolio.add(name, amount, price=price, tick=self.market.tick)
        self.cash_manager.debit(amount * price, self.market.tick, f"Buy {name}")
        return amount

    def sell(self, name: str, price: float, amount: float) -> float:
        """
        Sell `amount` units at `price`.

        Raises:
            ValueError: If amount exceeds the holding (see Portfolio.remove)
        """
        if amount <= 0.0:
            return 0.0

        self.portfolio.remove(name, amount, price=price, tick=self.market.tick)
        self.cash_manager.credit(amount * price, self.market.tick, f"Sell {name}")
        return amount

    def _recent_prices(self, asset: Asset) -> List[float]:
        return self._history[asset.name].read_recent(self.window)

    def interact(self) -> None:
        """Decide and trade every asset, buy before sell, in asset order."""
        for name in self.asset_names:
            asset = self.market.get_asset(name)
            decision = self.policy.decide(
                price=asset.price,
                history=self._recent_prices(asset),
                cash=self.cash,
                holding=self.portfolio[name],
                asset_count=len(self.asset_names),
            )
            if decision.is_noop:
                continue

            logger.debug(
                "Tick %d %s: price=%.6g avg=%.6g buy=%.6g sell=%.6g",
                self.market.tick, name, asset.price, decision.average,
                decision.buy, decision.sell
            )
            self.buy(name, asset.price, decision.buy)
            self.sell(name, asset.price, decision.sell)

    def liquidated_total(self, market: Optional[Market] = None) -> float:
        """Cash plus all holdings valued at current market prices."""
        market = market or self.market
        return self.cash + self.portfolio.liquidated_total(market.price)

    def liquidated_profits(self, market: Optional[Market] = None) -> float:
        return self.liquidated_total(market) - self.initial_cash
