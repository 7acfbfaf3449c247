"""Market simulation loop over a pre-loaded price matrix."""

import logging
from typing import Dict, List, Optional, Protocol, Sequence

import numpy as np

from .asset import Asset

logger = logging.getLogger(__name__)


class PriceObserver(Protocol):
    """Anything that can be fed an asset's price every tick."""

    def update(self, value: float, tick: int) -> None: ...

    def finished(self) -> bool: ...


class MarketParticipant(Protocol):
    """Anything the market lets trade every `interval` ticks."""

    def interact(self) -> None: ...


class Market:
    """
    Replay asset prices tick by tick.

    Each tick publishes every asset's price to all observers registered for
    that asset, and every `interval` ticks lets the trader act. The tick
    cursor persists across run() calls: a second run continues where the
    first stopped.
    """

    def __init__(self, asset_names: Sequence[str], prices: np.ndarray):
        """
        Initialize the market.

        Args:
            asset_names: Unique asset names, aligned with the rows of prices
            prices: Asset-major price array of shape (assets, ticks)

        Raises:
            ValueError: If names are duplicated or do not match the price rows
        """
        prices = np.asarray(prices, dtype=float)
        if prices.ndim != 2 or prices.shape[0] != len(asset_names):
            raise ValueError(
                f"Price array of shape {prices.shape} does not match {len(asset_names)} assets"
            )
        if len(set(asset_names)) != len(asset_names):
            raise ValueError("Asset names must be unique")

        self.asset_names: List[str] = list(asset_names)
        self._prices = prices
        self._index: Dict[str, int] = {name: i for i, name in enumerate(self.asset_names)}
        self._observers: Dict[str, List[PriceObserver]] = {name: [] for name in self.asset_names}
        self._cursor = 0

        # before the first tick an asset quotes its opening price
        opening = prices[:, 0] if prices.shape[1] else np.full(len(asset_names), np.nan)
        self._assets: Dict[str, Asset] = {
            name: Asset(name=name, price=float(opening[i]))
            for i, name in enumerate(self.asset_names)
        }

    @property
    def tick(self) -> int:
        """Number of ticks consumed so far."""
        return self._cursor

    @property
    def tick_count(self) -> int:
        """Total number of ticks in the backing price data."""
        return self._prices.shape[1]

    @property
    def remaining_ticks(self) -> int:
        return self.tick_count - self._cursor

    def add_observer(self, asset_name: str, observer: PriceObserver) -> PriceObserver:
        """
        Register an observer for an asset's price stream.

        Raises:
            KeyError: If the asset is not traded in this market
        """
        if asset_name not in self._observers:
            raise KeyError(f"Unknown asset: {asset_name}")
        self._observers[asset_name].append(observer)
        return observer

    def observers(self, asset_name: str) -> List[PriceObserver]:
        return list(self._observers[asset_name])

    def get_asset(self, asset_name: str) -> Asset:
        """Get an asset by name. Raises KeyError for unknown names."""
        return self._assets[asset_name]

    def price(self, asset_name: str) -> float:
        """Current price of an asset."""
        return self._assets[asset_name].price

    def prices(self) -> Dict[str, float]:
        return {name: asset.price for name, asset in self._assets.items()}

    def run(
        self,
        tick_count: int,
        trader: Optional[MarketParticipant] = None,
        interval: int = 1
    ) -> None:
        """
        Advance the market by exactly tick_count ticks.

        Args:
            tick_count: Number of ticks to advance
            trader: Participant to call every `interval` ticks
            interval: Ticks between trader interactions, counted from the
                start of the price data

        Raises:
            ValueError: If fewer than tick_count ticks remain, or interval < 1.
                Nothing is consumed in that case.
        """
        if tick_count < 0:
            raise ValueError("Tick count cannot be negative")
        if interval < 1:
            raise ValueError("Interaction interval must be at least 1")
        if tick_count > self.remaining_ticks:
            raise ValueError(
                f"Cannot run {tick_count} ticks from tick {self._cursor}: "
                f"only {self.remaining_ticks} of {self.tick_count} remain"
            )

        for _ in range(tick_count):
            self._advance()

            if trader is not None and self._cursor % interval == 0:
                trader.interact()

        logger.debug("Advanced to tick %d", self._cursor)

    def _advance(self) -> None:
        t = self._cursor
        for i, name in enumerate(self.asset_names):
            price = float(self._prices[i, t])
            self._assets[name].price = price

            observers = self._observers[name]
            for observer in observers:
                observer.update(price, t)

            live = [observer for observer in observers if not observer.finished()]
            if len(live) != len(observers):
                self._observers[name] = live

        self._cursor += 1
