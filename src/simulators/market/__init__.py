"""Tick-driven market simulation loop."""

from .asset import Asset
from .market import Market, PriceObserver, MarketParticipant

__all__ = [
    "Asset",
    "Market",
    "PriceObserver",
    "MarketParticipant",
]
