"""Moving-average trader."""

from .policy import MovingAveragePolicy, TradeDecision
from .trader import Trader

__all__ = [
    "MovingAveragePolicy",
    "TradeDecision",
    "Trader",
]
