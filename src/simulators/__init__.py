"""
Synthetic market simulator for evaluating trading rules.

This module provides:
- Log-normal price path generation and a plain-text history format
- Rolling price-history observers
- A tick-driven market loop with per-asset observer fan-out
- A moving-average trader with a holdings ledger
"""

from .base import SimulationConfig, SimulationResult, SimulationSnapshot
from .market import Asset, Market
from .observers import HistoryObserver
from .portfolio import Portfolio, Transaction, TransactionType, CashManager
from .trading import MovingAveragePolicy, TradeDecision, Trader
from .synthetic import PathGenerator, SyntheticSimulator, read_history, write_history

__all__ = [
    "SimulationConfig",
    "SimulationResult",
    "SimulationSnapshot",
    "Asset",
    "Market",
    "HistoryObserver",
    "Portfolio",
    "Transaction",
    "TransactionType",
    "CashManager",
    "MovingAveragePolicy",
    "TradeDecision",
    "Trader",
    "PathGenerator",
    "SyntheticSimulator",
    "read_history",
    "write_history",
]
