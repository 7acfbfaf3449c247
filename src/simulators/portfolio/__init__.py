"""Portfolio management components."""

from .portfolio import Portfolio
from .transaction import Transaction, TransactionType
from .cash_manager import CashManager

__all__ = [
    "Portfolio",
    "Transaction",
    "TransactionType",
    "CashManager",
]
