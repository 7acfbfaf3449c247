"""Cash balance management."""

from dataclasses import dataclass
from typing import Dict, List, Optional


@dataclass
class CashTransaction:
    """Record of cash movement."""
    amount: float
    tick: Optional[int]
    description: str
    balance_after: float


class CashManager:
    """Manage a trader's cash balance. The balance never goes negative."""

    def __init__(self, initial_balance: float):
        """
        Initialize cash manager.

        Args:
            initial_balance: Starting cash balance

        Raises:
            ValueError: If the starting balance is negative
        """
        if initial_balance < 0:
            raise ValueError("Can't have a negative amount of cash")

        self._balance = float(initial_balance)
        self.initial_balance = float(initial_balance)
        self.transactions: List[CashTransaction] = []

        self._record_transaction(initial_balance, None, "Initial deposit")

    def get_balance(self) -> float:
        """Get current cash balance."""
        return self._balance

    def debit(self, amount: float, tick: Optional[int] = None, description: str = "") -> float:
        """
        Remove cash from the balance.

        Floating rounding can leave the balance a hair below zero after
        spending everything; it is floored to zero.

        Returns:
            Balance after the debit
        """
        self._balance = max(0.0, self._balance - amount)
        self._record_transaction(-amount, tick, description)
        return self._balance

    def credit(self, amount: float, tick: Optional[int] = None, description: str = "") -> float:
        """Add cash to the balance and return the new balance."""
        self._balance += amount
        self._record_transaction(amount, tick, description)
        return self._balance

    def _record_transaction(
        self,
        amount: float,
        tick: Optional[int],
        description: str
    ) -> None:
        self.transactions.append(
            CashTransaction(
                amount=amount,
                tick=tick,
                description=description,
                balance_after=self._balance
            )
        )

    def get_summary(self) -> Dict[str, float]:
        """Get cash account summary."""
        return {
            'balance': self._balance,
            'initial_balance': self.initial_balance,
            'total_debits': sum(-t.amount for t in self.transactions if t.amount < 0),
            'total_credits': sum(t.amount for t in self.transactions[1:] if t.amount > 0),
        }
