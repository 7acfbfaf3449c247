"""Portfolio holdings ledger."""

import logging
from typing import Callable, Dict, List, Mapping, Optional, Set, Union
import pandas as pd

from .transaction import Transaction, TransactionType

logger = logging.getLogger(__name__)

PriceLookup = Union[Callable[[str], float], Mapping[str, float]]

# Relative slack for treating an over-sell as float rounding of a full close
_REMOVE_TOLERANCE = 1e-12


def _resolve_price(price_lookup: PriceLookup, symbol: str) -> float:
    if callable(price_lookup):
        return price_lookup(symbol)
    return price_lookup[symbol]


class Portfolio:
    """Track held quantity per asset and value it at caller-supplied prices."""

    def __init__(self):
        self.holdings: Dict[str, float] = {}
        self.transactions: List[Transaction] = []

    def __getitem__(self, symbol: str) -> float:
        """Held quantity, 0.0 for assets never held."""
        return self.holdings.get(symbol, 0.0)

    def __contains__(self, symbol: str) -> bool:
        return symbol in self.holdings

    def add(
        self,
        symbol: str,
        amount: float,
        price: Optional[float] = None,
        tick: Optional[int] = None
    ) -> float:
        """
        Increase the holding of an asset.

        Args:
            symbol: Asset name
            amount: Quantity to add; callers only pass positive amounts
            price: Execution price, recorded in the transaction ledger if given
            tick: Simulation tick of the trade

        Returns:
            Quantity held after the trade
        """
        self.holdings[symbol] = self.holdings.get(symbol, 0.0) + amount

        if price is not None:
            self._record(symbol, amount, price, tick, TransactionType.BUY)

        return self.holdings[symbol]

    def remove(
        self,
        symbol: str,
        amount: float,
        price: Optional[float] = None,
        tick: Optional[int] = None
    ) -> float:
        """
        Decrease the holding of an asset.

        A position reduced to zero is dropped from the ledger.

        Returns:
            Quantity held after the trade

        Raises:
            ValueError: If amount exceeds the current holding
        """
        held = self.holdings.get(symbol, 0.0)
        slack = _REMOVE_TOLERANCE * max(abs(held), 1.0)

        if amount > held + slack:
            raise ValueError(
                f"Insufficient holdings: selling {amount:.6g} {symbol}, hold {held:.6g}"
            )

        remaining = held - amount
        if remaining <= slack:
            self.holdings.pop(symbol, None)
            remaining = 0.0
        else:
            self.holdings[symbol] = remaining

        if price is not None:
            self._record(symbol, amount, price, tick, TransactionType.SELL)

        return remaining

    def _record(
        self,
        symbol: str,
        amount: float,
        price: float,
        tick: Optional[int],
        transaction_type: TransactionType
    ) -> None:
        transaction = Transaction(
            symbol=symbol,
            quantity=amount,
            price=price,
            tick=-1 if tick is None else tick,
            transaction_type=transaction_type
        )
        self.transactions.append(transaction)
        logger.debug("Executed %r", transaction)

    def get_symbols(self) -> Set[str]:
        """Get all symbols with holdings."""
        return set(self.holdings.keys())

    def liquidated_total(self, price_lookup: PriceLookup) -> float:
        """
        Value of all holdings if converted to cash at current prices.

        Args:
            price_lookup: Callable or mapping giving the current price of an asset

        Returns:
            Sum of quantity * price over every held asset
        """
        return sum(
            quantity * _resolve_price(price_lookup, symbol)
            for symbol, quantity in self.holdings.items()
        )

    def get_transaction_history(
        self,
        symbol: Optional[str] = None,
        transaction_type: Optional[TransactionType] = None
    ) -> List[Transaction]:
        """
        Get filtered transaction history.

        Args:
            symbol: Filter by symbol
            transaction_type: Filter by transaction type

        Returns:
            List of matching transactions
        """
        transactions = self.transactions

        if symbol:
            transactions = [t for t in transactions if t.symbol == symbol]

        if transaction_type:
            transactions = [t for t in transactions if t.transaction_type == transaction_type]

        return transactions

    def to_dataframe(self, price_lookup: PriceLookup) -> pd.DataFrame:
        """Convert holdings to DataFrame."""
        data = []
        for symbol, quantity in self.holdings.items():
            current_price = _resolve_price(price_lookup, symbol)
            data.append({
                'symbol': symbol,
                'quantity': quantity,
                'current_price': current_price,
                'market_value': quantity * current_price,
            })

        return pd.DataFrame(data, columns=['symbol', 'quantity', 'current_price', 'market_value'])
