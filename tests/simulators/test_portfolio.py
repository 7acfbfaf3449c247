"""Tests for portfolio management functionality."""

import pytest

from src.simulators.portfolio import CashManager, Portfolio, Transaction, TransactionType


class TestPortfolio:
    """Test Portfolio class."""

    def test_portfolio_initialization(self):
        portfolio = Portfolio()

        assert portfolio.holdings == {}
        assert len(portfolio.transactions) == 0
        assert portfolio["Asset 0"] == 0.0

    def test_add_accumulates(self):
        portfolio = Portfolio()

        portfolio.add("Asset 0", 2.5)
        held = portfolio.add("Asset 0", 1.5)

        assert held == 4.0
        assert portfolio["Asset 0"] == 4.0
        assert "Asset 0" in portfolio

    def test_remove_partial(self):
        portfolio = Portfolio()
        portfolio.add("Asset 0", 4.0)

        remaining = portfolio.remove("Asset 0", 1.0)

        assert remaining == 3.0
        assert portfolio["Asset 0"] == 3.0

    def test_remove_full_drops_position(self):
        portfolio = Portfolio()
        portfolio.add("Asset 0", 4.0)

        portfolio.remove("Asset 0", 4.0)

        assert "Asset 0" not in portfolio
        assert portfolio["Asset 0"] == 0.0

    def test_remove_more_than_held(self):
        """Over-selling is rejected and leaves the holding untouched."""
        portfolio = Portfolio()
        portfolio.add("Asset 0", 1.0)

        with pytest.raises(ValueError, match="Insufficient holdings"):
            portfolio.remove("Asset 0", 2.0)

        assert portfolio["Asset 0"] == 1.0

    def test_remove_never_held(self):
        portfolio = Portfolio()

        with pytest.raises(ValueError, match="Insufficient holdings"):
            portfolio.remove("Asset 0", 0.5)

    def test_liquidated_total_with_mapping(self):
        portfolio = Portfolio()
        portfolio.add("Asset 0", 2.0)
        portfolio.add("Asset 1", 3.0)

        total = portfolio.liquidated_total({"Asset 0": 10.0, "Asset 1": 20.0, "Asset 2": 99.0})

        assert total == pytest.approx(2.0 * 10.0 + 3.0 * 20.0)

    def test_liquidated_total_with_callable(self):
        portfolio = Portfolio()
        portfolio.add("Asset 0", 2.0)

        assert portfolio.liquidated_total(lambda name: 1.5) == pytest.approx(3.0)

    def test_liquidated_total_empty(self):
        assert Portfolio().liquidated_total({}) == 0.0

    def test_transactions_recorded_with_price(self):
        portfolio = Portfolio()

        portfolio.add("Asset 0", 2.0, price=10.0, tick=5)
        portfolio.remove("Asset 0", 2.0, price=12.0, tick=9)
        portfolio.add("Asset 1", 1.0)  # no price: not recorded

        assert len(portfolio.transactions) == 2
        buys = portfolio.get_transaction_history(transaction_type=TransactionType.BUY)
        sells = portfolio.get_transaction_history(symbol="Asset 0", transaction_type=TransactionType.SELL)
        assert buys[0].tick == 5
        assert sells[0].gross_amount == pytest.approx(24.0)

    def test_to_dataframe(self):
        portfolio = Portfolio()
        portfolio.add("Asset 0", 2.0)

        df = portfolio.to_dataframe({"Asset 0": 5.0})

        assert list(df["symbol"]) == ["Asset 0"]
        assert df["market_value"].iloc[0] == pytest.approx(10.0)


class TestCashManager:
    """Test CashManager class."""

    def test_negative_initial_cash(self):
        with pytest.raises(ValueError, match="negative amount of cash"):
            CashManager(-1.0)

    def test_debit_floors_at_zero(self):
        """Rounding below zero after spending everything is floored."""
        cash = CashManager(1.0)

        balance = cash.debit(1.0 + 1e-15)

        assert balance == 0.0
        assert cash.get_balance() == 0.0

    def test_credit_and_summary(self):
        cash = CashManager(100.0)
        cash.debit(40.0)
        cash.credit(10.0)

        summary = cash.get_summary()

        assert cash.get_balance() == pytest.approx(70.0)
        assert summary['total_debits'] == pytest.approx(40.0)
        assert summary['total_credits'] == pytest.approx(10.0)


class TestTransaction:
    """Test Transaction class."""

    def test_transaction_creation(self):
        tx = Transaction(
            symbol="Asset 0",
            quantity=100,
            price=1.5,
            tick=10,
            transaction_type=TransactionType.BUY
        )

        assert tx.gross_amount == 150
        assert tx.cash_flow == -150

    def test_transaction_serialization(self):
        tx = Transaction(
            symbol="Asset 0",
            quantity=2,
            price=3.0,
            tick=1,
            transaction_type=TransactionType.SELL
        )

        tx_dict = tx.to_dict()
        assert tx_dict['transaction_type'] == "SELL"

        tx2 = Transaction.from_dict(tx_dict)
        assert tx2.transaction_type == TransactionType.SELL
        assert tx2.cash_flow == pytest.approx(6.0)
