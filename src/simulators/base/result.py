"""Simulation result classes."""

from dataclasses import dataclass, field
from typing import Dict, List, Any
import pandas as pd
import numpy as np


@dataclass
class SimulationSnapshot:
    """Trader state at the end of a reporting block."""
    tick: int
    total_value: float
    cash: float
    positions_value: float
    holdings: Dict[str, float]
    profits: float = 0.0


@dataclass
class SimulationResult:
    """Complete simulation results with metrics."""

    initial_value: float
    final_value: float
    tick_count: int = 0

    # Return metrics
    total_return: float = 0.0

    # Risk metrics
    max_drawdown: float = 0.0
    volatility: float = 0.0

    # Trading metrics
    total_trades: int = 0
    buy_trades: int = 0
    sell_trades: int = 0

    # Time series data
    equity_curve: pd.Series = field(default_factory=lambda: pd.Series(dtype=float))
    returns: pd.Series = field(default_factory=lambda: pd.Series(dtype=float))
    trades: List[Dict[str, Any]] = field(default_factory=list)
    snapshots: List[SimulationSnapshot] = field(default_factory=list)

    @property
    def profits(self) -> float:
        return self.final_value - self.initial_value

    def calculate_metrics(self) -> None:
        """Calculate performance metrics from snapshots and trades."""
        if self.initial_value > 0:
            self.total_return = (self.final_value - self.initial_value) / self.initial_value

        self._calculate_trading_metrics()

        if not self.snapshots:
            return

        # Equity curve starts from the initial value at tick 0
        ticks = [0] + [s.tick for s in self.snapshots]
        values = [self.initial_value] + [s.total_value for s in self.snapshots]
        self.equity_curve = pd.Series(values, index=pd.Index(ticks, name="tick"), dtype=float)

        if self.initial_value > 0:
            self.returns = self.equity_curve.pct_change().dropna()

        if len(self.returns) > 1:
            self.volatility = float(self.returns.std())

        self._calculate_drawdown()

    def _calculate_drawdown(self) -> None:
        """Calculate maximum drawdown of the equity curve."""
        running_max = self.equity_curve.cummax()
        with np.errstate(divide="ignore", invalid="ignore"):
            drawdown = (self.equity_curve - running_max) / running_max
        drawdown = drawdown.replace([np.inf, -np.inf], np.nan).fillna(0.0)
        self.max_drawdown = float(drawdown.min())

    def _calculate_trading_metrics(self) -> None:
        if not self.trades:
            return

        self.total_trades = len(self.trades)
        self.buy_trades = sum(1 for t in self.trades if t['transaction_type'] == "BUY")
        self.sell_trades = sum(1 for t in self.trades if t['transaction_type'] == "SELL")

    def to_dict(self) -> Dict[str, Any]:
        """Convert result to dictionary for serialization."""
        return {
            'initial_value': self.initial_value,
            'final_value': self.final_value,
            'profits': self.profits,
            'tick_count': self.tick_count,
            'total_return': self.total_return,
            'max_drawdown': self.max_drawdown,
            'volatility': self.volatility,
            'total_trades': self.total_trades,
            'buy_trades': self.buy_trades,
            'sell_trades': self.sell_trades,
        }

    def to_dataframe(self) -> pd.DataFrame:
        """One row per reporting block."""
        return pd.DataFrame(
            [
                {
                    'tick': s.tick,
                    'cash': s.cash,
                    'positions_value': s.positions_value,
                    'total_value': s.total_value,
                    'profits': s.profits,
                }
                for s in self.snapshots
            ],
            columns=['tick', 'cash', 'positions_value', 'total_value', 'profits'],
        )

    def summary(self) -> str:
        """Generate human-readable summary."""
        return f"""
Simulation Results
==================
Ticks: {self.tick_count}
Initial Value: {self.initial_value:,.2f}
Final Value: {self.final_value:,.2f}
Profits: {self.profits:,.2f}

Returns
-------
Total Return: {self.total_return:.2%}
Max Drawdown: {self.max_drawdown:.2%}
Block Volatility: {self.volatility:.2%}

Trading
-------
Total Trades: {self.total_trades} ({self.buy_trades} buys, {self.sell_trades} sells)
"""
