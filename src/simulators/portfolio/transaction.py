"""Transaction record keeping."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Dict, Any
import uuid


class TransactionType(Enum):
    """Types of transactions."""
    BUY = "BUY"
    SELL = "SELL"


@dataclass
class Transaction:
    """Record of a single executed trade."""

    symbol: str
    quantity: float
    price: float
    tick: int
    transaction_type: TransactionType = TransactionType.BUY
    transaction_id: str = field(default_factory=lambda: str(uuid.uuid4()))

    gross_amount: Optional[float] = None
    metadata: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        """Calculate amounts after initialization."""
        if self.gross_amount is None:
            self.gross_amount = self.quantity * self.price

    @property
    def cash_flow(self) -> float:
        """Signed cash movement: negative for buys, positive for sells."""
        if self.transaction_type == TransactionType.BUY:
            return -self.gross_amount
        return self.gross_amount

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            'transaction_id': self.transaction_id,
            'symbol': self.symbol,
            'quantity': self.quantity,
            'price': self.price,
            'tick': self.tick,
            'transaction_type': self.transaction_type.value,
            'gross_amount': self.gross_amount,
            'metadata': self.metadata
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Transaction':
        """Create transaction from dictionary."""
        data = data.copy()

        if isinstance(data['transaction_type'], str):
            data['transaction_type'] = TransactionType(data['transaction_type'])

        return cls(**data)

    def __repr__(self) -> str:
        return (f"Transaction({self.transaction_type.value} {self.quantity:.6g} "
                f"{self.symbol} @ {self.price:.6g} on tick {self.tick})")
