"""Rolling price-history observer."""

from collections import deque
from typing import Deque, List, Optional


class HistoryObserver:
    """
    Fixed-capacity window over the most recent prices of one asset.

    Once the window is full each new observation evicts the oldest one.
    Several observers may watch the same asset; each owns its own window.
    """

    def __init__(self, capacity: int):
        """
        Initialize the observer.

        Args:
            capacity: Maximum number of observations retained

        Raises:
            ValueError: If capacity is negative
        """
        if capacity < 0:
            raise ValueError("History capacity cannot be negative")

        self.capacity = capacity
        self._window: Deque[float] = deque(maxlen=capacity)

    def observe(self, value: float, tick: Optional[int] = None) -> None:
        """Record the newest observation, dropping the oldest when full."""
        # deque(maxlen=0) silently discards, which is what a zero window means
        self._window.append(float(value))

    # Market fan-out calls observers through this name
    update = observe

    def finished(self) -> bool:
        """History observers never detach themselves."""
        return False

    def read_recent(self, max_count: int) -> List[float]:
        """
        Get up to max_count most recent observations.

        Args:
            max_count: Number of observations requested

        Returns:
            The last min(max_count, len(self)) values, oldest first. A shorter
            list than requested means the window is not warm yet.
        """
        count = min(max(max_count, 0), len(self._window))
        if count == 0:
            return []
        return list(self._window)[-count:]

    def is_full(self) -> bool:
        return len(self._window) == self.capacity

    def __len__(self) -> int:
        return len(self._window)

    def __repr__(self) -> str:
        return f"HistoryObserver(capacity={self.capacity}, size={len(self._window)})"
