"""Price observers attached to market assets."""

from .history import HistoryObserver

__all__ = [
    "HistoryObserver",
]
