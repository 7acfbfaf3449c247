"""Synthetic price paths: generation, file format and end-to-end runs."""

from .generator import PathGenerator, default_generator, log_to_price, set_default_generator
from .price_file import PriceHistory, read_history, write_history, write_matrix
from .simulator import SyntheticSimulator

__all__ = [
    "PathGenerator",
    "log_to_price",
    "default_generator",
    "set_default_generator",
    "PriceHistory",
    "read_history",
    "write_history",
    "write_matrix",
    "SyntheticSimulator",
]
