"""Simulated asset."""

from dataclasses import dataclass


@dataclass
class Asset:
    """A named asset and its price at the current tick."""
    name: str
    price: float

    def __repr__(self) -> str:
        return f"Asset({self.name!r}, price={self.price:.6g})"
