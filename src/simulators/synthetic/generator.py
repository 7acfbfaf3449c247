"""Synthetic log-normal price paths."""

import logging
from typing import Optional, Sequence

import numpy as np

logger = logging.getLogger(__name__)


class PathGenerator:
    """
    Multi-asset log-price generator with Gaussian noise in log space.

    ln(price) at tick t is t * mu + sigma * Z with a fresh standard-normal Z
    for every (tick, asset). Tick 0 is pinned to 0, so every path opens at
    price 1.0 and later ticks scatter around exp(t * mu).

    The generator owns a single numpy random stream. Consecutive calls to
    generate() continue that stream; pass a seeded Generator (or seed) for
    reproducible paths.
    """

    def __init__(
        self,
        rng: Optional[np.random.Generator] = None,
        seed: Optional[int] = None
    ):
        """
        Initialize the generator.

        Args:
            rng: Random stream to draw from. Takes precedence over seed.
            seed: Seed for a new stream. None seeds from OS entropy.
        """
        self.rng = rng if rng is not None else np.random.default_rng(seed)

    def generate(
        self,
        mu: Sequence[float],
        sigma: Sequence[float],
        tick_count: int
    ) -> np.ndarray:
        """
        Generate a tick-major log-price matrix.

        Args:
            mu: Per-asset drift per tick
            sigma: Per-asset volatility per sqrt(tick)
            tick_count: Number of ticks (rows) to produce

        Returns:
            Array of shape (tick_count, len(mu)); row 0 is all zeros

        Raises:
            ValueError: If mu and sigma differ in length, a sigma is negative
                or tick_count is negative
        """
        mu_arr = np.array(mu, dtype=float)
        sigma_arr = np.array(sigma, dtype=float)

        if mu_arr.ndim != 1 or mu_arr.shape != sigma_arr.shape:
            raise ValueError(
                f"mu and sigma must be 1-D and equal length, got {mu_arr.shape} and {sigma_arr.shape}"
            )
        if np.any(sigma_arr < 0):
            raise ValueError("Volatility cannot be negative")
        if tick_count < 0:
            raise ValueError("Tick count cannot be negative")

        asset_count = mu_arr.shape[0]
        if tick_count == 0:
            return np.empty((0, asset_count))

        # one independent draw per (tick, asset), drawn tick by tick
        t = np.arange(tick_count, dtype=float)[:, np.newaxis]
        log_prices = t * mu_arr + sigma_arr * self.rng.standard_normal((tick_count, asset_count))
        log_prices[0] = 0.0

        logger.debug("Generated %d ticks for %d assets", tick_count, asset_count)
        return log_prices


def log_to_price(log_prices: np.ndarray) -> np.ndarray:
    """
    Convert a tick-major log-price matrix into asset-major prices.

    Returns:
        Array of shape (assets, ticks) with exp() applied elementwise
    """
    return np.exp(np.asarray(log_prices, dtype=float).T)


# Process-wide stream used when callers inject no generator. Created on first
# use from settings.default_seed and shared by every later call.
_default_generator: Optional[PathGenerator] = None


def default_generator() -> PathGenerator:
    """Get the process-wide generator, creating it on first use."""
    global _default_generator
    if _default_generator is None:
        from config import settings

        _default_generator = PathGenerator(seed=settings.default_seed)
        logger.debug("Seeded default path generator (seed=%s)", settings.default_seed)
    return _default_generator


def set_default_generator(generator: Optional[PathGenerator]) -> Optional[PathGenerator]:
    """
    Replace the process-wide generator.

    Passing None makes the next default_generator() call reseed from settings.

    Returns:
        The generator previously in place
    """
    global _default_generator
    previous, _default_generator = _default_generator, generator
    return previous
