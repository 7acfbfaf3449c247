"""Plain-text price history format.

Line 1 holds the comma separated asset names. Every following line is one
tick: comma separated floats in header column order. Names are not escaped,
and values that fail to parse are read as 0.0.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Sequence, Union

import numpy as np

from .generator import PathGenerator, default_generator, log_to_price

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


@dataclass
class PriceHistory:
    """Asset names plus the tick-major log-price rows read from a file."""
    asset_names: List[str]
    log_prices: np.ndarray = field(default_factory=lambda: np.empty((0, 0)))

    @property
    def tick_count(self) -> int:
        return self.log_prices.shape[0]

    def to_prices(self) -> np.ndarray:
        """Asset-major price series ready for a Market."""
        return log_to_price(self.log_prices)


def format_header(asset_names: Sequence[str]) -> str:
    return ",".join(asset_names) + "\n"


def parse_header(line: str) -> List[str]:
    return line.rstrip("\r\n").split(",")


def format_line(values: Sequence[float]) -> str:
    # repr keeps full double precision
    return ",".join(repr(float(v)) for v in values) + "\n"


def _parse_float(token: str) -> float:
    try:
        return float(token)
    except ValueError:
        return 0.0


def parse_line(line: str, count: Optional[int] = None) -> List[float]:
    """
    Parse the first `count` comma separated values of a line.

    Missing trailing values are not padded; malformed tokens become 0.0.
    """
    tokens = line.strip().split(",")
    if count is not None:
        tokens = tokens[:count]
    return [_parse_float(token) for token in tokens]


def write_matrix(
    filename: PathLike,
    asset_names: Sequence[str],
    log_prices: np.ndarray
) -> None:
    """Write a tick-major matrix to file, replacing any existing contents."""
    log_prices = np.asarray(log_prices, dtype=float)
    if log_prices.ndim != 2 or log_prices.shape[1] != len(asset_names):
        raise ValueError(
            f"Matrix shape {log_prices.shape} does not match {len(asset_names)} asset names"
        )

    path = Path(filename)
    with open(path, "w", newline="") as f:
        f.write(format_header(asset_names))
        for row in log_prices:
            f.write(format_line(row))

    logger.info("Wrote %d ticks x %d assets to %s", log_prices.shape[0], log_prices.shape[1], path)


def write_history(
    filename: PathLike,
    asset_names: Sequence[str],
    mu: Sequence[float],
    sigma: Sequence[float],
    tick_count: int,
    generator: Optional[PathGenerator] = None
) -> np.ndarray:
    """
    Generate a log-price history and write it to file.

    The file is always rewritten from scratch.

    Args:
        filename: Target file
        asset_names: Column names, one per asset
        mu: Per-asset drift
        sigma: Per-asset volatility
        tick_count: Number of ticks to generate
        generator: Random path source; the shared process-wide stream if omitted

    Returns:
        The generated tick-major log-price matrix
    """
    if len(asset_names) != len(mu):
        raise ValueError(
            f"Got {len(asset_names)} asset names for {len(mu)} drift values"
        )

    generator = generator or default_generator()
    log_prices = generator.generate(mu, sigma, tick_count)
    write_matrix(filename, asset_names, log_prices)
    return log_prices


def read_history(
    filename: PathLike,
    max_assets: int,
    max_ticks: int,
    out: Optional[np.ndarray] = None
) -> PriceHistory:
    """
    Read up to max_ticks rows and max_assets columns of a history file.

    Extra header columns are dropped silently and a file shorter than
    max_ticks yields fewer rows. Values missing from a short row are 0.0.

    Args:
        filename: File to read
        max_assets: Maximum number of columns to keep
        max_ticks: Maximum number of rows to read
        out: Optional caller-owned buffer of at least (max_ticks, max_assets).
            Rows are written into it in place; it is never resized.

    Returns:
        PriceHistory whose log_prices has shape (rows_read, columns_kept).
        When out is given, log_prices is a view into it.

    Raises:
        ValueError: If out is smaller than the requested bounds
    """
    if out is not None and (out.ndim != 2 or out.shape[0] < max_ticks or out.shape[1] < max_assets):
        raise ValueError(
            f"Output buffer of shape {out.shape} cannot hold {max_ticks} x {max_assets}"
        )

    path = Path(filename)
    with open(path, "r") as f:
        header = f.readline()
        asset_names = parse_header(header) if header else []
        m = max(0, min(max_assets, len(asset_names)))

        rows: List[List[float]] = []
        for line in f:
            if len(rows) >= max_ticks:
                break
            if not line.strip():
                continue
            values = parse_line(line, m)
            values.extend([0.0] * (m - len(values)))
            rows.append(values)

    n = len(rows)
    if out is None:
        log_prices = np.array(rows, dtype=float).reshape(n, m)
    else:
        if n:
            out[:n, :m] = rows
        log_prices = out[:n, :m]

    logger.info("Read %d ticks x %d assets from %s", n, m, path)
    return PriceHistory(asset_names=asset_names[:m], log_prices=log_prices)
