#!/usr/bin/env python3
"""
Generate a synthetic log-price history file.

Examples:
  python scripts/generate_price_history.py --ticks 1000 --mu 0 0 0 --sigma 0.001 0.01 0.1
  python scripts/generate_price_history.py --output data/paths.csv --seed 7
"""

import argparse
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from config import settings
from src.simulators.synthetic import PathGenerator, default_generator, write_history
from src.utils.logging import setup_logging

logger = logging.getLogger(__name__)


def main(argv=None) -> int:
    defaults = settings.simulation_defaults

    parser = argparse.ArgumentParser(description="Generate a synthetic log-price history file")
    parser.add_argument("--output", default=str(settings.history_path), help="File to (over)write")
    parser.add_argument("--ticks", type=int, default=defaults.get("tick_count", 1000), help="Number of ticks")
    parser.add_argument("--mu", type=float, nargs="+", default=defaults.get("mu", [0.0, 0.0, 0.0]), help="Per-asset drift")
    parser.add_argument("--sigma", type=float, nargs="+", default=defaults.get("sigma", [1e-3, 1e-2, 1e-1]), help="Per-asset volatility")
    parser.add_argument("--names", nargs="+", help="Asset names (default: 'Asset 0', 'Asset 1', ...)")
    parser.add_argument("--seed", type=int, default=defaults.get("seed"), help="Random seed (default: shared stream from settings)")
    parser.add_argument("--log-level", default=None, help="Override log level")
    args = parser.parse_args(argv)

    setup_logging(args.log_level)

    generator = default_generator() if args.seed is None else PathGenerator(seed=args.seed)
    names = args.names or defaults.get("asset_names") or [f"Asset {i}" for i in range(len(args.mu))]
    output = Path(args.output)
    output.parent.mkdir(parents=True, exist_ok=True)

    try:
        write_history(output, names, args.mu, args.sigma, args.ticks, generator=generator)
    except ValueError as e:
        logger.error("Could not generate history: %s", e)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
