#!/usr/bin/env python3
"""
Run the moving-average trader against a synthetic market.

Defaults come from config/simulation.yml when present; flags override them.

Examples:
  # Default scenario: 3 assets, 1000 ticks, 10 reporting blocks
  python scripts/run_simulation.py

  # Replay through a history file and save block results
  python scripts/run_simulation.py --history data/price_history.csv --results blocks.csv
"""

import argparse
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from config import settings
from src.simulators import SimulationConfig, SyntheticSimulator
from src.utils.logging import setup_logging

logger = logging.getLogger(__name__)


def build_config(args) -> SimulationConfig:
    data = settings.simulation_defaults
    overrides = {
        "initial_cash": args.cash,
        "window": args.window,
        "interval": args.interval,
        "tick_count": args.ticks,
        "blocks": args.blocks,
        "mu": args.mu,
        "sigma": args.sigma,
        "seed": args.seed,
    }
    data.update({k: v for k, v in overrides.items() if v is not None})
    data.setdefault("seed", settings.default_seed)
    return SimulationConfig.from_dict(data)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        description="Run the moving-average trader on synthetic prices",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("--cash", type=float, help="Starting cash")
    parser.add_argument("--window", type=int, help="Moving-average window")
    parser.add_argument("--interval", type=int, help="Ticks between trader interactions")
    parser.add_argument("--ticks", type=int, help="Total ticks to simulate")
    parser.add_argument("--blocks", type=int, help="Number of reporting blocks")
    parser.add_argument("--mu", type=float, nargs="+", help="Per-asset drift")
    parser.add_argument("--sigma", type=float, nargs="+", help="Per-asset volatility")
    parser.add_argument("--seed", type=int, help="Random seed")
    parser.add_argument("--history", help="Write and replay the path through this file")
    parser.add_argument("--results", help="Save per-block results as CSV")
    parser.add_argument("--log-level", default=None, help="Override log level")
    args = parser.parse_args(argv)

    setup_logging(args.log_level)

    try:
        config = build_config(args)
    except ValueError as e:
        logger.error("Invalid configuration: %s", e)
        return 1

    if args.history:
        Path(args.history).parent.mkdir(parents=True, exist_ok=True)

    simulator = SyntheticSimulator(config)
    result = simulator.run(history_path=args.history)

    print(f"Starting cash {config.initial_cash}")
    for snapshot in result.snapshots:
        print(f"liquidated total after {snapshot.tick} steps: {snapshot.total_value}")
        print(f"Profits after {snapshot.tick} steps: {snapshot.profits}")
        print()
    print(result.summary())

    if args.results:
        result.to_dataframe().to_csv(args.results, index=False)
        logger.info("Saved block results to %s", args.results)

    return 0


if __name__ == "__main__":
    sys.exit(main())
