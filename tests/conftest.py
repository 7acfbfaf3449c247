"""Pytest configuration and fixtures"""

import pytest
import sys
from pathlib import Path

import numpy as np

# Add project root to Python path
sys.path.insert(0, str(Path(__file__).parent.parent))


@pytest.fixture
def rng():
    """Seeded random stream for reproducible paths"""
    return np.random.default_rng(12345)


@pytest.fixture
def asset_names():
    return ["Asset 0", "Asset 1", "Asset 2"]


@pytest.fixture
def history_file(tmp_path):
    """Path for a temporary price history file"""
    return tmp_path / "price_history.csv"


@pytest.fixture
def flat_then_dip_prices():
    """One asset: 50 ticks at 100, a dip to 90, then a spike to 120"""
    return np.array([[100.0] * 50 + [90.0, 120.0]])


@pytest.fixture
def seeded_default_generator():
    """Swap in a seeded process-wide generator, restoring the old one after"""
    from src.simulators.synthetic import PathGenerator, set_default_generator

    previous = set_default_generator(PathGenerator(seed=99))
    yield
    set_default_generator(previous)
