"""Simulation configuration and results."""

from .config import SimulationConfig
from .result import SimulationResult, SimulationSnapshot

__all__ = [
    "SimulationConfig",
    "SimulationResult",
    "SimulationSnapshot",
]
