"""
Selection engine: exact and greedy solvers plus the capacity estimator gating the exact one.
"""

from .capacity import (
    CapacityAssessment,
    CapacityEstimator,
    MemoryProbe,
    MemorySnapshot,
    StaticMemoryProbe,
    SystemMemoryProbe,
)
from .dynamic import DynamicSolver
from .greedy import GreedySolver, rank_by_ratio

__all__ = [
    'CapacityAssessment',
    'CapacityEstimator',
    'MemoryProbe',
    'MemorySnapshot',
    'StaticMemoryProbe',
    'SystemMemoryProbe',
    'DynamicSolver',
    'GreedySolver',
    'rank_by_ratio',
]
