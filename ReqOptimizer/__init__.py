"""
Requirement Optimizer

Selects the requirements that maximize perceived profit within a fixed cost,
using the exact dynamic solver when memory allows and the greedy solver otherwise.
Built on the root Core/ and Knapsack/ packages.
"""

from Core.errors import CapacityError, InvalidInputError, SchemaError
from Core.problem import Requirement, SelectionResult

from .core.config import OptimizerConfig
from .core.optimizer import Optimizer, optimize
from .io import read_requirements

__version__ = "0.1.0"
__all__ = [
    'Optimizer', 'OptimizerConfig', 'optimize',
    'Requirement', 'SelectionResult', 'read_requirements',
    'CapacityError', 'InvalidInputError', 'SchemaError',
    '__version__'
]
