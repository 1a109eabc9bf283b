"""
Core data model shared by the selection engine.
"""

from .errors import CapacityError, InvalidInputError, SchemaError
from .problem import (
    DYNAMIC,
    GREEDY,
    Algorithm,
    Requirement,
    SelectionResult,
    validate_budget,
    validate_requirements,
)
from .search_algorithm import SelectionAlgorithm

__all__ = [
    'Algorithm',
    'DYNAMIC',
    'GREEDY',
    'Requirement',
    'SelectionResult',
    'SelectionAlgorithm',
    'validate_budget',
    'validate_requirements',
    'CapacityError',
    'InvalidInputError',
    'SchemaError',
]
