"""
Optimizer: picks between the exact and the greedy selection algorithm.

The dynamic solver is always tried first unless greedy is forced. When the
capacity check predicts the table will not fit, or numpy fails to allocate it,
the optimizer falls back to the greedy solver so callers always get a valid
selection.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from Core.errors import CapacityError
from Core.problem import Algorithm, Requirement, SelectionResult, validate_budget, validate_requirements
from Knapsack.capacity import CapacityEstimator, MemoryProbe
from Knapsack.dynamic import DynamicSolver
from Knapsack.greedy import GreedySolver

from .config import OptimizerConfig


class Optimizer:
    """
    Chooses and runs a selection algorithm for one budget at a time.

    Holds no state between calls other than ``chosen_algorithm``, the tag of
    the most recent run.
    """

    def __init__(
        self,
        config: Optional[OptimizerConfig] = None,
        *,
        estimator: Optional[CapacityEstimator] = None,
        probe: Optional[MemoryProbe] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self.config = config or OptimizerConfig()
        if estimator is None:
            estimator = CapacityEstimator(
                probe,
                element_size=self.config.element_size,
                safety_ratio=self.config.safety_ratio,
            )
        self.estimator = estimator
        self.dynamic_solver = DynamicSolver(estimator, dtype=self.config.dtype)
        self.greedy_solver = GreedySolver()
        self.logger = logger or logging.getLogger(__name__)
        self.chosen_algorithm: Optional[Algorithm] = None

    def optimize(
        self,
        requirements: Iterable[Requirement],
        budget: int,
        force_greedy: Optional[bool] = None,
    ) -> SelectionResult:
        reqs = validate_requirements(requirements)
        budget = validate_budget(budget)
        if force_greedy is None:
            force_greedy = self.config.force_greedy

        self.logger.info("Selecting profit maximizing requirements given fixed cost of %d", budget)

        if force_greedy:
            result = self.greedy_solver.solve(reqs, budget)
        else:
            outcome = self.dynamic_solver.try_solve(reqs, budget)
            if isinstance(outcome, CapacityError):
                self.logger.debug("Dynamic selection unavailable (%s); using greedy", outcome)
                result = self.greedy_solver.solve(reqs, budget)
            else:
                result = outcome

        self.chosen_algorithm = result.algorithm
        return result


def optimize(
    requirements: Iterable[Requirement],
    budget: int,
    force_greedy: bool = False,
) -> SelectionResult:
    """One-shot selection with the default configuration and host memory probe."""
    return Optimizer().optimize(requirements, budget, force_greedy=force_greedy)
