"""Exact 0/1 selection via a dynamic-programming table, O(n * budget) time and space."""

from __future__ import annotations

import logging
from typing import Iterable, Optional, Union

import numpy as np

from Core.errors import CapacityError
from Core.problem import DYNAMIC, Requirement, SelectionResult
from Core.search_algorithm import SelectionAlgorithm

from .capacity import CapacityEstimator
from .knapsack import allocate_table, backtrack, check_profit_range, fill_table

logger = logging.getLogger(__name__)


class DynamicSolver(SelectionAlgorithm):
    """
    Maximizes total profit within budget (Kellerer, Pferschy & Pisinger, 2004).

    Before building the table the solver asks its CapacityEstimator whether the
    table fits. A negative answer, numpy running out of memory while building
    the table, or a profit total the cell dtype cannot hold is reported as a
    CapacityError value from ``try_solve``.
    """
    name = DYNAMIC

    def __init__(
        self,
        estimator: Optional[CapacityEstimator] = None,
        *,
        dtype: Union[str, np.dtype] = "int64",
    ):
        self.dtype = np.dtype(dtype)
        if self.dtype.kind not in "iu":
            raise ValueError(f"table dtype must be an integer type, got {self.dtype.name}")
        if estimator is None:
            estimator = CapacityEstimator(element_size=self.dtype.itemsize)
        elif estimator.element_size != self.dtype.itemsize:
            raise ValueError(
                f"estimator element_size {estimator.element_size} does not match "
                f"{self.dtype.name} cells ({self.dtype.itemsize} bytes)"
            )
        self.estimator = estimator

    def try_solve(
        self,
        requirements: Iterable[Requirement],
        budget: int,
    ) -> Union[SelectionResult, CapacityError]:
        reqs, budget = self._prepare(requirements, budget)
        n = len(reqs)
        if n == 0:
            return self._result((), budget)

        costs = [req.cost for req in reqs]
        profits = [req.profit for req in reqs]
        overflow = check_profit_range(profits, self.dtype)
        if overflow is not None:
            return overflow

        assessment = self.estimator.assess(n, budget)
        if not assessment.enough:
            return CapacityError(
                f"insufficient memory for {n + 1}x{budget + 1} table ({assessment.table_bytes} bytes)",
                required_bytes=assessment.table_bytes,
                available_bytes=assessment.snapshot.free_bytes,
            )

        table = allocate_table(n, budget, self.dtype)
        if isinstance(table, CapacityError):
            return table

        try:
            fill_table(table, costs, profits)
        except MemoryError as exc:
            return CapacityError(
                f"ran out of memory filling {n + 1}x{budget + 1} table: {exc}",
                required_bytes=assessment.table_bytes,
            )
        chosen = [reqs[idx] for idx in backtrack(table, costs)]
        logger.debug("Dynamic selection: %d of %d requirements, profit %d", len(chosen), n, int(table[n, budget]))
        return self._result(chosen, budget)

    def solve(self, requirements: Iterable[Requirement], budget: int) -> SelectionResult:
        outcome = self.try_solve(requirements, budget)
        if isinstance(outcome, CapacityError):
            raise outcome
        return outcome
