"""Approximate selection by descending profit/cost ratio, single forward pass."""

from __future__ import annotations

from typing import Iterable, List

from Core.problem import GREEDY, Requirement, SelectionResult
from Core.search_algorithm import SelectionAlgorithm


def rank_by_ratio(requirements: Iterable[Requirement]) -> List[Requirement]:
    # sorted() is stable: equal ratios keep their input order.
    return sorted(requirements, key=lambda req: req.ratio, reverse=True)


class GreedySolver(SelectionAlgorithm):
    """Takes requirements best-ratio first while they still fit; no optimality guarantee."""
    name = GREEDY

    def solve(self, requirements: Iterable[Requirement], budget: int) -> SelectionResult:
        reqs, budget = self._prepare(requirements, budget)

        chosen: List[Requirement] = []
        total_cost = 0
        for req in rank_by_ratio(reqs):
            if total_cost > budget:
                break
            if total_cost + req.cost <= budget:
                chosen.append(req)
                total_cost += req.cost
        return self._result(chosen, budget)
