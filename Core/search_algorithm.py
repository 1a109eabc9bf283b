import abc
from typing import ClassVar, Iterable, List, Tuple

from .problem import Algorithm, Requirement, SelectionResult, validate_budget, validate_requirements


class SelectionAlgorithm(abc.ABC):
    """
    Abstract base class for requirement selection algorithms.
    """
    # Tag recorded on every SelectionResult this solver produces.
    name: ClassVar[Algorithm]

    @abc.abstractmethod
    def solve(self, requirements: Iterable[Requirement], budget: int) -> SelectionResult:
        """
        Selects a subset of requirements whose total cost stays within budget.

        Args:
            requirements: Candidate requirements. The sequence is not modified.
            budget: Nonnegative cost ceiling.

        Returns:
            A SelectionResult tagged with this solver's name.
        """
        pass

    def _prepare(self, requirements: Iterable[Requirement], budget: int) -> Tuple[List[Requirement], int]:
        """Validates input and returns a private copy of the requirements."""
        return validate_requirements(requirements), validate_budget(budget)

    def _result(self, chosen: Iterable[Requirement], budget: int) -> SelectionResult:
        return SelectionResult(chosen=tuple(chosen), algorithm=self.name, budget=budget)
