"""
Requirement and selection-result models for budgeted requirement selection.

A ``Requirement`` is one candidate item (integer cost, integer perceived profit).
A ``SelectionResult`` is the subset chosen by a solver plus the tag of the
algorithm that produced it.
"""

from __future__ import annotations

import operator
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Iterator, List, Literal, Tuple

from .errors import InvalidInputError

Algorithm = Literal["dynamic", "greedy"]

DYNAMIC: Algorithm = "dynamic"
GREEDY: Algorithm = "greedy"


def _check_non_negative_int(value: Any, label: str) -> int:
    """Return ``value`` as a plain int; numpy integers are accepted, bools are not."""
    # bool is an int subclass; True/False are not meaningful costs.
    if isinstance(value, bool):
        raise InvalidInputError(f"{label} must be an integer, got {value!r}")
    try:
        number = operator.index(value)
    except TypeError:
        raise InvalidInputError(f"{label} must be an integer, got {value!r}") from None
    if number < 0:
        raise InvalidInputError(f"{label} must be >= 0, got {number}")
    return number


@dataclass(frozen=True, eq=False)
class Requirement:
    """
    A candidate requirement that is either fully selected or left out.

    Attributes
    ----------
    cost : int
        Nonnegative cost consumed from the budget if selected.
    profit : int
        Nonnegative perceived profit contributed if selected.
    name : str
        Optional label, used only for reporting.

    Requirements compare by identity, so results always point back to the
    caller's own objects even when two candidates carry the same numbers.
    """
    cost: int
    profit: int
    name: str = ""

    def __post_init__(self) -> None:  # type: ignore[override]
        label = f"Requirement[{self.name}]" if self.name else "Requirement"
        # Stored as plain ints so totals never wrap around in a numpy type.
        object.__setattr__(self, "cost", _check_non_negative_int(self.cost, f"{label}.cost"))
        object.__setattr__(self, "profit", _check_non_negative_int(self.profit, f"{label}.profit"))

    @property
    def ratio(self) -> float:
        """Profit per unit of cost; free requirements rank first."""
        if self.cost == 0:
            return float("inf")
        return self.profit / self.cost

    def __repr__(self) -> str:
        name = f"{self.name!r}, " if self.name else ""
        return f"Requirement({name}cost={self.cost}, profit={self.profit})"


@dataclass(frozen=True)
class SelectionResult:
    """
    Requirements chosen by one solver run.

    Attributes
    ----------
    chosen : tuple[Requirement, ...]
        The selected requirements (same objects as the input; order carries no meaning).
    algorithm : {"dynamic", "greedy"}
        Which solver produced the selection.
    budget : int
        The cost ceiling the selection was made under.
    """
    chosen: Tuple[Requirement, ...]
    algorithm: Algorithm
    budget: int

    @property
    def total_cost(self) -> int:
        return sum(req.cost for req in self.chosen)

    @property
    def total_profit(self) -> int:
        return sum(req.profit for req in self.chosen)

    def __len__(self) -> int:
        return len(self.chosen)

    def __iter__(self) -> Iterator[Requirement]:
        return iter(self.chosen)

    def __contains__(self, item: object) -> bool:
        return any(req is item for req in self.chosen)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "algorithm": self.algorithm,
            "budget": self.budget,
            "total_cost": self.total_cost,
            "total_profit": self.total_profit,
            "chosen": [
                {"name": req.name, "cost": req.cost, "profit": req.profit}
                for req in self.chosen
            ],
        }


def validate_budget(budget: Any) -> int:
    """Return ``budget`` as a plain int if it is a nonnegative integer (numpy integers included)."""
    return _check_non_negative_int(budget, "budget")


def validate_requirements(requirements: Iterable[Requirement]) -> List[Requirement]:
    """
    Check every element and return an internally owned list.

    Solvers work on this copy, so the caller's sequence is never reordered.
    """
    if requirements is None:
        raise InvalidInputError("requirements must be a sequence, got None")
    owned: List[Requirement] = []
    for idx, req in enumerate(requirements):
        if not isinstance(req, Requirement):
            raise InvalidInputError(
                f"requirements[{idx}] must be a Requirement, got {type(req).__name__}"
            )
        owned.append(req)
    return owned
