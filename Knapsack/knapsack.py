from __future__ import annotations

from typing import List, Optional, Sequence, Union

import numpy as np

from Core.errors import CapacityError


def allocate_table(n: int, budget: int, dtype: np.dtype) -> Union[np.ndarray, CapacityError]:
    """Zeroed (n+1) x (budget+1) table, or a CapacityError if numpy cannot allocate it."""
    shape = (n + 1, budget + 1)
    try:
        return np.zeros(shape, dtype=dtype)
    except (MemoryError, ValueError) as exc:
        # numpy raises ValueError for shapes beyond the addressable size
        return CapacityError(
            f"could not allocate {shape[0]}x{shape[1]} table of {np.dtype(dtype).name}: {exc}",
            required_bytes=np.dtype(dtype).itemsize * shape[0] * shape[1],
        )


def check_profit_range(profits: Sequence[int], dtype: np.dtype) -> Optional[CapacityError]:
    """CapacityError if the total profit cannot be represented in a cell of ``dtype``."""
    limit = int(np.iinfo(dtype).max)
    total = sum(profits)
    if total > limit:
        return CapacityError(
            f"total profit {total} overflows table dtype {np.dtype(dtype).name} (max {limit})"
        )
    return None


def fill_table(table: np.ndarray, costs: Sequence[int], profits: Sequence[int]) -> np.ndarray:
    """
    Fill the 0/1 knapsack table in place.

    ``table[i, c]`` is the best profit using the first ``i`` requirements with
    total cost at most ``c``. Row 0 stays zero. No temporaries are allocated;
    every ufunc writes straight into the row.
    """
    budget = table.shape[1] - 1
    for i in range(1, len(costs) + 1):
        cost = int(costs[i - 1])
        profit = table.dtype.type(profits[i - 1])
        prev = table[i - 1]
        row = table[i]
        if cost > budget:
            row[:] = prev
            continue
        # Columns below the cost cannot hold the item; inherit the prior best.
        row[:cost] = prev[:cost]
        np.add(prev[: budget + 1 - cost], profit, out=row[cost:])
        np.maximum(row[cost:], prev[cost:], out=row[cost:])
    return table


def backtrack(table: np.ndarray, costs: Sequence[int]) -> List[int]:
    """
    Indices of the requirements in the optimal subset, last index first.

    An item counts as included only when its row strictly differs from the
    previous one, so ties resolve to exclusion.
    """
    chosen: List[int] = []
    k = table.shape[1] - 1
    for i in range(len(costs), 0, -1):
        if table[i, k] != table[i - 1, k]:
            chosen.append(i - 1)
            k -= int(costs[i - 1])
    return chosen


def best_profit(table: np.ndarray) -> int:
    return int(table[-1, -1])
