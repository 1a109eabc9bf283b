"""
Optimizer configuration and its command-line mapping.
"""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from typing import Any

import numpy as np

from Knapsack.capacity import DEFAULT_SAFETY_RATIO


@dataclass(frozen=True)
class OptimizerConfig:
    """
    Knobs for one Optimizer.

    Attributes
    ----------
    safety_ratio : float
        Minimum share of total memory that must stay free after the exact
        solver's table is allocated; below it the greedy solver is used.
    dtype : str
        numpy integer dtype of the table cells; its item size is the element
        size used in the memory estimate.
    force_greedy : bool
        Skip the exact solver entirely.
    """
    safety_ratio: float = DEFAULT_SAFETY_RATIO
    dtype: str = "int64"
    force_greedy: bool = False

    def __post_init__(self) -> None:
        if not 0.0 <= float(self.safety_ratio) < 1.0:
            raise ValueError(f"safety_ratio must lie in [0, 1), got {self.safety_ratio}")
        try:
            kind = np.dtype(self.dtype).kind
        except TypeError as exc:
            raise ValueError(f"unknown dtype {self.dtype!r}") from exc
        if kind not in "iu":
            raise ValueError(f"dtype must be an integer type, got {self.dtype!r}")

    @property
    def element_size(self) -> int:
        return np.dtype(self.dtype).itemsize


def add_optimizer_args(parser: Any) -> argparse.ArgumentParser:
    defaults = OptimizerConfig()
    parser.add_argument(
        "--greedy",
        dest="force_greedy",
        action="store_true",
        default=defaults.force_greedy,
        help="Always use the greedy algorithm instead of the dynamic one.",
    )
    parser.add_argument(
        "--safety-ratio",
        type=float,
        default=defaults.safety_ratio,
        help=f"Free-memory ratio to keep after allocating the dynamic table (default: {defaults.safety_ratio}).",
    )
    parser.add_argument(
        "--dtype",
        choices=["int32", "int64", "uint32", "uint64"],
        default=defaults.dtype,
        help=f"Integer type of the dynamic table cells (default: {defaults.dtype}).",
    )
    return parser


def config_from_args(args: argparse.Namespace) -> OptimizerConfig:
    return OptimizerConfig(
        safety_ratio=float(args.safety_ratio),
        dtype=str(args.dtype),
        force_greedy=bool(args.force_greedy),
    )
