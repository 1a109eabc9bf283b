"""
Memory-capacity estimation for the dynamic-programming table.

The estimate is advisory: it reads a fresh snapshot of host memory on every
call and compares the projected free ratio after allocating the table against
a safety threshold. Nothing is reserved, so the real allocation can still fail
(or succeed) regardless of the answer.
"""

from __future__ import annotations

import abc
import logging
from dataclasses import dataclass
from typing import Optional

import psutil

logger = logging.getLogger(__name__)

DEFAULT_SAFETY_RATIO = 0.02


@dataclass(frozen=True)
class MemorySnapshot:
    """Total allocatable and currently used memory, in bytes."""
    total_bytes: int
    used_bytes: int

    @property
    def free_bytes(self) -> int:
        return max(0, self.total_bytes - self.used_bytes)


class MemoryProbe(abc.ABC):
    """Source of memory statistics; queried fresh on every capacity check."""

    @abc.abstractmethod
    def snapshot(self) -> MemorySnapshot:
        pass


class SystemMemoryProbe(MemoryProbe):
    """
    Reads host memory through psutil.

    When the process runs under an address-space limit lower than physical
    memory, that limit and the process' own virtual size are used instead.
    """

    def __init__(self, process: Optional[psutil.Process] = None):
        self._process = process

    def snapshot(self) -> MemorySnapshot:
        vm = psutil.virtual_memory()
        total = int(vm.total)
        used = int(vm.total - vm.available)

        limit = self._address_space_limit()
        if limit is not None and limit < total:
            proc = self._process or psutil.Process()
            return MemorySnapshot(total_bytes=limit, used_bytes=int(proc.memory_info().vms))
        return MemorySnapshot(total_bytes=total, used_bytes=used)

    def _address_space_limit(self) -> Optional[int]:
        if not hasattr(psutil, "RLIMIT_AS"):
            return None
        proc = self._process or psutil.Process()
        soft, _hard = proc.rlimit(psutil.RLIMIT_AS)
        if soft == psutil.RLIM_INFINITY or soft <= 0:
            return None
        return int(soft)


class StaticMemoryProbe(MemoryProbe):
    """Fixed snapshot, for simulating memory conditions deterministically."""

    def __init__(self, total_bytes: int, used_bytes: int = 0):
        if total_bytes < 0 or used_bytes < 0:
            raise ValueError("memory figures must be nonnegative")
        self._snapshot = MemorySnapshot(total_bytes=int(total_bytes), used_bytes=int(used_bytes))

    def snapshot(self) -> MemorySnapshot:
        return self._snapshot


@dataclass(frozen=True)
class CapacityAssessment:
    """Outcome of one capacity check and the snapshot it was based on."""
    snapshot: MemorySnapshot
    table_bytes: int
    free_ratio: float
    enough: bool


class CapacityEstimator:
    """Predicts whether a (n+1) x (budget+1) table fits in memory."""

    def __init__(
        self,
        probe: Optional[MemoryProbe] = None,
        *,
        element_size: int = 8,
        safety_ratio: float = DEFAULT_SAFETY_RATIO,
    ):
        if element_size <= 0:
            raise ValueError("element_size must be positive")
        if not 0.0 <= safety_ratio < 1.0:
            raise ValueError("safety_ratio must lie in [0, 1)")
        self.probe = probe if probe is not None else SystemMemoryProbe()
        self.element_size = int(element_size)
        self.safety_ratio = float(safety_ratio)

    def table_bytes(self, n: int, budget: int) -> int:
        return self.element_size * (budget + 1) * (n + 1)

    def assess(self, n: int, budget: int) -> CapacityAssessment:
        """Single-snapshot estimate; the verdict and figures all come from the same reading."""
        snap = self.probe.snapshot()
        expected = self.table_bytes(n, budget)
        if snap.total_bytes <= 0:
            ratio = float("-inf")
        else:
            ratio = (snap.total_bytes - snap.used_bytes - expected) / snap.total_bytes
        logger.debug("Expected free memory ratio for %dx%d table: %.4f", n + 1, budget + 1, ratio)
        return CapacityAssessment(
            snapshot=snap,
            table_bytes=expected,
            free_ratio=ratio,
            enough=ratio >= self.safety_ratio,
        )

    def expected_free_ratio(self, n: int, budget: int) -> float:
        return self.assess(n, budget).free_ratio

    def has_enough_space(self, n: int, budget: int) -> bool:
        return self.assess(n, budget).enough
