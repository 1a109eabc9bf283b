"""
Exceptions shared by the selection engine and its callers.
"""

from __future__ import annotations

from typing import Optional


class InvalidInputError(ValueError):
    """Raised when a requirement or budget violates the domain constraints."""


class SchemaError(ValueError):
    """Raised when a requirements file violates the expected schema."""


class CapacityError(MemoryError):
    """
    Signals that the dynamic-programming table cannot (or should not) be allocated.

    Solvers hand this back as a value from ``try_solve``; only ``solve`` raises it.
    """

    def __init__(
        self,
        message: str,
        *,
        required_bytes: Optional[int] = None,
        available_bytes: Optional[int] = None,
    ) -> None:
        super().__init__(message)
        self.required_bytes = required_bytes
        self.available_bytes = available_bytes
