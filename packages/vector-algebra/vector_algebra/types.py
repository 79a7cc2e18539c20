"""Shared type variables and error types for vector-algebra."""
from __future__ import annotations

from typing import TypeVar

S = TypeVar("S")


class AlgebraError(Exception):
    """Base class for every error raised by vector-algebra."""


class DimensionMismatchError(AlgebraError, ValueError):
    """Raised when operands (or constructor input) have the wrong element count."""

    def __init__(self, expected: int, actual: int, operation: str) -> None:
        self.expected = expected
        self.actual = actual
        self.operation = operation
        super().__init__(
            f"{operation}: expected {expected} dimensions, got {actual}"
        )


class DivisionByZeroError(AlgebraError, ZeroDivisionError):
    """Raised when a field divides by its additive identity."""


class ZeroMagnitudeError(AlgebraError, ZeroDivisionError):
    """Raised when normalizing a vector whose magnitude is the additive identity."""


class MagnitudeOverflowError(AlgebraError, OverflowError):
    """Raised when a magnitude is too large for its reciprocal to be non-zero."""


class IncompatibleVectorError(AlgebraError, TypeError):
    """Raised when vectors built on different scalar algebras are combined."""
