"""Operator layer: free dispatchers and the dunder mixin that routes to them.

Every function here is a thin dispatcher onto the named ``Vector``
methods. Where a vector is produced, ``into`` picks the concrete result
type; ``None`` keeps the left operand's type.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeVar

if TYPE_CHECKING:
    from vector_algebra.vector import Vector

V = TypeVar("V", bound="Vector[Any]")


def add(lhs: Vector[Any], rhs: Vector[Any], into: type[V] | None = None) -> Any:
    return lhs.sum(rhs, into=into)


def subtract(lhs: Vector[Any], rhs: Vector[Any], into: type[V] | None = None) -> Any:
    """Translate ``lhs`` by the negation of ``rhs``."""
    return lhs.sum(rhs.negative, into=into)


def multiply(lhs: Any, rhs: Any, into: type[V] | None = None) -> Any:
    """Piecewise product of two vectors, or a vector scaled by a scalar.

    The scalar may sit on either side. ``into`` only applies to the
    piecewise form. Any non-vector operand is handed to the ring's
    ``multiply`` as a scalar unchecked, so ``v * [0]`` builds a vector of
    lists under ``IntegerRing``.
    """
    lhs_is_vector = isinstance(lhs, VectorOperators)
    rhs_is_vector = isinstance(rhs, VectorOperators)
    if lhs_is_vector and rhs_is_vector:
        return lhs.piecewise_multiply(rhs, into=into)
    if lhs_is_vector:
        return lhs.scale(rhs)
    if rhs_is_vector:
        return rhs.scale(lhs)
    raise TypeError("multiply needs at least one vector operand")


def negate(vector: V) -> V:
    return vector.negative


def equal(lhs: Vector[Any], rhs: Vector[Any]) -> bool:
    """Same element count, same scalar algebra, pairwise equal scalars."""
    if lhs.dimensions != rhs.dimensions:
        return False
    if lhs.scalar != rhs.scalar:
        return False
    return all(a == b for a, b in zip(lhs, rhs))


class VectorOperators:
    """Maps ``+``, ``-``, ``*``, unary ``-`` and ``==`` onto the dispatchers.

    Mixed concrete types resolve to the left operand's type. Use the free
    functions with ``into=`` to pick the other one.
    """

    __slots__ = ()

    def __add__(self, other: Any) -> Any:
        if not isinstance(other, VectorOperators):
            return NotImplemented
        return add(self, other)  # type: ignore[arg-type]

    def __sub__(self, other: Any) -> Any:
        if not isinstance(other, VectorOperators):
            return NotImplemented
        return subtract(self, other)  # type: ignore[arg-type]

    def __mul__(self, other: Any) -> Any:
        return multiply(self, other)

    def __rmul__(self, other: Any) -> Any:
        return multiply(other, self)

    def __neg__(self) -> Any:
        return negate(self)  # type: ignore[type-var]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, VectorOperators):
            return NotImplemented
        return equal(self, other)  # type: ignore[arg-type]

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result
