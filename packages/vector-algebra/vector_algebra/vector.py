"""Vector capability: default algorithms shared by every conforming type.

A concrete vector type subclasses ``Vector`` (or ``NormedVector``) and
supplies four things:

- ``scalar``: the scalar algebra, a ``Ring`` (``Field`` for NormedVector);
- ``dimensions``: the element count;
- ``__getitem__``: 0-based element access;
- ``from_sequence``: the one constructor every derived vector goes through.

Everything else (arithmetic, operators, magnitude, conversion between
compatible types) comes from here. Two vectors are compatible when their
scalar algebras compare equal.
"""
from __future__ import annotations

import logging
import math
from abc import ABC, abstractmethod
from functools import reduce
from typing import Any, ClassVar, Generic, Iterable, Iterator, TypeVar

from vector_algebra.config import DEFAULT_TOLERANCE, Tolerance
from vector_algebra.field import Field
from vector_algebra.operators import VectorOperators
from vector_algebra.ring import Ring
from vector_algebra.types import (
    DimensionMismatchError,
    DivisionByZeroError,
    IncompatibleVectorError,
    MagnitudeOverflowError,
    S,
    ZeroMagnitudeError,
)

logger = logging.getLogger(__name__)

VT = TypeVar("VT", bound="Vector[Any]")


def _mismatch(expected: int, actual: int, operation: str) -> DimensionMismatchError:
    logger.debug("%s: dimension mismatch (%d != %d)", operation, expected, actual)
    return DimensionMismatchError(expected, actual, operation)


def collect_scalars(
    values: Iterable[S], dimensions: int | None = None
) -> tuple[S, ...]:
    """Materialize ``values`` for a ``from_sequence`` implementation.

    Raises DimensionMismatchError if ``dimensions`` is given and the count
    differs.
    """
    scalars = tuple(values)
    if dimensions is not None and len(scalars) != dimensions:
        raise _mismatch(dimensions, len(scalars), "construct")
    return scalars


class Vector(VectorOperators, ABC, Generic[S]):
    """Immutable dimensional value with Ring-tier default arithmetic."""

    __slots__ = ()

    scalar: ClassVar[Ring[Any]]

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        algebra = getattr(cls, "scalar", None)
        if algebra is not None and not isinstance(algebra, Ring):
            raise TypeError(
                f"{cls.__name__}.scalar must implement Ring, got {algebra!r}"
            )

    # --- Obligations ---

    @property
    @abstractmethod
    def dimensions(self) -> int:
        """Number of scalar elements."""

    @abstractmethod
    def __getitem__(self, index: int) -> S: ...

    @classmethod
    @abstractmethod
    def from_sequence(cls: type[VT], values: Iterable[Any]) -> VT:
        """Build an instance from scalars in index order."""

    # --- Sequence behaviour ---

    def __iter__(self) -> Iterator[S]:
        for index in range(self.dimensions):
            yield self[index]

    def __len__(self) -> int:
        return self.dimensions

    def __hash__(self) -> int:
        return hash(tuple(self))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({', '.join(repr(x) for x in self)})"

    # --- Compatibility ---

    def _check_compatible(self, operand: Any, operation: str) -> None:
        if not isinstance(operand, Vector):
            raise TypeError(
                f"{operation} expects a vector, got {type(operand).__name__}"
            )
        if operand.scalar != self.scalar:
            logger.debug(
                "%s: %s and %s use different scalar algebras",
                operation, type(self).__name__, type(operand).__name__,
            )
            raise IncompatibleVectorError(
                f"{operation}: {type(operand).__name__} is not compatible with "
                f"{type(self).__name__} ({operand.scalar!r} != {self.scalar!r})"
            )

    def _target(self, into: type[VT] | None, operation: str) -> type[Any]:
        if into is None:
            return type(self)
        if not (isinstance(into, type) and issubclass(into, Vector)):
            raise TypeError(f"{operation}: into must be a Vector type, got {into!r}")
        if getattr(into, "scalar", None) != self.scalar:
            raise IncompatibleVectorError(
                f"{operation}: cannot build {into.__name__} from "
                f"{type(self).__name__} scalars"
            )
        return into

    def _pairs(self, operand: Vector[S], operation: str) -> Iterator[tuple[S, S]]:
        self._check_compatible(operand, operation)
        if operand.dimensions != self.dimensions:
            raise _mismatch(self.dimensions, operand.dimensions, operation)
        return zip(self, operand, strict=True)

    # --- Construction and conversion ---

    @classmethod
    def zero(cls: type[VT], dimensions: int) -> VT:
        """The vector whose every element is the additive identity."""
        if dimensions < 0:
            raise ValueError(f"dimensions must be >= 0, got {dimensions}")
        return cls.from_sequence([cls.scalar.addition_identity] * dimensions)

    @classmethod
    def one(cls: type[VT], dimensions: int) -> VT:
        """Identity for ``piecewise_multiply``: every element is the multiplicative identity."""
        if dimensions < 0:
            raise ValueError(f"dimensions must be >= 0, got {dimensions}")
        return cls.from_sequence([cls.scalar.multiplication_identity] * dimensions)

    @classmethod
    def from_vector(cls: type[VT], other: Vector[Any]) -> VT:
        """Convert a compatible vector of any concrete type into ``cls``."""
        if not isinstance(other, Vector):
            raise TypeError(f"from_vector expects a vector, got {type(other).__name__}")
        if other.scalar != cls.scalar:
            raise IncompatibleVectorError(
                f"cannot convert {type(other).__name__} into {cls.__name__}"
            )
        return cls.from_sequence(other)

    def convert(self, into: type[VT]) -> VT:
        return into.from_vector(self)

    # --- Ring tier ---

    def sum(self, operand: Vector[S], into: type[VT] | None = None) -> Any:
        """Elementwise addition.

        The result is built by ``type(self)`` unless ``into`` names another
        compatible vector type. Raises DimensionMismatchError when the
        element counts differ.
        """
        ring = self.scalar
        target = self._target(into, "sum")
        pairs = self._pairs(operand, "sum")
        return target.from_sequence(ring.add(a, b) for a, b in pairs)

    def scale(self: VT, scalar: Any) -> VT:
        ring = self.scalar
        return type(self).from_sequence(ring.multiply(x, scalar) for x in self)

    def piecewise_multiply(
        self, operand: Vector[S], into: type[VT] | None = None
    ) -> Any:
        """Elementwise (Hadamard) product; ``into`` works as in ``sum``."""
        ring = self.scalar
        target = self._target(into, "piecewise_multiply")
        pairs = self._pairs(operand, "piecewise_multiply")
        return target.from_sequence(ring.multiply(a, b) for a, b in pairs)

    def dot(self, operand: Vector[S]) -> S:
        ring = self.scalar
        products = (ring.multiply(a, b) for a, b in self._pairs(operand, "dot"))
        return reduce(ring.add, products, ring.addition_identity)

    @property
    def squared_magnitude(self) -> S:
        """Sum of squares, accumulated in index order."""
        ring = self.scalar
        return reduce(
            lambda acc, x: ring.add(acc, ring.multiply(x, x)),
            self,
            ring.addition_identity,
        )

    @property
    def negative(self: VT) -> VT:
        """Same magnitude, opposite direction."""
        ring = self.scalar
        return self.scale(ring.negate(ring.multiplication_identity))

    def distance_squared_to(self, vector: Vector[S]) -> S:
        return (type(self).from_vector(vector) - self).squared_magnitude

    def is_close(self, other: Vector[S], tolerance: Tolerance = DEFAULT_TOLERANCE) -> bool:
        """Pairwise ``math.isclose`` over ``float()`` of each element.

        Scalars must support ``float()``. Mismatched dimension counts are
        never close.
        """
        self._check_compatible(other, "is_close")
        if other.dimensions != self.dimensions:
            return False
        return all(
            math.isclose(
                float(a), float(b),  # type: ignore[arg-type]
                rel_tol=tolerance.rel_tol, abs_tol=tolerance.abs_tol,
            )
            for a, b in zip(self, other)
        )


class NormedVector(Vector[S]):
    """Vector whose length is measured in its own scalar type.

    ``scalar`` must be a ``Field``. This tier adds magnitude, unit and
    distance.
    """

    __slots__ = ()

    scalar: ClassVar[Field[Any]]

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        algebra = getattr(cls, "scalar", None)
        if algebra is not None and not isinstance(algebra, Field):
            raise TypeError(
                f"{cls.__name__}.scalar must implement Field, got {algebra!r}"
            )

    @property
    def magnitude(self) -> S:
        return self.scalar.power(self.squared_magnitude, 0.5)

    @property
    def length(self) -> S:
        return self.magnitude

    @property
    def unit(self: VT) -> VT:
        """Vector of magnitude one pointing the same way.

        Raises ZeroMagnitudeError when the magnitude is the additive
        identity. For floats this includes non-zero vectors whose squared
        magnitude underflows to ``0.0``, e.g. ``(1e-200, 0.0)``. Raises
        MagnitudeOverflowError when the magnitude is so large that its
        reciprocal is the additive identity, e.g. ``(1e200, 1e200)`` whose
        squared magnitude overflows to ``inf``.
        """
        field = self.scalar
        try:
            factor = field.divide(field.multiplication_identity, self.magnitude)
        except DivisionByZeroError as exc:
            logger.debug("cannot normalize zero-magnitude %s", type(self).__name__)
            raise ZeroMagnitudeError(
                f"cannot normalize a zero-magnitude vector: {self!r}"
            ) from exc
        if factor == field.addition_identity:
            logger.debug("magnitude of %s overflows", type(self).__name__)
            raise MagnitudeOverflowError(
                f"cannot normalize, magnitude out of range: {self!r}"
            )
        return self.scale(factor)

    @property
    def normalized(self: VT) -> VT:
        return self.unit

    def distance_to(self, vector: Vector[S]) -> S:
        """Magnitude of ``vector - self``; other concrete types are converted first."""
        return (type(self).from_vector(vector) - self).magnitude

    def clamp_magnitude(self: VT, max_magnitude: Any) -> VT:
        """Rescale to ``max_magnitude`` if longer; otherwise return self.

        Scalars must be ordered.
        """
        field = self.scalar
        if max_magnitude < field.addition_identity:
            raise ValueError(f"max_magnitude must be >= 0, got {max_magnitude!r}")
        if self.squared_magnitude <= field.multiply(max_magnitude, max_magnitude):
            return self
        return self.unit.scale(max_magnitude)
