"""vector-algebra - Generic vector arithmetic over pluggable scalar algebras."""
from __future__ import annotations

import logging

from vector_algebra import operators
from vector_algebra.config import DEFAULT_TOLERANCE, Tolerance
from vector_algebra.field import (
    DECIMALS,
    RATIONALS,
    REALS,
    DecimalField,
    Field,
    RationalField,
    RealField,
)
from vector_algebra.ring import INTEGERS, IntegerRing, Ring
from vector_algebra.types import (
    AlgebraError,
    DimensionMismatchError,
    DivisionByZeroError,
    IncompatibleVectorError,
    MagnitudeOverflowError,
    ZeroMagnitudeError,
)
from vector_algebra.vector import NormedVector, Vector, collect_scalars

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Ring",
    "Field",
    "IntegerRing",
    "RealField",
    "RationalField",
    "DecimalField",
    "INTEGERS",
    "REALS",
    "RATIONALS",
    "DECIMALS",
    "Vector",
    "NormedVector",
    "collect_scalars",
    "operators",
    "Tolerance",
    "DEFAULT_TOLERANCE",
    "AlgebraError",
    "DimensionMismatchError",
    "DivisionByZeroError",
    "IncompatibleVectorError",
    "MagnitudeOverflowError",
    "ZeroMagnitudeError",
]
