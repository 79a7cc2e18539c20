"""Field capability and the shipped scalar fields."""
from __future__ import annotations

import decimal
import logging
import math
from dataclasses import dataclass
from fractions import Fraction
from typing import Protocol, runtime_checkable

from vector_algebra.ring import Ring
from vector_algebra.types import DivisionByZeroError, S

logger = logging.getLogger(__name__)


@runtime_checkable
class Field(Ring[S], Protocol[S]):
    """Ring extended with division and exponentiation.

    ``divide`` must raise ``DivisionByZeroError`` when the divisor equals
    the additive identity. ``power`` is used with exponent ``0.5`` to turn
    a squared magnitude into a magnitude. A negative power of the
    additive identity is a division by it and raises the same error.
    """

    def divide(self, a: S, b: S) -> S: ...

    def power(self, a: S, exponent: float) -> S: ...


def _division_by_zero(a: object) -> DivisionByZeroError:
    logger.debug("division of %r by the additive identity", a)
    return DivisionByZeroError(f"cannot divide {a!r} by the additive identity")


@dataclass(frozen=True)
class RealField:
    """Field over Python ``float``."""

    @property
    def addition_identity(self) -> float:
        return 0.0

    @property
    def multiplication_identity(self) -> float:
        return 1.0

    def add(self, a: float, b: float) -> float:
        return a + b

    def multiply(self, a: float, b: float) -> float:
        return a * b

    def negate(self, a: float) -> float:
        return -a

    def divide(self, a: float, b: float) -> float:
        if b == 0.0:
            raise _division_by_zero(a)
        return a / b

    def power(self, a: float, exponent: float) -> float:
        if a == 0.0 and exponent < 0:
            raise _division_by_zero(self.multiplication_identity)
        return math.pow(a, exponent)


@dataclass(frozen=True)
class RationalField:
    """Field over ``fractions.Fraction``.

    Integral exponents and square roots of perfect-square fractions are
    exact. Any other power goes through ``float`` and is converted back,
    so the result is the closest fraction to the float answer.
    """

    @property
    def addition_identity(self) -> Fraction:
        return Fraction(0)

    @property
    def multiplication_identity(self) -> Fraction:
        return Fraction(1)

    def add(self, a: Fraction, b: Fraction) -> Fraction:
        return a + b

    def multiply(self, a: Fraction, b: Fraction) -> Fraction:
        return a * b

    def negate(self, a: Fraction) -> Fraction:
        return -a

    def divide(self, a: Fraction, b: Fraction) -> Fraction:
        if b == 0:
            raise _division_by_zero(a)
        return Fraction(a) / b

    def power(self, a: Fraction, exponent: float) -> Fraction:
        a = Fraction(a)
        if a == 0 and exponent < 0:
            raise _division_by_zero(self.multiplication_identity)
        if float(exponent).is_integer():
            return Fraction(a ** int(exponent))
        if exponent == 0.5 and a >= 0:
            num = math.isqrt(a.numerator)
            den = math.isqrt(a.denominator)
            if num * num == a.numerator and den * den == a.denominator:
                return Fraction(num, den)
        return Fraction(math.pow(float(a), exponent))


@dataclass(frozen=True)
class DecimalField:
    """Field over ``decimal.Decimal``.

    Args:
        context: Arithmetic context (precision, rounding). ``None`` uses the
            thread's current context at call time.
    """

    context: decimal.Context | None = None

    def _ctx(self) -> decimal.Context:
        return self.context if self.context is not None else decimal.getcontext()

    @property
    def addition_identity(self) -> decimal.Decimal:
        return decimal.Decimal(0)

    @property
    def multiplication_identity(self) -> decimal.Decimal:
        return decimal.Decimal(1)

    def add(self, a: decimal.Decimal, b: decimal.Decimal) -> decimal.Decimal:
        return self._ctx().add(a, b)

    def multiply(self, a: decimal.Decimal, b: decimal.Decimal) -> decimal.Decimal:
        return self._ctx().multiply(a, b)

    def negate(self, a: decimal.Decimal) -> decimal.Decimal:
        return self._ctx().minus(a)

    def divide(self, a: decimal.Decimal, b: decimal.Decimal) -> decimal.Decimal:
        if b == 0:
            raise _division_by_zero(a)
        return self._ctx().divide(a, b)

    def power(self, a: decimal.Decimal, exponent: float) -> decimal.Decimal:
        if a == 0 and exponent < 0:
            raise _division_by_zero(self.multiplication_identity)
        ctx = self._ctx()
        if exponent == 0.5:
            return ctx.sqrt(a)
        if float(exponent).is_integer():
            return ctx.power(a, int(exponent))
        return ctx.power(a, decimal.Decimal(repr(exponent)))


REALS = RealField()
RATIONALS = RationalField()
DECIMALS = DecimalField()
