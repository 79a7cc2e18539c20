"""Ring capability: addition, multiplication and their identities."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from vector_algebra.types import S


@runtime_checkable
class Ring(Protocol[S]):
    """Protocol for scalar algebras with addition and multiplication.

    Implementations are expected to satisfy the identity laws
    ``add(x, addition_identity) == x`` and
    ``multiply(x, multiplication_identity) == x``, with associative
    operations and commutative addition. None of this is enforced.
    """

    @property
    def addition_identity(self) -> S: ...

    @property
    def multiplication_identity(self) -> S: ...

    def add(self, a: S, b: S) -> S: ...

    def multiply(self, a: S, b: S) -> S: ...

    def negate(self, a: S) -> S:
        """Additive inverse: ``add(a, negate(a)) == addition_identity``."""
        ...


@dataclass(frozen=True)
class IntegerRing:
    """Ring over Python ``int``. Has no division, so it is not a Field."""

    @property
    def addition_identity(self) -> int:
        return 0

    @property
    def multiplication_identity(self) -> int:
        return 1

    def add(self, a: int, b: int) -> int:
        return a + b

    def multiply(self, a: int, b: int) -> int:
        return a * b

    def negate(self, a: int) -> int:
        return -a


INTEGERS = IntegerRing()
