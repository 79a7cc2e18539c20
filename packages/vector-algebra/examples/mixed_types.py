"""Mixed types -- compatible vectors of different concrete types.

Demonstrates:
- Two unrelated vector types sharing the rational field
- Operators keep the left operand's type
- Picking the result type explicitly with ``into=``
- Integer vectors: Ring-only arithmetic with negation from the ring
- Incompatible scalar algebras are rejected

Run: python -m examples.mixed_types
"""

from __future__ import annotations

from dataclasses import dataclass
from fractions import Fraction
from typing import Iterable

from vector_algebra import (
    INTEGERS,
    RATIONALS,
    IncompatibleVectorError,
    NormedVector,
    Vector,
    collect_scalars,
    operators,
)


@dataclass(frozen=True, eq=False)
class Point(NormedVector[Fraction]):
    scalar = RATIONALS
    x: Fraction
    y: Fraction

    @property
    def dimensions(self) -> int:
        return 2

    def __getitem__(self, index: int) -> Fraction:
        return (self.x, self.y)[index]

    @classmethod
    def from_sequence(cls, values: Iterable[Fraction]) -> Point:
        x, y = collect_scalars(values, 2)
        return cls(x, y)


@dataclass(frozen=True, eq=False)
class Coords(NormedVector[Fraction]):
    scalar = RATIONALS
    values: tuple[Fraction, ...]

    @property
    def dimensions(self) -> int:
        return len(self.values)

    def __getitem__(self, index: int) -> Fraction:
        return self.values[index]

    @classmethod
    def from_sequence(cls, values: Iterable[Fraction]) -> Coords:
        return cls(collect_scalars(values))


@dataclass(frozen=True, eq=False)
class Steps(Vector[int]):
    scalar = INTEGERS
    values: tuple[int, ...]

    @property
    def dimensions(self) -> int:
        return len(self.values)

    def __getitem__(self, index: int) -> int:
        return self.values[index]

    @classmethod
    def from_sequence(cls, values: Iterable[int]) -> Steps:
        return cls(collect_scalars(values))


def main() -> None:
    print("=== Mixed types ===\n")

    p = Point(Fraction(1, 2), Fraction(3, 2))
    c = Coords((Fraction(1), Fraction(-1, 3)))

    print(f"  p + c              = {p + c}")
    print(f"  c + p              = {c + p}")
    print(f"  add(p, c, Coords)  = {operators.add(p, c, into=Coords)}")
    print(f"  p == c.convert(Point)? {p == c.convert(Point)}")
    print(f"  |Point(3, 4)|      = {Point(Fraction(3), Fraction(4)).magnitude}")
    print(f"  unit(Point(3, 4))  = {Point(Fraction(3), Fraction(4)).unit}")

    s = Steps((2, -5, 7))
    print(f"\n  -s                 = {-s}")
    print(f"  s . s              = {s.dot(s)}")

    try:
        p + Steps((1, 1))
    except IncompatibleVectorError as exc:
        print(f"\n  rejected: {exc}")


if __name__ == "__main__":
    main()
