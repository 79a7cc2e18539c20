"""Basics -- declaring a vector type and using the inherited arithmetic.

Demonstrates:
- Conforming a frozen dataclass to NormedVector over the real field
- Operators (+, -, *, unary -, ==) and the named methods behind them
- Magnitude, unit vector, distance
- The explicit error for normalizing a zero vector

Run: python -m examples.basics
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from vector_algebra import REALS, NormedVector, ZeroMagnitudeError, collect_scalars


# A concrete type only supplies storage, indexing and a constructor.
@dataclass(frozen=True, eq=False)
class Vec2(NormedVector[float]):
    scalar = REALS
    x: float
    y: float

    @property
    def dimensions(self) -> int:
        return 2

    def __getitem__(self, index: int) -> float:
        return (self.x, self.y)[index]

    @classmethod
    def from_sequence(cls, values: Iterable[float]) -> Vec2:
        x, y = collect_scalars(values, 2)
        return cls(x, y)


def main() -> None:
    print("=== Basics ===\n")

    a = Vec2(3.0, 4.0)
    b = Vec2(1.0, 0.0)

    print(f"  a          = {a}")
    print(f"  b          = {b}")
    print(f"  a + b      = {a + b}")
    print(f"  a - b      = {a - b}")
    print(f"  2 * a      = {2.0 * a}")
    print(f"  a * b      = {a * b}  (piecewise)")
    print(f"  -a         = {-a}")
    print(f"  |a|^2      = {a.squared_magnitude}")
    print(f"  |a|        = {a.magnitude}")
    print(f"  unit(a)    = {a.unit}")
    print(f"  dist(a, b) = {a.distance_to(b):.4f}")

    try:
        Vec2(0.0, 0.0).unit
    except ZeroMagnitudeError as exc:
        print(f"\n  zero vector: {exc}")


if __name__ == "__main__":
    main()
