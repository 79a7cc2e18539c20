"""Tests for the operator layer: dunders and the free dispatchers."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

import pytest

from vector_algebra import (
    INTEGERS,
    REALS,
    DimensionMismatchError,
    IncompatibleVectorError,
    NormedVector,
    Vector,
    collect_scalars,
    operators,
)


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


@dataclass(frozen=True, eq=False)
class VecN(NormedVector[float]):
    scalar = REALS
    values: tuple[float, ...]

    @property
    def dimensions(self) -> int:
        return len(self.values)

    def __getitem__(self, index: int) -> float:
        return self.values[index]

    @classmethod
    def from_sequence(cls, values: Iterable[float]) -> VecN:
        return cls(collect_scalars(values))


@dataclass(frozen=True, eq=False)
class IntVec(Vector[int]):
    scalar = INTEGERS
    values: tuple[int, ...]

    @property
    def dimensions(self) -> int:
        return len(self.values)

    def __getitem__(self, index: int) -> int:
        return self.values[index]

    @classmethod
    def from_sequence(cls, values: Iterable[int]) -> IntVec:
        return cls(collect_scalars(values))


class TestAdd:
    def test_same_type(self) -> None:
        assert Vec2(1.0, 0.0) + Vec2(0.0, 1.0) == Vec2(1.0, 1.0)

    def test_mixed_types_take_left_type(self) -> None:
        left = Vec2(1.0, 2.0) + VecN((3.0, 4.0))
        right = VecN((3.0, 4.0)) + Vec2(1.0, 2.0)
        assert isinstance(left, Vec2)
        assert isinstance(right, VecN)
        assert left == right

    def test_free_function_into(self) -> None:
        result = operators.add(Vec2(1.0, 2.0), VecN((3.0, 4.0)), into=VecN)
        assert isinstance(result, VecN)
        assert result.values == (4.0, 6.0)

    def test_non_vector_is_type_error(self) -> None:
        with pytest.raises(TypeError):
            Vec2(1.0, 2.0) + (1.0, 2.0)  # type: ignore[operator]

    def test_dimension_mismatch(self) -> None:
        with pytest.raises(DimensionMismatchError):
            VecN((1.0, 2.0, 3.0)) + VecN((1.0, 2.0))

    def test_incompatible_algebras(self) -> None:
        with pytest.raises(IncompatibleVectorError):
            Vec2(1.0, 2.0) + IntVec((1, 2))


class TestSubtract:
    def test_same_type(self) -> None:
        assert Vec2(5.0, 3.0) - Vec2(1.0, 2.0) == Vec2(4.0, 1.0)

    def test_integer(self) -> None:
        assert IntVec((5, 3, 1)) - IntVec((1, 2, 1)) == IntVec((4, 1, 0))

    def test_mixed_types(self) -> None:
        result = VecN((5.0, 5.0)) - Vec2(1.0, 2.0)
        assert isinstance(result, VecN)
        assert result.values == (4.0, 3.0)

    def test_free_function_into(self) -> None:
        result = operators.subtract(VecN((5.0, 5.0)), Vec2(1.0, 2.0), into=Vec2)
        assert result == Vec2(4.0, 3.0)
        assert isinstance(result, Vec2)

    def test_non_vector_is_type_error(self) -> None:
        with pytest.raises(TypeError):
            Vec2(1.0, 2.0) - 1.0  # type: ignore[operator]


class TestMultiply:
    def test_vector_times_scalar(self) -> None:
        assert Vec2(1.0, 2.0) * 3.0 == Vec2(3.0, 6.0)

    def test_scalar_times_vector(self) -> None:
        assert 3.0 * Vec2(1.0, 2.0) == Vec2(3.0, 6.0)

    def test_integer_scalar(self) -> None:
        assert 2 * IntVec((1, 2)) == IntVec((2, 4))

    def test_piecewise(self) -> None:
        assert Vec2(2.0, 3.0) * Vec2(4.0, 5.0) == Vec2(8.0, 15.0)

    def test_piecewise_mixed_types(self) -> None:
        result = VecN((2.0, 3.0)) * Vec2(4.0, 5.0)
        assert isinstance(result, VecN)
        assert result.values == (8.0, 15.0)

    def test_free_function_into(self) -> None:
        result = operators.multiply(VecN((2.0, 3.0)), Vec2(4.0, 5.0), into=Vec2)
        assert result == Vec2(8.0, 15.0)

    def test_free_function_scalar_either_side(self) -> None:
        assert operators.multiply(2.0, Vec2(1.0, 1.0)) == Vec2(2.0, 2.0)
        assert operators.multiply(Vec2(1.0, 1.0), 2.0) == Vec2(2.0, 2.0)

    def test_free_function_needs_a_vector(self) -> None:
        with pytest.raises(TypeError):
            operators.multiply(2.0, 3.0)

    def test_non_vector_operand_goes_to_ring_unchecked(self) -> None:
        result = IntVec((1, 2)) * [0]
        assert isinstance(result, IntVec)
        assert result.values == ([0], [0, 0])

    def test_piecewise_dimension_mismatch(self) -> None:
        with pytest.raises(DimensionMismatchError):
            VecN((1.0,)) * VecN((1.0, 2.0))


class TestNegate:
    def test_unary_minus(self) -> None:
        assert -Vec2(1.0, -2.0) == Vec2(-1.0, 2.0)

    def test_free_function(self) -> None:
        assert operators.negate(IntVec((3, -4))) == IntVec((-3, 4))

    def test_keeps_type(self) -> None:
        assert isinstance(-VecN((1.0,)), VecN)


class TestEquality:
    def test_equal(self) -> None:
        assert Vec2(1.0, 2.0) == Vec2(1.0, 2.0)

    def test_not_equal(self) -> None:
        assert Vec2(1.0, 2.0) != Vec2(1.0, 3.0)

    def test_across_compatible_types(self) -> None:
        assert Vec2(1.0, 2.0) == VecN((1.0, 2.0))
        assert VecN((1.0, 2.0)) == Vec2(1.0, 2.0)

    def test_dimension_mismatch_is_false(self) -> None:
        assert not VecN((1.0, 2.0, 3.0)) == VecN((1.0, 2.0))
        assert VecN((1.0, 2.0, 3.0)) != VecN((1.0, 2.0))

    def test_different_algebras_not_equal(self) -> None:
        assert Vec2(1.0, 2.0) != IntVec((1, 2))

    def test_non_vector_not_equal(self) -> None:
        assert Vec2(1.0, 2.0) != (1.0, 2.0)
        assert Vec2(1.0, 2.0) != "Vec2"

    def test_free_function(self) -> None:
        assert operators.equal(VecN((1.0,)), VecN((1.0,)))
        assert not operators.equal(VecN((1.0,)), VecN((1.0, 1.0)))
