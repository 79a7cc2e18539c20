"""Tolerance configuration for approximate comparisons."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Tolerance:
    """Immutable tolerance settings used by ``Vector.is_close``.

    Attributes:
        rel_tol: Maximum relative difference, as in ``math.isclose``.
        abs_tol: Minimum absolute difference floor, useful near zero.
    """

    rel_tol: float = 1e-9
    abs_tol: float = 0.0

    def __post_init__(self) -> None:
        if self.rel_tol < 0.0:
            raise ValueError(f"rel_tol must be >= 0, got {self.rel_tol}")
        if self.abs_tol < 0.0:
            raise ValueError(f"abs_tol must be >= 0, got {self.abs_tol}")


DEFAULT_TOLERANCE = Tolerance()
