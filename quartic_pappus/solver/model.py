"""Core data structures for the root solver."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from ..complex_num import Complex
from .config import (
    DEFAULT_MAX_ITER,
    DEFAULT_TOL,
    DENOMINATOR_GUARDED,
    DENOMINATOR_POLICIES,
    UPDATE_SCHEMES,
    UPDATE_SEQUENTIAL,
)

Roots = Tuple[Complex, Complex, Complex, Complex]


@dataclass(frozen=True)
class SolveOptions:
    """Tuning knobs for :func:`quartic_pappus.solver.solve_roots`.

    ``update`` selects how a pass reads the other estimates: ``"sequential"``
    updates in place in index order, ``"jacobi"`` reads a start-of-pass
    snapshot. ``denominator`` selects how a vanishing product of differences
    is handled (see ``durand_kerner._correction``).
    """

    max_iter: int = DEFAULT_MAX_ITER
    tol: float = DEFAULT_TOL
    update: str = UPDATE_SEQUENTIAL
    denominator: str = DENOMINATOR_GUARDED

    def __post_init__(self) -> None:
        if int(self.max_iter) != self.max_iter or self.max_iter < 1:
            raise ValueError(f"max_iter must be a positive integer, got {self.max_iter!r}")
        if not self.tol > 0.0:
            raise ValueError(f"tol must be positive, got {self.tol!r}")
        if self.update not in UPDATE_SCHEMES:
            raise ValueError(
                f"unknown update scheme {self.update!r} (expected one of {', '.join(UPDATE_SCHEMES)})"
            )
        if self.denominator not in DENOMINATOR_POLICIES:
            raise ValueError(
                f"unknown denominator policy {self.denominator!r} "
                f"(expected one of {', '.join(DENOMINATOR_POLICIES)})"
            )
        object.__setattr__(self, "max_iter", int(self.max_iter))
        object.__setattr__(self, "tol", float(self.tol))


@dataclass(frozen=True)
class RootSolution:
    """Roots in solver order plus the diagnostics of the final pass."""

    roots: Roots
    iterations: int
    max_correction: float
    options: SolveOptions

    @property
    def converged(self) -> bool:
        return self.max_correction < self.options.tol

    def __iter__(self):
        return iter(self.roots)

    def __len__(self) -> int:
        return len(self.roots)

    def __getitem__(self, index: int) -> Complex:
        return self.roots[index]


__all__ = ["RootSolution", "Roots", "SolveOptions"]
