"""Implicit lines, intersections and collinearity in the complex plane.

A complex value ``x + iy`` is read as the point ``(x, y)``; a line is the
coefficient triple of ``a*x + b*y + c = 0``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from .complex_num import Complex

logger = logging.getLogger(__name__)

PARALLEL_EPS = 1e-12
COLLINEAR_EPS = 1e-6


@dataclass(frozen=True)
class Line:
    a: float
    b: float
    c: float

    @property
    def is_degenerate(self) -> bool:
        """``True`` for the zero line produced by two coincident points."""

        return self.a == 0.0 and self.b == 0.0

    def evaluate(self, z: Complex) -> float:
        return self.a * z.re + self.b * z.im + self.c

    def as_tuple(self) -> Tuple[float, float, float]:
        return self.a, self.b, self.c


@dataclass(frozen=True)
class CollinearityResult:
    points: Tuple[Complex, Complex, Complex]
    determinant: float
    collinear: bool
    tolerance: float


def line_from_points(z1: Complex, z2: Complex) -> Line:
    """Return the line through ``z1`` and ``z2``.

    Coincident points give the zero line ``(0, 0, 0)``; callers are expected
    to pass distinct points.
    """

    x1, y1 = z1.re, z1.im
    x2, y2 = z2.re, z2.im
    return Line(y1 - y2, x2 - x1, x1 * y2 - x2 * y1)


def intersect_lines(l1: Line, l2: Line, *, eps: float = PARALLEL_EPS) -> Optional[Complex]:
    """Intersect two lines with Cramer's rule; ``None`` when ``|det| < eps``."""

    det = l1.a * l2.b - l2.a * l1.b
    if abs(det) < eps:
        logger.debug("Lines %s and %s are parallel or coincident (det=%.3e)", l1, l2, det)
        return None
    x = (l1.b * l2.c - l2.b * l1.c) / det
    y = (l2.a * l1.c - l1.a * l2.c) / det
    return Complex(x, y)


def collinearity_determinant(z1: Complex, z2: Complex, z3: Complex) -> float:
    """Twice the signed area of the triangle ``z1 z2 z3``."""

    return z1.re * (z2.im - z3.im) + z2.re * (z3.im - z1.im) + z3.re * (z1.im - z2.im)


def check_collinear(
    z1: Complex, z2: Complex, z3: Complex, *, eps: float = COLLINEAR_EPS
) -> CollinearityResult:
    det = collinearity_determinant(z1, z2, z3)
    return CollinearityResult(points=(z1, z2, z3), determinant=det, collinear=abs(det) < eps, tolerance=eps)


__all__ = [
    "COLLINEAR_EPS",
    "CollinearityResult",
    "Line",
    "PARALLEL_EPS",
    "check_collinear",
    "collinearity_determinant",
    "intersect_lines",
    "line_from_points",
]
