"""Pappus-style cross construction on the roots of the quartic family.

Two labelled triples ``(A1, B1, C1)`` and ``(A2, B2, C2)`` are paired
crosswise::

    P = A1B2 ∩ A2B1
    Q = B1C2 ∩ B2C1
    R = C1A2 ∩ C2A1

and the three intersection points are tested for collinearity. For the
quartic roots the triples are taken with the fixed overlapping mapping
:data:`TRIPLE_INDICES`. That mapping makes ``B1 == A2`` and ``C1 == B2``, so
the lines ``A2B1`` and ``B2C1`` collapse to the zero line and ``P`` and ``Q``
come out absent; only ``R`` survives.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Optional, Sequence, Tuple

from .complex_num import Complex
from .geometry import (
    COLLINEAR_EPS,
    CollinearityResult,
    Line,
    check_collinear,
    intersect_lines,
    line_from_points,
)
from .logging_utils import apply_debug_logging
from .solver import RootSolution, SolveOptions, solve_roots

logger = logging.getLogger(__name__)

Triple = Tuple[Complex, Complex, Complex]

# (A1, B1, C1) = roots[0, 1, 2]; (A2, B2, C2) = roots[1, 2, 3]
TRIPLE_INDICES: Tuple[Tuple[int, int, int], Tuple[int, int, int]] = ((0, 1, 2), (1, 2, 3))

POINT_LABELS = ("P", "Q", "R")


@dataclass(frozen=True)
class CrossConstruction:
    """Lines and intersection points of the cross pairing of two triples."""

    first: Triple
    second: Triple
    lines: Dict[str, Line]
    base_lines: Tuple[Line, Line]
    p: Optional[Complex]
    q: Optional[Complex]
    r: Optional[Complex]
    collinearity: Optional[CollinearityResult]

    @property
    def points(self) -> Tuple[Optional[Complex], Optional[Complex], Optional[Complex]]:
        return self.p, self.q, self.r

    @property
    def present_points(self) -> Tuple[Complex, ...]:
        return tuple(point for point in self.points if point is not None)

    @property
    def determinant(self) -> Optional[float]:
        return None if self.collinearity is None else self.collinearity.determinant

    @property
    def collinear(self) -> Optional[bool]:
        return None if self.collinearity is None else self.collinearity.collinear

    @property
    def pappus_line(self) -> Optional[Line]:
        """Line through ``P`` and ``Q`` when the three points were found collinear."""

        if not self.collinear:
            return None
        return line_from_points(self.p, self.q)  # type: ignore[arg-type]


@dataclass(frozen=True)
class ConstructionResult:
    """Roots of ``p_m`` together with the cross construction built on them."""

    m: Complex
    solution: RootSolution
    construction: CrossConstruction

    @property
    def roots(self) -> Tuple[Complex, ...]:
        return self.solution.roots

    @property
    def points(self):
        return self.construction.points

    @property
    def determinant(self) -> Optional[float]:
        return self.construction.determinant

    @property
    def collinear(self) -> Optional[bool]:
        return self.construction.collinear


def _as_triple(points: Sequence[Complex], label: str) -> Triple:
    if len(points) != 3:
        raise ValueError(f"{label} triple needs exactly 3 points, got {len(points)}")
    return points[0], points[1], points[2]


def cross_construction(
    first: Sequence[Complex],
    second: Sequence[Complex],
    *,
    eps: float = COLLINEAR_EPS,
) -> CrossConstruction:
    """Pair ``first = (A1, B1, C1)`` with ``second = (A2, B2, C2)`` crosswise."""

    a1, b1, c1 = _as_triple(first, "first")
    a2, b2, c2 = _as_triple(second, "second")

    lines = {
        "A1B2": line_from_points(a1, b2),
        "A2B1": line_from_points(a2, b1),
        "B1C2": line_from_points(b1, c2),
        "B2C1": line_from_points(b2, c1),
        "C1A2": line_from_points(c1, a2),
        "C2A1": line_from_points(c2, a1),
    }
    p = intersect_lines(lines["A1B2"], lines["A2B1"])
    q = intersect_lines(lines["B1C2"], lines["B2C1"])
    r = intersect_lines(lines["C1A2"], lines["C2A1"])

    collinearity = None
    if p is not None and q is not None and r is not None:
        collinearity = check_collinear(p, q, r, eps=eps)
        logger.info(
            "Cross construction: det(P,Q,R)=%.6e collinear=%s",
            collinearity.determinant,
            collinearity.collinear,
        )
    else:
        missing = [label for label, point in zip(POINT_LABELS, (p, q, r)) if point is None]
        logger.info("Cross construction: no verdict, missing intersection(s) %s", ", ".join(missing))

    return CrossConstruction(
        first=(a1, b1, c1),
        second=(a2, b2, c2),
        lines=lines,
        base_lines=(line_from_points(a1, c1), line_from_points(a2, c2)),
        p=p,
        q=q,
        r=r,
        collinearity=collinearity,
    )


def labelled_triples(roots: Sequence[Complex]) -> Tuple[Triple, Triple]:
    """Split four roots into ``(A1, B1, C1)`` and ``(A2, B2, C2)`` by :data:`TRIPLE_INDICES`."""

    if len(roots) != 4:
        raise ValueError(f"expected exactly 4 roots, got {len(roots)}")
    first, second = TRIPLE_INDICES
    return (
        (roots[first[0]], roots[first[1]], roots[first[2]]),
        (roots[second[0]], roots[second[1]], roots[second[2]]),
    )


def build_construction(roots: Sequence[Complex], *, eps: float = COLLINEAR_EPS) -> CrossConstruction:
    first, second = labelled_triples(roots)
    return cross_construction(first, second, eps=eps)


def run_construction(
    m: Complex,
    options: Optional[SolveOptions] = None,
    *,
    eps: float = COLLINEAR_EPS,
) -> ConstructionResult:
    """Solve ``p_m`` and run the cross construction on its roots."""

    solution = solve_roots(m, options)
    construction = build_construction(solution.roots, eps=eps)
    return ConstructionResult(m=m, solution=solution, construction=construction)


apply_debug_logging(globals(), logger=logger, skip={"_as_triple"})


__all__ = [
    "ConstructionResult",
    "CrossConstruction",
    "POINT_LABELS",
    "TRIPLE_INDICES",
    "Triple",
    "build_construction",
    "cross_construction",
    "labelled_triples",
    "run_construction",
]
