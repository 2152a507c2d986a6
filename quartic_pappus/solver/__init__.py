"""Solver façade for the quartic family."""

from __future__ import annotations

import logging
from typing import Optional

from ..complex_num import Complex
from .config import (
    DEFAULT_MAX_ITER,
    DEFAULT_TOL,
    DENOMINATOR_GUARDED,
    DENOMINATOR_POLICIES,
    DENOMINATOR_REFERENCE,
    UPDATE_JACOBI,
    UPDATE_SCHEMES,
    UPDATE_SEQUENTIAL,
)
from .durand_kerner import initial_guesses, initial_radius, roots_durand_kerner
from .model import RootSolution, Roots, SolveOptions

logger = logging.getLogger(__name__)


def solve_roots(m: Complex, options: Optional[SolveOptions] = None) -> RootSolution:
    """Return the four roots of ``p_m`` using ``options`` (defaults when ``None``)."""

    options = options or SolveOptions()
    logger.debug("Solving quartic for m=%r with %s", m, options)
    return roots_durand_kerner(m, options=options)


__all__ = [
    "DEFAULT_MAX_ITER",
    "DEFAULT_TOL",
    "DENOMINATOR_GUARDED",
    "DENOMINATOR_POLICIES",
    "DENOMINATOR_REFERENCE",
    "RootSolution",
    "Roots",
    "SolveOptions",
    "UPDATE_JACOBI",
    "UPDATE_SCHEMES",
    "UPDATE_SEQUENTIAL",
    "initial_guesses",
    "initial_radius",
    "roots_durand_kerner",
    "solve_roots",
]
