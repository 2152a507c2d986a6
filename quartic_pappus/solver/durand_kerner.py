"""Durand–Kerner (Weierstrass) simultaneous iteration for the quartic family."""

from __future__ import annotations

import logging
import math
from typing import List, Optional, Sequence

from ..complex_num import ONE, Complex, div, magnitude, mul, sub
from ..logging_utils import apply_debug_logging
from ..polynomial import DEGREE, poly_eval
from .config import (
    DEFAULT_MAX_ITER,
    DEFAULT_TOL,
    DENOMINATOR_REFERENCE,
    GUARDED_DENOM_SQ_FLOOR,
    REFERENCE_DENOM_EPS,
    UPDATE_JACOBI,
)
from .model import RootSolution, SolveOptions

logger = logging.getLogger(__name__)


def initial_radius(m: Complex) -> float:
    """Radius of the starting circle, ``1 + |Re m| + |Im m|``."""

    return 1.0 + abs(m.re) + abs(m.im)


def initial_guesses(m: Complex) -> List[Complex]:
    radius = initial_radius(m)
    guesses = []
    for k in range(DEGREE):
        theta = 2.0 * math.pi * k / DEGREE
        guesses.append(Complex(radius * math.cos(theta), radius * math.sin(theta)))
    return guesses


def _difference_product(index: int, estimates: Sequence[Complex]) -> Complex:
    xi = estimates[index]
    denom = ONE
    for j, xj in enumerate(estimates):
        if j != index:
            denom = mul(denom, sub(xi, xj))
    return denom


def _correction(px: Complex, denom: Complex, policy: str) -> Complex:
    """Return the Weierstrass correction ``p(x_i) / prod_{j != i}(x_i - x_j)``.

    The ``"reference"`` policy keeps the historical stabilisation for a
    vanishing product: each component of ``p(x_i)`` is divided by the real
    part of the product (or by ``|product| + eps`` when that is zero). This is
    not complex division and steers the iterate arbitrarily; the default
    ``"guarded"`` policy divides properly with a floor on ``|product|**2``.
    """

    if policy == DENOMINATOR_REFERENCE:
        denom_abs = magnitude(denom)
        if denom_abs < REFERENCE_DENOM_EPS:
            divisor = denom.re if denom.re != 0.0 else denom_abs + REFERENCE_DENOM_EPS
            return Complex(px.re / divisor, px.im / divisor)
        return div(px, denom)
    return div(px, denom, floor=GUARDED_DENOM_SQ_FLOOR)


def roots_durand_kerner(
    m: Complex,
    max_iter: Optional[int] = None,
    tol: Optional[float] = None,
    *,
    options: Optional[SolveOptions] = None,
) -> RootSolution:
    """Find the four roots of ``p_m`` simultaneously.

    ``max_iter``/``tol`` and ``options`` are mutually exclusive; passing both
    raises ``ValueError``. The iteration stops once the largest correction of
    a pass drops below ``tol`` or after ``max_iter`` passes. It never fails to
    return: when the cap is exhausted the current estimates are returned and
    ``converged`` is false. Non-finite ``m`` propagates ``nan``/``inf`` into
    the roots.
    """

    if options is None:
        options = SolveOptions(
            max_iter=DEFAULT_MAX_ITER if max_iter is None else max_iter,
            tol=DEFAULT_TOL if tol is None else tol,
        )
    elif max_iter is not None or tol is not None:
        raise ValueError("pass either max_iter/tol or options, not both")

    roots = initial_guesses(m)
    jacobi = options.update == UPDATE_JACOBI
    moved = math.inf
    iterations = 0

    for iterations in range(1, options.max_iter + 1):
        moved = 0.0
        snapshot = tuple(roots) if jacobi else roots
        for i in range(DEGREE):
            xi = snapshot[i]
            px = poly_eval(xi, m)
            denom = _difference_product(i, snapshot)
            delta = _correction(px, denom, options.denominator)
            roots[i] = sub(xi, delta)
            step = magnitude(delta)
            # nan is sticky so a blown-up pass never reads as converged
            if math.isnan(step) or step > moved:
                moved = step
        logger.debug("durand-kerner pass %d: max correction %.3e", iterations, moved)
        if moved < options.tol:
            break

    solution = RootSolution(
        roots=tuple(roots),  # type: ignore[arg-type]
        iterations=iterations,
        max_correction=moved,
        options=options,
    )
    if solution.converged:
        logger.info(
            "Durand-Kerner converged for m=(%g, %g) after %d passes (max correction %.3e)",
            m.re,
            m.im,
            iterations,
            moved,
        )
    else:
        logger.warning(
            "Durand-Kerner stopped without converging for m=(%g, %g) after %d passes (max correction %.3e)",
            m.re,
            m.im,
            iterations,
            moved,
        )
    return solution


apply_debug_logging(
    globals(),
    logger=logger,
    skip={"_correction", "_difference_product"},
)
