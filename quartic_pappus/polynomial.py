"""The quartic family ``p_m(x) = x^4 + m x^3 + m^2 x^2 + m^3 x + m^4``."""

from __future__ import annotations

from typing import List, Sequence

import numpy as np

from .complex_num import Complex, add, magnitude, mul

DEGREE = 4


def poly_eval(x: Complex, m: Complex) -> Complex:
    """Evaluate ``p_m`` at ``x``.

    Powers of ``x`` and ``m`` are built by successive multiplication, which
    keeps the evaluation to a fixed count of complex products.
    """

    x2 = mul(x, x)
    x3 = mul(x2, x)
    x4 = mul(x3, x)
    m2 = mul(m, m)
    m3 = mul(m2, m)
    m4 = mul(m2, m2)

    total = add(x4, mul(m, x3))
    total = add(total, mul(m2, x2))
    total = add(total, mul(m3, x))
    return add(total, m4)


def coefficients(m: Complex) -> np.ndarray:
    """Return ``[1, m, m^2, m^3, m^4]`` (highest degree first) as a complex array."""

    mc = m.to_complex()
    return np.array([1.0 + 0.0j, mc, mc**2, mc**3, mc**4], dtype=complex)


def residuals(roots: Sequence[Complex], m: Complex) -> List[float]:
    """Return ``|p_m(r)|`` for every ``r`` in ``roots``."""

    return [magnitude(poly_eval(root, m)) for root in roots]


__all__ = ["DEGREE", "coefficients", "poly_eval", "residuals"]
