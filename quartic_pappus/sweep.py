"""Polar parameterisation of ``m`` and angle sweeps over the construction."""

from __future__ import annotations

import logging
import math
from typing import Iterable, List, Optional

import numpy as np

from .complex_num import Complex
from .construction import ConstructionResult, run_construction
from .solver import SolveOptions

logger = logging.getLogger(__name__)


def parameter_from_polar(magnitude: float, angle: float) -> Complex:
    """Return ``m = magnitude * (cos(angle), sin(angle))``."""

    return Complex(magnitude * math.cos(angle), magnitude * math.sin(angle))


def sweep(
    magnitude: float,
    angles: Iterable[float],
    options: Optional[SolveOptions] = None,
) -> List[ConstructionResult]:
    """Run the construction for ``m`` on the circle of radius ``magnitude`` at each angle."""

    options = options or SolveOptions()
    results = [run_construction(parameter_from_polar(magnitude, float(theta)), options) for theta in angles]
    verdicts = sum(1 for result in results if result.collinear is not None)
    logger.info(
        "Swept %d angle(s) at |m|=%g: %d with a collinearity verdict", len(results), magnitude, verdicts
    )
    return results


def uniform_angles(count: int) -> np.ndarray:
    if count < 1:
        raise ValueError(f"sweep needs at least one angle, got count={count}")
    return np.linspace(0.0, 2.0 * math.pi, num=count, endpoint=False)


def sweep_uniform(
    magnitude: float,
    count: int,
    options: Optional[SolveOptions] = None,
) -> List[ConstructionResult]:
    """Sweep ``count`` evenly spaced angles of ``[0, 2π)``."""

    return sweep(magnitude, uniform_angles(count), options)


__all__ = ["parameter_from_polar", "sweep", "sweep_uniform", "uniform_angles"]
