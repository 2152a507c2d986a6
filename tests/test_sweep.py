import math

import numpy as np
import pytest

from quartic_pappus import Complex, SolveOptions, parameter_from_polar, sweep, sweep_uniform
from quartic_pappus.sweep import uniform_angles


def test_parameter_from_polar():
    m = parameter_from_polar(2.0, math.pi / 2)
    assert m.re == pytest.approx(0.0, abs=1e-15)
    assert m.im == pytest.approx(2.0)
    assert parameter_from_polar(1.0, 0.0) == Complex(1.0, 0.0)


def test_uniform_angles_exclude_full_turn():
    angles = uniform_angles(4)
    assert np.allclose(angles, [0.0, math.pi / 2, math.pi, 3 * math.pi / 2])


def test_uniform_angles_reject_empty_sweep():
    with pytest.raises(ValueError):
        uniform_angles(0)


def test_sweep_runs_one_construction_per_angle():
    angles = [0.0, 0.3, 1.7]
    results = sweep(1.5, angles)

    assert len(results) == len(angles)
    for theta, result in zip(angles, results):
        assert result.m == parameter_from_polar(1.5, theta)
        assert result.solution.converged
        # the overlapping root mapping never yields P or Q
        assert result.points[0] is None
        assert result.points[1] is None
        assert result.collinear is None


def test_sweep_uniform_forwards_options():
    options = SolveOptions(max_iter=3)
    results = sweep_uniform(1.0, 5, options)
    assert len(results) == 5
    assert all(result.solution.options is options for result in results)
    assert all(result.solution.iterations <= 3 for result in results)
