import cmath
import math
from typing import Sequence

import numpy as np
import pytest

from quartic_pappus import Complex, poly_eval
from quartic_pappus.solver import (
    RootSolution,
    SolveOptions,
    initial_guesses,
    initial_radius,
    roots_durand_kerner,
    solve_roots,
)
from quartic_pappus.solver.durand_kerner import _correction


def _expected_roots(m: complex) -> Sequence[complex]:
    # x^4 + m x^3 + m^2 x^2 + m^3 x + m^4 = (x^5 - m^5) / (x - m)
    return [m * cmath.exp(2j * math.pi * k / 5) for k in range(1, 5)]


def _assert_matches(roots, expected, tol):
    remaining = list(expected)
    for root in roots:
        z = root.to_complex()
        nearest = min(remaining, key=lambda e: abs(e - z))
        assert abs(nearest - z) < tol
        remaining.remove(nearest)
    assert not remaining


def test_initial_guesses_lie_on_enclosing_circle():
    m = Complex(0.5, -1.5)
    assert initial_radius(m) == pytest.approx(3.0)
    guesses = initial_guesses(m)
    assert len(guesses) == 4
    assert guesses[0] == Complex(3.0, 0.0)
    for k, guess in enumerate(guesses):
        assert abs(guess) == pytest.approx(3.0)
        assert math.atan2(guess.im, guess.re) % (2 * math.pi) == pytest.approx(
            (math.pi / 2) * k, abs=1e-12
        )


def test_m_zero_collapses_to_origin():
    solution = solve_roots(Complex(0.0))

    assert len(solution) == 4
    assert solution.converged
    assert solution.iterations < 200
    for root in solution:
        assert abs(root) < 1e-9


def test_reference_denominator_stalls_at_m_zero():
    guarded = solve_roots(Complex(0.0))
    reference = solve_roots(Complex(0.0), SolveOptions(denominator="reference"))

    assert not reference.converged
    assert reference.iterations == 200
    # the estimates still approach the quadruple root, only much less closely
    assert max(abs(root) for root in reference) < 1e-6
    assert max(abs(root) for root in reference) > max(abs(root) for root in guarded)


def test_m_one_gives_primitive_fifth_roots_of_unity():
    m = Complex(1.0)
    solution = solve_roots(m)

    assert solution.converged
    assert solution.iterations < 200
    _assert_matches(solution.roots, _expected_roots(1.0), 1e-9)
    for root in solution.roots:
        assert abs(poly_eval(root, m)) < 1e-9


@pytest.mark.parametrize("seed", [3, 17, 42])
def test_random_parameters_satisfy_polynomial(seed):
    rng = np.random.default_rng(seed)
    for _ in range(10):
        radius = rng.uniform(0.25, 2.5)
        theta = rng.uniform(0.0, 2.0 * math.pi)
        m = Complex(radius * math.cos(theta), radius * math.sin(theta))

        solution = solve_roots(m)

        assert solution.converged
        for root in solution:
            assert abs(poly_eval(root, m)) < 1e-6
        _assert_matches(solution.roots, _expected_roots(m.to_complex()), 1e-8)


def test_roots_agree_with_numpy_companion_matrix():
    from quartic_pappus import coefficients

    m = Complex(-0.7, 1.1)
    solution = solve_roots(m)
    _assert_matches(solution.roots, list(np.roots(coefficients(m))), 1e-8)


def test_repeated_calls_are_bit_identical():
    m = Complex(0.8, 0.6)
    first = solve_roots(m, SolveOptions(max_iter=150, tol=1e-13))
    second = solve_roots(m, SolveOptions(max_iter=150, tol=1e-13))
    assert first.roots == second.roots
    assert first.iterations == second.iterations
    assert first.max_correction == second.max_correction


def test_keyword_signature_matches_options():
    m = Complex(1.0, 1.0)
    direct = roots_durand_kerner(m, max_iter=50, tol=1e-10)
    via_options = solve_roots(m, SolveOptions(max_iter=50, tol=1e-10))
    assert direct.roots == via_options.roots
    assert direct.options == via_options.options


def test_explicit_limits_and_options_are_mutually_exclusive():
    with pytest.raises(ValueError):
        roots_durand_kerner(Complex(1.0), 10, options=SolveOptions())
    with pytest.raises(ValueError):
        roots_durand_kerner(Complex(1.0), tol=1e-6, options=SolveOptions())


def test_jacobi_update_reaches_the_same_roots():
    m = Complex(0.6, 0.9)
    sequential = solve_roots(m)
    jacobi = solve_roots(m, SolveOptions(update="jacobi"))
    assert jacobi.converged
    _assert_matches(jacobi.roots, _expected_roots(m.to_complex()), 1e-9)
    _assert_matches(sequential.roots, [r.to_complex() for r in jacobi.roots], 1e-9)


def test_reference_denominator_matches_guarded_for_separated_roots():
    m = Complex(1.0)
    guarded = solve_roots(m)
    reference = solve_roots(m, SolveOptions(denominator="reference"))
    assert guarded.roots == reference.roots


def test_iteration_cap_returns_best_effort_without_raising():
    solution = solve_roots(Complex(1.0), SolveOptions(max_iter=1))
    assert isinstance(solution, RootSolution)
    assert solution.iterations == 1
    assert len(solution.roots) == 4
    assert not solution.converged
    assert solution.max_correction > solution.options.tol


def test_non_finite_parameter_propagates_nan():
    solution = solve_roots(Complex(math.nan, 0.0), SolveOptions(max_iter=5))
    assert solution.iterations == 5
    assert not solution.converged
    assert all(math.isnan(root.re) for root in solution.roots)


def test_reference_correction_divides_by_real_part_for_tiny_product():
    px = Complex(1.0, 2.0)
    delta = _correction(px, Complex(1e-20, 1e-20), "reference")
    assert delta.re == pytest.approx(1e20)
    assert delta.im == pytest.approx(2e20)

    delta = _correction(px, Complex(0.0, 1e-20), "reference")
    assert delta.re == pytest.approx(1.0 / (1e-20 + 1e-18))
    assert delta.im == pytest.approx(2.0 / (1e-20 + 1e-18))


def test_correction_is_complex_division_for_regular_product():
    px = Complex(1.0, 2.0)
    denom = Complex(3.0, -1.0)
    expected = (1 + 2j) / (3 - 1j)
    for policy in ("guarded", "reference"):
        assert _correction(px, denom, policy).to_complex() == pytest.approx(expected, rel=1e-15)


def test_guarded_correction_stays_finite_for_vanishing_product():
    delta = _correction(Complex(1.0, 2.0), Complex(1e-200, 0.0), "guarded")
    assert math.isfinite(delta.re) and math.isfinite(delta.im)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"max_iter": 0},
        {"max_iter": 2.5},
        {"tol": 0.0},
        {"tol": -1e-3},
        {"tol": math.nan},
        {"update": "gauss"},
        {"denominator": "exact"},
    ],
)
def test_invalid_options_raise_value_error(kwargs):
    with pytest.raises(ValueError):
        SolveOptions(**kwargs)
