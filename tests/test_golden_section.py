import logging
import math

import pytest

from scalar_search import (
    PHI_RATIO,
    Converged,
    NonConvergenceReason,
    NotConverged,
    golden_section_search,
    refine,
)

from objectives import CountingObjective, make_quadratic


def test_phi_ratio_is_inverse_golden_ratio():
    assert PHI_RATIO == pytest.approx(0.6180339887498949)
    assert 1 / PHI_RATIO == pytest.approx(1 + PHI_RATIO)


def test_refine_finds_interior_minimum(status):
    x = refine(make_quadratic(2.0, offset=1.5), 0.0, 5.0, 1e-8, 100, status)

    assert x == pytest.approx(2.0, abs=1e-6)
    assert status.converged
    assert status.argmin == x
    assert status.minimum == pytest.approx(1.5, abs=1e-12)


def test_refine_returns_left_bound_for_increasing_function():
    assert refine(lambda x: x * x, 1.0, 5.0) == 1.0


def test_refine_returns_right_bound_for_decreasing_function():
    assert refine(lambda x: -x, 0.0, 10.0) == 10.0


def test_refine_boundary_correction_reports_bound_value(status):
    refine(lambda x: x * x, 1.0, 5.0, status=status)

    assert status.argmin == 1.0
    assert status.minimum == 1.0


def test_refine_ties_shift_toward_the_right():
    result = golden_section_search(lambda x: 1.0, 0.0, 1.0)

    assert isinstance(result, Converged)
    assert result.argmin == pytest.approx(1.0, abs=1e-6)


def test_refine_with_single_iteration_budget_does_not_converge(status):
    x = refine(make_quadratic(2.0), 0.0, 5.0, 1e-8, 1, status)

    assert math.isnan(x)
    assert status.converged is False
    assert status.iterations == 1
    # diagnostics still reflect the last midpoint
    assert status.argmin == 2.5


def test_nan_probe_is_reported_as_non_convergence():
    result = golden_section_search(lambda x: math.nan, 0.0, 1.0)

    assert isinstance(result, NotConverged)
    assert result.reason is NonConvergenceReason.NAN_PROBE
    assert math.isnan(result.value)


def test_budget_exhaustion_is_reported_as_non_convergence():
    result = golden_section_search(make_quadratic(2.0), 0.0, 5.0, tol=1e-8, max_iterations=10)

    assert isinstance(result, NotConverged)
    assert result.reason is NonConvergenceReason.MAX_ITERATIONS
    assert result.iterations == 10


def test_collapsed_bracket_converges_immediately():
    result = golden_section_search(make_quadratic(3.0), 4.0, 4.0)

    assert result.converged
    assert result.iterations == 1
    assert result.argmin == 4.0


def test_each_iteration_costs_one_evaluation():
    objective = CountingObjective(make_quadratic(2.0))
    result = golden_section_search(objective, 0.0, 5.0)

    assert 0 < result.iterations < 100
    assert result.function_calls == result.iterations + 3
    assert len(objective.calls) == result.function_calls


def test_result_carries_the_bracket_it_refined():
    result = golden_section_search(make_quadratic(2.0), 0.0, 5.0)

    assert result.bracket == (0.0, 5.0)
    assert result.evaluations == ()


def test_non_convergence_is_logged(caplog):
    with caplog.at_level(logging.WARNING, logger="scalar_search"):
        refine(make_quadratic(2.0), 0.0, 5.0, max_iterations=1)

    assert "did not converge (MAX_ITERATIONS)" in caplog.text
