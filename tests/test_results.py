import dataclasses
import math

import pytest

from scalar_search import (
    Converged,
    NonConvergenceReason,
    NotConverged,
    SearchResult,
    SearchStatus,
)


def _result_fields():
    return dict(iterations=3, argmin=1.5, minimum=0.25, bracket=(1.0, 2.0), function_calls=7)


def test_new_status_reads_as_not_converged():
    status = SearchStatus()

    assert status.iterations == 0
    assert math.isnan(status.argmin)
    assert status.minimum == math.inf
    assert status.converged is False


def test_status_reset_and_update():
    status = SearchStatus()
    status.update_from(Converged(**_result_fields()))

    assert (status.iterations, status.argmin, status.minimum, status.converged) == (3, 1.5, 0.25, True)

    status.reset()
    assert status.iterations == 0
    assert status.converged is False


def test_converged_value_is_argmin():
    result = Converged(**_result_fields())

    assert result.converged
    assert result.value == 1.5
    assert result.evaluations == ()


def test_not_converged_value_is_nan_but_keeps_diagnostics():
    result = NotConverged(reason=NonConvergenceReason.MAX_ITERATIONS, **_result_fields())

    assert not result.converged
    assert math.isnan(result.value)
    assert result.argmin == 1.5


def test_results_are_immutable():
    result = Converged(**_result_fields())

    with pytest.raises(dataclasses.FrozenInstanceError):
        result.argmin = 0.0  # type: ignore[misc]


def test_base_result_cannot_be_created():
    with pytest.raises(TypeError):
        SearchResult(**_result_fields())  # type: ignore[abstract]
