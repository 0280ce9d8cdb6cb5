"""Entry points chaining bracketing and golden-section refinement."""
from __future__ import annotations

import logging
import math
from collections.abc import Callable, Mapping
from typing import Any

from scalar_search.core.bracketing import bracket_minimum
from scalar_search.core.golden_section import golden_section_search
from scalar_search.core.objective import ObjectiveRecorder
from scalar_search.options import SearchOptions, resolve_options
from scalar_search.results import (
    NonConvergenceReason,
    NotConverged,
    SearchResult,
    SearchStatus,
)
from scalar_search.utils.typing import ObjectiveValue

logger = logging.getLogger(__name__)

OptionsInput = SearchOptions | Mapping[str, Any] | None


def minimize_scalar(
    f: Callable[[float], ObjectiveValue],
    options: OptionsInput = None,
    *,
    trace: bool = False,
) -> SearchResult:
    """Locate a local minimum of ``f`` and describe how the search went.

    With both bounds finite the bounds are refined directly. Otherwise a
    bracket is first found by stepping away from the lower bound (or from 0
    when there is none) by ``initial_increment``.

    Parameters
    ----------
    f : callable
        Objective mapping a float to a float.
    options : SearchOptions or mapping, optional
        Search configuration; see :class:`SearchOptions` for the defaults.
    trace : bool, optional
        Record every objective evaluation on the result.

    Returns
    -------
    SearchResult
        :class:`Converged` or :class:`NotConverged`.

    Raises
    ------
    SearchConfigurationError
        If ``options`` cannot be resolved.
    """
    opts = resolve_options(options)
    recorder = ObjectiveRecorder(f, trace=trace)

    if opts.is_bounded:
        x_lower, x_upper = opts.lower_bound, opts.upper_bound
    else:
        x_lower, x_upper, _, bounded = bracket_minimum(
            recorder, opts.start_point, opts.initial_increment, opts.max_bracket_steps
        )
        if not bounded:
            return NotConverged(
                iterations=0,
                argmin=math.nan,
                minimum=math.inf,
                bracket=(x_lower, x_upper),
                function_calls=recorder.calls,
                evaluations=tuple(recorder.evaluations),
                reason=NonConvergenceReason.BRACKET_EXHAUSTED,
            )

    return golden_section_search(recorder, x_lower, x_upper, opts.tolerance, opts.max_iterations)


def minimize(
    f: Callable[[float], ObjectiveValue],
    options: OptionsInput = None,
    status: SearchStatus | None = None,
) -> float:
    """Return a local minimizer of ``f``, or NaN if the search did not converge.

    Callers must check the return value with :func:`math.isnan`. ``status`` is
    reset before any work starts and filled in afterwards.
    """
    if status is not None:
        status.reset()
    result = minimize_scalar(f, options)
    if status is not None:
        status.update_from(result)
    return result.value


def maximize(
    f: Callable[[float], ObjectiveValue],
    options: OptionsInput = None,
    status: SearchStatus | None = None,
) -> float:
    """Return a local maximizer of ``f``, or NaN if the search did not converge.

    The search runs on ``-f``, so ``status.minimum`` holds ``-max(f)``.
    """
    return minimize(lambda x: -f(x), options, status)


def bounded_minimize(
    f: Callable[[float], ObjectiveValue],
    a: float,
    b: float,
    tol: float = 1e-4,
    max_iter: int = 100,
) -> tuple[float, float]:
    """
    Best-effort bounded minimization on ``[a, b]``.

    Unlike :func:`minimize` this does not return NaN when the iteration budget
    runs out; the last estimate is returned instead.

    Returns
    -------
    x_min : float
        Estimated location of the minimum.
    f_min : float
        Function value at x_min.
    """
    result = minimize_scalar(f, SearchOptions(lower_bound=a, upper_bound=b, tolerance=tol, max_iterations=max_iter))
    if not result.converged:
        logger.debug(f"bounded_minimize on [{a}, {b}] returning unconverged estimate {result.argmin}.")
    return result.argmin, result.minimum
