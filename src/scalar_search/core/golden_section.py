"""Golden-section refinement of a bracketed minimum."""
from __future__ import annotations

import logging
import math
from collections.abc import Callable

from scalar_search.core.objective import as_recorder
from scalar_search.results import (
    Converged,
    NonConvergenceReason,
    NotConverged,
    SearchPhase,
    SearchResult,
    SearchStatus,
)
from scalar_search.utils.typing import ObjectiveValue

logger = logging.getLogger(__name__)

PHI_RATIO = 2 / (1 + math.sqrt(5))  # inverse golden ratio (~0.618)


def golden_section_search(
    f: Callable[[float], ObjectiveValue],
    x_lower: float,
    x_upper: float,
    tol: float = 1e-8,
    max_iterations: int = 100,
) -> SearchResult:
    """
    Converge on the minimum of ``f`` inside ``[x_lower, x_upper]``.

    Parameters
    ----------
    f : callable
        Function to minimize.
    x_lower, x_upper : float
        Bracket believed to contain a minimum.
    tol : float, optional
        Stop once the bracket is no wider than this (default 1e-8).
    max_iterations : int, optional
        Iteration budget. The final width check counts against it, so at
        most ``max_iterations - 1`` reductions are performed and an
        exhausted run reports ``iterations == max_iterations``.

    Returns
    -------
    SearchResult
        :class:`Converged` with the minimizer, or :class:`NotConverged` when a
        probe evaluated to NaN or the budget ran out before reaching ``tol``.

    Notes
    -----
    The objective is also evaluated at both original bounds. The iteration
    approaches but never reaches a minimum sitting on a bound, so a bound
    whose value beats the final estimate is returned instead of the midpoint.
    """
    f = as_recorder(f, SearchPhase.REFINE)
    x1 = x_upper - PHI_RATIO * (x_upper - x_lower)
    x2 = x_lower + PHI_RATIO * (x_upper - x_lower)
    f1 = f(x1)
    f2 = f(x2)

    x_lower0, x_upper0 = x_lower, x_upper
    f_lower0 = f(x_lower)
    f_upper0 = f(x_upper)

    iteration = 1
    while iteration < max_iterations and abs(x_upper - x_lower) > tol:
        # ties go right
        if f2 > f1:
            x_upper = x2
            x2, f2 = x1, f1
            x1 = x_upper - PHI_RATIO * (x_upper - x_lower)
            f1 = f(x1)
        else:
            x_lower = x1
            x1, f1 = x2, f2
            x2 = x_lower + PHI_RATIO * (x_upper - x_lower)
            f2 = f(x2)
        iteration += 1

    x_mid = 0.5 * (x_upper + x_lower)
    f_mid = 0.5 * (f1 + f2)
    common = dict(
        iterations=iteration,
        bracket=(x_lower0, x_upper0),
        function_calls=f.calls,
        evaluations=tuple(f.evaluations),
    )

    reason: NonConvergenceReason | None = None
    if math.isnan(f1) or math.isnan(f2):
        reason = NonConvergenceReason.NAN_PROBE
    elif iteration >= max_iterations and abs(x_upper - x_lower) > tol:
        reason = NonConvergenceReason.MAX_ITERATIONS
    if reason is not None:
        logger.warning(
            f"Golden-section search on [{x_lower0}, {x_upper0}] did not converge "
            f"({reason.name}) after {iteration} iterations."
        )
        return NotConverged(argmin=x_mid, minimum=f_mid, reason=reason, **common)

    if f_lower0 < f_mid:
        logger.debug(f"Lower bound {x_lower0} beats the interior estimate {x_mid}.")
        return Converged(argmin=x_lower0, minimum=f_lower0, **common)
    if f_upper0 < f_mid:
        logger.debug(f"Upper bound {x_upper0} beats the interior estimate {x_mid}.")
        return Converged(argmin=x_upper0, minimum=f_upper0, **common)
    logger.debug(f"Golden-section search converged to {x_mid} after {iteration} iterations.")
    return Converged(argmin=x_mid, minimum=f_mid, **common)


def refine(
    f: Callable[[float], ObjectiveValue],
    x_lower: float,
    x_upper: float,
    tol: float = 1e-8,
    max_iterations: int = 100,
    status: SearchStatus | None = None,
) -> float:
    """Golden-section minimizer of ``f`` on a bracket, or NaN if it did not converge.

    ``status``, when given, is always filled in, whether or not the search
    converged. When one of the original bounds beats the interior estimate,
    ``status.argmin`` and ``status.minimum`` hold that bound and its value
    rather than the final midpoint and averaged probe value.
    """
    result = golden_section_search(f, x_lower, x_upper, tol, max_iterations)
    if status is not None:
        status.update_from(result)
    return result.value
