"""Outward bracketing of a local minimum.

The search walks from the start point in a single direction with a constant
step, so that on time-indexed objectives it never jumps past a nearby
minimum. Reversing direction or growing the step would change which local
minimum is found.
"""
from __future__ import annotations

import logging
import math
from collections.abc import Callable

from scalar_search.utils.typing import ObjectiveValue

logger = logging.getLogger(__name__)


def bracket_minimum(
    f: Callable[[float], ObjectiveValue],
    x0: float,
    dx: float,
    max_steps: int | None = None,
) -> tuple[float, float, int, bool]:
    """Step from ``x0`` by ``dx`` until the objective starts rising again.

    Parameters
    ----------
    f : callable
        Objective function.
    x0 : float
        Starting point.
    dx : float
        Step size; its sign selects the search direction. A zero or
        non-finite step yields the collapsed bracket ``(x0, x0)``.
    max_steps : int, optional
        Stop expanding after this many steps. ``None`` expands until a
        minimum is bracketed.

    Returns
    -------
    x_lower, x_upper : float
        The bracket, ordered along the search direction.
    steps : int
        Number of steps taken.
    bounded : bool
        False when ``max_steps`` ran out, or the walk overflowed to a
        non-finite point, before a minimum was bracketed.
    """
    if dx == 0 or not math.isfinite(dx):
        logger.debug(f"Increment {dx} is zero or non-finite; collapsing bracket to {x0}.")
        return x0, x0, 0, True

    x_upper = x0
    f_min = f_lower = f_upper = f(x0)
    steps = 0
    bounded = False
    while not bounded and math.isfinite(x_upper):
        bounded = True
        if f_upper <= f_min:
            if max_steps is not None and steps >= max_steps:
                logger.warning(
                    f"Bracketing from {x0} stopped after {steps} steps without bracketing a minimum."
                )
                return x_upper - 2 * dx, x_upper, steps, False
            f_min = f_upper
            x_upper += dx
            f_upper = f(x_upper)
            steps += 1
            bounded = False

        f_min = min(f_min, f_upper)

        # Nothing beat the starting value, so the minimum sits against x0.
        if f_lower == f_min:
            bounded = True

    # pull the lower edge back two steps from the last point
    x_lower = x_upper - 2 * dx
    if x0 == x_lower + dx:
        x_lower = x0

    if bounded:
        logger.debug(f"Bracketed a minimum in [{x_lower}, {x_upper}] after {steps} steps.")
    else:
        logger.warning(f"Bracketing from {x0} ran off to {x_upper} without bracketing a minimum.")
    return x_lower, x_upper, steps, bounded


def bracket(f: Callable[[float], ObjectiveValue], x0: float, dx: float) -> tuple[float, float]:
    """Find an interval ``(x_lower, x_upper)`` believed to contain a local minimum of ``f``."""
    x_lower, x_upper, _, _ = bracket_minimum(f, x0, dx)
    return x_lower, x_upper
