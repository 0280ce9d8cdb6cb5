"""Derivative-free one-dimensional minimization.

A local minimum is located by stepping outward from a start point until the
objective rises again, then narrowing that bracket with a golden-section
search. Non-convergence is reported as NaN (or a :class:`NotConverged`
result), never as an exception.
"""

from scalar_search.core import (
    PHI_RATIO,
    bounded_minimize,
    bracket,
    bracket_minimum,
    golden_section_search,
    maximize,
    minimize,
    minimize_scalar,
    refine,
)
from scalar_search.options import SearchOptions, resolve_options
from scalar_search.results import (
    Converged,
    Evaluation,
    NonConvergenceReason,
    NotConverged,
    SearchPhase,
    SearchResult,
    SearchStatus,
)
from scalar_search.validation import SearchConfigurationError

__version__ = "0.1.0"

__all__ = [
    "PHI_RATIO",
    "Converged",
    "Evaluation",
    "NonConvergenceReason",
    "NotConverged",
    "SearchConfigurationError",
    "SearchOptions",
    "SearchPhase",
    "SearchResult",
    "SearchStatus",
    "bounded_minimize",
    "bracket",
    "bracket_minimum",
    "golden_section_search",
    "maximize",
    "minimize",
    "minimize_scalar",
    "refine",
    "resolve_options",
]
