"""Bracketing and golden-section search engine."""
from scalar_search.core.bracketing import bracket, bracket_minimum
from scalar_search.core.golden_section import PHI_RATIO, golden_section_search, refine
from scalar_search.core.minimize import bounded_minimize, maximize, minimize, minimize_scalar
from scalar_search.core.objective import ObjectiveRecorder

__all__ = [
    "PHI_RATIO",
    "ObjectiveRecorder",
    "bracket",
    "bracket_minimum",
    "bounded_minimize",
    "golden_section_search",
    "maximize",
    "minimize",
    "minimize_scalar",
    "refine",
]
