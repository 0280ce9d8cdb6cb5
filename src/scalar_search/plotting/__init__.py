"""Visualization helpers for inspecting a traced search."""

from .trace import evaluations_to_arrays, plot_search_trace

__all__ = [
    "evaluations_to_arrays",
    "plot_search_trace",
]
