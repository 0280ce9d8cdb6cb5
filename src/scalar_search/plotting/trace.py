"""Utilities for plotting the objective evaluations of a traced search with Matplotlib."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, List, Tuple, TYPE_CHECKING

import numpy as np

from scalar_search.results import Evaluation, SearchPhase, SearchResult

if TYPE_CHECKING:  # pragma: no cover - imported for typing only
    from matplotlib.axes import Axes
else:  # pragma: no cover - fall back when matplotlib is absent
    Axes = Any  # type: ignore

_PHASE_MARKERS = {SearchPhase.BRACKET: "s", SearchPhase.REFINE: "o"}


def evaluations_to_arrays(evaluations: Sequence[Evaluation]) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Convert evaluations into NumPy arrays of probe points, values, and phases."""

    xs = np.empty(len(evaluations), dtype=float)
    values = np.empty(len(evaluations), dtype=float)
    phases = np.empty(len(evaluations), dtype=int)

    for idx, evaluation in enumerate(evaluations):
        xs[idx] = evaluation.x
        values[idx] = evaluation.value
        phases[idx] = int(evaluation.phase)
    return xs, values, phases


def plot_search_trace(
    ax: Axes,
    result: SearchResult,
    *,
    label: str | None = None,
    show_bracket: bool = True,
    scatter_kwargs: Mapping[str, Any] | None = None,
) -> List[Any]:
    """Plot the evaluations recorded on ``result`` on ``ax``.

    Parameters
    ----------
    ax:
        Matplotlib axes to draw on.
    result:
        Result of :func:`~scalar_search.minimize_scalar` run with ``trace=True``.
    label:
        Legend label prefix; each phase is suffixed with its name.
    show_bracket:
        Shade the bracket handed to the golden-section search.
    scatter_kwargs:
        Additional keyword arguments forwarded to ``ax.scatter``.

    Returns
    -------
    list
        The artists that were added to ``ax``.
    """

    if not result.evaluations:
        raise ValueError("Result carries no evaluations; run the search with trace=True.")

    xs, values, phases = evaluations_to_arrays(result.evaluations)
    scatter_style = dict(scatter_kwargs or {})
    artists: List[Any] = []

    for phase in SearchPhase:
        mask = phases == int(phase)
        if not mask.any():
            continue
        phase_label = phase.name.lower() if label is None else f"{label} ({phase.name.lower()})"
        artists.append(
            ax.scatter(xs[mask], values[mask], marker=_PHASE_MARKERS[phase], label=phase_label, **scatter_style)
        )

    if show_bracket:
        lo, hi = sorted(result.bracket)
        artists.append(ax.axvspan(lo, hi, alpha=0.15, color="tab:gray"))

    if result.converged:
        artists.append(ax.axvline(result.argmin, linestyle="--", color="tab:red"))

    return artists
