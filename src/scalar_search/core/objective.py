from __future__ import annotations

from collections.abc import Callable

from scalar_search.results import Evaluation, SearchPhase
from scalar_search.utils.typing import ObjectiveValue, coerce_scalar


class ObjectiveRecorder:
    """Callable wrapper that counts (and optionally records) objective evaluations.

    The wrapped function is called exactly once per evaluation; its return
    value is coerced to a plain ``float`` so that comparisons in the search
    loops behave the same for numpy scalars and one-element arrays.
    """

    __slots__ = ("_f", "_trace", "phase", "calls", "evaluations")

    def __init__(self, f: Callable[[float], ObjectiveValue], trace: bool = False) -> None:
        self._f = f
        self._trace = trace
        self.phase = SearchPhase.BRACKET
        self.calls = 0
        self.evaluations: list[Evaluation] = []

    def __call__(self, x: float) -> float:
        value = coerce_scalar(self._f(x))
        self.calls += 1
        if self._trace:
            self.evaluations.append(Evaluation(x=float(x), value=value, phase=self.phase))
        return value


def as_recorder(f: Callable[[float], ObjectiveValue], phase: SearchPhase) -> ObjectiveRecorder:
    """Return ``f`` as an :class:`ObjectiveRecorder` set to ``phase``, wrapping it if needed."""
    recorder = f if isinstance(f, ObjectiveRecorder) else ObjectiveRecorder(f)
    recorder.phase = phase
    return recorder
