"""Status and result records produced by a minimization run."""
from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import IntEnum


class SearchPhase(IntEnum):
    """Which stage of the search issued an objective evaluation."""

    BRACKET = 0
    REFINE = 1


class NonConvergenceReason(IntEnum):
    """Why a run ended without a usable minimizer."""

    NAN_PROBE = 0
    MAX_ITERATIONS = 1
    BRACKET_EXHAUSTED = 2


@dataclass(frozen=True, slots=True)
class Evaluation:
    """A single call of the objective function."""

    x: float
    value: float
    phase: SearchPhase


@dataclass(slots=True)
class SearchStatus:
    """Mutable diagnostic record filled in by :func:`minimize` and :func:`refine`.

    A freshly constructed (or :meth:`reset`) status reads as "not converged",
    so a caller inspecting it after an aborted call still sees a defined state.
    """

    iterations: int = 0
    argmin: float = math.nan
    minimum: float = math.inf
    converged: bool = False

    def reset(self) -> None:
        self.iterations = 0
        self.argmin = math.nan
        self.minimum = math.inf
        self.converged = False

    def update_from(self, result: SearchResult) -> None:
        self.iterations = result.iterations
        self.argmin = result.argmin
        self.minimum = result.minimum
        self.converged = result.converged


@dataclass(frozen=True, slots=True, kw_only=True)
class SearchResult(ABC):
    """Outcome of a minimization run.

    Only the :class:`Converged` and :class:`NotConverged` variants can be
    created;
    ``value`` is the minimizer on success and NaN otherwise. After a failed
    run, ``argmin`` and ``minimum`` hold the last midpoint and averaged probe
    value and are only meaningful as diagnostics.
    """

    iterations: int
    argmin: float
    minimum: float
    bracket: tuple[float, float]
    function_calls: int = 0
    evaluations: tuple[Evaluation, ...] = field(default=())

    @property
    @abstractmethod
    def converged(self) -> bool: ...

    @property
    @abstractmethod
    def value(self) -> float: ...


@dataclass(frozen=True, slots=True, kw_only=True)
class Converged(SearchResult):
    @property
    def converged(self) -> bool:
        return True

    @property
    def value(self) -> float:
        return self.argmin


@dataclass(frozen=True, slots=True, kw_only=True)
class NotConverged(SearchResult):
    reason: NonConvergenceReason

    @property
    def converged(self) -> bool:
        return False

    @property
    def value(self) -> float:
        return math.nan
