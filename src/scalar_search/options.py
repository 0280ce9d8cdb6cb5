"""Search configuration and its resolution against defaults."""
from __future__ import annotations

import math
from collections.abc import Mapping
from typing import Any

from astropy.units import UnitsError
from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator
from pydantic.alias_generators import to_camel

from scalar_search.utils.typing import SerializableUnit, is_quantity_like, quantity_to_float, unit_validator
from scalar_search.validation.exceptions import SearchConfigurationError

# fields that live on the search axis and may therefore be given as quantities
_AXIS_FIELDS = ("tolerance", "initial_increment", "lower_bound", "upper_bound")


class SearchOptions(BaseModel):
    """Options controlling a one-dimensional minimization.

    Both the snake_case field names and their camelCase aliases
    (``initialIncrement``, ``lowerBound``, ...) are accepted. Numeric values are
    taken as given: zero, negative, NaN and infinite values are not rejected
    here and instead lead to trivial brackets or early termination.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
        frozen=True,
        arbitrary_types_allowed=True,
    )

    tolerance: float = Field(default=1e-8, description="stop once the bracket is no wider than this.")
    initial_increment: float = Field(
        default=1.0,
        description="step used when bracketing; its sign selects the search direction.",
    )
    lower_bound: float = Field(default=-math.inf)
    upper_bound: float = Field(default=math.inf)
    max_iterations: int = Field(default=100, description="hard cap on golden-section iterations.")
    max_bracket_steps: int | None = Field(
        default=None,
        description="optional cap on bracketing steps. None expands until a minimum is bracketed.",
    )
    unit: SerializableUnit | None = Field(
        default=None,
        description="unit of the search axis. Quantity-valued options are converted to it.",
    )

    @model_validator(mode="before")
    @classmethod
    def convert_quantities(cls, data: Any) -> Any:
        if not isinstance(data, Mapping):
            return data
        data = dict(data)
        raw_unit = data.get("unit")
        unit = unit_validator(raw_unit) if raw_unit is not None else None
        for name in _AXIS_FIELDS:
            for key in (name, to_camel(name)):
                if key in data and is_quantity_like(data[key]):
                    data[key] = quantity_to_float(data[key], unit)
        return data

    @property
    def is_bounded(self) -> bool:
        """True when both bounds are finite, so bracketing can be skipped."""
        return math.isfinite(self.lower_bound) and math.isfinite(self.upper_bound)

    @property
    def start_point(self) -> float:
        """Where an unbounded search begins: the lower bound if finite, else zero."""
        return self.lower_bound if self.lower_bound > -math.inf else 0.0


def resolve_options(options: SearchOptions | Mapping[str, Any] | None = None) -> SearchOptions:
    """Resolve ``options`` against the defaults.

    Raises
    ------
    SearchConfigurationError
        If ``options`` names an unknown option, carries a non-numeric value,
        or holds a quantity that cannot be converted to the search unit.
    """
    if options is None:
        return SearchOptions()
    if isinstance(options, SearchOptions):
        return options
    try:
        return SearchOptions.model_validate(options)
    except ValidationError as exc:
        raise SearchConfigurationError(f"Invalid search options: {exc}") from exc
    except UnitsError as exc:
        raise SearchConfigurationError(f"Invalid search options: {exc}") from exc
