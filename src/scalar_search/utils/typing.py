from numpy.typing import NDArray
import numpy as np
from typing import Any, TypeAlias, Annotated
from pydantic import BeforeValidator, PlainSerializer
from astropy.units import Unit, Quantity, UnitBase, UnitsError

ObjectiveValue: TypeAlias = float | np.floating | NDArray[np.float64]
"""What a caller's objective may return: a float, a numpy scalar or a single-element array."""


def coerce_scalar(value: Any) -> float:
    arr = np.asarray(value)
    if arr.shape != () and arr.shape != (1, ):
        raise ValueError(
            "Objective functions must return a scalar; received array with shape "
            f"{arr.shape}."
        )
    return float(arr.item())


# below are for pydantic model fields to handle additional
# validation and serialization
def unit_validator(v: UnitBase | str) -> UnitBase:
    return v if isinstance(v, UnitBase) else Unit(v)


def unit_serializer(v: UnitBase) -> str:
    return str(v)


SerializableUnit = Annotated[
    UnitBase | str,
    BeforeValidator(unit_validator),
    PlainSerializer(unit_serializer),
]
"""
Represents any Astropy Unit that also parses string inputs.
When serializing, the unit is converted to its string representation, since
astropy.unit.Unit is NOT serializable.
"""


def is_quantity_like(v: Any) -> bool:
    return isinstance(v, Quantity) or (isinstance(v, dict) and "value" in v and "unit" in v)


def quantity_to_float(v: dict[str, float | str] | Quantity | float, unit: UnitBase | None) -> float:
    """Convert ``v`` to a plain float expressed in ``unit``.

    ``v`` may be a float (assumed to already be in ``unit``), a scalar
    ``Quantity``, or a mapping such as ``{"value": 10, "unit": "min"}``.
    """
    # 1. convert dictionary input to quantity
    if isinstance(v, dict):
        try:
            v = Quantity(float(v["value"]), str(v["unit"]))
        except Exception:
            raise ValueError(f"Invalid input dictionary v: {v}")
    if isinstance(v, Quantity):
        if not np.isscalar(v.value):
            raise ValueError(f"Expected a scalar Quantity, got {v}")
        if unit is None:
            raise UnitsError(
                f"Got the quantity {v} but no search unit is configured to convert it to."
            )
        if not v.unit.is_equivalent(unit):
            raise UnitsError(f"Expected a unit equivalent to {unit}, got {v.unit}")
        return float(v.to_value(unit))
    return float(v)
