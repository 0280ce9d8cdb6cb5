from scalar_search.utils.typing import (
    ObjectiveValue,
    SerializableUnit,
    coerce_scalar,
    quantity_to_float,
)

__all__ = [
    "ObjectiveValue",
    "SerializableUnit",
    "coerce_scalar",
    "quantity_to_float",
]
