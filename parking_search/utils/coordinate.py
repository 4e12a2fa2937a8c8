"""Coordinate type helpers.

Rows, columns and lengths are small unsigned integers whose width is picked
per run (``uint8`` covers every common puzzle). The width bounds the board:
a grid side or car length that does not fit is a configuration error.
"""

from typing import Dict, Type

import numpy as np

from parking_search.errors import ConfigurationError

COORDINATE_TYPES: Dict[str, Type[np.unsignedinteger]] = {
    "uint8": np.uint8,
    "uint16": np.uint16,
    "uint32": np.uint32,
}


def coordinate_dtype(name: str) -> np.dtype:
    """Return the numpy dtype registered under ``name``.

    Raises:
        ConfigurationError: If ``name`` is not a known coordinate type.
    """
    try:
        return np.dtype(COORDINATE_TYPES[name])
    except KeyError:
        raise ConfigurationError(
            f"Unknown coordinate type {name!r}; expected one of "
            f"{sorted(COORDINATE_TYPES)}"
        ) from None


def coordinate_max(name: str) -> int:
    """Largest value representable by the coordinate type."""
    return int(np.iinfo(coordinate_dtype(name)).max)


def check_fits(value: int, name: str, what: str) -> None:
    """Raise ``ConfigurationError`` unless ``0 <= value <= max(name)``."""
    limit = coordinate_max(name)
    if not 0 <= value <= limit:
        raise ConfigurationError(
            f"{what} {value} does not fit coordinate type {name} (max {limit})"
        )
