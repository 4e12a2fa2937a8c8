"""parking_search.components
==========================

Value objects describing a puzzle board. Every class is a frozen
``@dataclass`` without behavior; board logic lives in
:mod:`parking_search.board` and :mod:`parking_search.views`.

    from parking_search.components import Car, Position, View
"""

from .car import Car
from .position import Position
from .view import View, ViewFrom

__all__ = [
    "Car",
    "Position",
    "View",
    "ViewFrom",
]
