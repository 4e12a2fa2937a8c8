"""View components produced by :mod:`parking_search.views`.

A ``View`` tells how many single-cell slides a car can make in one direction
and what stops it. Views are frozen: a car may slide ``1..distance`` cells in
``direction`` without any trial and error, and consumers (the tail mutator)
must never adjust a view in place.
"""

from dataclasses import dataclass
from typing import Optional

from parking_search.types import CarID, Direction


@dataclass(frozen=True)
class View:
    """View from a car in one direction of travel.

    Attributes:
        direction: Direction looked in.
        observed: Car first encountered, or ``None`` if the obstacle is a wall.
        distance: Empty cells between the car and the obstacle (``0`` means
            the obstacle is directly adjacent).
    """

    direction: Direction
    observed: Optional[CarID]
    distance: int


@dataclass(frozen=True)
class ViewFrom:
    """The view from a car, backward (UP / LEFT) and forward (DOWN / RIGHT)."""

    backward: View
    forward: View
