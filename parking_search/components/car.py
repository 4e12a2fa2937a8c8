"""Car component.

A car covers ``length`` consecutive cells starting at its anchor position,
extending rightward (``LEFT_RIGHT``) or downward (``UP_DOWN``). Length and
orientation never change during a run, so only ``State.position`` moves.
"""

from dataclasses import dataclass

from parking_search.types import Orientation


@dataclass(frozen=True)
class Car:
    """Static car shape.

    Attributes:
        length: Number of cells covered.
        orientation: Axis the car slides along.
    """

    length: int
    orientation: Orientation
