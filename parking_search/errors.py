"""Exception hierarchy.

``MoveError`` subclasses are *expected* outcomes: the board refused a slide
and nothing changed. The executor turns them into ``ExitKind.CRASH``.
``ConfigurationError`` marks a malformed puzzle or search setup and is fatal.
"""

from typing import Optional

from parking_search.types import CarID


class ParkingError(Exception):
    """Base class for all errors raised by this package."""


class MoveError(ParkingError):
    """A single slide could not be applied; the board is unchanged."""

    def __init__(self, car_id: CarID, message: str) -> None:
        super().__init__(message)
        self.car_id = car_id


class OutOfBounds(MoveError):
    """The slide would push part of the car off the grid."""


class Collision(MoveError):
    """The slide would overlap another car.

    Attributes:
        blocker: Id of the car in the way (diagnostic only).
    """

    def __init__(self, car_id: CarID, blocker: CarID) -> None:
        super().__init__(car_id, f"Car {car_id} collides with car {blocker}")
        self.blocker = blocker


class IllegalDirection(MoveError):
    """The direction does not match the car's orientation."""


class UnknownCar(MoveError):
    """No car with this id exists on the board."""


class ConfigurationError(ParkingError, ValueError):
    """Malformed puzzle or search configuration."""

    def __init__(self, message: str, car_id: Optional[CarID] = None) -> None:
        super().__init__(message)
        self.car_id = car_id
