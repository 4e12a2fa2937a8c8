"""Core immutable board ``State`` dataclass.

This module defines the frozen :class:`State` object that represents one
configuration of a parking puzzle. Moves are pure functions that take a
``State`` and return a *new* ``State`` (see :mod:`parking_search.board`); no
mutation happens in-place. Candidates, snapshots and observers can therefore
share states freely without aliasing hazards.

Design notes:

* Stores are **persistent maps** (``pyrsistent.PMap``) keyed by ``CarID``.
  ``car`` is fixed for a run; only ``position`` changes between states.
* Car ``1`` is always the objective car; its orientation picks the target
  edge (rightmost column for ``LEFT_RIGHT``, bottom row for ``UP_DOWN``).
* ``coordinate`` names the unsigned integer type grid coordinates must fit
  (see :mod:`parking_search.utils.coordinate`).

Use :func:`create_state` to build a validated initial configuration.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Sequence, Tuple

from pyrsistent import pmap
from pyrsistent.typing import PMap

from parking_search.components import Car, Position
from parking_search.errors import ConfigurationError
from parking_search.types import CarID, OBJECTIVE_CAR
from parking_search.utils.coordinate import check_fits
from parking_search.utils.geometry import occupied_cells

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class State:
    """Immutable puzzle configuration.

    Attributes:
        height (int): Number of grid rows.
        width (int): Number of grid columns.
        car (PMap[CarID, Car]): Static car shapes.
        position (PMap[CarID, Position]): Anchor cell of each car.
        coordinate (str): Name of the coordinate type (``"uint8"`` etc.).
    """

    height: int
    width: int
    car: PMap[CarID, Car] = pmap()
    position: PMap[CarID, Position] = pmap()
    coordinate: str = "uint8"

    @property
    def car_count(self) -> int:
        return len(self.car)


def create_state(
    height: int,
    width: int,
    cars: Sequence[Tuple[Position, Car]],
    coordinate: str = "uint8",
) -> State:
    """Validate a configuration and build its ``State``.

    Cars receive ids ``1..len(cars)`` in the given order, so the objective
    car must come first.

    Args:
        height (int): Grid rows.
        width (int): Grid columns.
        cars (Sequence[Tuple[Position, Car]]): Anchor and shape per car.
        coordinate (str): Coordinate type the board must fit.

    Returns:
        State: The initial configuration.

    Raises:
        ConfigurationError: If there are no cars, the grid or a car does not
            fit the coordinate type, a car leaves the grid, or cars overlap.
    """
    check_fits(height, coordinate, "Grid height")
    check_fits(width, coordinate, "Grid width")
    if height == 0 or width == 0:
        raise ConfigurationError(f"Grid must not be empty, got {height}x{width}")
    if not cars:
        raise ConfigurationError("A puzzle needs at least one car")

    taken: Dict[Position, CarID] = {}
    car_store: Dict[CarID, Car] = {}
    position_store: Dict[CarID, Position] = {}
    for car_id, (pos, car) in enumerate(cars, start=OBJECTIVE_CAR):
        check_fits(car.length, coordinate, f"Length of car {car_id}")
        if car.length == 0:
            raise ConfigurationError(f"Car {car_id} has zero length", car_id)
        for cell in occupied_cells(pos, car):
            if not (0 <= cell.row < height and 0 <= cell.column < width):
                raise ConfigurationError(
                    f"Car {car_id} at {pos} leaves the {height}x{width} grid", car_id
                )
            if cell in taken:
                raise ConfigurationError(
                    f"Car {car_id} overlaps car {taken[cell]} at {cell}", car_id
                )
            taken[cell] = car_id
        car_store[car_id] = car
        position_store[car_id] = pos

    logger.debug("Created %dx%d state with %d cars", height, width, len(cars))
    return State(
        height=height,
        width=width,
        car=pmap(car_store),
        position=pmap(position_store),
        coordinate=coordinate,
    )
