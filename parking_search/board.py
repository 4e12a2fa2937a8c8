"""Board model: move legality and application.

``shift_car`` is the only way a configuration changes. It is a pure
function: given a ``State`` it either returns a *new* ``State`` with one car
slid by a single cell, or raises a :class:`parking_search.errors.MoveError`
subclass. The input state is never touched, so a failed move trivially has no
effect.

Legality checks, in order:

1. the car exists (``UnknownCar``);
2. the direction matches the car's orientation (``IllegalDirection``);
3. the slid car stays on the grid (``OutOfBounds``);
4. the one newly covered cell is free (``Collision``).

Only the leading cell needs the overlap check: every other cell the slid car
covers was already covered by the car itself.
"""

from dataclasses import replace
from typing import Iterator, Tuple

from parking_search.components import Car, Position
from parking_search.errors import Collision, IllegalDirection, OutOfBounds, UnknownCar
from parking_search.state import State
from parking_search.types import CarID, Direction, OBJECTIVE_CAR, Orientation
from parking_search.utils.geometry import directions_for, shift_position
from parking_search.utils.grid import is_in_bounds, occupant_at


def shift_car(state: State, car_id: CarID, direction: Direction) -> State:
    """Slide ``car_id`` by one cell towards ``direction``.

    Args:
        state (State): Current configuration.
        car_id (CarID): Car to move.
        direction (Direction): Slide direction; must match the car's orientation.

    Returns:
        State: New configuration with the car's anchor updated.

    Raises:
        UnknownCar: ``car_id`` is not on the board.
        IllegalDirection: ``direction`` is perpendicular to the car.
        OutOfBounds: The car would leave the grid.
        Collision: Another car is in the way.
    """
    car = state.car.get(car_id)
    if car is None:
        raise UnknownCar(car_id, f"No car {car_id} on the board")
    if direction not in directions_for(car.orientation):
        raise IllegalDirection(
            car_id, f"Car {car_id} is {car.orientation} and cannot move {direction}"
        )

    pos = state.position[car_id]
    entered = _leading_cell(pos, car, direction)
    if not is_in_bounds(state, entered):
        raise OutOfBounds(car_id, f"Car {car_id} cannot move {direction} off the grid")
    blocker = occupant_at(state, entered)
    if blocker is not None:
        raise Collision(car_id, blocker)

    return replace(
        state, position=state.position.set(car_id, shift_position(pos, direction))
    )


def _leading_cell(pos: Position, car: Car, direction: Direction) -> Position:
    """Cell the car enters when sliding one step towards ``direction``."""
    if direction in (Direction.UP, Direction.LEFT):
        return shift_position(pos, direction)
    return shift_position(pos, direction, car.length)


def is_solved(state: State) -> bool:
    """True iff the objective car's forward-most cell touches its target edge."""
    car = state.car[OBJECTIVE_CAR]
    pos = state.position[OBJECTIVE_CAR]
    if car.orientation == Orientation.LEFT_RIGHT:
        return pos.column + car.length == state.width
    return pos.row + car.length == state.height


def cars(state: State) -> Iterator[Tuple[CarID, Position, Car]]:
    """Yield ``(car_id, position, car)`` in index order (objective car first)."""
    for car_id in sorted(state.car.keys()):
        yield car_id, state.position[car_id], state.car[car_id]
