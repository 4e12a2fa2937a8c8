"""Obstacle view analysis.

For every car and both of its directions of travel, walk outward from the
car's edge cell by cell until hitting a wall (off-grid) or another car. The
resulting :class:`parking_search.components.View` lists exactly the legal
slides: ``1..distance`` cells in ``direction``.

The analysis only reads the given immutable ``State`` and returns freshly
built frozen values, so it is safe to call from several threads on
independent configurations.
"""

from typing import Tuple

from parking_search.components import View, ViewFrom
from parking_search.state import State
from parking_search.types import CarID, Direction
from parking_search.utils.geometry import directions_for, shift_position
from parking_search.utils.grid import is_in_bounds, occupant_at


def step_until_seen(state: State, car_id: CarID, direction: Direction) -> View:
    """Return the view from ``car_id`` looking towards ``direction``.

    Probing starts one cell beyond the car's trailing edge for UP / LEFT and
    one cell beyond its leading edge for DOWN / RIGHT. An obstacle directly
    adjacent is zero cells away.
    """
    pos = state.position[car_id]
    if direction in (Direction.UP, Direction.LEFT):
        offset = 1
    else:
        offset = state.car[car_id].length

    distance = 0
    while True:
        probe = shift_position(pos, direction, offset)
        if not is_in_bounds(state, probe):
            return View(direction=direction, observed=None, distance=distance)
        observed = occupant_at(state, probe)
        if observed is not None:
            return View(direction=direction, observed=observed, distance=distance)
        distance += 1
        offset += 1


def view_from(state: State, car_id: CarID) -> ViewFrom:
    """Backward (UP / LEFT) and forward (DOWN / RIGHT) views of one car."""
    backward, forward = directions_for(state.car[car_id].orientation)
    return ViewFrom(
        backward=step_until_seen(state, car_id, backward),
        forward=step_until_seen(state, car_id, forward),
    )


def compute_views(state: State) -> Tuple[ViewFrom, ...]:
    """Views of every car in index order; element ``i`` belongs to car ``i + 1``."""
    return tuple(view_from(state, car_id) for car_id in sorted(state.car.keys()))
