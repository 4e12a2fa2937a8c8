"""Cell geometry for cars.

State-free helpers: which cells a car covers and where a slide takes it.
"""

from typing import Dict, List, Tuple

from parking_search.components import Car, Position
from parking_search.types import Direction, Orientation

DIRECTION_DELTAS: Dict[Direction, Tuple[int, int]] = {
    Direction.UP: (-1, 0),
    Direction.DOWN: (1, 0),
    Direction.LEFT: (0, -1),
    Direction.RIGHT: (0, 1),
}

ORIENTATION_DIRECTIONS: Dict[Orientation, Tuple[Direction, Direction]] = {
    Orientation.LEFT_RIGHT: (Direction.LEFT, Direction.RIGHT),
    Orientation.UP_DOWN: (Direction.UP, Direction.DOWN),
}
"""(backward, forward) directions per orientation."""

OPPOSITE: Dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


def occupied_cells(pos: Position, car: Car) -> List[Position]:
    """Cells covered by ``car`` anchored at ``pos``, anchor first."""
    if car.orientation == Orientation.LEFT_RIGHT:
        return [Position(pos.row, pos.column + i) for i in range(car.length)]
    return [Position(pos.row + i, pos.column) for i in range(car.length)]


def shift_position(pos: Position, direction: Direction, offset: int = 1) -> Position:
    """Return ``pos`` moved ``offset`` cells towards ``direction``.

    The result may lie off-grid (including negative coordinates); callers
    check bounds.
    """
    d_row, d_column = DIRECTION_DELTAS[direction]
    return Position(pos.row + d_row * offset, pos.column + d_column * offset)


def directions_for(orientation: Orientation) -> Tuple[Direction, Direction]:
    """Legal directions for a car with ``orientation`` (backward, forward)."""
    return ORIENTATION_DIRECTIONS[orientation]


def opposite(direction: Direction) -> Direction:
    return OPPOSITE[direction]
