"""Text map loader.

Map format:

1. Empty cells are ``.``.
2. The car which must reach the exit is ``o``; it becomes car ``1``.
3. Every other car is a unique single character; cars are numbered from
   ``2`` in lexicographical order of their characters.
4. A car is a straight, contiguous run of at least two cells. A horizontal
   run slides left/right, a vertical one up/down.

Leading/trailing blank lines and per-row indentation are ignored, so maps can
be written as indented triple-quoted strings::

    parse_map(
        '''
        oo.
        .22
        '''
    )
"""

from typing import Dict, List, Tuple

from parking_search.components import Car, Position
from parking_search.errors import ConfigurationError
from parking_search.state import State, create_state
from parking_search.types import CarID, Orientation

EMPTY = "."
OBJECTIVE = "o"
MIN_CAR_LENGTH = 2


def parse_named_map(
    text: str, coordinate: str = "uint8"
) -> Tuple[State, Dict[CarID, str]]:
    """Parse ``text`` into a ``State`` plus the map character of each car.

    Raises:
        ConfigurationError: On ragged rows, a missing objective car, or a car
            that is too short, bent or split.
    """
    rows = [line.strip() for line in text.strip().splitlines()]
    if not rows or not rows[0]:
        raise ConfigurationError("Map is empty")
    width = len(rows[0])
    cells: Dict[str, List[Position]] = {}
    for row_idx, row in enumerate(rows):
        if len(row) != width:
            raise ConfigurationError(
                f"Row {row_idx} has {len(row)} cells, expected {width}"
            )
        for col_idx, char in enumerate(row):
            if char != EMPTY:
                cells.setdefault(char, []).append(Position(row_idx, col_idx))

    if OBJECTIVE not in cells:
        raise ConfigurationError(f"Map has no objective car {OBJECTIVE!r}")
    names = [OBJECTIVE] + sorted(name for name in cells if name != OBJECTIVE)

    cars: List[Tuple[Position, Car]] = [_car_from_cells(n, cells[n]) for n in names]
    state = create_state(len(rows), width, cars, coordinate=coordinate)
    return state, {car_id: name for car_id, name in enumerate(names, start=1)}


def parse_map(text: str, coordinate: str = "uint8") -> State:
    """Parse ``text`` into a ``State`` (see module docstring for the format)."""
    state, _ = parse_named_map(text, coordinate=coordinate)
    return state


def _car_from_cells(name: str, cells: List[Position]) -> Tuple[Position, Car]:
    """Turn the cells carrying one character into an anchor and a car."""
    if len(cells) < MIN_CAR_LENGTH:
        raise ConfigurationError(
            f"Car {name!r} covers {len(cells)} cell(s), needs {MIN_CAR_LENGTH}"
        )
    anchor = min(cells, key=lambda p: (p.row, p.column))
    rows = {p.row for p in cells}
    columns = {p.column for p in cells}
    if len(rows) == 1:
        orientation = Orientation.LEFT_RIGHT
        span = max(columns) - anchor.column + 1
    elif len(columns) == 1:
        orientation = Orientation.UP_DOWN
        span = max(rows) - anchor.row + 1
    else:
        raise ConfigurationError(f"Car {name!r} is not a straight line")
    if span != len(cells):
        raise ConfigurationError(f"Car {name!r} is split into several pieces")
    return anchor, Car(length=len(cells), orientation=orientation)
