"""Plain-text rendering of boards and move lists."""

from typing import Iterable, Mapping, Optional

from parking_search.board import cars
from parking_search.candidate import compress_moves
from parking_search.state import State
from parking_search.types import CarID, Direction, Move, OBJECTIVE_CAR
from parking_search.utils.geometry import occupied_cells

ARROWS = {
    Direction.UP: "^",
    Direction.DOWN: "v",
    Direction.LEFT: "<",
    Direction.RIGHT: ">",
}

# fallback glyphs for cars without a name: 2-9, then letters
_GLYPHS = "23456789abcdefghijklmnpqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"


def car_name(car_id: CarID, names: Optional[Mapping[CarID, str]] = None) -> str:
    """Display name of ``car_id``: from ``names`` if given, else a glyph."""
    if names is not None and car_id in names:
        return names[car_id]
    if car_id == OBJECTIVE_CAR:
        return "o"
    index = car_id - 2
    return _GLYPHS[index] if index < len(_GLYPHS) else "#"


def render(state: State, names: Optional[Mapping[CarID, str]] = None) -> str:
    """Draw ``state`` as rows of characters in the map format."""
    grid = [["." for _ in range(state.width)] for _ in range(state.height)]
    for car_id, pos, car in cars(state):
        glyph = car_name(car_id, names)
        for cell in occupied_cells(pos, car):
            grid[cell.row][cell.column] = glyph
    return "\n".join("".join(row) for row in grid)


def format_moves(
    moves: Iterable[Move], names: Optional[Mapping[CarID, str]] = None
) -> str:
    """Comma-separated ``<car><arrow><steps>`` tokens, e.g. ``"o>2,av1"``."""
    return ",".join(
        f"{car_name(car_id, names)}{ARROWS[direction]}{steps}"
        for car_id, direction, steps in compress_moves(moves)
    )
