from typing import Iterable, List, Optional, Tuple

from parking_search.board import cars, shift_car
from parking_search.candidate import Candidate, replay
from parking_search.components import Car, Position
from parking_search.corpus import Testcase
from parking_search.errors import MoveError
from parking_search.fingerprint import fingerprint
from parking_search.state import State, create_state
from parking_search.types import CarID, Move, Orientation
from parking_search.utils.geometry import directions_for
from parking_search.views import compute_views

LR = Orientation.LEFT_RIGHT
UD = Orientation.UP_DOWN

CarSpec = Tuple[Tuple[int, int], int, Orientation]


def make_state(
    height: int,
    width: int,
    car_specs: Iterable[CarSpec],
    coordinate: str = "uint8",
) -> State:
    """Build a state from ``((row, column), length, orientation)`` tuples.

    The first spec is the objective car.
    """
    return create_state(
        height,
        width,
        [(Position(*anchor), Car(length, orientation)) for anchor, length, orientation in car_specs],
        coordinate=coordinate,
    )


def assert_car_positions(state: State, expected: dict[CarID, tuple[int, int]]) -> None:
    """Check that expected cars are anchored at the right cells."""
    for car_id, (row, column) in expected.items():
        actual = state.position.get(car_id)
        assert actual == Position(row, column), (
            f"Car {car_id} expected at {(row, column)}, got {actual}"
        )


def legal_single_moves(state: State) -> List[Move]:
    """Every one-cell slide the board accepts in ``state``."""
    moves: List[Move] = []
    for car_id, _, car in cars(state):
        for direction in directions_for(car.orientation):
            try:
                shift_car(state, car_id, direction)
            except MoveError:
                continue
            moves.append((car_id, direction))
    return moves


def make_testcase(initial: State, candidate: Optional[Candidate] = None) -> Testcase:
    """Corpus entry for ``candidate`` (empty by default) replayed from ``initial``."""
    candidate = candidate if candidate is not None else Candidate.empty()
    final = replay(initial, candidate.moves)
    return Testcase(candidate, fingerprint(final), compute_views(final))
