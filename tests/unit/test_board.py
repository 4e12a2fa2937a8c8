import pytest

from parking_search.board import cars, is_solved, shift_car
from parking_search.components import Car, Position
from parking_search.errors import (
    Collision,
    ConfigurationError,
    IllegalDirection,
    MoveError,
    OutOfBounds,
    UnknownCar,
)
from parking_search.examples import EXAMPLE_MAPS, load_example
from parking_search.levels import parse_map
from parking_search.state import State, create_state
from parking_search.types import Direction
from parking_search.utils.geometry import occupied_cells, opposite
from parking_search.utils.grid import occupant_at
from tests.test_utils import LR, UD, assert_car_positions, legal_single_moves, make_state


def test_move_right_solves_single_row() -> None:
    state = parse_map("oo.")
    assert not is_solved(state)

    moved = shift_car(state, 1, Direction.RIGHT)

    assert_car_positions(moved, {1: (0, 1)})
    assert occupied_cells(moved.position[1], moved.car[1]) == [
        Position(0, 1),
        Position(0, 2),
    ]
    assert is_solved(moved)


def test_perpendicular_move_fails_and_leaves_board_unchanged() -> None:
    state = parse_map("oo.")
    with pytest.raises(MoveError) as excinfo:
        shift_car(state, 1, Direction.DOWN)
    assert isinstance(excinfo.value, IllegalDirection)
    assert_car_positions(state, {1: (0, 0)})
    assert state == parse_map("oo.")


def test_move_off_grid_is_out_of_bounds() -> None:
    state = parse_map("oo.")
    with pytest.raises(OutOfBounds):
        shift_car(state, 1, Direction.LEFT)


@pytest.mark.parametrize(
    "direction, blocker",
    [
        (Direction.RIGHT, 2),
        (Direction.LEFT, 3),
    ],
)
def test_collision_reports_blocking_car(direction: Direction, blocker: int) -> None:
    state = parse_map("33oo22.")
    with pytest.raises(Collision) as excinfo:
        shift_car(state, 1, direction)
    assert excinfo.value.blocker == blocker
    assert excinfo.value.car_id == 1


def test_unknown_car_is_a_move_error() -> None:
    state = parse_map("oo.")
    with pytest.raises(UnknownCar):
        shift_car(state, 7, Direction.RIGHT)


def test_up_down_objective_targets_bottom_row() -> None:
    state = parse_map(
        """
        o
        o
        .
        """
    )
    assert not is_solved(state)
    moved = shift_car(state, 1, Direction.DOWN)
    assert_car_positions(moved, {1: (1, 0)})
    assert is_solved(moved)


def test_other_car_moves_along_its_own_axis() -> None:
    state = make_state(3, 3, [((0, 0), 2, LR), ((1, 2), 2, UD)])
    moved = shift_car(state, 2, Direction.UP)
    assert_car_positions(moved, {1: (0, 0), 2: (0, 2)})
    with pytest.raises(Collision):
        shift_car(shift_car(state, 1, Direction.RIGHT), 2, Direction.UP)


@pytest.mark.parametrize("name", sorted(EXAMPLE_MAPS))
def test_moves_are_locally_invertible(name: str) -> None:
    state = load_example(name)
    for car_id, direction in legal_single_moves(state):
        moved = shift_car(state, car_id, direction)
        assert moved != state
        assert shift_car(moved, car_id, opposite(direction)) == state


def test_occupant_lookup() -> None:
    state = parse_map("33oo22.")
    assert occupant_at(state, Position(0, 0)) == 3
    assert occupant_at(state, Position(0, 3)) == 1
    assert occupant_at(state, Position(0, 5)) == 2
    assert occupant_at(state, Position(0, 6)) is None
    assert occupant_at(state, Position(0, 7)) is None
    assert occupant_at(state, Position(-1, 0)) is None


def test_cars_enumerate_in_index_order() -> None:
    state = parse_map("33oo22.")
    assert [(car_id, pos) for car_id, pos, _ in cars(state)] == [
        (1, Position(0, 2)),
        (2, Position(0, 4)),
        (3, Position(0, 0)),
    ]


@pytest.mark.parametrize(
    "height, width, car_specs",
    [
        (3, 3, []),  # no cars
        (3, 3, [((0, 0), 2, LR), ((0, 1), 2, UD)]),  # overlap
        (3, 3, [((0, 2), 2, LR)]),  # leaves the grid
        (3, 3, [((0, 0), 0, LR)]),  # zero length
        (0, 3, [((0, 0), 2, LR)]),  # empty grid
        (1, 256, [((0, 0), 2, LR)]),  # too wide for uint8
        (1, 3, [((0, 0), 300, LR)]),  # too long for uint8
    ],
)
def test_invalid_configurations_are_rejected(
    height: int, width: int, car_specs: list
) -> None:
    with pytest.raises(ConfigurationError):
        make_state(height, width, car_specs)


def test_wider_coordinate_type_accepts_large_board() -> None:
    state = make_state(1, 256, [((0, 253), 2, LR)], coordinate="uint16")
    assert state.width == 256
    assert is_solved(shift_car(state, 1, Direction.RIGHT))


def test_unknown_coordinate_type_is_rejected() -> None:
    with pytest.raises(ConfigurationError):
        create_state(1, 3, [(Position(0, 0), Car(2, LR))], coordinate="int8")


def test_states_are_values() -> None:
    first = parse_map("oo.")
    second = parse_map("oo.")
    assert first == second
    assert isinstance(first, State)
    assert hash(first) == hash(second)
