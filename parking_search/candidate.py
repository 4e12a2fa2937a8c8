"""Move-sequence candidates and replay.

A :class:`Candidate` is an ordered, possibly empty list of single-cell moves
interpreted from the puzzle's initial configuration. Candidates are frozen;
the mutation helpers return new candidates sharing structure with the parent
through ``pyrsistent.PVector``.
"""

from dataclasses import dataclass
from typing import Iterable, Iterator, List, Tuple

from pyrsistent import pvector
from pyrsistent.typing import PVector

from parking_search.board import shift_car
from parking_search.state import State
from parking_search.types import CarID, Direction, Move


@dataclass(frozen=True)
class Candidate:
    """Trial solution: moves to apply in order from the initial configuration.

    Attributes:
        moves (PVector[Move]): ``(car_id, direction)`` pairs.
    """

    moves: PVector[Move] = pvector()

    @classmethod
    def empty(cls) -> "Candidate":
        return cls()

    @classmethod
    def of(cls, moves: Iterable[Move]) -> "Candidate":
        return cls(pvector(moves))

    def __len__(self) -> int:
        return len(self.moves)

    def __iter__(self) -> Iterator[Move]:
        return iter(self.moves)

    def append(self, move: Move, count: int = 1) -> "Candidate":
        """Return a copy with ``move`` appended ``count`` times."""
        return Candidate(self.moves.extend([move] * count))

    def insert(self, index: int, move: Move) -> "Candidate":
        """Return a copy with ``move`` inserted before position ``index``."""
        return Candidate(self.moves[:index] + pvector([move]) + self.moves[index:])

    def is_prefix_of(self, other: "Candidate") -> bool:
        return len(self.moves) <= len(other.moves) and (
            self.moves == other.moves[: len(self.moves)]
        )


def replay(state: State, moves: Iterable[Move]) -> State:
    """Apply ``moves`` in order starting from ``state``.

    Raises:
        MoveError: The first move the board refuses.
    """
    for car_id, direction in moves:
        state = shift_car(state, car_id, direction)
    return state


def compress_moves(moves: Iterable[Move]) -> List[Tuple[CarID, Direction, int]]:
    """Fold runs of identical moves into ``(car_id, direction, steps)``."""
    runs: List[Tuple[CarID, Direction, int]] = []
    for car_id, direction in moves:
        if runs and runs[-1][0] == car_id and runs[-1][1] == direction:
            runs[-1] = (car_id, direction, runs[-1][2] + 1)
        else:
            runs.append((car_id, direction, 1))
    return runs
