"""Common type aliases and enumerations.

``MutatorFn`` is the central extension point of the search loop: it maps a
parent corpus entry to a new candidate move sequence. Strategies are looked up
by name in :data:`parking_search.mutators.MUTATOR_REGISTRY`.
"""

import random
from enum import StrEnum, auto
from typing import Callable, Optional, Tuple, TYPE_CHECKING


# Forward declaration for MutatorFn typing to avoid circular imports:
if TYPE_CHECKING:
    from parking_search.candidate import Candidate
    from parking_search.corpus import Testcase
    from parking_search.state import State

CarID = int
"""Car index. The objective car is always ``OBJECTIVE_CAR``; others follow."""

OBJECTIVE_CAR: CarID = 1

Fingerprint = int


class Orientation(StrEnum):
    """Axis a car may slide along (fixed for the car's lifetime)."""

    LEFT_RIGHT = auto()
    UP_DOWN = auto()


class Direction(StrEnum):
    """Single-cell slide directions.

    ``UP`` / ``DOWN`` are only legal for ``UP_DOWN`` cars and ``LEFT`` /
    ``RIGHT`` only for ``LEFT_RIGHT`` cars.
    """

    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()


class ExitKind(StrEnum):
    """Outcome of replaying a candidate."""

    OK = auto()
    CRASH = auto()


Move = Tuple[CarID, Direction]

MutatorFn = Callable[
    ["State", "Testcase", random.Random], Optional["Candidate"]
]
