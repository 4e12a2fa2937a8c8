"""Built-in mutator functions.

Each *mutator* maps (initial state, parent testcase, rng) to a child
:class:`parking_search.candidate.Candidate`, or ``None`` when it has nothing
to propose. The search loop picks one mutator per run by name from
:data:`MUTATOR_REGISTRY`.

Contract (``MutatorFn``):

* Must not modify the parent (candidates and views are immutable anyway).
* Returns ``None`` instead of a candidate identical to the parent.
* Raises ``ConfigurationError`` on a board without cars.

``random_mutator`` is unconstrained: it may well propose moves the board
refuses, and most of its children on crowded boards die during replay.
``tail_mutator`` only appends slides the parent's views prove legal, so every
child replays successfully; children can still be dropped as not novel.
"""

import random
from typing import Dict, List, Optional, Tuple

from parking_search.candidate import Candidate
from parking_search.corpus import Testcase
from parking_search.errors import ConfigurationError
from parking_search.state import State
from parking_search.types import CarID, Direction, MutatorFn
from parking_search.utils.geometry import directions_for


def random_mutator(
    initial: State, parent: Testcase, rng: random.Random
) -> Optional[Candidate]:
    """Insert one arbitrary orientation-legal move at an arbitrary position.

    The car, the insertion index (``0..len(moves)``) and the direction are
    each drawn uniformly.
    """
    if initial.car_count == 0:
        raise ConfigurationError("Cannot mutate moves on a board without cars")
    car_id = rng.randrange(initial.car_count) + 1
    index = rng.randint(0, len(parent.candidate))
    direction = rng.choice(directions_for(initial.car[car_id].orientation))
    return parent.candidate.insert(index, (car_id, direction))


def tail_choices(parent: Testcase) -> List[Tuple[CarID, Direction, int]]:
    """Every ``(car, direction, steps)`` slide legal after ``parent``'s moves."""
    choices: List[Tuple[CarID, Direction, int]] = []
    for car_id, view_from in enumerate(parent.views, start=1):
        for view in (view_from.backward, view_from.forward):
            for steps in range(1, view.distance + 1):
                choices.append((car_id, view.direction, steps))
    return choices


def tail_mutator(
    initial: State, parent: Testcase, rng: random.Random
) -> Optional[Candidate]:
    """Append a slide of one or more cells proven legal by the parent's views.

    Returns ``None`` if no car can move at all.
    """
    if initial.car_count == 0 or not parent.views:
        raise ConfigurationError("Cannot mutate moves on a board without cars")
    choices = tail_choices(parent)
    if not choices:
        return None
    car_id, direction, steps = rng.choice(choices)
    return parent.candidate.append((car_id, direction), steps)


MUTATOR_REGISTRY: Dict[str, MutatorFn] = {
    "random": random_mutator,
    "tail": tail_mutator,
}
"""Registry of built-in mutator names to callables."""
