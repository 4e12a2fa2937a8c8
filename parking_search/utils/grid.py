"""Grid occupancy helpers.

Lookups used by the board model and the view analyzer. All functions are
pure and operate on the immutable :class:`parking_search.state.State`.

Performance: ``cell_index`` caches a reverse index of the immutable
``State.position`` / ``State.car`` PMaps, so each configuration pays for the
index once no matter how many cells are probed.
"""

from functools import lru_cache
from typing import Dict, Mapping, Optional

from parking_search.components import Car, Position
from parking_search.state import State
from parking_search.types import CarID
from parking_search.utils.geometry import occupied_cells


def is_in_bounds(state: State, pos: Position) -> bool:
    """Return True if ``pos`` lies within the grid rectangle."""
    return 0 <= pos.row < state.height and 0 <= pos.column < state.width


@lru_cache(maxsize=4096)
def _cell_index(
    position_store: Mapping[CarID, Position],
    car_store: Mapping[CarID, Car],
) -> Mapping[Position, CarID]:
    """Build a reverse index from occupied cell to car id.

    Both arguments are persistent PMaps, which are hashable and thus safe to
    use with ``lru_cache``. Any new configuration produces a distinct key.
    """
    index: Dict[Position, CarID] = {}
    for car_id, pos in position_store.items():
        for cell in occupied_cells(pos, car_store[car_id]):
            index[cell] = car_id
    return index


def cell_index(state: State) -> Mapping[Position, CarID]:
    """Return the (shared, read-only) cell -> car mapping for ``state``."""
    return _cell_index(state.position, state.car)


def occupant_at(state: State, pos: Position) -> Optional[CarID]:
    """Return the id of the car covering ``pos``, or ``None`` if empty/off-grid."""
    return cell_index(state).get(pos)
