"""Canonical configuration fingerprints.

A fingerprint identifies a configuration for deduplication in the search
loop. Only car positions are hashed, in car index order (objective car
first): lengths and orientations never change during a run and move history
is irrelevant to which states are reachable next.

Positions are packed as the state's coordinate dtype and hashed with 64-bit
BLAKE2b, which is stable across processes (unlike ``hash()``), so persisted
fingerprints can be restored into a seen-set later. Distinct configurations
hashing equal is an accepted approximation: it may hide a state from the
search but never produces a bogus solution, because solutions are checked on
the real board.
"""

from hashlib import blake2b

import numpy as np

from parking_search.state import State
from parking_search.types import Fingerprint
from parking_search.utils.coordinate import coordinate_dtype

FINGERPRINT_BYTES = 8


def position_array(state: State) -> np.ndarray:
    """``(cars, 2)`` array of ``(row, column)`` anchors in car index order."""
    rows = [
        (state.position[car_id].row, state.position[car_id].column)
        for car_id in sorted(state.position.keys())
    ]
    # fixed byte order keeps fingerprints portable between machines
    dtype = coordinate_dtype(state.coordinate).newbyteorder("<")
    return np.array(rows, dtype=dtype).reshape(-1, 2)


def fingerprint(state: State) -> Fingerprint:
    """Return the 64-bit fingerprint of ``state``'s car positions."""
    digest = blake2b(position_array(state).tobytes(), digest_size=FINGERPRINT_BYTES)
    return int.from_bytes(digest.digest(), "little")
