"""Position component.

Immutable grid coordinates of a car's anchor cell (its top-left cell). Stored
in ``State.position`` keyed by car id.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Position:
    """Grid coordinate.

    Attributes:
        row: Row index (0 at top).
        column: Column index (0 at left).
    """

    row: int
    column: int
