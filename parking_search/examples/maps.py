"""Built-in puzzles in the text map format of :mod:`parking_search.levels.parse`.

``EXAMPLE_MAPS`` maps a name to map text; ``load_example`` parses one.
"""

from typing import Dict

from parking_search.levels import parse_map
from parking_search.state import State

TRIVIAL = """
oo.
.22
"""

BLOCKED = """
33oo22.
"""

FIRST_STEPS = """
aa.b..
...b.f
.oo..f
c.....
c.dd..
....ee
"""

TRAFFIC_JAM = """
aab..c
d.b..c
doo..c
d...ee
..fff.
....gg
"""

EXAMPLE_MAPS: Dict[str, str] = {
    "trivial": TRIVIAL,
    "blocked": BLOCKED,
    "first_steps": FIRST_STEPS,
    "traffic_jam": TRAFFIC_JAM,
}


def load_example(name: str, coordinate: str = "uint8") -> State:
    """Parse the built-in puzzle ``name``.

    Raises:
        KeyError: If there is no such example.
    """
    return parse_map(EXAMPLE_MAPS[name], coordinate=coordinate)
