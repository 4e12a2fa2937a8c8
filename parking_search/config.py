"""Search run configuration.

``SearchConfig`` gathers every knob of a run in one frozen dataclass so the
command line, tests and library callers build searches the same way (see
:meth:`parking_search.search.Searcher.from_config`). Values are validated on
construction.
"""

from dataclasses import dataclass
from typing import Optional

from parking_search.errors import ConfigurationError
from parking_search.mutators import MUTATOR_REGISTRY
from parking_search.utils.coordinate import COORDINATE_TYPES


@dataclass(frozen=True)
class SearchConfig:
    """Search settings.

    Attributes:
        mutator: Key into ``MUTATOR_REGISTRY`` (``"tail"`` or ``"random"``).
        seed: RNG seed; ``None`` seeds from system entropy.
        max_iterations: Iteration budget; ``None`` means unlimited.
        time_budget: Wall-clock budget in seconds; ``None`` means unlimited.
        snapshots: Resume replays from cached parent snapshots.
        coordinate: Coordinate type puzzles are loaded with.
        log_interval: Executions between progress log lines (``0`` disables).
    """

    mutator: str = "tail"
    seed: Optional[int] = None
    max_iterations: Optional[int] = None
    time_budget: Optional[float] = None
    snapshots: bool = True
    coordinate: str = "uint8"
    log_interval: int = 10000

    def __post_init__(self) -> None:
        if self.mutator not in MUTATOR_REGISTRY:
            raise ConfigurationError(
                f"Unknown mutator {self.mutator!r}; expected one of "
                f"{sorted(MUTATOR_REGISTRY)}"
            )
        if self.coordinate not in COORDINATE_TYPES:
            raise ConfigurationError(f"Unknown coordinate type {self.coordinate!r}")
        if self.max_iterations is not None and self.max_iterations < 0:
            raise ConfigurationError("max_iterations must not be negative")
        if self.time_budget is not None and self.time_budget < 0:
            raise ConfigurationError("time_budget must not be negative")
        if self.log_interval < 0:
            raise ConfigurationError("log_interval must not be negative")
