"""Observers which collect data from :class:`parking_search.executor.Executor` runs.

Observers form a plain ordered list; the executor resets each one before a
run and hands each the final configuration after a successful replay.
Nothing is delivered when a move fails, so a stale value from a previous run
can never be mistaken for the current one.
"""

from typing import Optional, Protocol, Tuple

from parking_search.components import ViewFrom
from parking_search.fingerprint import fingerprint
from parking_search.state import State
from parking_search.types import Fingerprint
from parking_search.views import compute_views


class Observer(Protocol):
    """Receives the final configuration of each successful execution."""

    def pre_exec(self) -> None:
        """Called before every run."""
        ...

    def final_state(self, state: State) -> None:
        """Called with the resulting configuration if every move succeeded."""
        ...

    def flush(self) -> None:
        """Drop whatever the observer holds."""
        ...


class FinalStateObserver:
    """Stashes the final configuration and exposes its fingerprint."""

    def __init__(self) -> None:
        self._state: Optional[State] = None

    @property
    def state(self) -> Optional[State]:
        """The final state, or ``None`` if the last run failed."""
        return self._state

    def fingerprint(self) -> Optional[Fingerprint]:
        if self._state is None:
            return None
        return fingerprint(self._state)

    def pre_exec(self) -> None:
        self._state = None

    def final_state(self, state: State) -> None:
        self._state = state

    def flush(self) -> None:
        self._state = None


class ViewObserver:
    """Collects the per-car views of the final configuration."""

    def __init__(self) -> None:
        self._views: Tuple[ViewFrom, ...] = ()

    @property
    def views(self) -> Tuple[ViewFrom, ...]:
        """Views in car index order; the objective car's comes first."""
        return self._views

    def pre_exec(self) -> None:
        self._views = ()

    def final_state(self, state: State) -> None:
        self._views = compute_views(state)

    def flush(self) -> None:
        self._views = ()
