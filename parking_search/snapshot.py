"""Snapshot arena for prefix replay.

Caches, per fingerprint, the configuration a corpus candidate reached and
the moves that reached it. A child derived from that candidate then only
needs its *new* moves applied to the cached configuration instead of the
whole list replayed from the initial one.

Snapshots are frozen ``State`` values held by the arena and looked up by
fingerprint; candidates never hold a reference to them, so no candidate can
alter another's cached configuration. The arena grows without bound.
"""

from dataclasses import dataclass
from typing import Dict, Iterator, Optional, Tuple

from pyrsistent.typing import PVector

from parking_search.candidate import Candidate
from parking_search.state import State
from parking_search.types import Fingerprint, Move


@dataclass(frozen=True)
class Snapshot:
    """Configuration reached by replaying ``moves`` from the initial state."""

    moves: PVector[Move]
    state: State


class SnapshotArena:
    """Fingerprint-keyed store of :class:`Snapshot` values."""

    def __init__(self) -> None:
        self._snapshots: Dict[Fingerprint, Snapshot] = {}

    def __len__(self) -> int:
        return len(self._snapshots)

    def __contains__(self, key: Fingerprint) -> bool:
        return key in self._snapshots

    def __iter__(self) -> Iterator[Fingerprint]:
        return iter(self._snapshots)

    def store(self, key: Fingerprint, candidate: Candidate, state: State) -> None:
        """Record the configuration ``candidate`` reaches (first writer wins)."""
        self._snapshots.setdefault(key, Snapshot(candidate.moves, state))

    def get(self, key: Fingerprint) -> Optional[Snapshot]:
        return self._snapshots.get(key)

    def resume(
        self, key: Fingerprint, candidate: Candidate
    ) -> Optional[Tuple[State, PVector[Move]]]:
        """Return the cached state and the moves still to apply.

        Returns ``None`` when no snapshot is cached under ``key`` or the
        cached moves are not a prefix of ``candidate`` (e.g. a move was
        inserted in the middle); the caller then replays from scratch.
        """
        snapshot = self._snapshots.get(key)
        if snapshot is None:
            return None
        prefix = len(snapshot.moves)
        if prefix > len(candidate.moves) or candidate.moves[:prefix] != snapshot.moves:
            return None
        return snapshot.state, candidate.moves[prefix:]

    def clear(self) -> None:
        self._snapshots.clear()
