"""Executor which "runs" a candidate by replaying its moves.

Each run starts either from the initial configuration or, when the candidate
extends a corpus entry whose snapshot is cached, from that snapshot. Both
paths produce the same outcome; the snapshot path just skips the shared
prefix.

A refused move ends the run with ``ExitKind.CRASH``; observers only see the
final configuration of runs that finish with ``ExitKind.OK``.
"""

import logging
from typing import Optional, Sequence

from parking_search.candidate import Candidate, replay
from parking_search.errors import MoveError
from parking_search.observers import Observer
from parking_search.snapshot import SnapshotArena
from parking_search.state import State
from parking_search.types import ExitKind, Fingerprint

logger = logging.getLogger(__name__)


class Executor:
    """Replays candidates against a fixed initial configuration.

    Attributes:
        initial (State): Configuration every candidate starts from.
        observers (Sequence[Observer]): Notified around each run, in order.
        arena (SnapshotArena): Cached configurations keyed by fingerprint.
        use_snapshots (bool): Resume from cached snapshots when possible.
        executions (int): Runs performed.
        replayed_moves (int): Moves handed to replay across all runs (the
            skipped snapshot prefixes are not counted).
    """

    def __init__(
        self,
        initial: State,
        observers: Sequence[Observer],
        arena: Optional[SnapshotArena] = None,
        use_snapshots: bool = True,
    ) -> None:
        self.initial = initial
        self.observers = list(observers)
        self.arena = arena if arena is not None else SnapshotArena()
        self.use_snapshots = use_snapshots
        self.executions = 0
        self.replayed_moves = 0

    def run(
        self, candidate: Candidate, parent: Optional[Fingerprint] = None
    ) -> ExitKind:
        """Replay ``candidate`` and notify observers.

        Args:
            candidate (Candidate): Moves to apply.
            parent (Fingerprint | None): Fingerprint of the corpus entry the
                candidate was derived from, used to look up a snapshot.

        Returns:
            ExitKind: ``OK`` if every move applied, ``CRASH`` otherwise.
        """
        self.executions += 1
        for observer in self.observers:
            observer.pre_exec()

        start, moves = self.initial, candidate.moves
        if self.use_snapshots and parent is not None:
            resumed = self.arena.resume(parent, candidate)
            if resumed is not None:
                start, moves = resumed

        self.replayed_moves += len(moves)
        try:
            final = replay(start, moves)
        except MoveError as exc:
            logger.debug("Candidate of %d moves rejected: %s", len(candidate), exc)
            return ExitKind.CRASH

        for observer in self.observers:
            observer.final_state(final)
        return ExitKind.OK

    def flush(self) -> None:
        """Reset observers and drop cached snapshots."""
        for observer in self.observers:
            observer.flush()
        self.arena.clear()
