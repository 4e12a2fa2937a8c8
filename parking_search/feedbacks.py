"""Feedbacks deciding what happens to an executed candidate.

* The *objective* fires when the run succeeded and the final configuration
  is solved; it is checked on the real board, never on a fingerprint.
* The *novelty* feedback keeps a candidate iff its final configuration's
  fingerprint enters the seen-set for the first time.

The seen-set may be shared by several searchers; ``insert_if_absent`` is
atomic so two workers never both claim the same configuration.
"""

import threading
from typing import Iterable, Iterator, Optional, Set

from parking_search.board import is_solved
from parking_search.state import State
from parking_search.types import ExitKind, Fingerprint


class SeenSet:
    """Thread-safe set of fingerprints already explored."""

    def __init__(self, fingerprints: Iterable[Fingerprint] = ()) -> None:
        self._lock = threading.Lock()
        self._seen: Set[Fingerprint] = set(fingerprints)

    def __len__(self) -> int:
        with self._lock:
            return len(self._seen)

    def __contains__(self, key: Fingerprint) -> bool:
        with self._lock:
            return key in self._seen

    def __iter__(self) -> Iterator[Fingerprint]:
        with self._lock:
            return iter(list(self._seen))

    def insert_if_absent(self, key: Fingerprint) -> bool:
        """Add ``key``; return True iff it was not present before."""
        with self._lock:
            if key in self._seen:
                return False
            self._seen.add(key)
            return True

    def clear(self) -> None:
        with self._lock:
            self._seen.clear()


def is_objective(exit_kind: ExitKind, state: Optional[State]) -> bool:
    """The run did not crash and reached a solved configuration."""
    return exit_kind == ExitKind.OK and state is not None and is_solved(state)


def is_novel(
    exit_kind: ExitKind, key: Optional[Fingerprint], seen: SeenSet
) -> bool:
    """The run did not crash and its fingerprint was never seen before.

    Records ``key`` in ``seen`` as a side effect when it is novel.
    """
    if exit_kind != ExitKind.OK or key is None:
        return False
    return seen.insert_if_absent(key)
