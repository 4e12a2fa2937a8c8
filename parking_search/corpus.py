"""In-memory corpus of distinct-fingerprint candidates.

Every entry reached a configuration no earlier entry reached. Parents are
handed out in queue order, cycling back to the first entry after the last,
which gives breadth-first-like coverage: older (shorter) entries are expanded
as often as newer ones.
"""

from dataclasses import dataclass
from typing import Iterator, List, Tuple

from parking_search.candidate import Candidate
from parking_search.components import ViewFrom
from parking_search.types import Fingerprint


@dataclass(frozen=True)
class Testcase:
    """Corpus entry.

    Attributes:
        candidate (Candidate): Moves reaching the configuration.
        fingerprint (Fingerprint): Fingerprint of that configuration.
        views (Tuple[ViewFrom, ...]): Views of that configuration, stashed for
            the tail mutator.
    """

    __test__ = False  # keep pytest from collecting this class

    candidate: Candidate
    fingerprint: Fingerprint
    views: Tuple[ViewFrom, ...]


class Corpus:
    """Ordered pool of testcases with a cyclic queue cursor."""

    def __init__(self) -> None:
        self._entries: List[Testcase] = []
        self._cursor = 0

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Testcase]:
        return iter(self._entries)

    def add(self, testcase: Testcase) -> int:
        """Append ``testcase`` and return its index."""
        self._entries.append(testcase)
        return len(self._entries) - 1

    def next(self) -> Testcase:
        """Return the next parent in queue order.

        Raises:
            IndexError: If the corpus is empty.
        """
        if not self._entries:
            raise IndexError("Corpus is empty")
        testcase = self._entries[self._cursor % len(self._entries)]
        self._cursor = (self._cursor + 1) % len(self._entries)
        return testcase
