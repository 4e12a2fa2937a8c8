"""Corpus-driven search loop.

The loop keeps a growing corpus of candidates whose final configurations are
pairwise distinct (by fingerprint) and repeatedly:

1. takes the next parent from the corpus in queue order;
2. asks the run's mutator for a child candidate;
3. replays the child (resuming from the parent's snapshot when possible);
4. drops the child if a move failed;
5. stops with the child as solution if its configuration is solved;
6. otherwise keeps the child iff its fingerprint is new.

Step 6 is the whole coverage mechanism: without it the loop degenerates into
a random walk over the same few configurations.

The loop itself never gives up. ``run`` takes an iteration and/or time
budget; running out of budget leaves the searcher ``EXPLORING`` and the
result simply carries no solution.
"""

import logging
import random
import time
from dataclasses import dataclass, replace
from enum import StrEnum, auto
from typing import Iterable, Optional

from parking_search.board import is_solved
from parking_search.candidate import Candidate, replay
from parking_search.config import SearchConfig
from parking_search.corpus import Corpus, Testcase
from parking_search.errors import ConfigurationError, MoveError
from parking_search.executor import Executor
from parking_search.feedbacks import SeenSet, is_novel, is_objective
from parking_search.mutators import MUTATOR_REGISTRY
from parking_search.observers import FinalStateObserver, ViewObserver
from parking_search.state import State
from parking_search.types import ExitKind, Fingerprint, Move, MutatorFn

logger = logging.getLogger(__name__)


class SearchStatus(StrEnum):
    """Search state machine: ``EXPLORING`` until ``SOLVED`` (terminal)."""

    EXPLORING = auto()
    SOLVED = auto()


@dataclass
class SearchStats:
    """Running counters of a search.

    Attributes:
        iterations: Loop iterations performed.
        executions: Candidates replayed.
        failures: Replays ending in a refused move.
        skipped: Iterations where the mutator proposed nothing.
        rejected: Successful replays whose configuration was already seen.
        corpus_size: Entries in the corpus.
        elapsed: Seconds spent inside ``run``.
    """

    iterations: int = 0
    executions: int = 0
    failures: int = 0
    skipped: int = 0
    rejected: int = 0
    corpus_size: int = 0
    elapsed: float = 0.0

    @property
    def failure_rate(self) -> float:
        """Fraction of executions that crashed (0.0 before any execution)."""
        if self.executions == 0:
            return 0.0
        return self.failures / self.executions


@dataclass(frozen=True)
class SearchResult:
    """Outcome of :meth:`Searcher.run`."""

    status: SearchStatus
    solution: Optional[Candidate]
    stats: SearchStats

    @property
    def found(self) -> bool:
        return self.status == SearchStatus.SOLVED

    @property
    def moves(self) -> list[Move]:
        """Solving moves, or an empty list if nothing was found."""
        return list(self.solution) if self.solution is not None else []


class Searcher:
    """One search over one puzzle with one mutator.

    Several searchers may share a :class:`SeenSet` (e.g. one per thread,
    each with its own corpus and mutator); each configuration is then
    expanded by whichever searcher reaches it first.
    """

    def __init__(
        self,
        initial: State,
        mutator: MutatorFn,
        rng: Optional[random.Random] = None,
        seen: Optional[SeenSet] = None,
        use_snapshots: bool = True,
        log_interval: int = 10000,
    ) -> None:
        if initial.car_count == 0:
            raise ConfigurationError("Refusing to search a board without cars")
        self.initial = initial
        self.mutator = mutator
        self.rng = rng if rng is not None else random.Random()
        self.seen = seen if seen is not None else SeenSet()
        self.log_interval = log_interval
        self.final_observer = FinalStateObserver()
        self.view_observer = ViewObserver()
        self.executor = Executor(
            initial,
            [self.final_observer, self.view_observer],
            use_snapshots=use_snapshots,
        )
        self.corpus = Corpus()
        self.status = SearchStatus.EXPLORING
        self.solution: Optional[Candidate] = None
        self.stats = SearchStats()

    @classmethod
    def from_config(
        cls, initial: State, config: SearchConfig, seen: Optional[SeenSet] = None
    ) -> "Searcher":
        return cls(
            initial,
            MUTATOR_REGISTRY[config.mutator],
            rng=random.Random(config.seed),
            seen=seen,
            use_snapshots=config.snapshots,
            log_interval=config.log_interval,
        )

    # -------- Corpus seeding / restoration --------

    def seed(self) -> None:
        """Evaluate the empty candidate and make it the first corpus entry.

        The initial configuration enters the corpus even if a shared seen-set
        already holds its fingerprint; without a first parent the loop could
        not start.
        """
        if self.corpus or self.status == SearchStatus.SOLVED:
            return
        empty = Candidate.empty()
        exit_kind = self._execute(empty, None)
        state = self.final_observer.state
        if is_objective(exit_kind, state):
            self._solved(empty)
            return
        key = self.final_observer.fingerprint()
        assert state is not None and key is not None
        self.seen.insert_if_absent(key)
        self._keep(empty, key, state)

    def evaluate(self, candidate: Candidate) -> bool:
        """Replay ``candidate`` from scratch and add it if it is interesting.

        Harnesses use this to restore persisted candidates into the corpus.

        Returns:
            bool: True if the candidate solved the puzzle or joined the corpus.
        """
        return self._process(candidate, None)

    def restore_seen(self, fingerprints: Iterable[Fingerprint]) -> None:
        """Mark persisted fingerprints as already explored."""
        for key in fingerprints:
            self.seen.insert_if_absent(key)

    # -------- Main loop --------

    def step(self) -> SearchStatus:
        """Run one propose / replay / record iteration."""
        if self.status == SearchStatus.SOLVED:
            return self.status
        if not self.corpus:
            self.seed()
            if self.status == SearchStatus.SOLVED:
                return self.status

        self.stats.iterations += 1
        parent = self.corpus.next()
        child = self.mutator(self.initial, parent, self.rng)
        if child is None:
            self.stats.skipped += 1
            return self.status
        self._process(child, parent.fingerprint)
        return self.status

    def run(
        self,
        max_iterations: Optional[int] = None,
        time_budget: Optional[float] = None,
    ) -> SearchResult:
        """Iterate until solved or a budget is exhausted.

        With neither budget set the loop only stops once solved, which never
        happens for an unsolvable puzzle.

        Args:
            max_iterations (int | None): Iterations allowed for this call.
            time_budget (float | None): Seconds allowed for this call.

        Returns:
            SearchResult: Status, solution (if any) and a copy of the stats.
        """
        started = time.monotonic()
        logger.info(
            "Searching %dx%d board with %d cars",
            self.initial.height,
            self.initial.width,
            self.initial.car_count,
        )
        self.seed()
        iterations = 0
        while self.status == SearchStatus.EXPLORING:
            if max_iterations is not None and iterations >= max_iterations:
                break
            if time_budget is not None and time.monotonic() - started >= time_budget:
                break
            self.step()
            iterations += 1
        self.stats.elapsed += time.monotonic() - started

        if self.status == SearchStatus.SOLVED:
            assert self.solution is not None
            logger.info(
                "Solved after %d executions: %d moves",
                self.stats.executions,
                len(self.solution),
            )
        else:
            logger.info(
                "No solution within budget after %d executions (corpus %d)",
                self.stats.executions,
                self.stats.corpus_size,
            )
        return self.result()

    def result(self) -> SearchResult:
        return SearchResult(self.status, self.solution, replace(self.stats))

    # -------- Internal helpers --------

    def _execute(
        self, candidate: Candidate, parent: Optional[Fingerprint]
    ) -> ExitKind:
        exit_kind = self.executor.run(candidate, parent)
        self.stats.executions += 1
        if exit_kind == ExitKind.CRASH:
            self.stats.failures += 1
        if self.log_interval and self.stats.executions % self.log_interval == 0:
            logger.info(
                "executions: %d, corpus: %d, failure rate: %.1f%%",
                self.stats.executions,
                self.stats.corpus_size,
                100.0 * self.stats.failure_rate,
            )
        return exit_kind

    def _process(self, candidate: Candidate, parent: Optional[Fingerprint]) -> bool:
        if self.status == SearchStatus.SOLVED:
            return False
        exit_kind = self._execute(candidate, parent)
        if exit_kind == ExitKind.CRASH:
            return False

        state = self.final_observer.state
        if is_objective(exit_kind, state):
            self._solved(candidate)
            return True

        key = self.final_observer.fingerprint()
        if is_novel(exit_kind, key, self.seen):
            assert state is not None and key is not None
            self._keep(candidate, key, state)
            return True
        self.stats.rejected += 1
        return False

    def _keep(self, candidate: Candidate, key: Fingerprint, state: State) -> None:
        self.executor.arena.store(key, candidate, state)
        self.corpus.add(Testcase(candidate, key, self.view_observer.views))
        self.stats.corpus_size = len(self.corpus)

    def _solved(self, candidate: Candidate) -> None:
        self.status = SearchStatus.SOLVED
        self.solution = candidate


def verify_solution(initial: State, moves: Iterable[Move]) -> bool:
    """Replay ``moves`` from scratch and check the puzzle ends solved."""
    try:
        return is_solved(replay(initial, moves))
    except MoveError:
        return False


def solve(initial: State, config: Optional[SearchConfig] = None) -> SearchResult:
    """Build a searcher from ``config`` and run it within the config's budgets."""
    config = config if config is not None else SearchConfig()
    searcher = Searcher.from_config(initial, config)
    return searcher.run(
        max_iterations=config.max_iterations, time_budget=config.time_budget
    )
