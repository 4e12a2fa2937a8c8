import random

import pytest

from parking_search.board import is_solved
from parking_search.candidate import Candidate, replay
from parking_search.config import SearchConfig
from parking_search.examples import load_example
from parking_search.feedbacks import SeenSet
from parking_search.fingerprint import fingerprint
from parking_search.levels import parse_map
from parking_search.mutators import random_mutator, tail_mutator
from parking_search.search import (
    SearchStatus,
    Searcher,
    solve,
    verify_solution,
)
from parking_search.types import Direction, ExitKind

TWO_ROWS = """
oo.
.22
"""


@pytest.mark.parametrize("mutator", [random_mutator, tail_mutator])
@pytest.mark.parametrize("text", ["oo.", TWO_ROWS, "oo...\n.22.."])
def test_small_boards_are_solved(text: str, mutator) -> None:
    initial = parse_map(text)
    searcher = Searcher(initial, mutator, rng=random.Random(42))
    result = searcher.run(max_iterations=2000)

    assert result.status == SearchStatus.SOLVED
    assert result.found
    assert len(result.moves) > 0
    assert verify_solution(initial, result.moves)
    assert is_solved(replay(initial, result.moves))


@pytest.mark.parametrize("name", ["trivial", "first_steps", "traffic_jam"])
def test_examples_are_solved_with_tail_mutator(name: str) -> None:
    initial = load_example(name)
    result = solve(initial, SearchConfig(seed=1, max_iterations=200000))
    assert result.found
    assert verify_solution(initial, result.moves)
    assert result.stats.failures == 0


def test_random_mutator_solves_first_steps() -> None:
    initial = load_example("first_steps")
    result = solve(
        initial, SearchConfig(mutator="random", seed=3, max_iterations=200000)
    )
    assert result.found
    assert verify_solution(initial, result.moves)
    assert result.stats.failures > 0
    assert 0.0 < result.stats.failure_rate < 1.0


def test_unsolvable_board_exhausts_iteration_budget() -> None:
    initial = load_example("blocked")
    searcher = Searcher(initial, tail_mutator, rng=random.Random(0))
    result = searcher.run(max_iterations=200)

    assert result.status == SearchStatus.EXPLORING
    assert not result.found
    assert result.solution is None
    assert result.moves == []
    assert result.stats.iterations == 200
    # 2 slides right, then o, then 3; every slide can be undone
    assert result.stats.corpus_size == 4
    assert result.stats.rejected > 0


def test_search_can_be_resumed_after_budget() -> None:
    initial = load_example("blocked")
    searcher = Searcher(initial, random_mutator, rng=random.Random(0))
    searcher.run(max_iterations=50)
    result = searcher.run(max_iterations=50)
    assert result.stats.iterations == 100
    assert result.status == SearchStatus.EXPLORING


def test_zero_time_budget_only_seeds() -> None:
    initial = load_example("traffic_jam")
    result = Searcher(initial, tail_mutator).run(time_budget=0)
    assert not result.found
    assert result.stats.iterations == 0
    assert result.stats.executions == 1
    assert result.stats.corpus_size == 1


def test_already_solved_board_returns_empty_solution() -> None:
    initial = parse_map(".oo")
    searcher = Searcher(initial, tail_mutator)
    result = searcher.run(max_iterations=10)

    assert result.found
    assert result.solution == Candidate.empty()
    assert result.moves == []
    assert result.stats.executions == 1
    assert len(searcher.corpus) == 0
    assert searcher.step() == SearchStatus.SOLVED
    assert verify_solution(initial, [])


def test_corpus_fingerprints_are_distinct() -> None:
    initial = load_example("traffic_jam")
    searcher = Searcher(initial, random_mutator, rng=random.Random(9))
    searcher.run(max_iterations=1000)
    keys = [testcase.fingerprint for testcase in searcher.corpus]
    assert len(keys) == len(set(keys))
    for testcase in searcher.corpus:
        assert fingerprint(replay(initial, testcase.candidate.moves)) == testcase.fingerprint
        assert testcase.fingerprint in searcher.seen


def test_shared_seen_set_splits_work_between_searchers() -> None:
    initial = load_example("traffic_jam")
    seen = SeenSet()
    first = Searcher(initial, tail_mutator, rng=random.Random(1), seen=seen)
    second = Searcher(initial, random_mutator, rng=random.Random(2), seen=seen)
    for _ in range(300):
        first.step()
        second.step()

    start = fingerprint(initial)
    first_keys = {testcase.fingerprint for testcase in first.corpus}
    second_keys = {testcase.fingerprint for testcase in second.corpus}
    assert first_keys & second_keys == {start}
    assert first_keys | second_keys <= set(seen)


def test_snapshots_do_not_change_the_search() -> None:
    initial = load_example("traffic_jam")
    results = []
    replayed = []
    for use_snapshots in (True, False):
        searcher = Searcher(
            initial,
            tail_mutator,
            rng=random.Random(5),
            use_snapshots=use_snapshots,
        )
        results.append(searcher.run(max_iterations=200000))
        replayed.append(searcher.executor.replayed_moves)

    with_snapshots, without_snapshots = results
    assert with_snapshots.found
    assert with_snapshots.solution == without_snapshots.solution
    assert with_snapshots.stats.executions == without_snapshots.stats.executions
    assert replayed[0] < replayed[1]


def test_flush_does_not_affect_full_replay() -> None:
    initial = load_example("first_steps")
    searcher = Searcher(initial, tail_mutator, rng=random.Random(8))
    result = searcher.run(max_iterations=200000)
    assert result.solution is not None

    searcher.executor.flush()
    searcher.executor.flush()
    assert len(searcher.executor.arena) == 0
    assert searcher.executor.run(result.solution) == ExitKind.OK
    assert is_solved(searcher.final_observer.state)


def test_evaluate_restores_a_persisted_corpus() -> None:
    initial = load_example("traffic_jam")
    original = Searcher(initial, tail_mutator, rng=random.Random(4))
    original.run(max_iterations=100)
    persisted = [testcase.candidate for testcase in original.corpus]
    keys = {testcase.fingerprint for testcase in original.corpus}

    restored = Searcher(initial, tail_mutator)
    restored.seed()
    added = [restored.evaluate(candidate) for candidate in persisted]
    assert added == [False] + [True] * (len(persisted) - 1)
    assert {testcase.fingerprint for testcase in restored.corpus} == keys

    fresh = Searcher(initial, tail_mutator)
    fresh.restore_seen(keys)
    assert not any(fresh.evaluate(candidate) for candidate in persisted)
    assert len(fresh.corpus) == 0


def test_verify_solution_rejects_bad_move_lists() -> None:
    initial = parse_map("oo.")
    assert verify_solution(initial, [(1, Direction.RIGHT)])
    assert not verify_solution(initial, [])
    assert not verify_solution(initial, [(1, Direction.LEFT)])
    assert not verify_solution(initial, [(1, Direction.RIGHT), (1, Direction.RIGHT)])
