import threading

import pytest

from parking_search.candidate import Candidate
from parking_search.corpus import Corpus, Testcase
from parking_search.feedbacks import SeenSet, is_novel, is_objective
from parking_search.levels import parse_map
from parking_search.types import ExitKind


def _testcase(key: int) -> Testcase:
    return Testcase(Candidate.empty(), key, ())


def test_seen_set_insert_if_absent() -> None:
    seen = SeenSet([1])
    assert not seen.insert_if_absent(1)
    assert seen.insert_if_absent(2)
    assert not seen.insert_if_absent(2)
    assert 2 in seen
    assert sorted(seen) == [1, 2]
    assert len(seen) == 2
    seen.clear()
    assert len(seen) == 0


def test_seen_set_claims_each_key_once_across_threads() -> None:
    seen = SeenSet()
    claimed = []
    lock = threading.Lock()

    def worker() -> None:
        mine = [key for key in range(2000) if seen.insert_if_absent(key)]
        with lock:
            claimed.extend(mine)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert sorted(claimed) == list(range(2000))
    assert len(seen) == 2000


def test_objective_requires_successful_solved_run() -> None:
    solved = parse_map(".oo")
    unsolved = parse_map("oo.")
    assert is_objective(ExitKind.OK, solved)
    assert not is_objective(ExitKind.OK, unsolved)
    assert not is_objective(ExitKind.CRASH, solved)
    assert not is_objective(ExitKind.CRASH, None)


def test_novelty_records_new_fingerprints_only() -> None:
    seen = SeenSet()
    assert is_novel(ExitKind.OK, 5, seen)
    assert not is_novel(ExitKind.OK, 5, seen)
    assert not is_novel(ExitKind.CRASH, 6, seen)
    assert not is_novel(ExitKind.OK, None, seen)
    assert 6 not in seen


def test_corpus_cycles_in_queue_order() -> None:
    corpus = Corpus()
    assert [corpus.add(_testcase(key)) for key in (10, 20, 30)] == [0, 1, 2]
    order = [corpus.next().fingerprint for _ in range(7)]
    assert order == [10, 20, 30, 10, 20, 30, 10]
    assert len(corpus) == 3
    assert [testcase.fingerprint for testcase in corpus] == [10, 20, 30]


def test_corpus_next_reaches_entries_added_later() -> None:
    corpus = Corpus()
    corpus.add(_testcase(1))
    assert corpus.next().fingerprint == 1
    corpus.add(_testcase(2))
    assert {corpus.next().fingerprint for _ in range(2)} == {1, 2}


def test_empty_corpus_has_no_next() -> None:
    with pytest.raises(IndexError):
        Corpus().next()
