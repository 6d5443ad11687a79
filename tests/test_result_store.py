"""
QBayes Tests: result_store
FIFO eviction, type filtering, collisions and copy-on-read.
"""

from __future__ import annotations

import itertools
import re
import threading

import pytest

from qbayes.core.errors import ConfigError
from qbayes.core.result_store import ResultStore, utc_timestamp


def test_identifier_is_type_and_timestamp(ticking_clock) -> None:
    store = ResultStore(clock=ticking_clock)
    identifier = store.store("bayes", {"bayes_factor": 0.25})
    assert identifier == "bayes_2026-01-01T00:00:00.001Z"
    assert identifier in store
    assert store.get(identifier).timestamp == "2026-01-01T00:00:00.001Z"


def test_default_timestamp_is_iso_millis_utc() -> None:
    assert re.fullmatch(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z", utc_timestamp())


def test_fifo_eviction_past_capacity(ticking_clock) -> None:
    store = ResultStore(clock=ticking_clock)
    ids = [store.store("entropy", i) for i in range(101)]

    assert len(store) == 100
    assert ids[0] not in store
    assert ids[100] in store
    assert [key for key, _ in store.query()] == ids[1:]


def test_eviction_ignores_type(ticking_clock) -> None:
    store = ResultStore(capacity=3, clock=ticking_clock)
    first = store.store("bayes", 1)
    store.store("entropy", 2)
    store.store("entropy", 3)
    store.store("entropy", 4)

    assert first not in store
    assert store.query("bayes") == []


def test_query_filters_by_type_in_insertion_order(ticking_clock) -> None:
    store = ResultStore(clock=ticking_clock)
    a = store.store("bayes", "a")
    store.store("entropy", "x")
    b = store.store("bayes", "b")
    store.store("decision", "y")
    c = store.store("bayes", "c")

    bayes = store.query("bayes")
    assert [key for key, _ in bayes] == [a, b, c]
    assert [entry.result for _, entry in bayes] == ["a", "b", "c"]
    assert all(entry.type == "bayes" for _, entry in bayes)
    assert len(store.query()) == 5


def test_same_millisecond_collision_overwrites_in_place(capsys: pytest.CaptureFixture) -> None:
    times = iter(["t1", "t2", "t2"])
    store = ResultStore(clock=lambda: next(times))
    first = store.store("bayes", "old-first")
    second = store.store("bayes", "old")
    again = store.store("bayes", "new")

    assert second == again
    assert len(store) == 2
    assert [key for key, _ in store.query()] == [first, second]
    assert store.get(second).result == "new"
    assert "collision" in capsys.readouterr().out


def test_callers_get_copies(ticking_clock) -> None:
    store = ResultStore(clock=ticking_clock)
    payload = {"A": 0.5}
    identifier = store.store("inference", payload)

    payload["A"] = 99.0
    assert store.get(identifier).result == {"A": 0.5}

    (_, entry), = store.query("inference")
    entry.result["A"] = -1.0
    assert store.get(identifier).result == {"A": 0.5}


def test_independent_instances_do_not_share_state(ticking_clock) -> None:
    one = ResultStore(clock=ticking_clock)
    two = ResultStore(clock=ticking_clock)
    one.store("bayes", 1)
    assert len(two) == 0


@pytest.mark.parametrize("capacity", [0, -1, 2.5, True])
def test_capacity_must_be_positive_int(capacity) -> None:
    with pytest.raises(ConfigError):
        ResultStore(capacity=capacity)


def test_missing_identifier_returns_none() -> None:
    assert ResultStore().get("nope") is None


def test_to_frame(ticking_clock) -> None:
    store = ResultStore(clock=ticking_clock)
    store.store("bayes", {"bayes_factor": 1.0})
    store.store("entropy", 0.5)

    frame = store.to_frame()
    assert list(frame.columns) == ["identifier", "type", "timestamp", "result"]
    assert frame["type"].tolist() == ["bayes", "entropy"]
    assert len(store.to_frame("entropy")) == 1


def test_concurrent_writers_respect_capacity_and_order() -> None:
    n_threads, per_thread, capacity = 8, 100, 50
    counter = itertools.count(1)
    counter_lock = threading.Lock()

    def _clock() -> str:
        with counter_lock:
            return f"{next(counter):06d}"

    store = ResultStore(capacity=capacity, clock=_clock)
    written = {}
    start = threading.Barrier(n_threads)

    def _writer(worker: int) -> None:
        start.wait()
        written[worker] = [store.store(f"w{worker}", i) for i in range(per_thread)]

    threads = [threading.Thread(target=_writer, args=(w,)) for w in range(n_threads)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    all_ids = [i for ids in written.values() for i in ids]
    assert len(set(all_ids)) == n_threads * per_thread
    assert len(store) == capacity

    kept = [key for key, _ in store.query()]
    assert len(kept) == capacity
    assert set(kept) <= set(all_ids)
    # each writer's surviving entries are its most recent ones, still in write order
    for worker, ids in written.items():
        survivors = [key for key in kept if key.startswith(f"w{worker}_")]
        assert survivors == ids[len(ids) - len(survivors):]
