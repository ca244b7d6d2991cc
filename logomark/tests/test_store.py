from __future__ import annotations

import threading
from concurrent.futures import ThreadPoolExecutor

from logomark.store import HashDedupStore, LogoHashRecord


def _record(i: int) -> LogoHashRecord:
    return LogoHashRecord(hash=f"h{i:04d}", brand_name="Acme", algorithm="starburst" if i % 2 else "gear_cog", variant=i, quality_score=80)


def test_record_and_contains():
    store = HashDedupStore()
    assert len(store) == 0
    store.record(_record(1))
    assert store.contains("h0001")
    assert "h0001" in store
    assert 42 not in store
    assert not store.contains("missing")


def test_concurrent_appends_are_not_lost():
    store = HashDedupStore()
    with ThreadPoolExecutor(max_workers=8) as ex:
        list(ex.map(lambda i: store.record(_record(i)), range(2000)))
    assert len(store) == 2000
    assert len({r.hash for r in store.records()}) == 2000
    assert store.by_algorithm() == {"starburst": 1000, "gear_cog": 1000}


def test_caller_supplied_lock_is_used():
    class CountingLock:
        def __init__(self):
            self._lock = threading.Lock()
            self.entries = 0

        def __enter__(self):
            self.entries += 1
            return self._lock.__enter__()

        def __exit__(self, *exc):
            return self._lock.__exit__(*exc)

    lock = CountingLock()
    store = HashDedupStore(lock=lock)
    store.record(_record(1))
    store.record(_record(2))
    assert lock.entries == 2


def test_records_snapshot_is_immutable_view():
    store = HashDedupStore()
    store.record(_record(1))
    snap = store.records()
    store.record(_record(2))
    assert len(snap) == 1
    assert isinstance(snap, tuple)
