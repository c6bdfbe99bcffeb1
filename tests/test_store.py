# File: tests/test_store.py
from concurrent.futures import ThreadPoolExecutor

from link_scout.crawler.store import VisitedStore


def test_claim_inserts_once():
    store = VisitedStore()
    assert store.claim("http://foo.com/") is True
    assert store.claim("http://foo.com/") is False
    assert store.claim("http://foo.com/bar") is True
    assert store.snapshot() == ["http://foo.com/", "http://foo.com/bar"]
    assert len(store) == 2
    assert "http://foo.com/bar" in store
    assert "http://foo.com/baz" not in store


def test_snapshot_is_a_copy():
    store = VisitedStore()
    store.claim("a")
    snap = store.snapshot()
    snap.append("b")
    assert store.snapshot() == ["a"]


def test_fetched_counter_is_independent_of_claims():
    store = VisitedStore()
    store.claim("a")
    store.claim("b")
    store.mark_fetched()
    assert store.fetched == 1
    assert len(store) == 2
    assert list(store) == ["a", "b"]


def test_concurrent_claims_from_threads():
    store = VisitedStore()
    urls = [f"http://foo.com/{i % 50}" for i in range(2000)]

    with ThreadPoolExecutor(max_workers=16) as pool:
        results = list(pool.map(store.claim, urls))

    assert sum(results) == 50
    snapshot = store.snapshot()
    assert len(snapshot) == len(set(snapshot)) == 50


def test_concurrent_mark_fetched():
    store = VisitedStore()

    with ThreadPoolExecutor(max_workers=8) as pool:
        for _ in pool.map(lambda _: store.mark_fetched(), range(1000)):
            pass

    assert store.fetched == 1000
