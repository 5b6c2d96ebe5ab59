"""Tests for the explicit lookup cache."""

import threading

from services.lookup.cache import LookupCache


def test_get_missing_returns_none():
    assert LookupCache().get("wage:15-1232.00:CA") is None


def test_set_then_get():
    cache = LookupCache()
    cache.set("crosswalk:army:25B", ["15-1232.00"])
    assert cache.get("crosswalk:army:25B") == ["15-1232.00"]
    assert "crosswalk:army:25B" in cache
    assert len(cache) == 1


def test_instances_are_isolated():
    a, b = LookupCache(), LookupCache()
    a.set("table:zip_state", {"10001": "NY"})
    assert "table:zip_state" not in b


def test_clear():
    cache = LookupCache()
    cache.set("a", 1)
    cache.set("b", 2)
    cache.clear()
    assert len(cache) == 0
    assert cache.keys() == []


def test_concurrent_writes_all_land():
    cache = LookupCache()

    def writer(start: int):
        for i in range(start, start + 200):
            cache.set(f"k:{i}", i)

    threads = [threading.Thread(target=writer, args=(n * 200,)) for n in range(5)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(cache) == 1000
