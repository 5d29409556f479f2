from algopractice.lru_cache import LRUCache


def test_source_sequence():
    cache = LRUCache(2)
    cache.put(2, 1)
    cache.put(1, 1)
    cache.put(2, 3)
    cache.put(4, 1)
    assert cache.get(1) == -1
    assert cache.get(2) == 3


def test_get_refreshes_recency():
    cache = LRUCache(2)
    cache.put(1, 1)
    cache.put(2, 2)
    assert cache.get(1) == 1
    cache.put(3, 3)
    assert cache.get(2) == -1
    assert cache.get(1) == 1
    assert cache.get(3) == 3


def test_missing_key():
    assert LRUCache(1).get(42) == -1


def test_size_never_exceeds_capacity():
    cache = LRUCache(3)
    for key in range(10):
        cache.put(key, key * 10)
    assert len(cache) == 3
    assert [cache.get(k) for k in (7, 8, 9)] == [70, 80, 90]


def test_zero_capacity_keeps_last_entry():
    cache = LRUCache(0)
    cache.put(1, 5)
    cache.put(2, 6)
    assert cache.get(1) == -1
    assert cache.get(2) == 6