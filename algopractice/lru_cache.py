"""A least-recently-used cache of integer keys and values."""

from __future__ import annotations

from collections import OrderedDict


class LRUCache:
    """Fixed-capacity cache that evicts the least recently used key.

    A cache always holds at least the entry just written, even with a
    capacity below one.
    """

    def __init__(self, capacity: int) -> None:
        self.capacity = capacity
        self._data: OrderedDict[int, int] = OrderedDict()

    def __len__(self) -> int:
        return len(self._data)

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def get(self, key: int) -> int:
        """Return the value for ``key`` and mark it used, or -1 if absent."""
        if key not in self._data:
            return -1
        self._data.move_to_end(key)
        return self._data[key]

    def put(self, key: int, value: int) -> None:
        """Store ``value`` under ``key``, evicting the oldest entry if full."""
        if key in self._data:
            self._data.move_to_end(key)
        elif self._data and len(self._data) >= self.capacity:
            self._data.popitem(last=False)
        self._data[key] = value