"""Explicit memo cache shared by the table-backed resolvers.

One instance is injected into each resolver. Entries are never evicted;
they live as long as the cache object does.
"""

import threading
from typing import Any


class LookupCache:
    """Thread-safe mapping from a composite lookup key to a computed result.

    Keys follow ``<source>:<param>[:<param>...]``, e.g. ``wage:15-1232.00:CA``.
    """

    def __init__(self) -> None:
        self._entries: dict[str, Any] = {}
        self._lock = threading.Lock()

    def get(self, key: str) -> Any | None:
        with self._lock:
            return self._entries.get(key)

    def set(self, key: str, value: Any) -> None:
        with self._lock:
            self._entries[key] = value

    def contains(self, key: str) -> bool:
        with self._lock:
            return key in self._entries

    def keys(self) -> list[str]:
        with self._lock:
            return list(self._entries)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __contains__(self, key: str) -> bool:
        return self.contains(key)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
