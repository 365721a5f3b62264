"""Process-local table, used in tests and when Redis is unreachable."""

from __future__ import annotations

import threading

from .base import KeyValueTable


class InMemoryTable(KeyValueTable):
    """Dict-backed table guarded by a lock."""

    def __init__(self) -> None:
        self._hashes: dict[str, dict[str, str]] = {}
        self._sets: dict[str, set[str]] = {}
        self._lock = threading.Lock()

    def hget(self, key: str, field: str) -> str | None:
        with self._lock:
            return self._hashes.get(key, {}).get(field)

    def hset(self, key: str, field: str, value: str) -> None:
        with self._lock:
            self._hashes.setdefault(key, {})[field] = value

    def hdel(self, key: str, field: str) -> None:
        with self._lock:
            fields = self._hashes.get(key)
            if fields is None:
                return
            fields.pop(field, None)
            if not fields:
                del self._hashes[key]

    def hgetall(self, key: str) -> dict[str, str]:
        with self._lock:
            return dict(self._hashes.get(key, {}))

    def sadd(self, key: str, member: str) -> None:
        with self._lock:
            self._sets.setdefault(key, set()).add(member)

    def sismember(self, key: str, member: str) -> bool:
        with self._lock:
            return member in self._sets.get(key, ())

    def smembers(self, key: str) -> set[str]:
        with self._lock:
            return set(self._sets.get(key, ()))

    def delete(self, *keys: str) -> None:
        with self._lock:
            for key in keys:
                self._hashes.pop(key, None)
                self._sets.pop(key, None)

    def ping(self) -> bool:
        return True
