"""Abstract key-value table shared by cooperating processes."""

from __future__ import annotations

import abc


class KeyValueTable(abc.ABC):
    """Hash and set primitives addressed by namespaced keys.

    Each primitive must be atomic on its own: another process sees a write
    either wholly or not at all. Nothing spans more than one call.
    """

    @abc.abstractmethod
    def hget(self, key: str, field: str) -> str | None:
        """Return one field of the hash at *key*."""

    @abc.abstractmethod
    def hset(self, key: str, field: str, value: str) -> None:
        """Insert or overwrite one field of the hash at *key*."""

    @abc.abstractmethod
    def hdel(self, key: str, field: str) -> None:
        """Remove one field of the hash at *key*; missing fields are ignored."""

    @abc.abstractmethod
    def hgetall(self, key: str) -> dict[str, str]:
        """Return a snapshot copy of the whole hash at *key*."""

    @abc.abstractmethod
    def sadd(self, key: str, member: str) -> None:
        """Add *member* to the set at *key*."""

    @abc.abstractmethod
    def sismember(self, key: str, member: str) -> bool:
        """Return True if *member* is in the set at *key*."""

    @abc.abstractmethod
    def smembers(self, key: str) -> set[str]:
        """Return a snapshot copy of the set at *key*."""

    @abc.abstractmethod
    def delete(self, *keys: str) -> None:
        """Drop the given keys entirely."""

    @abc.abstractmethod
    def ping(self) -> bool:
        """Return True if the backend is reachable."""

    def close(self) -> None:  # noqa: B027
        """Release any held resources (connections, pools, etc.)."""
