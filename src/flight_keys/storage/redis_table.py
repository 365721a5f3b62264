"""Redis-backed table visible to every process sharing the server."""

from __future__ import annotations

import logging

import redis

from .base import KeyValueTable

logger = logging.getLogger(__name__)


class RedisTable(KeyValueTable):
    """One Redis command per primitive, so every write is atomic."""

    def __init__(self, client: redis.Redis) -> None:
        self._redis = client

    @classmethod
    def from_url(cls, url: str, socket_timeout: float | None = None) -> RedisTable:
        client = redis.Redis.from_url(
            url,
            decode_responses=True,
            socket_timeout=socket_timeout,
            socket_connect_timeout=socket_timeout,
        )
        return cls(client)

    def hget(self, key: str, field: str) -> str | None:
        return self._redis.hget(key, field)

    def hset(self, key: str, field: str, value: str) -> None:
        self._redis.hset(key, field, value)

    def hdel(self, key: str, field: str) -> None:
        self._redis.hdel(key, field)

    def hgetall(self, key: str) -> dict[str, str]:
        return self._redis.hgetall(key)

    def sadd(self, key: str, member: str) -> None:
        self._redis.sadd(key, member)

    def sismember(self, key: str, member: str) -> bool:
        return bool(self._redis.sismember(key, member))

    def smembers(self, key: str) -> set[str]:
        return set(self._redis.smembers(key))

    def delete(self, *keys: str) -> None:
        if keys:
            self._redis.delete(*keys)

    def ping(self) -> bool:
        try:
            return bool(self._redis.ping())
        except redis.exceptions.RedisError as exc:
            logger.warning("Redis ping failed: %s", exc)
            return False

    def close(self) -> None:
        self._redis.close()
        logger.debug("Redis connection closed")
