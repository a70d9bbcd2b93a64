"""Key-value store backends.

The game storage service only needs string get/set/delete/clear; any object
with these coroutines can be injected.
"""

import logging
from typing import Protocol

from upstash_redis.asyncio import Redis

from bowling_scores.config import get_settings
from bowling_scores.dependencies.redis import get_redis_client
from bowling_scores.exceptions import PersistenceError

logger = logging.getLogger(__name__)


class KeyValueStore(Protocol):
    async def get(self, key: str) -> str | None: ...

    async def set(self, key: str, value: str) -> None: ...

    async def delete(self, key: str) -> None: ...

    async def clear(self) -> None: ...


class InMemoryStore:
    """Dict-backed store for tests and local play."""

    def __init__(self, data: dict[str, str] | None = None):
        self._data: dict[str, str] = dict(data or {})

    async def get(self, key: str) -> str | None:
        return self._data.get(key)

    async def set(self, key: str, value: str) -> None:
        self._data[key] = value

    async def delete(self, key: str) -> None:
        self._data.pop(key, None)

    async def clear(self) -> None:
        self._data.clear()


class RedisStore:
    """Store backed by Upstash Redis.

    clear() only removes keys under the configured prefix.
    """

    def __init__(self, redis_client: Redis | None = None, prefix: str | None = None):
        self._redis = redis_client or get_redis_client()
        self._prefix = prefix or get_settings().STORAGE_KEY_PREFIX

    async def get(self, key: str) -> str | None:
        try:
            return await self._redis.get(key)
        except Exception as e:
            raise PersistenceError(f"Failed to read key {key}", details=[str(e)]) from e

    async def set(self, key: str, value: str) -> None:
        try:
            await self._redis.set(key, value)
        except Exception as e:
            raise PersistenceError(f"Failed to write key {key}", details=[str(e)]) from e

    async def delete(self, key: str) -> None:
        try:
            await self._redis.delete(key)
        except Exception as e:
            raise PersistenceError(f"Failed to delete key {key}", details=[str(e)]) from e

    async def clear(self) -> None:
        pattern = f"{self._prefix}:*"
        try:
            cursor = 0
            deleted = 0
            while True:
                cursor, keys = await self._redis.scan(cursor, match=pattern)
                if keys:
                    deleted += await self._redis.delete(*keys)
                if int(cursor) == 0:
                    break
        except Exception as e:
            raise PersistenceError(f"Failed to clear keys {pattern}", details=[str(e)]) from e
        logger.info("Cleared Redis keys: pattern=%s, deleted=%d", pattern, deleted)


def get_store() -> KeyValueStore:
    """Return a Redis-backed store when Upstash is configured, else in-memory."""
    settings = get_settings()
    if settings.redis_configured:
        logger.info("Using Redis store")
        return RedisStore(prefix=settings.STORAGE_KEY_PREFIX)
    logger.info("Redis not configured, using in-memory store")
    return InMemoryStore()
