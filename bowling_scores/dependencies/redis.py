import logging

from upstash_redis.asyncio import Redis

from bowling_scores.config import get_settings

logger = logging.getLogger(__name__)

# Shared by every RedisStore created without an explicit client
_redis_client: Redis | None = None


def get_redis_client() -> Redis:
    """Return the process-wide Upstash client, creating it on first use.

    Raises:
        RuntimeError: If UPSTASH_REDIS_REST_URL or UPSTASH_REDIS_REST_TOKEN is unset.
    """
    global _redis_client
    if _redis_client is not None:
        return _redis_client

    settings = get_settings()
    if not settings.redis_configured:
        raise RuntimeError("Upstash Redis is not configured")

    _redis_client = Redis(
        url=settings.UPSTASH_REDIS_REST_URL,
        token=settings.UPSTASH_REDIS_REST_TOKEN,
    )
    logger.info(
        "Upstash Redis client created: url=%s, prefix=%s",
        settings.UPSTASH_REDIS_REST_URL,
        settings.STORAGE_KEY_PREFIX,
    )
    return _redis_client


async def close_redis_client() -> None:
    """Close the shared client; the next get_redis_client() call opens a new one."""
    global _redis_client
    if _redis_client is None:
        return

    client, _redis_client = _redis_client, None
    await client.close()
    logger.info("Upstash Redis client closed")
