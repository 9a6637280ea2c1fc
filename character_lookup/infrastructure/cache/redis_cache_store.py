"""Redis cache store."""

from redis.asyncio import Redis
from redis.exceptions import RedisError

from character_lookup.infrastructure.cache.cache_store import (
    CacheStore,
    CacheStoreUnavailableError,
)


class RedisCacheStore(CacheStore):
    """Redis 기반 캐시 저장소.

    Redis 예외는 CacheStoreUnavailableError로 감싸서 전달합니다.
    """

    def __init__(self, redis: Redis) -> None:
        """Initialize.

        Args:
            redis: Redis 클라이언트
        """
        self._redis = redis

    async def get(self, key: str) -> str | None:
        try:
            value = await self._redis.get(key)
        except RedisError as e:
            raise CacheStoreUnavailableError(str(e)) from e

        # decode_responses 설정에 따라 bytes로 올 수 있음
        if isinstance(value, bytes):
            value = value.decode("utf-8")
        return value

    async def set(self, key: str, value: str, ttl: int | None = None) -> None:
        try:
            if ttl and ttl > 0:
                await self._redis.setex(key, ttl, value)
            else:
                await self._redis.set(key, value)
        except RedisError as e:
            raise CacheStoreUnavailableError(str(e)) from e
