"""Cache Infrastructure.

characters 캐시 리전에 ID 기반 메모이제이션을 제공합니다.
"""

from character_lookup.infrastructure.cache.cache_store import (
    CacheStore,
    CacheStoreUnavailableError,
)
from character_lookup.infrastructure.cache.cached_character_reader import (
    CACHE_REGION,
    NEGATIVE_CACHE_MARKER,
    CachedCharacterReader,
    cache_key,
)
from character_lookup.infrastructure.cache.memory_cache_store import InMemoryCacheStore
from character_lookup.infrastructure.cache.redis_cache_store import RedisCacheStore

__all__ = [
    "CACHE_REGION",
    "NEGATIVE_CACHE_MARKER",
    "CacheStore",
    "CacheStoreUnavailableError",
    "CachedCharacterReader",
    "InMemoryCacheStore",
    "RedisCacheStore",
    "cache_key",
]
