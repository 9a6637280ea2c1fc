"""Thread-safe in-memory cache store.

로컬 실행과 테스트용 캐시 저장소입니다.

Architecture:
    - 만료: 조회 시 lazy 제거 + 저장 시 만료 엔트리 sweep
    - 용량: max_entries 초과 시 가장 오래 저장된 엔트리부터 제거
"""

from __future__ import annotations

import logging
import time
from collections import OrderedDict
from threading import Lock
from typing import Callable

from character_lookup.infrastructure.cache.cache_store import CacheStore

logger = logging.getLogger(__name__)

DEFAULT_MAX_ENTRIES = 10_000


class InMemoryCacheStore(CacheStore):
    """Lock으로 보호되는 dict 기반 캐시 저장소.

    Usage:
        store = InMemoryCacheStore()
        await store.set("characters:1", payload, ttl=3600)
    """

    def __init__(
        self,
        clock: Callable[[], float] = time.monotonic,
        max_entries: int = DEFAULT_MAX_ENTRIES,
    ) -> None:
        if max_entries <= 0:
            raise ValueError("max_entries must be > 0")
        self._entries: OrderedDict[str, tuple[str, float | None]] = OrderedDict()
        self._lock = Lock()
        self._clock = clock
        self._max_entries = max_entries

    async def get(self, key: str) -> str | None:
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            value, expires_at = entry
            if expires_at is not None and expires_at <= self._clock():
                del self._entries[key]
                logger.debug("memory_cache_expired", extra={"key": key})
                return None
            return value

    async def set(self, key: str, value: str, ttl: int | None = None) -> None:
        now = self._clock()
        expires_at = now + ttl if ttl and ttl > 0 else None
        with self._lock:
            self._entries.pop(key, None)
            self._entries[key] = (value, expires_at)
            if len(self._entries) > self._max_entries:
                self._sweep_expired(now)
            while len(self._entries) > self._max_entries:
                evicted, _ = self._entries.popitem(last=False)
                logger.debug("memory_cache_evicted", extra={"key": evicted})

    def _sweep_expired(self, now: float) -> None:
        """만료된 엔트리를 모두 제거합니다. Lock을 잡은 상태에서 호출."""
        expired = [
            key
            for key, (_, expires_at) in self._entries.items()
            if expires_at is not None and expires_at <= now
        ]
        for key in expired:
            del self._entries[key]

    def count(self) -> int:
        """저장된 엔트리 수 (만료 대기 중인 엔트리 포함)."""
        with self._lock:
            return len(self._entries)

    def clear(self) -> None:
        """캐시 초기화 (테스트용)."""
        with self._lock:
            self._entries.clear()
            logger.warning("memory_cache_cleared")
