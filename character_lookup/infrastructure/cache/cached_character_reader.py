"""Cached Character Reader Implementation.

Architecture:
    - 캐시 hit: 캐시 값 반환 (DB 조회 없음)
    - 캐시 miss: delegate(DB Reader) 조회 → 결과 저장 → 반환
    - 조회 결과가 없는 경우도 NEGATIVE_CACHE_MARKER로 저장
    - 캐시 저장소 장애 시 DB로 fallback (graceful degradation)

같은 ID에 대한 동시 miss는 모두 DB를 조회할 수 있습니다 (last-write-wins).
"""

from __future__ import annotations

import json
import logging
from typing import Any

from character_lookup.application.lookup.ports import CharacterReader
from character_lookup.domain.entities import Character
from character_lookup.infrastructure.cache.cache_store import (
    CacheStore,
    CacheStoreUnavailableError,
)

logger = logging.getLogger(__name__)

CACHE_REGION = "characters"
NEGATIVE_CACHE_MARKER = "null"
DEFAULT_CACHE_TTL = 3600  # 1시간

_MISS = object()


def cache_key(region: str, character_id: int) -> str:
    """캐시 키를 생성합니다. 예: characters:1"""
    return f"{region}:{character_id}"


class CachedCharacterReader(CharacterReader):
    """캐시를 활용한 캐릭터 Reader.

    DB Reader를 데코레이트하여 캐시 레이어를 추가합니다.
    """

    def __init__(
        self,
        delegate: CharacterReader,
        store: CacheStore,
        ttl: int | None = DEFAULT_CACHE_TTL,
        region: str = CACHE_REGION,
    ) -> None:
        """Initialize.

        Args:
            delegate: 실제 DB Reader
            store: 캐시 저장소
            ttl: 캐시 만료 시간(초)
            region: 캐시 리전 이름 (키 prefix)
        """
        self._delegate = delegate
        self._store = store
        self._ttl = ttl
        self._region = region

    async def find_by_id(self, character_id: int) -> Character | None:
        """캐시를 거쳐 캐릭터를 조회합니다."""
        key = cache_key(self._region, character_id)

        # 1. 캐시 확인
        cached = await self._read_cache(key)
        if cached is not _MISS:
            logger.debug("Cache hit for character", extra={"character_id": character_id})
            return cached

        # 2. 캐시 miss → DB 조회 (CharacterIntegrityError는 그대로 전파)
        logger.debug("Cache miss for character, fetching from DB", extra={"character_id": character_id})
        character = await self._delegate.find_by_id(character_id)

        # 3. 캐시 저장 (없음 포함)
        await self._write_cache(key, character)

        return character

    async def _read_cache(self, key: str) -> Character | None | object:
        try:
            raw = await self._store.get(key)
        except CacheStoreUnavailableError as e:
            logger.warning("Cache store unavailable on read", extra={"key": key, "error": str(e)})
            return _MISS

        if raw is None:
            return _MISS
        try:
            return self._deserialize(raw)
        except (ValueError, KeyError, TypeError) as e:
            logger.warning("Corrupt cache entry, treating as miss", extra={"key": key, "error": str(e)})
            return _MISS

    async def _write_cache(self, key: str, character: Character | None) -> None:
        try:
            await self._store.set(key, self._serialize(character), self._ttl)
        except CacheStoreUnavailableError as e:
            logger.warning("Cache store unavailable on write", extra={"key": key, "error": str(e)})

    def _serialize(self, character: Character | None) -> str:
        """캐릭터를 JSON으로 직렬화합니다. None은 NEGATIVE_CACHE_MARKER."""
        if character is None:
            return NEGATIVE_CACHE_MARKER
        return json.dumps(
            {
                "id": character.id,
                "first_name": character.first_name,
                "last_name": character.last_name,
                "nick_name": character.nick_name,
            }
        )

    def _deserialize(self, data: str) -> Character | None:
        """JSON을 캐릭터로 역직렬화합니다."""
        item: dict[str, Any] | None = json.loads(data)
        if item is None:
            return None
        return Character(
            id=int(item["id"]),
            first_name=item["first_name"],
            last_name=item["last_name"],
            nick_name=item.get("nick_name"),
        )
