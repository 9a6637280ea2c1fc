"""Dependency Injection for FastAPI.

Depends provider는 객체를 조립만 합니다.
각 객체는 생성자로 협력 객체(session, cache store, delegate)를 받습니다.
"""

from typing import Annotated, AsyncIterator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from character_lookup.application.lookup import GetCharacterQuery
from character_lookup.application.lookup.ports import CharacterReader
from character_lookup.infrastructure.cache import (
    CachedCharacterReader,
    CacheStore,
    RedisCacheStore,
)
from character_lookup.infrastructure.persistence_postgres import SqlaCharacterReader
from character_lookup.setup.config import Settings, get_settings
from character_lookup.setup.database import (
    async_session_factory,
    get_memory_cache_store,
    get_redis,
)


async def get_db_session() -> AsyncIterator[AsyncSession]:
    """DB 세션을 주입합니다."""
    async with async_session_factory() as session:
        try:
            yield session
        finally:
            await session.close()


async def get_cache_store(
    settings: Annotated[Settings, Depends(get_settings)],
) -> CacheStore:
    """설정된 백엔드의 캐시 저장소를 주입합니다."""
    if settings.cache_backend == "memory":
        return get_memory_cache_store()
    return RedisCacheStore(await get_redis())


async def get_character_reader(
    session: Annotated[AsyncSession, Depends(get_db_session)],
    store: Annotated[CacheStore, Depends(get_cache_store)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> CharacterReader:
    """캐시된 Character Reader를 주입합니다.

    캐시 miss 시 DB Reader로 fallback.
    """
    db_reader = SqlaCharacterReader(session)
    return CachedCharacterReader(db_reader, store, ttl=settings.cache_ttl_seconds)


async def get_character_query(
    reader: Annotated[CharacterReader, Depends(get_character_reader)],
) -> GetCharacterQuery:
    """GetCharacterQuery를 주입합니다."""
    return GetCharacterQuery(reader)
