"""Dependency provider 테스트."""

from unittest.mock import AsyncMock

import pytest

from character_lookup.application.lookup import GetCharacterQuery
from character_lookup.infrastructure.cache import CachedCharacterReader, InMemoryCacheStore
from character_lookup.setup.config import Settings
from character_lookup.setup.dependencies import (
    get_cache_store,
    get_character_query,
    get_character_reader,
)

pytestmark = pytest.mark.asyncio


class TestProviders:
    async def test_memory_backend_shares_one_store(self) -> None:
        settings = Settings(cache_backend="memory")

        first = await get_cache_store(settings)
        second = await get_cache_store(settings)

        assert isinstance(first, InMemoryCacheStore)
        assert first is second

    async def test_reader_is_cache_decorated(self) -> None:
        settings = Settings(cache_backend="memory", cache_ttl_seconds=30)
        store = InMemoryCacheStore()

        reader = await get_character_reader(AsyncMock(), store, settings)

        assert isinstance(reader, CachedCharacterReader)

    async def test_query_wraps_reader(self, counting_reader, zorro) -> None:
        query = await get_character_query(counting_reader)

        assert isinstance(query, GetCharacterQuery)
        assert await query.execute(1) == zorro
