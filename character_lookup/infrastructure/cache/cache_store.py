"""Cache Store Port.

키-값 캐시 저장소 추상화입니다 (Redis / 인메모리).
"""

from abc import ABC, abstractmethod


class CacheStoreUnavailableError(Exception):
    """캐시 저장소에 접근할 수 없음 (연결 실패, 타임아웃 등)."""


class CacheStore(ABC):
    """문자열 값을 저장하는 캐시 저장소."""

    @abstractmethod
    async def get(self, key: str) -> str | None:
        """키에 해당하는 값을 반환합니다. 없거나 만료되었으면 None."""
        ...

    @abstractmethod
    async def set(self, key: str, value: str, ttl: int | None = None) -> None:
        """값을 저장합니다.

        Args:
            key: 캐시 키
            value: 저장할 문자열
            ttl: 만료 시간(초). None 또는 0 이하면 만료 없음
        """
        ...
