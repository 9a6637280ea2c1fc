"""Character Reader Port."""

from abc import ABC, abstractmethod

from character_lookup.domain.entities import Character


class CharacterReader(ABC):
    """ID 기반 캐릭터 조회 포트.

    인프라스트럭처 계층에서 구현됩니다 (DB Reader, 캐시 데코레이터).
    """

    @abstractmethod
    async def find_by_id(self, character_id: int) -> Character | None:
        """ID로 캐릭터를 조회합니다.

        Args:
            character_id: 캐릭터 ID

        Returns:
            캐릭터 또는 None (매칭되는 행이 없는 경우)

        Raises:
            CharacterIntegrityError: 두 개 이상의 행이 매칭된 경우
        """
        ...
