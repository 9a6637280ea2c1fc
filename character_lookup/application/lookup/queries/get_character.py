"""GetCharacterQuery.

ID로 단일 캐릭터를 조회하는 Query입니다.
"""

from character_lookup.application.common.exceptions import CharacterNotFoundError
from character_lookup.application.lookup.ports import CharacterReader
from character_lookup.domain.entities import Character


class GetCharacterQuery:
    """캐릭터 단건 조회 Query.

    Reader가 None을 반환하면 CharacterNotFoundError로 변환합니다.
    """

    def __init__(self, reader: CharacterReader) -> None:
        """Initialize.

        Args:
            reader: 캐릭터 Reader (보통 캐시 데코레이터)
        """
        self._reader = reader

    async def execute(self, character_id: int) -> Character:
        """캐릭터를 조회합니다.

        Raises:
            CharacterNotFoundError: 캐릭터가 없는 경우
        """
        character = await self._reader.find_by_id(character_id)
        if character is None:
            raise CharacterNotFoundError(character_id)
        return character
