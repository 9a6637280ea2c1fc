"""캐릭터 조회 관련 예외."""

from __future__ import annotations

from character_lookup.application.common.exceptions.base import ApplicationError


class CharacterNotFoundError(ApplicationError):
    """해당 ID의 캐릭터가 없음 (정상 흐름, HTTP 404)."""

    def __init__(self, character_id: int) -> None:
        self.character_id = character_id
        super().__init__(f"Character not found: {character_id}")


class CharacterIntegrityError(ApplicationError):
    """하나의 ID에 두 개 이상의 행이 매칭됨.

    id는 유일해야 하므로 정상 운영에서는 발생하지 않습니다.
    상위 데이터 손상을 의미하며, 임의로 하나를 고르지 않고 요청을 실패시킵니다.
    """

    def __init__(self, character_id: int, count: int) -> None:
        self.character_id = character_id
        self.count = count
        super().__init__(
            f"Expected at most one character for id={character_id}, found {count} rows"
        )
