"""SQLAlchemy Character Reader Implementation."""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from character_lookup.application.common.exceptions import CharacterIntegrityError
from character_lookup.application.lookup.ports import CharacterReader
from character_lookup.domain.entities import Character
from character_lookup.infrastructure.persistence_postgres.mappers import (
    character_model_to_entity,
)
from character_lookup.infrastructure.persistence_postgres.models import CharacterModel

logger = logging.getLogger(__name__)

# characters.id 컬럼 (INTEGER, int4) 범위
INT4_MIN = -(2**31)
INT4_MAX = 2**31 - 1


class SqlaCharacterReader(CharacterReader):
    """SQLAlchemy 기반 캐릭터 Reader.

    id 동등 조건 쿼리 한 번으로 조회합니다.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize.

        Args:
            session: SQLAlchemy 비동기 세션
        """
        self._session = session

    async def find_by_id(self, character_id: int) -> Character | None:
        """ID로 캐릭터를 조회합니다.

        행이 두 개 이상이면 행 수를 담아 CharacterIntegrityError를 던집니다.
        int4 범위 밖의 ID는 저장될 수 없으므로 쿼리 없이 None.
        """
        if not INT4_MIN <= character_id <= INT4_MAX:
            logger.debug("Character id out of column range", extra={"character_id": character_id})
            return None

        stmt = select(CharacterModel).where(CharacterModel.id == character_id)
        result = await self._session.execute(stmt)
        models = result.scalars().all()

        if not models:
            return None
        if len(models) > 1:
            logger.error(
                "Duplicate character rows",
                extra={"character_id": character_id, "count": len(models)},
            )
            raise CharacterIntegrityError(character_id, len(models))

        return character_model_to_entity(models[0])
