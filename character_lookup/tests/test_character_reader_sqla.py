"""SqlaCharacterReader 테스트.

AsyncSession을 mock하여 쿼리 형태와 행 개수별 동작을 검증합니다.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from character_lookup.application.common.exceptions import CharacterIntegrityError
from character_lookup.domain.entities import Character
from character_lookup.infrastructure.persistence_postgres import SqlaCharacterReader
from character_lookup.infrastructure.persistence_postgres.models import CharacterModel

pytestmark = pytest.mark.asyncio


def make_session(models: list[CharacterModel]) -> AsyncMock:
    """execute() 결과로 주어진 모델 목록을 반환하는 세션 mock."""
    result = MagicMock()
    result.scalars.return_value.all.return_value = models
    session = AsyncMock()
    session.execute.return_value = result
    return session


class TestFindById:
    """find_by_id 테스트.

    검증 포인트:
    1. 0행 → None
    2. 1행 → 엔티티 매핑
    3. 2행 이상 → CharacterIntegrityError
    4. id 동등 조건 단일 쿼리
    """

    async def test_no_rows_returns_none(self) -> None:
        reader = SqlaCharacterReader(make_session([]))

        assert await reader.find_by_id(987654321) is None

    async def test_single_row_is_mapped(self) -> None:
        """한 행이면 모든 필드가 엔티티로 매핑됨."""
        session = make_session(
            [CharacterModel(id=1, first_name="Diego", last_name="de la Vega", nick_name="Zorro")]
        )
        reader = SqlaCharacterReader(session)

        result = await reader.find_by_id(1)

        assert result == Character(id=1, first_name="Diego", last_name="de la Vega", nick_name="Zorro")

    async def test_single_row_without_nick_name(self) -> None:
        session = make_session([CharacterModel(id=3, first_name="Isabella", last_name="Pulido", nick_name=None)])
        reader = SqlaCharacterReader(session)

        result = await reader.find_by_id(3)

        assert result is not None
        assert result.nick_name is None

    async def test_multiple_rows_raise_integrity_error(self) -> None:
        """중복 행은 무결성 위반.

        검증:
        - 임의의 행을 고르지 않고 예외 발생
        - 예외에 id와 행 수 포함

        이유:
        id는 유일해야 합니다. 중복은 상위 데이터 손상입니다.
        """
        session = make_session(
            [
                CharacterModel(id=7, first_name="A", last_name="B", nick_name=None),
                CharacterModel(id=7, first_name="C", last_name="D", nick_name=None),
            ]
        )
        reader = SqlaCharacterReader(session)

        with pytest.raises(CharacterIntegrityError) as exc_info:
            await reader.find_by_id(7)

        assert exc_info.value.character_id == 7
        assert exc_info.value.count == 2

    async def test_issues_single_equality_query(self) -> None:
        session = make_session([])
        reader = SqlaCharacterReader(session)

        await reader.find_by_id(42)

        session.execute.assert_awaited_once()
        stmt = session.execute.call_args[0][0]
        compiled = stmt.compile()
        assert "FROM characters" in str(compiled)
        assert "WHERE characters.id = :id_1" in str(compiled)
        assert compiled.params == {"id_1": 42}

    @pytest.mark.parametrize("character_id", [2**31, 99999999999, -(2**31) - 1])
    async def test_id_outside_column_range_returns_none_without_query(self, character_id) -> None:
        """int4 범위 밖의 ID는 쿼리 없이 None.

        이유:
        asyncpg는 int4 범위를 벗어난 파라미터 바인딩에서 DataError를 냅니다.
        그런 ID의 행은 존재할 수 없으므로 '없음'이 맞는 결과입니다.
        """
        session = make_session([])
        reader = SqlaCharacterReader(session)

        assert await reader.find_by_id(character_id) is None
        session.execute.assert_not_called()

    async def test_column_range_bounds_are_queried(self) -> None:
        session = make_session([])
        reader = SqlaCharacterReader(session)

        await reader.find_by_id(2**31 - 1)
        await reader.find_by_id(-(2**31))

        assert session.execute.await_count == 2
