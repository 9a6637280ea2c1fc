"""Pytest configuration for character lookup tests."""

import pytest

from character_lookup.application.common.exceptions import CharacterIntegrityError
from character_lookup.application.lookup.ports import CharacterReader
from character_lookup.domain.entities import Character


class CountingCharacterReader(CharacterReader):
    """레코드 저장소 대역. 조회 횟수(calls)를 기록합니다."""

    def __init__(self, rows: list[Character]) -> None:
        self._rows = rows
        self.calls = 0

    async def find_by_id(self, character_id: int) -> Character | None:
        self.calls += 1
        matches = [row for row in self._rows if row.id == character_id]
        if len(matches) > 1:
            raise CharacterIntegrityError(character_id, len(matches))
        return matches[0] if matches else None


@pytest.fixture(scope="session")
def anyio_backend() -> str:
    """Use asyncio backend for async tests."""
    return "asyncio"


@pytest.fixture
def zorro() -> Character:
    """id=1 캐릭터."""
    return Character(id=1, first_name="Diego", last_name="de la Vega", nick_name="Zorro")


@pytest.fixture
def counting_reader(zorro: Character) -> CountingCharacterReader:
    """id=1 한 건만 있는 저장소."""
    return CountingCharacterReader([zorro])


@pytest.fixture
def duplicated_reader() -> CountingCharacterReader:
    """id=7 행이 두 개인 (손상된) 저장소."""
    return CountingCharacterReader(
        [
            Character(id=7, first_name="Bernardo", last_name="Unknown"),
            Character(id=7, first_name="Bernardo", last_name="Copy"),
        ]
    )
