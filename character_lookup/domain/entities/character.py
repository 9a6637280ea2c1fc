"""Character Entity.

캐릭터 조회 서비스의 읽기 전용 엔티티입니다.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Character:
    """캐릭터 엔티티.

    이 서비스는 캐릭터를 생성/수정하지 않습니다 (읽기 전용).
    불변 값 객체이므로 필드 값 기반으로 동등성을 비교합니다.

    Attributes:
        id: 캐릭터 고유 ID (PK)
        first_name: 이름
        last_name: 성
        nick_name: 별명 (없을 수 있음)
    """

    id: int
    first_name: str
    last_name: str
    nick_name: str | None = None
