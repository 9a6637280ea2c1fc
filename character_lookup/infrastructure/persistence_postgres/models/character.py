"""Character ORM Model.

스키마는 외부 마이그레이션이 관리합니다. 이 서비스는 읽기만 합니다.
"""

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from character_lookup.infrastructure.persistence_postgres.models.base import Base


class CharacterModel(Base):
    """캐릭터 ORM 모델.

    characters 테이블에 매핑됩니다.
    """

    __tablename__ = "characters"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    first_name: Mapped[str] = mapped_column(Text, nullable=False)
    last_name: Mapped[str] = mapped_column(Text, nullable=False)
    nick_name: Mapped[str | None] = mapped_column(Text)
