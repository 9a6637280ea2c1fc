"""SQLAlchemy ORM Models."""

from character_lookup.infrastructure.persistence_postgres.models.base import Base
from character_lookup.infrastructure.persistence_postgres.models.character import (
    CharacterModel,
)

__all__ = ["Base", "CharacterModel"]
