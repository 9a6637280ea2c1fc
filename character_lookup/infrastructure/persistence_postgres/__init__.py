"""PostgreSQL Persistence."""

from character_lookup.infrastructure.persistence_postgres.character_reader_sqla import (
    SqlaCharacterReader,
)

__all__ = ["SqlaCharacterReader"]
