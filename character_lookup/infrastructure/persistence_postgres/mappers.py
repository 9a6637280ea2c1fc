"""ORM to Domain Mappers."""

from character_lookup.domain.entities import Character
from character_lookup.infrastructure.persistence_postgres.models import CharacterModel


def character_model_to_entity(model: CharacterModel) -> Character:
    """CharacterModel을 Character 엔티티로 변환합니다."""
    return Character(
        id=model.id,
        first_name=model.first_name,
        last_name=model.last_name,
        nick_name=model.nick_name,
    )
