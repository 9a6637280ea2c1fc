"""Domain Entities."""

from character_lookup.domain.entities.character import Character

__all__ = ["Character"]
