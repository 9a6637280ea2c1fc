"""Character Lookup Use Case."""

from character_lookup.application.lookup.queries import GetCharacterQuery

__all__ = ["GetCharacterQuery"]
