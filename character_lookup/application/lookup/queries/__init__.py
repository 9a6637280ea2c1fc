"""Lookup Queries."""

from character_lookup.application.lookup.queries.get_character import GetCharacterQuery

__all__ = ["GetCharacterQuery"]
