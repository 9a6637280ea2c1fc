"""Lookup Ports."""

from character_lookup.application.lookup.ports.character_reader import CharacterReader

__all__ = ["CharacterReader"]
