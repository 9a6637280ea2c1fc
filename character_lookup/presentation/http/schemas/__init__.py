"""HTTP Schemas."""

from character_lookup.presentation.http.schemas.character import (
    CharacterResponse,
    MessageResponse,
)

__all__ = ["CharacterResponse", "MessageResponse"]
