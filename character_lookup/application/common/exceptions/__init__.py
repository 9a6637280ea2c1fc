"""Application Exceptions."""

from character_lookup.application.common.exceptions.base import ApplicationError
from character_lookup.application.common.exceptions.character import (
    CharacterIntegrityError,
    CharacterNotFoundError,
)

__all__ = [
    "ApplicationError",
    "CharacterIntegrityError",
    "CharacterNotFoundError",
]
