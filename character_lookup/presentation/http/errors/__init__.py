"""HTTP Error Handlers."""

from character_lookup.presentation.http.errors.handlers import register_exception_handlers

__all__ = ["register_exception_handlers"]
