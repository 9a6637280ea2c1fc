"""HTTP Controllers."""

from character_lookup.presentation.http.controllers.character import router as character_router
from character_lookup.presentation.http.controllers.health import router as health_router

__all__ = ["character_router", "health_router"]
