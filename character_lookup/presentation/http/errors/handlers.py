"""Exception Handlers.

애플리케이션 예외를 HTTP 응답으로 변환합니다.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from character_lookup.application.common.exceptions import (
    CharacterIntegrityError,
    CharacterNotFoundError,
)

logger = logging.getLogger(__name__)


def register_exception_handlers(app: FastAPI) -> None:
    """예외 핸들러 등록."""

    @app.exception_handler(CharacterNotFoundError)
    async def character_not_found_handler(request: Request, exc: CharacterNotFoundError):
        return JSONResponse(status_code=404, content={"message": "Not found"})

    @app.exception_handler(CharacterIntegrityError)
    async def character_integrity_handler(request: Request, exc: CharacterIntegrityError):
        logger.error(
            "Character integrity violation",
            extra={"character_id": exc.character_id, "count": exc.count, "path": request.url.path},
        )
        return JSONResponse(status_code=500, content={"message": "Internal server error"})
