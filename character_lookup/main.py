"""Character Lookup Service Main Entry Point.

GET /api/character/{id} 단일 엔드포인트를 제공합니다.

분산 트레이싱 통합 (OTEL_ENABLED=true):
- FastAPI 자동 계측 (HTTP 요청/응답)
- SQLAlchemy 자동 계측 (DB 쿼리)
- Redis 자동 계측 (캐시)
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from character_lookup.infrastructure.observability import (
    instrument_fastapi,
    instrument_redis,
    instrument_sqlalchemy,
    setup_tracing,
    shutdown_tracing,
)
from character_lookup.presentation.http.controllers import character_router, health_router
from character_lookup.presentation.http.errors import register_exception_handlers
from character_lookup.setup.config import get_settings
from character_lookup.setup.database import close_redis, dispose_engine, engine
from character_lookup.setup.logging import setup_logging

logger = logging.getLogger(__name__)
settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """애플리케이션 라이프사이클 관리."""
    setup_logging(settings.log_level, service_name=settings.service_name)
    logger.info(
        "Starting Character Lookup service",
        extra={"environment": settings.environment, "cache_backend": settings.cache_backend},
    )

    if settings.otel_enabled:
        setup_tracing(
            settings.service_name,
            settings.otel_exporter_otlp_endpoint,
            settings.otel_sampling_rate,
            settings.environment,
        )
        instrument_sqlalchemy(engine)
        instrument_redis()

    yield

    logger.info("Shutting down Character Lookup service")
    if settings.otel_enabled:
        shutdown_tracing()
    await close_redis()
    await dispose_engine()


def create_app() -> FastAPI:
    """FastAPI 앱을 생성합니다."""
    app = FastAPI(
        title="Character Lookup API",
        description="ID 기반 캐릭터 조회 서비스 (characters 캐시)",
        version="1.0.0",
        lifespan=lifespan,
    )

    if settings.otel_enabled:
        instrument_fastapi(app)

    register_exception_handlers(app)

    # Routers
    app.include_router(health_router)
    app.include_router(character_router, prefix="/api")

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "character_lookup.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.environment == "local",
    )
