"""Logging configuration."""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s - {service} - %(name)s - %(levelname)s - %(message)s"

# 캐시 hit/miss 로그 (DEBUG)
CACHE_LOGGER = "character_lookup.infrastructure.cache"


def setup_logging(
    level: str = "INFO",
    service_name: str = "character-lookup-api",
    cache_level: str | None = None,
) -> None:
    """애플리케이션 로깅을 설정합니다.

    Args:
        level: 루트 로그 레벨
        service_name: 로그 라인에 포함될 서비스 이름
        cache_level: 캐시 레이어 로그 레벨 (None이면 루트 레벨을 따름)
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT.format(service=service_name),
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    if cache_level is not None:
        logging.getLogger(CACHE_LOGGER).setLevel(getattr(logging, cache_level.upper(), logging.INFO))

    # SQLAlchemy / asyncpg 로깅 레벨 조정
    for name in ("sqlalchemy.engine", "sqlalchemy.pool", "asyncpg"):
        logging.getLogger(name).setLevel(logging.WARNING)
