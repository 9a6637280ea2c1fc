"""Character Lookup Service Configuration."""

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Character Lookup 서비스 설정."""

    # Service
    service_name: str = "character-lookup-api"
    environment: str = "development"
    log_level: str = "INFO"

    # Database (database_url이 있으면 postgres_* 보다 우선)
    database_url: str | None = None
    postgres_host: str = "localhost"
    postgres_port: int = 5432
    postgres_user: str = "character"
    postgres_password: str = "character"
    postgres_db: str = "character"

    # Redis
    redis_host: str = "localhost"
    redis_port: int = 6379
    redis_db: int = 0

    # Cache ("characters" 리전)
    cache_backend: Literal["redis", "memory"] = "redis"
    cache_ttl_seconds: int = 3600

    # OpenTelemetry
    otel_enabled: bool = False
    otel_exporter_otlp_endpoint: str = "http://localhost:4317"
    otel_sampling_rate: float = 1.0

    @property
    def database_url_resolved(self) -> str:
        """SQLAlchemy 비동기 연결 URL."""
        if self.database_url:
            return self.database_url
        return (
            f"postgresql+asyncpg://{self.postgres_user}:{self.postgres_password}"
            f"@{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"
        )

    @property
    def redis_url(self) -> str:
        """Redis 연결 URL."""
        return f"redis://{self.redis_host}:{self.redis_port}/{self.redis_db}"

    model_config = {"env_prefix": "", "case_sensitive": False}


@lru_cache
def get_settings() -> Settings:
    """설정 싱글톤을 반환합니다."""
    return Settings()
