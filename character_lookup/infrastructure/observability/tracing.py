"""OpenTelemetry Tracing - Character Lookup Service.

트레이싱 실패는 서비스 기동을 막지 않습니다 (로그만 남김).
"""

from __future__ import annotations

import logging

from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor
from opentelemetry.sdk.trace.sampling import TraceIdRatioBased

logger = logging.getLogger(__name__)

_tracer_provider: TracerProvider | None = None


def setup_tracing(
    service_name: str,
    endpoint: str,
    sampling_rate: float = 1.0,
    environment: str = "development",
) -> bool:
    """OpenTelemetry 트레이싱 설정.

    Args:
        service_name: 서비스 이름
        endpoint: OTLP gRPC exporter 엔드포인트
        sampling_rate: 샘플링 비율 (0.0 ~ 1.0)
        environment: 배포 환경

    Returns:
        설정 성공 여부
    """
    global _tracer_provider

    try:
        resource = Resource.create(
            {
                "service.name": service_name,
                "deployment.environment": environment,
            }
        )
        provider = TracerProvider(resource=resource, sampler=TraceIdRatioBased(sampling_rate))
        provider.add_span_processor(
            BatchSpanProcessor(
                OTLPSpanExporter(endpoint=endpoint, insecure=True),
                max_queue_size=2048,
                max_export_batch_size=512,
                schedule_delay_millis=1000,
            )
        )
        trace.set_tracer_provider(provider)
        _tracer_provider = provider

        logger.info(
            "OpenTelemetry tracing configured",
            extra={
                "service": service_name,
                "endpoint": endpoint,
                "sampling_rate": sampling_rate,
            },
        )
        return True

    except Exception as e:
        logger.error(f"Failed to configure tracing: {e}")
        return False


def instrument_fastapi(app) -> None:
    """FastAPI 자동 계측."""
    from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor

    try:
        FastAPIInstrumentor.instrument_app(app, excluded_urls="health,ready")
        logger.info("FastAPI instrumentation enabled")
    except Exception as e:
        logger.error(f"Failed to instrument FastAPI: {e}")


def instrument_redis() -> None:
    """Redis 자동 계측 (캐시 추적)."""
    from opentelemetry.instrumentation.redis import RedisInstrumentor

    try:
        RedisInstrumentor().instrument()
        logger.info("Redis instrumentation enabled")
    except Exception as e:
        logger.error(f"Failed to instrument Redis: {e}")


def instrument_sqlalchemy(engine) -> None:
    """SQLAlchemy 자동 계측 (DB 쿼리 추적).

    Args:
        engine: AsyncEngine (내부 sync_engine에 계측)
    """
    from opentelemetry.instrumentation.sqlalchemy import SQLAlchemyInstrumentor

    try:
        SQLAlchemyInstrumentor().instrument(engine=engine.sync_engine)
        logger.info("SQLAlchemy instrumentation enabled")
    except Exception as e:
        logger.error(f"Failed to instrument SQLAlchemy: {e}")


def shutdown_tracing() -> None:
    """트레이싱 종료 (남은 span flush)."""
    global _tracer_provider
    if _tracer_provider is not None:
        _tracer_provider.shutdown()
        _tracer_provider = None
