"""Connectivity API - FastAPI application entry point.

Redis(캐시)와 RabbitMQ(큐)를 HTTP 엔드포인트로 노출하는 데모 서비스입니다.

Architecture:
    HTTP
     ├── /api/redis/*  → WriteKeyCommand / ReadKeyQuery
     │                      └── RedisKeyValueStore → Redis (SET/GET)
     └── /rabbitmq/*   → PublishMessageCommand / ReadMessageQuery
                            └── RabbitMQMessageQueue → RabbitMQ (filaTeste)

Run:
    uvicorn apps.connectivity.main:app
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from apps.connectivity.application.common.exceptions import UpstreamUnavailableError
from apps.connectivity.infrastructure.persistence_redis import close_cache_redis
from apps.connectivity.presentation.http.controllers import (
    cache_router,
    health_router,
    queue_router,
)
from apps.connectivity.presentation.http.errors import register_exception_handlers
from apps.connectivity.setup.config import get_settings
from apps.connectivity.setup.dependencies import close_message_queue, get_message_queue
from apps.connectivity.setup.logging import setup_logging

logger = logging.getLogger(__name__)
settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """애플리케이션 수명주기 관리."""
    # Startup
    setup_logging("DEBUG" if settings.environment == "local" else settings.log_level)
    logger.info(f"Starting {settings.app_name} ({settings.environment})")

    # 큐 선언은 시작 시점에 수행, 실패하면 첫 요청에서 재시도
    try:
        await get_message_queue(settings)
    except UpstreamUnavailableError as e:
        logger.warning(f"RabbitMQ not reachable at startup, will retry on first request: {e}")

    yield

    # Shutdown
    logger.info(f"Shutting down {settings.app_name}")
    await close_message_queue()
    await close_cache_redis()


def create_app() -> FastAPI:
    """FastAPI 애플리케이션을 생성합니다."""
    app = FastAPI(
        title=settings.app_name,
        version=settings.service_version,
        description="Endpoints para manipulação de chaves no Redis e filas no RabbitMQ",
        lifespan=lifespan,
    )

    # 예외 핸들러 등록
    register_exception_handlers(app)

    # 라우터 등록
    app.include_router(health_router)  # /health, /ping (prefix 없음)
    app.include_router(cache_router)  # /api/redis
    app.include_router(queue_router)  # /rabbitmq

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "apps.connectivity.main:app",
        host="0.0.0.0",
        port=8080,
        reload=settings.environment == "local",
    )
