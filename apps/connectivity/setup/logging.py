"""Logging Configuration.

ECS 호환 JSON 로깅 설정입니다.

lifespan이 여러 번 실행되어도(reload, 테스트) 같은 결과가 되도록
최초 호출 시점의 LogRecord factory를 기준으로 한 번만 감쌉니다.
"""

from __future__ import annotations

import logging
import sys
from typing import Any, Callable

import ecs_logging

from apps.connectivity.setup.config import Settings, get_settings

# 브로커/캐시 클라이언트의 내부 로그는 WARNING 이상만
QUIET_LOGGERS = ("aio_pika", "aiormq", "redis")

_base_record_factory: Callable[..., logging.LogRecord] | None = None


def setup_logging(level: str | None = None) -> None:
    """로깅 설정.

    Args:
        level: 로그 레벨 (없으면 settings.log_level 사용)
    """
    settings = get_settings()

    root_logger = logging.getLogger()
    root_logger.setLevel((level or settings.log_level).upper())
    root_logger.handlers.clear()
    root_logger.addHandler(_build_handler())

    _install_service_metadata(settings)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def _build_handler() -> logging.Handler:
    """stdout ECS JSON 핸들러."""
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(ecs_logging.StdlibFormatter())
    return handler


def _install_service_metadata(settings: Settings) -> None:
    """모든 LogRecord에 service 메타데이터 추가."""
    global _base_record_factory
    if _base_record_factory is None:
        _base_record_factory = logging.getLogRecordFactory()
    base_factory = _base_record_factory

    service = {
        "name": settings.service_name,
        "version": settings.service_version,
        "environment": settings.environment,
    }

    def record_factory(*args: Any, **kwargs: Any) -> logging.LogRecord:
        record = base_factory(*args, **kwargs)
        record.service = service
        return record

    logging.setLogRecordFactory(record_factory)
