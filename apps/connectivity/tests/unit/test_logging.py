"""Logging 테스트."""

from __future__ import annotations

import logging
import os
from unittest.mock import patch

import ecs_logging

from apps.connectivity.setup import logging as logging_setup
from apps.connectivity.setup.config import get_settings


class TestSetupLogging:
    """setup_logging 함수 테스트."""

    def setup_method(self) -> None:
        """테스트 전 설정."""
        get_settings.cache_clear()
        self._factory = logging.getLogRecordFactory()
        logging_setup._base_record_factory = None

    def teardown_method(self) -> None:
        """테스트 후 정리."""
        logging.setLogRecordFactory(self._factory)
        logging_setup._base_record_factory = None
        root_logger = logging.getLogger()
        root_logger.handlers.clear()
        root_logger.setLevel(logging.WARNING)
        get_settings.cache_clear()

    def test_setup_logging_configures_root_logger(self) -> None:
        """루트 로거에 ECS 포맷터 핸들러 하나."""
        with patch.dict(os.environ, {"CONNECTIVITY_LOG_LEVEL": "DEBUG"}, clear=True):
            from apps.connectivity.setup.logging import setup_logging

            setup_logging()

        root_logger = logging.getLogger()
        assert root_logger.level == logging.DEBUG
        assert len(root_logger.handlers) == 1
        assert isinstance(root_logger.handlers[0].formatter, ecs_logging.StdlibFormatter)

    def test_explicit_level_overrides_settings(self) -> None:
        """인자로 받은 레벨 우선."""
        from apps.connectivity.setup.logging import setup_logging

        setup_logging("warning")

        assert logging.getLogger().level == logging.WARNING

    def test_setup_logging_adds_service_metadata(self) -> None:
        """서비스 메타데이터 추가 확인."""
        with patch.dict(
            os.environ,
            {"CONNECTIVITY_SERVICE_NAME": "test-api", "ENVIRONMENT": "test"},
            clear=True,
        ):
            from apps.connectivity.setup.logging import setup_logging

            setup_logging()

        record = logging.getLogRecordFactory()(
            "test", logging.INFO, __file__, 1, "msg", None, None
        )
        assert record.service["name"] == "test-api"
        assert record.service["environment"] == "test"

    def test_external_loggers_quieted(self) -> None:
        """aio_pika/aiormq 로그 레벨 WARNING."""
        from apps.connectivity.setup.logging import setup_logging

        setup_logging()

        assert logging.getLogger("aio_pika").level == logging.WARNING
        assert logging.getLogger("aiormq").level == logging.WARNING

    def test_repeated_setup_does_not_stack_factories(self) -> None:
        """여러 번 호출해도 기존 factory는 한 번만 감쌈."""
        calls: list[str] = []
        original = logging.getLogRecordFactory()

        def counting_factory(*args, **kwargs) -> logging.LogRecord:
            calls.append("base")
            return original(*args, **kwargs)

        logging.setLogRecordFactory(counting_factory)

        logging_setup.setup_logging()
        logging_setup.setup_logging()
        logging_setup.setup_logging()

        record = logging.getLogRecordFactory()(
            "test", logging.INFO, __file__, 1, "msg", None, None
        )
        assert calls == ["base"]
        assert record.service["name"] == "connectivity-api"

    def test_repeated_setup_keeps_single_handler(self) -> None:
        """핸들러도 하나만 유지."""
        logging_setup.setup_logging()
        logging_setup.setup_logging()

        assert len(logging.getLogger().handlers) == 1
