"""Gateway 관련 예외."""

from __future__ import annotations

from apps.connectivity.application.common.exceptions.base import ApplicationError


class UpstreamUnavailableError(ApplicationError):
    """외부 저장소/브로커에 연결할 수 없음.

    Redis, RabbitMQ 어댑터가 클라이언트 라이브러리 예외를 감싸서 발생시킵니다.
    """

    def __init__(self, upstream: str, reason: str | None = None) -> None:
        self.upstream = upstream
        message = f"{upstream} unavailable"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
