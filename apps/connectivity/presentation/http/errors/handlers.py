"""Exception Handlers.

애플리케이션 예외를 HTTP 응답으로 변환합니다.
"""

import logging

from fastapi import FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse

from apps.connectivity.application.cache.exceptions import (
    KeyNotFoundError,
    MissingFieldError,
)
from apps.connectivity.application.common.exceptions import (
    ApplicationError,
    UpstreamUnavailableError,
)
from apps.connectivity.application.queue.exceptions import QueueEmptyError

logger = logging.getLogger(__name__)

INVALID_REQUEST_MESSAGE = "Requisição inválida."


def register_exception_handlers(app: FastAPI) -> None:
    """예외 핸들러 등록."""

    @app.exception_handler(MissingFieldError)
    async def missing_field_handler(request: Request, exc: MissingFieldError):
        return PlainTextResponse(status_code=400, content=exc.message)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        logger.error(
            "Invalid request body",
            extra={"path": request.url.path, "errors": str(exc.errors())},
        )
        return PlainTextResponse(status_code=400, content=INVALID_REQUEST_MESSAGE)

    @app.exception_handler(KeyNotFoundError)
    async def key_not_found_handler(request: Request, exc: KeyNotFoundError):
        return Response(status_code=404)

    @app.exception_handler(QueueEmptyError)
    async def queue_empty_handler(request: Request, exc: QueueEmptyError):
        return Response(status_code=204)

    @app.exception_handler(UpstreamUnavailableError)
    async def upstream_unavailable_handler(request: Request, exc: UpstreamUnavailableError):
        logger.error(
            "Upstream unavailable",
            extra={"upstream": exc.upstream, "path": request.url.path},
        )
        return JSONResponse(
            status_code=500,
            content={"detail": exc.message, "code": "UPSTREAM_UNAVAILABLE"},
        )

    @app.exception_handler(ApplicationError)
    async def application_error_handler(request: Request, exc: ApplicationError):
        return JSONResponse(
            status_code=400,
            content={"detail": exc.message, "code": "APPLICATION_ERROR"},
        )
