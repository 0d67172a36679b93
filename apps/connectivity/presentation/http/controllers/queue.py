"""Queue controller - RabbitMQ 발행/조회 엔드포인트."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request
from fastapi.responses import PlainTextResponse

from apps.connectivity.application.queue.commands import PublishMessageCommand
from apps.connectivity.application.queue.queries import ReadMessageQuery
from apps.connectivity.setup.dependencies import (
    get_publish_message_command,
    get_read_message_query,
)

router = APIRouter(prefix="/rabbitmq", tags=["RabbitMQ"])


@router.post(
    "/send",
    response_class=PlainTextResponse,
    summary="Envia uma mensagem para o RabbitMQ",
    description="Recebe um JSON ou um Texto e envia para fila",
    responses={
        200: {"description": "Mensagem enviada com sucesso", "content": {"text/plain": {}}},
    },
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {"text/plain": {"schema": {"type": "string"}}},
        }
    },
)
async def send_message(
    request: Request,
    command: PublishMessageCommand = Depends(get_publish_message_command),
) -> str:
    """본문을 그대로 큐에 발행합니다."""
    message = (await request.body()).decode("utf-8", errors="replace")
    await command.execute(message)
    return f"Mensagem enviada com sucesso: {message}"


@router.get(
    "/read",
    response_class=PlainTextResponse,
    summary="Lê uma mensagem do RabbitMQ",
    description="Lê e remove uma mensagem da fila. Retorna 204 se a fila estiver vazia.",
    responses={
        200: {"description": "Mensagem lida", "content": {"text/plain": {}}},
        204: {"description": "Nenhuma mensagem na fila"},
    },
)
async def read_message(
    query: ReadMessageQuery = Depends(get_read_message_query),
) -> str:
    """메시지 하나를 꺼내 반환합니다."""
    message = await query.execute()
    return f"Mensagem lida: {message}"
