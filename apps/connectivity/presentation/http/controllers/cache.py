"""Cache controller - Redis 키 저장/조회 엔드포인트."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from apps.connectivity.application.cache.commands import WriteKeyCommand
from apps.connectivity.application.cache.queries import ReadKeyQuery
from apps.connectivity.presentation.http.schemas import WriteKeyRequest
from apps.connectivity.setup.dependencies import (
    get_read_key_query,
    get_write_key_command,
)

router = APIRouter(prefix="/api/redis", tags=["Redis"])


@router.post(
    "/gravar",
    response_class=PlainTextResponse,
    summary="Grava uma chave e valor no Redis",
    description="Recebe um JSON com uma chave e um valor e os armazena no Redis usando o comando SET.",
    responses={
        200: {"description": "Chave gravada com sucesso", "content": {"text/plain": {}}},
        400: {
            "description": "Requisição inválida por falta de 'chave' ou 'valor' no corpo",
            "content": {"text/plain": {}},
        },
    },
)
async def write_key(
    payload: WriteKeyRequest,
    command: WriteKeyCommand = Depends(get_write_key_command),
) -> str:
    """키-값 쌍을 저장합니다."""
    pair = await command.execute(payload.chave, payload.valor)
    return f"Chave '{pair.key}' gravada com sucesso!"


@router.get(
    "/ler/{chave}",
    response_class=PlainTextResponse,
    summary="Lê uma chave do Redis",
    description="Busca e retorna o valor associado a uma chave específica no Redis.",
    responses={
        200: {"description": "Valor encontrado para a chave", "content": {"text/plain": {}}},
        404: {"description": "Chave não encontrada no Redis"},
    },
)
async def read_key(
    chave: str,
    query: ReadKeyQuery = Depends(get_read_key_query),
) -> str:
    """키에 저장된 값을 반환합니다. 없으면 404."""
    return await query.execute(chave)
