"""Dependency Injection Setup.

FastAPI Depends를 사용한 의존성 주입 설정입니다.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import Depends

from apps.connectivity.setup.config import Settings, get_settings

if TYPE_CHECKING:
    import redis.asyncio as aioredis

    from apps.connectivity.infrastructure.messaging import RabbitMQMessageQueue


# ============================================================
# Infrastructure Dependencies
# ============================================================


def get_cache_redis() -> "aioredis.Redis":
    """캐시용 Redis 클라이언트 제공자."""
    from apps.connectivity.infrastructure.persistence_redis import get_cache_redis

    return get_cache_redis()


_message_queue: "RabbitMQMessageQueue | None" = None


async def get_message_queue(
    settings: Settings = Depends(get_settings),
) -> "RabbitMQMessageQueue":
    """RabbitMQMessageQueue 제공자 (싱글톤)."""
    global _message_queue
    if _message_queue is None:
        from apps.connectivity.infrastructure.messaging import RabbitMQMessageQueue

        _message_queue = RabbitMQMessageQueue(settings.amqp_url, settings.queue_name)
    await _message_queue.connect()
    return _message_queue


async def close_message_queue() -> None:
    """RabbitMQMessageQueue 종료."""
    global _message_queue
    if _message_queue is not None:
        await _message_queue.close()
        _message_queue = None


# ============================================================
# Gateway Dependencies (Adapters)
# ============================================================


def get_key_value_store(
    redis: "aioredis.Redis" = Depends(get_cache_redis),
):
    """KeyValueStore 제공자."""
    from apps.connectivity.infrastructure.persistence_redis import RedisKeyValueStore

    return RedisKeyValueStore(redis)


# ============================================================
# Use Case Dependencies
# ============================================================


def get_write_key_command(store=Depends(get_key_value_store)):
    """WriteKeyCommand 제공자."""
    from apps.connectivity.application.cache.commands import WriteKeyCommand

    return WriteKeyCommand(store)


def get_read_key_query(store=Depends(get_key_value_store)):
    """ReadKeyQuery 제공자."""
    from apps.connectivity.application.cache.queries import ReadKeyQuery

    return ReadKeyQuery(store)


def get_publish_message_command(queue=Depends(get_message_queue)):
    """PublishMessageCommand 제공자."""
    from apps.connectivity.application.queue.commands import PublishMessageCommand

    return PublishMessageCommand(queue)


def get_read_message_query(queue=Depends(get_message_queue)):
    """ReadMessageQuery 제공자."""
    from apps.connectivity.application.queue.queries import ReadMessageQuery

    return ReadMessageQuery(queue)
