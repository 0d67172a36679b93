"""Redis Key-Value Store.

KeyValueStore 포트의 Redis 구현체입니다.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from redis.exceptions import RedisError

from apps.connectivity.application.common.exceptions import UpstreamUnavailableError

if TYPE_CHECKING:
    import redis.asyncio as aioredis

logger = logging.getLogger(__name__)


class RedisKeyValueStore:
    """Redis 기반 키-값 저장소.

    SET/GET 명령을 그대로 호출합니다. TTL이나 키 prefix는 사용하지 않습니다.
    """

    def __init__(self, redis: "aioredis.Redis") -> None:
        """Initialize.

        Args:
            redis: Redis 클라이언트 (decode_responses=True)
        """
        self._redis = redis

    async def set(self, key: str, value: str) -> None:
        """SET key value."""
        try:
            await self._redis.set(key, value)
        except RedisError as e:
            logger.error("Redis SET failed", extra={"key": key, "error": str(e)})
            raise UpstreamUnavailableError("Redis", str(e)) from e

    async def get(self, key: str) -> str | None:
        """GET key.

        Returns:
            저장된 값, 키가 없으면 None
        """
        try:
            return await self._redis.get(key)
        except RedisError as e:
            logger.error("Redis GET failed", extra={"key": key, "error": str(e)})
            raise UpstreamUnavailableError("Redis", str(e)) from e
