"""Redis Client Provider.

캐시 엔드포인트가 사용하는 프로세스 단위 Redis 클라이언트입니다.

Retry 설정:
    - ExponentialBackoff: 지수 백오프 재시도
    - MAX_RETRIES: 3회 재시도
    - ConnectionError, TimeoutError에서 자동 재시도
    - health_check_interval: 30초마다 연결 상태 확인
"""

from __future__ import annotations

from functools import lru_cache
from typing import TYPE_CHECKING

from redis.asyncio.retry import Retry
from redis.backoff import ExponentialBackoff
from redis.exceptions import ConnectionError, TimeoutError

if TYPE_CHECKING:
    import redis.asyncio as aioredis

HEALTH_CHECK_INTERVAL = 30  # seconds
MAX_CONNECTIONS = 50
SOCKET_CONNECT_TIMEOUT = 5.0  # seconds
SOCKET_TIMEOUT = 5.0  # seconds
RETRY_ON_ERROR = [ConnectionError, TimeoutError]
MAX_RETRIES = 3


def build_async_client(redis_url: str) -> "aioredis.Redis":
    """비동기 Redis 클라이언트 생성.

    decode_responses=True로 문자열 값을 그대로 주고받습니다.
    """
    import redis.asyncio as aioredis

    retry = Retry(ExponentialBackoff(), retries=MAX_RETRIES)

    return aioredis.from_url(
        redis_url,
        encoding="utf-8",
        decode_responses=True,
        health_check_interval=HEALTH_CHECK_INTERVAL,
        socket_keepalive=True,
        socket_connect_timeout=SOCKET_CONNECT_TIMEOUT,
        socket_timeout=SOCKET_TIMEOUT,
        max_connections=MAX_CONNECTIONS,
        retry=retry,
        retry_on_error=RETRY_ON_ERROR,
    )


@lru_cache
def get_cache_redis() -> "aioredis.Redis":
    """캐시용 Redis 클라이언트.

    환경변수:
        - CONNECTIVITY_REDIS_URL (default: redis://localhost:6379/0)
    """
    from apps.connectivity.setup.config import get_settings

    settings = get_settings()
    return build_async_client(settings.redis_url)


async def close_cache_redis() -> None:
    """캐시용 Redis 클라이언트 종료 (생성된 경우에만)."""
    if get_cache_redis.cache_info().currsize == 0:
        return
    client = get_cache_redis()
    await client.aclose()
    get_cache_redis.cache_clear()
