"""Redis Persistence Layer."""

from apps.connectivity.infrastructure.persistence_redis.client import (
    close_cache_redis,
    get_cache_redis,
)
from apps.connectivity.infrastructure.persistence_redis.key_value_store_redis import (
    RedisKeyValueStore,
)

__all__ = [
    "close_cache_redis",
    "get_cache_redis",
    "RedisKeyValueStore",
]
