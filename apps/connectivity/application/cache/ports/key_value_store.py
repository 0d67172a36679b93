"""Key-Value Store Port.

키-값 저장소 인터페이스입니다.
"""

from __future__ import annotations

from typing import Protocol


class KeyValueStore(Protocol):
    """키-값 저장소 인터페이스.

    구현체:
        - RedisKeyValueStore (infrastructure/persistence_redis/)
    """

    async def set(self, key: str, value: str) -> None:
        """값 저장.

        Args:
            key: 키
            value: 값

        Raises:
            UpstreamUnavailableError: 저장소 연결 실패
        """
        ...

    async def get(self, key: str) -> str | None:
        """값 조회.

        Args:
            key: 키

        Returns:
            저장된 값, 없으면 None
        """
        ...
