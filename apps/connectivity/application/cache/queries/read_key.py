"""Read Key Query."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from apps.connectivity.application.cache.exceptions import KeyNotFoundError

if TYPE_CHECKING:
    from apps.connectivity.application.cache.ports import KeyValueStore

logger = logging.getLogger(__name__)


class ReadKeyQuery:
    """키 조회 Query."""

    def __init__(self, store: "KeyValueStore") -> None:
        self._store = store

    async def execute(self, key: str) -> str:
        """키에 저장된 값을 반환합니다.

        Raises:
            KeyNotFoundError: 키가 존재하지 않는 경우
        """
        logger.info("Read key requested", extra={"key": key})

        value = await self._store.get(key)
        if value is None:
            logger.warning("Key not found", extra={"key": key})
            raise KeyNotFoundError(key)

        logger.info("Key found", extra={"key": key})
        return value
