"""Write Key Command.

키-값 쌍을 Redis에 저장하는 Use Case입니다.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from apps.connectivity.application.cache.dto import KeyValuePair
from apps.connectivity.application.cache.exceptions import MissingFieldError

if TYPE_CHECKING:
    from apps.connectivity.application.cache.ports import KeyValueStore

logger = logging.getLogger(__name__)


class WriteKeyCommand:
    """키 저장 Command.

    'chave'와 'valor'가 모두 있을 때만 저장소를 호출합니다.
    """

    def __init__(self, store: "KeyValueStore") -> None:
        """Initialize.

        Args:
            store: 키-값 저장소 (DI)
        """
        self._store = store

    async def execute(self, key: str | None, value: str | None) -> KeyValuePair:
        """키-값 저장.

        Args:
            key: 키 (None이면 거부)
            value: 값 (None이면 거부)

        Returns:
            저장된 키-값 쌍

        Raises:
            MissingFieldError: 키 또는 값 누락
        """
        if key is None or value is None:
            logger.error("Invalid write payload: key or value is null")
            raise MissingFieldError()

        pair = KeyValuePair(key=key, value=value)
        logger.info("Write key requested", extra={"key": pair.key})

        await self._store.set(pair.key, pair.value)

        logger.info("Key written", extra={"key": pair.key})
        return pair
