"""Read Message Query."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from apps.connectivity.application.queue.exceptions import QueueEmptyError

if TYPE_CHECKING:
    from apps.connectivity.application.queue.ports import MessageQueue

logger = logging.getLogger(__name__)


class ReadMessageQuery:
    """메시지 조회 Query.

    큐에서 메시지 하나를 꺼냅니다 (fetch-and-remove).
    """

    def __init__(self, queue: "MessageQueue") -> None:
        self._queue = queue

    async def execute(self) -> str:
        """메시지 하나를 반환합니다.

        Raises:
            QueueEmptyError: 큐가 비어 있는 경우
        """
        message = await self._queue.receive_one()
        if message is None:
            logger.warning(
                "No message in queue",
                extra={"queue": self._queue.queue_name},
            )
            raise QueueEmptyError(self._queue.queue_name)

        logger.info(
            "Message read",
            extra={"queue": self._queue.queue_name},
        )
        return message
