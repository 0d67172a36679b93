"""Publish Message Command.

텍스트 메시지를 고정된 durable 큐에 발행하는 Use Case입니다.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from apps.connectivity.application.queue.ports import MessageQueue

logger = logging.getLogger(__name__)


class PublishMessageCommand:
    """메시지 발행 Command.

    본문 검증 없이 그대로 발행합니다.
    """

    def __init__(self, queue: "MessageQueue") -> None:
        """Initialize.

        Args:
            queue: 메시지 큐 (DI)
        """
        self._queue = queue

    async def execute(self, message: str) -> None:
        """메시지 발행.

        Args:
            message: 텍스트 페이로드
        """
        logger.debug(
            "Publish requested",
            extra={"queue": self._queue.queue_name, "size": len(message)},
        )
        await self._queue.publish(message)
