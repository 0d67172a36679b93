"""Message Queue Port.

단일 큐에 대한 발행/조회 인터페이스입니다.
"""

from __future__ import annotations

from typing import Protocol


class MessageQueue(Protocol):
    """메시지 큐 인터페이스.

    구현체:
        - RabbitMQMessageQueue (infrastructure/messaging/)
    """

    @property
    def queue_name(self) -> str:
        """대상 큐 이름."""
        ...

    async def publish(self, message: str) -> None:
        """메시지 발행.

        Args:
            message: 텍스트 페이로드

        Raises:
            UpstreamUnavailableError: 브로커 연결 실패
        """
        ...

    async def receive_one(self) -> str | None:
        """메시지 하나를 꺼내서 반환합니다.

        Returns:
            메시지, 큐가 비어 있으면 None
        """
        ...
