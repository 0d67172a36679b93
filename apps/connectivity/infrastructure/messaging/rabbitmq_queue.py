"""RabbitMQ Message Queue.

MessageQueue 포트의 RabbitMQ 구현체입니다.

| 동작 | AMQP |
|------|------|
| connect | connect_robust + durable queue 선언 |
| publish | default exchange, routing_key=queue, persistent |
| receive_one | basic.get (no_ack) |
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

import aio_pika
from aio_pika import DeliveryMode, Message
from aio_pika.exceptions import AMQPError

from apps.connectivity.application.common.exceptions import UpstreamUnavailableError

if TYPE_CHECKING:
    from aio_pika.abc import AbstractChannel, AbstractConnection, AbstractQueue

logger = logging.getLogger(__name__)

DEFAULT_QUEUE_NAME = "filaTeste"


class RabbitMQMessageQueue:
    """RabbitMQ 기반 단일 큐 클라이언트.

    하나의 durable 큐에만 발행/조회합니다.
    published_count는 진단용 카운터이며 어떤 엔드포인트로도 노출되지 않습니다.
    """

    def __init__(self, amqp_url: str, queue_name: str = DEFAULT_QUEUE_NAME) -> None:
        """Initialize.

        Args:
            amqp_url: RabbitMQ 연결 URL
            queue_name: 대상 큐 이름
        """
        self._amqp_url = amqp_url
        self._queue_name = queue_name
        self._connection: AbstractConnection | None = None
        self._channel: AbstractChannel | None = None
        self._queue: AbstractQueue | None = None
        self._published_count = 0
        self._connect_lock = asyncio.Lock()

    @property
    def queue_name(self) -> str:
        """대상 큐 이름."""
        return self._queue_name

    @property
    def published_count(self) -> int:
        """이 프로세스에서 발행한 메시지 수 (동기화되지 않음)."""
        return self._published_count

    async def connect(self) -> None:
        """RabbitMQ 연결 및 큐 선언.

        큐 선언까지 성공해야 연결 상태를 저장합니다. 실패하면 연결을 닫고
        다음 호출에서 처음부터 다시 연결합니다.
        """
        async with self._connect_lock:
            if self._is_ready():
                return

            connection: AbstractConnection | None = None
            try:
                connection = await aio_pika.connect_robust(self._amqp_url)
                channel = await connection.channel()

                # Durable Queue 선언 (브로커 재시작 후에도 유지)
                queue = await channel.declare_queue(
                    self._queue_name,
                    durable=True,
                )
            except (AMQPError, OSError) as e:
                if connection is not None and not connection.is_closed:
                    await connection.close()
                raise UpstreamUnavailableError("RabbitMQ", str(e)) from e

            self._connection = connection
            self._channel = channel
            self._queue = queue

        logger.info(
            "RabbitMQ connected",
            extra={"queue": self._queue_name},
        )

    async def close(self) -> None:
        """연결 종료."""
        if self._connection and not self._connection.is_closed:
            await self._connection.close()
            logger.info("RabbitMQ connection closed")
        self._connection = None
        self._channel = None
        self._queue = None

    async def publish(self, message: str) -> None:
        """메시지 발행.

        Args:
            message: 텍스트 페이로드
        """
        await self._ensure_connected()
        if not self._channel:
            raise RuntimeError("Channel not initialized")

        amqp_message = Message(
            body=message.encode("utf-8"),
            content_type="text/plain",
            content_encoding="utf-8",
            delivery_mode=DeliveryMode.PERSISTENT,
        )

        try:
            await self._channel.default_exchange.publish(
                amqp_message,
                routing_key=self._queue_name,
            )
        except (AMQPError, OSError) as e:
            raise UpstreamUnavailableError("RabbitMQ", str(e)) from e

        self._published_count += 1
        logger.info(
            "Message published",
            extra={
                "queue": self._queue_name,
                "size": len(message),
                "published_count": self._published_count,
            },
        )

    async def receive_one(self) -> str | None:
        """메시지 하나를 꺼냅니다.

        큐가 비어 있으면 기다리지 않고 None을 반환합니다.
        """
        await self._ensure_connected()
        if not self._queue:
            raise RuntimeError("Queue not initialized")

        try:
            incoming = await self._queue.get(no_ack=True, fail=False)
        except (AMQPError, OSError) as e:
            raise UpstreamUnavailableError("RabbitMQ", str(e)) from e

        if incoming is None:
            return None
        # no_ack로 이미 제거된 메시지, 비 UTF-8 바이트는 치환 문자로
        return incoming.body.decode("utf-8", errors="replace")

    def _is_ready(self) -> bool:
        """연결과 큐 선언이 모두 유효한지."""
        return (
            self._connection is not None
            and not self._connection.is_closed
            and self._queue is not None
        )

    async def _ensure_connected(self) -> None:
        """연결 확인 및 재연결."""
        if not self._is_ready():
            await self.connect()
