"""Messaging Infrastructure.

메시지 브로커 연결을 담당합니다.
"""

from apps.connectivity.infrastructure.messaging.rabbitmq_queue import (
    DEFAULT_QUEUE_NAME,
    RabbitMQMessageQueue,
)

__all__ = ["DEFAULT_QUEUE_NAME", "RabbitMQMessageQueue"]
