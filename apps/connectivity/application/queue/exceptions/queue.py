"""Queue exceptions."""

from __future__ import annotations

from apps.connectivity.application.common.exceptions.base import ApplicationError


class QueueEmptyError(ApplicationError):
    """조회 시점에 큐가 비어 있음."""

    def __init__(self, queue_name: str) -> None:
        self.queue_name = queue_name
        super().__init__(f"No message in queue '{queue_name}'")
