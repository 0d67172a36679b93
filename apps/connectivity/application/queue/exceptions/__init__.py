"""Queue exceptions."""

from apps.connectivity.application.queue.exceptions.queue import QueueEmptyError

__all__ = ["QueueEmptyError"]
