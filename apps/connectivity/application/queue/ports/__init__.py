"""Ports (Interfaces)."""

from apps.connectivity.application.queue.ports.message_queue import MessageQueue

__all__ = ["MessageQueue"]
