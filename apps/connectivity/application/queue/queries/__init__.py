"""Queue Queries."""

from apps.connectivity.application.queue.queries.read_message import ReadMessageQuery

__all__ = ["ReadMessageQuery"]
